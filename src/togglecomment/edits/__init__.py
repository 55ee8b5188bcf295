# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/edits/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Pure line transformations and selection validation.

Nothing in this package touches the filesystem: functions take line contents
and return new line contents, so every edit can be validated and computed in
full before the atomic writer runs.
"""

from __future__ import annotations
