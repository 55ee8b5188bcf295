# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""ToggleComment package.

ToggleComment is a line-oriented source editor. It toggles single-line,
doc and block comment markers and adjusts indentation on selected lines of a
file, rewriting the file atomically and leaving every other byte untouched.
It exposes both a CLI and a small typed API (`togglecomment.api`).
"""

from __future__ import annotations
