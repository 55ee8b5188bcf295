# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""ToggleComment CLI subcommands."""

from __future__ import annotations
