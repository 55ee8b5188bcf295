# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Command-line interface for ToggleComment (Click-based)."""

from __future__ import annotations
