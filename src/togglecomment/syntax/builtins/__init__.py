# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/syntax/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Built-in comment profiles, grouped by comment family.

Exports:
    PROFILES (list[CommentProfile]): All built-in profiles, slash family first.
"""

from __future__ import annotations

from togglecomment.syntax.base import CommentProfile

from .pound import PROFILES as POUND_PROFILES
from .slash import PROFILES as SLASH_PROFILES

PROFILES: list[CommentProfile] = [*SLASH_PROFILES, *POUND_PROFILES]
