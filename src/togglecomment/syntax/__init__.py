# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/syntax/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Comment syntax table: maps file extensions to comment profiles."""

from __future__ import annotations

from togglecomment.syntax.base import BlockMarkers, CommentProfile
from togglecomment.syntax.registry import (
    extension_of,
    get_syntax_registry,
    iter_profiles,
    profile_for,
)

__all__ = [
    "BlockMarkers",
    "CommentProfile",
    "extension_of",
    "get_syntax_registry",
    "iter_profiles",
    "profile_for",
]
