# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Runtime configuration for ToggleComment.

ToggleComment has no configuration file: comment styles are fixed by the
built-in syntax table and limits are module constants
(see `togglecomment.constants`). What remains configurable at runtime is
diagnostic logging, controlled through `togglecomment.config.logging`.
"""

from __future__ import annotations
