# topmark:header:start
#
#   project      : ToggleComment
#   file         : constants.py
#   file_relpath : src/togglecomment/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""ToggleComment constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TOGGLECOMMENT_VERSION: str = get_version("togglecomment")

# Lines longer than this (in bytes, terminator excluded) are never transformed.
MAX_LINE_BYTES: Final[int] = 1024 * 1024

# Upper bound on the number of entries accepted by a batch toggle.
MAX_BATCH_LINES: Final[int] = 128

# One indentation unit, added or removed by the indent engine.
INDENT_UNIT: Final[str] = "    "

# Backups are written next to the original as ``<BACKUP_PREFIX><filename>``.
BACKUP_PREFIX: Final[str] = "backup_toggle_comment_"

# Temporary files live in the original's directory until they replace it.
TEMP_PREFIX: Final[str] = ".toggle_comment_"
TEMP_SUFFIX: Final[str] = ".tmp"

LOG_LEVEL_ENV_VAR: Final[str] = "TOGGLECOMMENT_LOG_LEVEL"
