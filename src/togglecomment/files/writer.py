# topmark:header:start
#
#   project      : ToggleComment
#   file         : writer.py
#   file_relpath : src/togglecomment/files/writer.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Backups and the atomic writer.

Every operation goes through two steps:

1. `write_backup` copies the file (content and metadata) to
   ``backup_toggle_comment_<name>`` in the same directory, right after it is
   loaded and before any line is validated. The backup is kept whatever the
   outcome, so it always holds the content from before the last call.
2. `write_atomic` writes the new bytes to a temporary file in the same
   directory, fsyncs it, gives it the original's permission bits and
   ``os.replace``s it over the original.

A failure in either step raises `IoError` and leaves the original untouched; the
temporary file is removed on failure.
"""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from togglecomment.config.logging import get_logger
from togglecomment.constants import BACKUP_PREFIX, TEMP_PREFIX, TEMP_SUFFIX
from togglecomment.core.errors import IoError

logger = get_logger(__name__)


def backup_path_for(path: Path) -> Path:
    """Return the backup location for ``path`` (a sibling with a fixed prefix)."""
    return path.with_name(f"{BACKUP_PREFIX}{path.name}")


def _discard(tmp_path: Path | None) -> None:
    """Remove a leftover temporary file after a failed write."""
    if tmp_path is None:
        return
    try:
        tmp_path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("could not remove temporary file %s: %s", tmp_path, exc)


def write_backup(path: Path) -> Path:
    """Copy ``path`` to its backup location, replacing any earlier backup.

    Returns:
        Path: The backup file.

    Raises:
        IoError: If the copy fails.
    """
    backup: Path = backup_path_for(path)
    try:
        shutil.copy2(path, backup)
    except OSError as exc:
        raise IoError("backup", f"{backup}: {exc}") from exc
    logger.debug("backed up %s to %s", path, backup)
    return backup


def write_atomic(path: Path, data: bytes) -> None:
    """Replace the content of ``path`` with ``data``.

    Args:
        path (Path): Existing file to rewrite.
        data (bytes): Complete replacement content.

    Raises:
        IoError: If the temporary write or the final rename fails.
    """
    tmp_path: Path | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=path.parent,
            prefix=f"{TEMP_PREFIX}{path.name}.",
            suffix=TEMP_SUFFIX,
            delete=False,
        ) as tf:
            tmp_path = Path(tf.name)
            tf.write(data)
            tf.flush()
            os.fsync(tf.fileno())
        shutil.copymode(path, tmp_path)
    except OSError as exc:
        _discard(tmp_path)
        raise IoError("write", f"{path}: {exc}") from exc

    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        _discard(tmp_path)
        raise IoError("rename", f"{tmp_path} -> {path}: {exc}") from exc

    logger.debug("wrote %d bytes to %s", len(data), path)
