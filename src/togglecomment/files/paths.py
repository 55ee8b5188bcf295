# topmark:header:start
#
#   project      : ToggleComment
#   file         : paths.py
#   file_relpath : src/togglecomment/files/paths.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Target path resolution.

Operations only edit existing regular files. This module turns a caller-supplied
path into an absolute `Path` or raises the matching error.
"""

from __future__ import annotations

from os import PathLike, fspath
from pathlib import Path

from togglecomment.config.logging import get_logger
from togglecomment.core.errors import FileNotFound, PathError

logger = get_logger(__name__)


def resolve_target(path: str | PathLike[str]) -> Path:
    """Resolve ``path`` to an absolute path of an existing regular file.

    Symlinks are followed, so the edit (and its backup) happen next to the real
    file.

    Args:
        path (str | PathLike[str]): Path as given by the caller.

    Returns:
        Path: The resolved absolute path.

    Raises:
        FileNotFound: If nothing exists at ``path`` (including dangling symlinks).
        PathError: If the path cannot be resolved or is not a regular file.
    """
    raw = fspath(path)
    if not raw:
        raise PathError("empty path")
    try:
        resolved = Path(raw).resolve(strict=True)
    except FileNotFoundError as exc:
        raise FileNotFound(raw) from exc
    except (OSError, RuntimeError) as exc:
        raise PathError(f"cannot resolve {raw}: {exc}") from exc

    if not resolved.is_file():
        raise PathError(f"not a regular file: {raw}")

    logger.debug("resolved target %s -> %s", raw, resolved)
    return resolved
