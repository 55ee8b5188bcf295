# topmark:header:start
#
#   project      : ToggleComment
#   file         : runtime.py
#   file_relpath : src/togglecomment/api/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Runtime plumbing shared by the public operations.

Each public operation is one stateless transaction: resolve the target, load it,
back it up, validate, transform, then commit through the atomic writer. The
helpers here cover the first and last steps so the operations only state what
they change. The backup is taken as soon as the file is read, so a call that
fails validation still leaves the pre-call content beside the file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from togglecomment.config.logging import get_logger
from togglecomment.core.errors import UnsupportedExtension
from togglecomment.files.paths import resolve_target
from togglecomment.files.source import read_source
from togglecomment.files.writer import write_atomic, write_backup
from togglecomment.syntax.registry import extension_of, profile_for

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike
    from pathlib import Path

    from togglecomment.config.logging import ToggleLogger
    from togglecomment.files.source import SourceFile
    from togglecomment.syntax.base import BlockMarkers, CommentProfile

logger: ToggleLogger = get_logger(__name__)


def load_source(path: str | PathLike[str]) -> SourceFile:
    """Resolve ``path``, load it and back it up, without consulting the syntax table."""
    source: SourceFile = read_source(resolve_target(path))
    write_backup(source.path)
    return source


def load_commentable(path: str | PathLike[str]) -> tuple[SourceFile, CommentProfile]:
    """Resolve ``path``, look up its comment profile, then load and back it up.

    The profile is resolved before reading so unsupported files fail without I/O
    and without a backup.

    Returns:
        tuple[SourceFile, CommentProfile]: The loaded file and its profile.
    """
    resolved: Path = resolve_target(path)
    profile: CommentProfile = profile_for(extension_of(resolved))
    source: SourceFile = read_source(resolved)
    write_backup(source.path)
    return source, profile


def require_doc_token(source: SourceFile, profile: CommentProfile) -> str:
    """Return the profile's doc token or raise `UnsupportedExtension`."""
    if profile.doc_token is None:
        raise UnsupportedExtension(extension_of(source.path), feature="doc comments")
    return profile.doc_token


def require_block_markers(source: SourceFile, profile: CommentProfile) -> BlockMarkers:
    """Return the profile's block markers or raise `UnsupportedExtension`."""
    if profile.block_markers is None:
        raise UnsupportedExtension(extension_of(source.path), feature="block comments")
    return profile.block_markers


def commit(source: SourceFile, lines: Sequence[str]) -> None:
    """Write ``lines`` back to ``source.path`` atomically."""
    updated: SourceFile = source.with_lines(lines)
    write_atomic(source.path, updated.render())
    logger.trace(
        "committed %s: %d -> %d lines", source.path, source.line_count, updated.line_count
    )
