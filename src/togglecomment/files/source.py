# topmark:header:start
#
#   project      : ToggleComment
#   file         : source.py
#   file_relpath : src/togglecomment/files/source.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

r"""Line store: load a file as lines and rebuild its exact bytes.

The file is decoded as UTF-8 with the ``surrogateescape`` error handler, so any
byte sequence (including invalid UTF-8) survives a load/render round trip.

Newline detection works on the terminated lines only:
  * CRLF when every terminated line ends with ``\r\n``; the ``\r`` is moved out
    of the line content.
  * LF otherwise; a stray ``\r`` (mixed files) stays part of the line content,
    which keeps the round trip byte-exact.
  * NONE when the file contains no ``\n`` at all (empty or single unterminated line).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Final

from togglecomment.config.logging import get_logger
from togglecomment.core.errors import IoError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from togglecomment.config.logging import ToggleLogger

logger: ToggleLogger = get_logger(__name__)

ENCODING: Final[str] = "utf-8"
ENCODING_ERRORS: Final[str] = "surrogateescape"


class NewlineStyle(Enum):
    """Line terminator detected in a file."""

    LF = "\n"
    CRLF = "\r\n"
    NONE = ""

    @property
    def terminator(self) -> str:
        """Terminator used when joining lines; NONE falls back to LF."""
        return self.value or "\n"


@dataclass(frozen=True)
class SourceFile:
    """In-memory image of a text file.

    Attributes:
        path (Path): File the image was loaded from.
        lines (tuple[str, ...]): Line contents without terminators.
        newline (NewlineStyle): Detected line terminator.
        ends_with_newline (bool): Whether the last line carries a terminator.
    """

    path: Path
    lines: tuple[str, ...]
    newline: NewlineStyle
    ends_with_newline: bool

    @property
    def line_count(self) -> int:
        """Number of lines in the file."""
        return len(self.lines)

    def line(self, number: int) -> str:
        """Return the content of the 1-indexed line ``number``."""
        return self.lines[number - 1]

    def line_length(self, number: int) -> int:
        """Return the byte length of the 1-indexed line ``number`` (terminator excluded)."""
        return len(self.lines[number - 1].encode(ENCODING, ENCODING_ERRORS))

    def with_lines(self, lines: Sequence[str]) -> SourceFile:
        """Return a copy holding ``lines``, keeping newline style and EOF policy."""
        return replace(self, lines=tuple(lines))

    def render(self) -> bytes:
        """Rebuild the file bytes.

        Returns:
            bytes: The encoded content; identical to the loaded bytes when the
            lines were not modified.
        """
        if not self.lines:
            return b""
        nl: str = self.newline.terminator
        text: str = nl.join(self.lines)
        if self.ends_with_newline:
            text += nl
        return text.encode(ENCODING, ENCODING_ERRORS)


def parse_source(data: bytes, path: Path) -> SourceFile:
    """Split raw file bytes into a `SourceFile`.

    Args:
        data (bytes): Raw file content.
        path (Path): Path the content belongs to.

    Returns:
        SourceFile: The parsed image.
    """
    text: str = data.decode(ENCODING, ENCODING_ERRORS)
    if not text:
        return SourceFile(path=path, lines=(), newline=NewlineStyle.NONE, ends_with_newline=False)

    parts: list[str] = text.split("\n")
    ends_with_newline: bool = parts[-1] == ""
    if ends_with_newline:
        parts.pop()

    terminated: int = len(parts) if ends_with_newline else len(parts) - 1
    if terminated == 0:
        newline = NewlineStyle.NONE
    elif all(part.endswith("\r") for part in parts[:terminated]):
        newline = NewlineStyle.CRLF
        parts[:terminated] = [part[:-1] for part in parts[:terminated]]
    else:
        newline = NewlineStyle.LF

    logger.debug(
        "parsed %s: %d lines, newline=%s, ends_with_newline=%s",
        path,
        len(parts),
        newline.name,
        ends_with_newline,
    )
    return SourceFile(
        path=path,
        lines=tuple(parts),
        newline=newline,
        ends_with_newline=ends_with_newline,
    )


def read_source(path: Path) -> SourceFile:
    """Load ``path`` into a `SourceFile`.

    Raises:
        IoError: If the file cannot be read.
    """
    try:
        data: bytes = path.read_bytes()
    except OSError as exc:
        raise IoError("read", f"{path}: {exc}") from exc
    logger.trace("read %d bytes from %s", len(data), path)
    return parse_source(data, path)
