# topmark:header:start
#
#   project      : ToggleComment
#   file         : errors.py
#   file_relpath : src/togglecomment/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Error taxonomy for ToggleComment operations.

Every public operation either succeeds or raises exactly one `ToggleError`
subclass. Validation errors are raised before anything is written; once a write
has started only `IoError` can occur, and the original file is left untouched
when it does.

Each class carries the CLI exit code it maps to, and keeps its structured
fields as attributes so callers never have to parse messages.
"""

from __future__ import annotations

from typing import ClassVar

from togglecomment.core.exit_codes import ExitCode


class ToggleError(Exception):
    """Base class for all ToggleComment errors."""

    exit_code: ClassVar[ExitCode] = ExitCode.UNEXPECTED_ERROR


class FileNotFound(ToggleError):
    """The target path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(f"File not found: {path}")
        self.path = path


class NoExtension(ToggleError):
    """The file name has no extension to derive a comment syntax from."""

    exit_code = ExitCode.NO_EXTENSION

    def __init__(self, path: str) -> None:
        super().__init__(f"No file extension: {path}")
        self.path = path


class UnsupportedExtension(ToggleError):
    """The extension is unknown, or its profile lacks the requested comment style."""

    exit_code = ExitCode.UNSUPPORTED_EXTENSION

    def __init__(self, extension: str, *, feature: str | None = None) -> None:
        if feature:
            message = f"Unsupported extension for {feature}: {extension}"
        else:
            message = f"Unsupported extension: {extension}"
        super().__init__(message)
        self.extension = extension
        self.feature = feature


class LineNotFound(ToggleError):
    """A requested 1-indexed line number is outside ``[1, file_lines]``."""

    exit_code = ExitCode.LINE_NOT_FOUND

    def __init__(self, requested: int, file_lines: int) -> None:
        super().__init__(f"Line {requested} not found (file has {file_lines} lines)")
        self.requested = requested
        self.file_lines = file_lines


class IoError(ToggleError):
    """An I/O step failed; ``operation`` is one of read, backup, write, rename."""

    exit_code = ExitCode.IO_ERROR

    def __init__(self, operation: str, details: str) -> None:
        super().__init__(f"I/O error during {operation}: {details}")
        self.operation = operation
        self.details = details


class PathError(ToggleError):
    """The path exists but cannot be edited as a regular file."""

    exit_code = ExitCode.PATH_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(f"Path error: {message}")


class LineTooLong(ToggleError):
    """A selected line exceeds the per-line byte cap."""

    exit_code = ExitCode.LINE_TOO_LONG

    def __init__(self, line_number: int, length: int) -> None:
        super().__init__(f"Line {line_number} exceeds maximum length: {length} bytes")
        self.line_number = line_number
        self.length = length


class InconsistentBlockMarkers(ToggleError):
    """Only one boundary of a block range looks like a block marker."""

    exit_code = ExitCode.INCONSISTENT_BLOCK_MARKERS

    def __init__(self, start: int, end: int, detail: str) -> None:
        super().__init__(f"Inconsistent block markers for lines {start}-{end}: {detail}")
        self.start = start
        self.end = end
        self.detail = detail


class InvalidLineRange(ToggleError):
    """A line range is reversed or out of bounds, or a batch is unusable."""

    exit_code = ExitCode.INVALID_LINE_RANGE

    def __init__(self, message: str, *, start: int | None = None, end: int | None = None) -> None:
        super().__init__(f"Invalid line range: {message}")
        self.start = start
        self.end = end


class BatchTooLarge(InvalidLineRange):
    """A batch toggle received more entries than allowed."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"batch of {count} lines exceeds the limit of {limit}")
        self.count = count
        self.limit = limit
