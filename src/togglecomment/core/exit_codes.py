# topmark:header:start
#
#   project      : ToggleComment
#   file         : exit_codes.py
#   file_relpath : src/togglecomment/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Exit codes for the ToggleComment CLI.

The numeric values 2..8 are a stable contract shared with scripts that drive the
tool; each maps one-to-one onto an error class in `togglecomment.core.errors`.
Click's own usage errors default to 2, which would collide with
``FILE_NOT_FOUND``, so the CLI remaps them to ``USAGE_ERROR``.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ToggleComment CLI.

    Attributes:
        SUCCESS: The requested edit was applied.
        USAGE_ERROR: Command-line invocation error (invalid flags/args).
        FILE_NOT_FOUND: The target path does not exist.
        NO_EXTENSION: The target file name has no extension.
        UNSUPPORTED_EXTENSION: The extension (or the requested comment style)
            is not in the built-in syntax table.
        LINE_NOT_FOUND: A requested line number is outside the file.
        IO_ERROR: Reading, backing up, writing or replacing the file failed.
        PATH_ERROR: The path exists but cannot be used (not a regular file,
            symlink loop, ...).
        LINE_TOO_LONG: A selected line exceeds the per-line byte cap.
        INCONSISTENT_BLOCK_MARKERS: Only one boundary of a block range carries
            a block marker.
        INVALID_LINE_RANGE: A range is reversed or out of bounds, or a batch is
            empty or too large.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    USAGE_ERROR = 1
    FILE_NOT_FOUND = 2
    NO_EXTENSION = 3
    UNSUPPORTED_EXTENSION = 4
    LINE_NOT_FOUND = 5
    IO_ERROR = 6
    PATH_ERROR = 7
    LINE_TOO_LONG = 8
    INCONSISTENT_BLOCK_MARKERS = 9
    INVALID_LINE_RANGE = 10

    UNEXPECTED_ERROR = 255
