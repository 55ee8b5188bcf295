# topmark:header:start
#
#   project      : ToggleComment
#   file         : selection.py
#   file_relpath : src/togglecomment/edits/selection.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Validation of line selections against a loaded file.

All checks run before any transformation. Line numbers are 1-indexed; ranges
are inclusive.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from togglecomment.config.logging import get_logger
from togglecomment.constants import MAX_BATCH_LINES, MAX_LINE_BYTES
from togglecomment.core.errors import BatchTooLarge, InvalidLineRange, LineNotFound, LineTooLong

if TYPE_CHECKING:
    from collections.abc import Iterable

    from togglecomment.config.logging import ToggleLogger
    from togglecomment.files.source import SourceFile

logger: ToggleLogger = get_logger(__name__)


def check_length(source: SourceFile, number: int) -> None:
    """Reject a line whose byte length exceeds `MAX_LINE_BYTES`.

    Raises:
        LineTooLong: If the line is over the cap.
    """
    length: int = source.line_length(number)
    if length > MAX_LINE_BYTES:
        raise LineTooLong(number, length)


def check_line(source: SourceFile, number: int) -> int:
    """Validate a single 1-indexed line number.

    Args:
        source (SourceFile): The loaded file.
        number (int): Requested line number.

    Returns:
        int: The validated line number.

    Raises:
        LineNotFound: If ``number`` is outside ``[1, line_count]``.
        LineTooLong: If the line exceeds the byte cap.
    """
    if number < 1 or number > source.line_count:
        raise LineNotFound(number, source.line_count)
    check_length(source, number)
    return number


def check_range(source: SourceFile, start: int, end: int) -> range:
    """Validate an inclusive 1-indexed range and every line in it.

    Args:
        source (SourceFile): The loaded file.
        start (int): First line of the range.
        end (int): Last line of the range.

    Returns:
        range: The line numbers ``start..end``.

    Raises:
        InvalidLineRange: If ``start > end`` or a bound is outside the file.
        LineTooLong: If any line in the range exceeds the byte cap.
    """
    if start > end:
        raise InvalidLineRange(f"start line {start} is after end line {end}", start=start, end=end)
    if start < 1 or end > source.line_count:
        raise InvalidLineRange(
            f"lines {start}-{end} are outside the file (1-{source.line_count})",
            start=start,
            end=end,
        )
    numbers = range(start, end + 1)
    for number in numbers:
        check_length(source, number)
    return numbers


def check_batch(source: SourceFile, numbers: Iterable[int]) -> list[int]:
    """Validate a batch of line numbers, all-or-nothing.

    The entry count is checked before duplicates collapse. Lines are then
    validated in ascending order, so the first reported failure is deterministic.

    Args:
        source (SourceFile): The loaded file.
        numbers (Iterable[int]): Requested line numbers, in any order, possibly repeated.

    Returns:
        list[int]: The distinct line numbers, sorted.

    Raises:
        InvalidLineRange: If the batch is empty.
        BatchTooLarge: If the batch has more than `MAX_BATCH_LINES` entries.
        LineNotFound: If any number is outside the file.
        LineTooLong: If any selected line exceeds the byte cap.
    """
    requested: list[int] = list(numbers)
    if not requested:
        raise InvalidLineRange("empty batch")
    if len(requested) > MAX_BATCH_LINES:
        raise BatchTooLarge(len(requested), MAX_BATCH_LINES)

    unique: list[int] = sorted(set(requested))
    if len(unique) != len(requested):
        logger.debug("batch: collapsed %d entries to %d lines", len(requested), len(unique))
    for number in unique:
        check_line(source, number)
    return unique
