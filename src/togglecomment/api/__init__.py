# topmark:header:start
#
#   project      : ToggleComment
#   file         : __init__.py
#   file_relpath : src/togglecomment/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Public ToggleComment API (stable surface).

Every function here edits one file in place and returns ``None`` on success.
Failures raise a `togglecomment.core.errors.ToggleError` subclass; validation
errors are raised before the file is rewritten.

Contract
--------
- Line numbers are **1-indexed**; ranges are **inclusive**.
- Comment operations derive the comment syntax from the file extension
  (case-sensitive, see `togglecomment.syntax`). Indent operations work on any file.
- Once the file is found and loaded, the call leaves
  ``backup_toggle_comment_<name>`` next to it holding the content from before
  that call, even when validation then fails.
- Calls are stateless and independent. Nothing is locked: callers must not run
  two operations on the same path at once.

```python
from togglecomment import api

api.toggle_basic_singleline_comment("a.py", 3)  # "x = 1" -> "# x = 1"
api.toggle_block_comment("lib.rs", 10, 20)  # wraps lines 10-20 in /* */
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from togglecomment.api.runtime import (
    commit,
    load_commentable,
    load_source,
    require_block_markers,
    require_doc_token,
)
from togglecomment.config.logging import get_logger
from togglecomment.edits.block import toggle_block
from togglecomment.edits.comments import toggle_lines
from togglecomment.edits.indent import indent_lines, unindent_lines
from togglecomment.edits.selection import check_batch, check_line, check_range
from togglecomment.syntax.registry import get_syntax_registry, profile_for

if TYPE_CHECKING:
    from collections.abc import Iterable
    from os import PathLike

    from togglecomment.config.logging import ToggleLogger

__all__ = [
    "get_syntax_registry",
    "indent_line",
    "indent_range",
    "profile_for",
    "toggle_basic_singleline_comment",
    "toggle_block_comment",
    "toggle_multiple_basic_comments",
    "toggle_multiple_docstring_comments",
    "toggle_range_basic_comments",
    "toggle_range_docstring_comments",
    "toggle_rust_docstring_singleline_comment",
    "unindent_line",
    "unindent_range",
]

logger: ToggleLogger = get_logger(__name__)


# --- Comments --------------------------------------------------------------


def toggle_basic_singleline_comment(path: str | PathLike[str], line: int) -> None:
    """Toggle the single-line comment token on one line.

    Args:
        path (str | PathLike[str]): File to edit.
        line (int): 1-indexed line number.

    Raises:
        FileNotFound: If the file does not exist.
        PathError: If the path is not a usable regular file.
        NoExtension: If the file name has no extension.
        UnsupportedExtension: If the extension is not in the syntax table.
        LineNotFound: If ``line`` is outside the file.
        LineTooLong: If the line exceeds the byte cap.
        IoError: If backing up or rewriting the file fails.
    """
    source, profile = load_commentable(path)
    check_line(source, line)
    commit(source, toggle_lines(source.lines, [line], profile.line_token))
    logger.info("toggled %r on line %d of %s", profile.line_token, line, source.path)


def toggle_rust_docstring_singleline_comment(path: str | PathLike[str], line: int) -> None:
    """Toggle the doc-comment token (e.g. ``///``) on one line.

    Same contract as `toggle_basic_singleline_comment`; additionally raises
    `UnsupportedExtension` when the file's profile has no doc token.
    """
    source, profile = load_commentable(path)
    token: str = require_doc_token(source, profile)
    check_line(source, line)
    commit(source, toggle_lines(source.lines, [line], token))
    logger.info("toggled %r on line %d of %s", token, line, source.path)


def toggle_multiple_basic_comments(path: str | PathLike[str], lines: Iterable[int]) -> None:
    """Toggle the single-line comment token on a batch of lines in one rewrite.

    Duplicates collapse, so ``[5, 10, 5]`` toggles lines 5 and 10 once each.
    Every number is validated before any change.

    Args:
        path (str | PathLike[str]): File to edit.
        lines (Iterable[int]): 1-indexed line numbers, at most 128 entries.

    Raises:
        InvalidLineRange: If the batch is empty.
        BatchTooLarge: If the batch has more than 128 entries.
        LineNotFound: If any line is outside the file.
        LineTooLong: If any selected line exceeds the byte cap.
    """
    source, profile = load_commentable(path)
    numbers: list[int] = check_batch(source, lines)
    commit(source, toggle_lines(source.lines, numbers, profile.line_token))
    logger.info("toggled %r on %d lines of %s", profile.line_token, len(numbers), source.path)


def toggle_multiple_docstring_comments(path: str | PathLike[str], lines: Iterable[int]) -> None:
    """Batch variant of `toggle_rust_docstring_singleline_comment`."""
    source, profile = load_commentable(path)
    token: str = require_doc_token(source, profile)
    numbers: list[int] = check_batch(source, lines)
    commit(source, toggle_lines(source.lines, numbers, token))
    logger.info("toggled %r on %d lines of %s", token, len(numbers), source.path)


def toggle_range_basic_comments(path: str | PathLike[str], start: int, end: int) -> None:
    """Toggle the single-line comment token on every line of ``start..end``.

    Each line is toggled on its own: commented lines are uncommented and the
    others commented.

    Raises:
        InvalidLineRange: If ``start > end`` or a bound is outside the file.
        LineTooLong: If any line in the range exceeds the byte cap.
    """
    source, profile = load_commentable(path)
    numbers: range = check_range(source, start, end)
    commit(source, toggle_lines(source.lines, numbers, profile.line_token))
    logger.info("toggled %r on lines %d-%d of %s", profile.line_token, start, end, source.path)


def toggle_range_docstring_comments(path: str | PathLike[str], start: int, end: int) -> None:
    """Range variant of `toggle_rust_docstring_singleline_comment`."""
    source, profile = load_commentable(path)
    token: str = require_doc_token(source, profile)
    numbers: range = check_range(source, start, end)
    commit(source, toggle_lines(source.lines, numbers, token))
    logger.info("toggled %r on lines %d-%d of %s", token, start, end, source.path)


def toggle_block_comment(path: str | PathLike[str], start: int, end: int) -> None:
    """Wrap ``start..end`` in block markers, or unwrap it if already wrapped.

    When the line at ``start`` is the open marker and the line at ``end`` the
    close marker, both marker lines are deleted. Otherwise marker lines are
    inserted before ``start`` and after ``end``. So toggling ``(s, e)`` and then
    ``(s, e + 2)`` restores the file.

    Raises:
        UnsupportedExtension: If the file's profile has no block markers.
        InvalidLineRange: If ``start > end`` or a bound is outside the file.
        InconsistentBlockMarkers: If only one boundary is a marker line.
        LineTooLong: If any line in the range exceeds the byte cap.
    """
    source, profile = load_commentable(path)
    markers = require_block_markers(source, profile)
    check_range(source, start, end)
    action, updated = toggle_block(source.lines, start, end, markers)
    commit(source, updated)
    logger.info("block comment %s on lines %d-%d of %s", action.value, start, end, source.path)


# --- Indentation -----------------------------------------------------------


def indent_line(path: str | PathLike[str], line: int) -> None:
    """Prepend four spaces to one line.

    Raises:
        FileNotFound: If the file does not exist.
        LineNotFound: If ``line`` is outside the file.
        LineTooLong: If the line exceeds the byte cap.
        IoError: If backing up or rewriting the file fails.
    """
    source = load_source(path)
    check_line(source, line)
    commit(source, indent_lines(source.lines, [line]))
    logger.info("indented line %d of %s", line, source.path)


def unindent_line(path: str | PathLike[str], line: int) -> None:
    """Remove up to four leading spaces from one line (tabs are left alone)."""
    source = load_source(path)
    check_line(source, line)
    commit(source, unindent_lines(source.lines, [line]))
    logger.info("unindented line %d of %s", line, source.path)


def indent_range(path: str | PathLike[str], start: int, end: int) -> None:
    """Indent every line of ``start..end``; all-or-nothing."""
    source = load_source(path)
    numbers: range = check_range(source, start, end)
    commit(source, indent_lines(source.lines, numbers))
    logger.info("indented lines %d-%d of %s", start, end, source.path)


def unindent_range(path: str | PathLike[str], start: int, end: int) -> None:
    """Unindent every line of ``start..end``; all-or-nothing."""
    source = load_source(path)
    numbers: range = check_range(source, start, end)
    commit(source, unindent_lines(source.lines, numbers))
    logger.info("unindented lines %d-%d of %s", start, end, source.path)
