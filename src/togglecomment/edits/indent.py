# topmark:header:start
#
#   project      : ToggleComment
#   file         : indent.py
#   file_relpath : src/togglecomment/edits/indent.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Indent engine: add or remove one indentation unit (four spaces)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from togglecomment.constants import INDENT_UNIT

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def indent_text(text: str) -> str:
    """Prepend one indentation unit."""
    return INDENT_UNIT + text


def unindent_text(text: str) -> str:
    """Remove up to one indentation unit of leading spaces.

    Only contiguous leading space characters count; a leading tab stops the
    scan and is never removed.
    """
    spaces: int = len(text) - len(text.lstrip(" "))
    return text[min(spaces, len(INDENT_UNIT)) :]


def indent_lines(lines: Sequence[str], numbers: Iterable[int]) -> list[str]:
    """Indent each 1-indexed line in ``numbers``."""
    updated: list[str] = list(lines)
    for number in numbers:
        updated[number - 1] = indent_text(updated[number - 1])
    return updated


def unindent_lines(lines: Sequence[str], numbers: Iterable[int]) -> list[str]:
    """Unindent each 1-indexed line in ``numbers``."""
    updated: list[str] = list(lines)
    for number in numbers:
        updated[number - 1] = unindent_text(updated[number - 1])
    return updated
