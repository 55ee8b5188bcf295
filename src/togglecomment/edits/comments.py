# topmark:header:start
#
#   project      : ToggleComment
#   file         : comments.py
#   file_relpath : src/togglecomment/edits/comments.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

r"""Single-line comment toggling.

A line counts as commented when, after its leading spaces and tabs, it starts
with the token followed by exactly one space. Removing strips that
``token + " "``; adding inserts it right after the leading whitespace. Nothing
else on the line changes, so add followed by remove restores the line, blank
lines included (``""`` becomes ``"# "`` and back).

Lines such as ``"#  x"`` (two spaces after the token) or ``"# \tx"`` are *not*
commented in this sense and get a second token on toggle. With that rule a
toggle is undone by the next toggle, except on a line carrying two stacked
markers (``"# # x"``), which loses one marker per toggle.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from togglecomment.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from togglecomment.config.logging import ToggleLogger

logger: ToggleLogger = get_logger(__name__)

_LEADING_WS = re.compile(r"[ \t]*")


def split_indent(text: str) -> tuple[str, str]:
    """Split a line into its leading spaces/tabs and the rest."""
    match = _LEADING_WS.match(text)
    cut: int = match.end() if match else 0
    return text[:cut], text[cut:]


def is_commented(text: str, token: str) -> bool:
    """Return True if ``text`` carries ``token`` plus exactly one space after its indentation.

    The character after that space must not be blank either: a tab there would be
    read back as indentation once the marker is removed.
    """
    _indent, body = split_indent(text)
    marker: str = f"{token} "
    return body.startswith(marker) and not body[len(marker) :].startswith((" ", "\t"))


def toggle_line(text: str, token: str) -> str:
    """Add or remove ``token`` on one line.

    Args:
        text (str): Line content without terminator.
        token (str): Comment token (e.g. ``"#"``, ``"//"`` or ``"///"``).

    Returns:
        str: The toggled line.
    """
    indent, body = split_indent(text)
    marker: str = f"{token} "
    if is_commented(text, token):
        return indent + body[len(marker) :]
    return indent + marker + body


def toggle_lines(lines: Sequence[str], numbers: Iterable[int], token: str) -> list[str]:
    """Toggle ``token`` on each 1-indexed line in ``numbers``.

    Callers pass distinct, validated numbers; each line is toggled once and
    independently of the others.
    """
    updated: list[str] = list(lines)
    for number in numbers:
        before: str = updated[number - 1]
        after: str = toggle_line(before, token)
        logger.trace("line %d: %r -> %r", number, before, after)
        updated[number - 1] = after
    return updated
