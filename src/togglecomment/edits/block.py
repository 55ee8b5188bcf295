# topmark:header:start
#
#   project      : ToggleComment
#   file         : block.py
#   file_relpath : src/togglecomment/edits/block.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Block comment toggling.

A block is a pair of marker lines around an inclusive range. The decision is
taken from the two boundary lines, each compared to its marker after trailing
whitespace is stripped:

- both match: remove the two boundary lines (the interior shifts up by one);
- neither matches: insert the open marker before ``start`` and the close marker
  after ``end``, at column 0;
- exactly one matches: refuse with `InconsistentBlockMarkers`.

Unlike line toggles this changes the line count, so it works on the whole line
list rather than line by line.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from togglecomment.config.logging import get_logger
from togglecomment.core.errors import InconsistentBlockMarkers

if TYPE_CHECKING:
    from collections.abc import Sequence

    from togglecomment.syntax.base import BlockMarkers

logger = get_logger(__name__)


class BlockAction(Enum):
    """What a block toggle does to a range."""

    ADD = "add"
    REMOVE = "remove"


def _is_marker(text: str, marker: str) -> bool:
    return text.rstrip() == marker


def plan_block(lines: Sequence[str], start: int, end: int, markers: BlockMarkers) -> BlockAction:
    """Decide whether toggling ``start..end`` adds or removes a block.

    Args:
        lines (Sequence[str]): File lines; ``start`` and ``end`` are validated 1-indexed bounds.
        start (int): First line of the range.
        end (int): Last line of the range.
        markers (BlockMarkers): Markers of the file's comment profile.

    Returns:
        BlockAction: ``REMOVE`` if the range is already wrapped, ``ADD`` otherwise.

    Raises:
        InconsistentBlockMarkers: If only one boundary is a marker, or a
            single-line range holds a marker.
    """
    opens: bool = _is_marker(lines[start - 1], markers.open)
    closes: bool = _is_marker(lines[end - 1], markers.close)

    if start == end and (opens or closes):
        raise InconsistentBlockMarkers(start, end, "a single marker line cannot be unwrapped")
    if opens and closes:
        return BlockAction.REMOVE
    if not opens and not closes:
        return BlockAction.ADD
    if opens:
        detail = f"line {start} opens a block but line {end} does not close it"
    else:
        detail = f"line {end} closes a block but line {start} does not open it"
    raise InconsistentBlockMarkers(start, end, detail)


def toggle_block(
    lines: Sequence[str], start: int, end: int, markers: BlockMarkers
) -> tuple[BlockAction, list[str]]:
    """Wrap or unwrap ``start..end`` with block markers.

    Returns:
        tuple[BlockAction, list[str]]: The action taken and the new line list.
    """
    action: BlockAction = plan_block(lines, start, end, markers)
    head: list[str] = list(lines[: start - 1])
    tail: list[str] = list(lines[end:])
    if action is BlockAction.REMOVE:
        body: list[str] = list(lines[start : end - 1])
        updated: list[str] = head + body + tail
    else:
        body = list(lines[start - 1 : end])
        updated = [*head, markers.open, *body, markers.close, *tail]
    logger.debug("block %s on lines %d-%d", action.value, start, end)
    return action, updated
