# topmark:header:start
#
#   project      : ToggleComment
#   file         : strategies_togglecomment.py
#   file_relpath : tests/strategies_togglecomment.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating source files and line selections.

Lines are drawn from a small alphabet that is rich in the characters the
toggler cares about (spaces, tabs, comment tokens), so shrinking produces
readable counter-examples.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

# Every extension below resolves to a built-in profile.
EXTENSIONS: tuple[str, ...] = ("py", "rs", "sh", "js", "c", "toml")

_LINE_ALPHABET = st.sampled_from([" ", "\t", "#", "/", "*", "x", "y", "=", "1", "é", '"'])


@dataclass(frozen=True)
class SourceSample:
    """A generated file: its lines, terminator and end-of-file policy."""

    lines: tuple[str, ...]
    newline: str
    final_newline: bool
    ext: str

    def to_bytes(self) -> bytes:
        """Render the sample exactly as it should appear on disk."""
        body: str = self.newline.join(self.lines)
        if self.final_newline:
            body += self.newline
        return body.encode("utf-8")


def s_line() -> st.SearchStrategy[str]:
    """Strategy for a single line without terminator."""
    return st.text(_LINE_ALPHABET, max_size=24)


@st.composite
def s_source(draw: Draw, *, min_lines: int = 1, max_lines: int = 12) -> SourceSample:
    """Strategy for a whole source file with at least ``min_lines`` lines."""
    lines: list[str] = draw(st.lists(s_line(), min_size=min_lines, max_size=max_lines))
    final_newline: bool = draw(st.booleans())
    if lines[-1] == "" and not final_newline:
        # A trailing empty line only exists on disk when it is terminated.
        final_newline = True
    return SourceSample(
        lines=tuple(lines),
        newline=draw(st.sampled_from(LINE_ENDINGS)),
        final_newline=final_newline,
        ext=draw(st.sampled_from(EXTENSIONS)),
    )


@st.composite
def s_source_with_line(draw: Draw) -> tuple[SourceSample, int]:
    """Strategy for a source file plus a valid 1-indexed line number in it."""
    sample: SourceSample = draw(s_source())
    number: int = draw(st.integers(min_value=1, max_value=len(sample.lines)))
    return sample, number
