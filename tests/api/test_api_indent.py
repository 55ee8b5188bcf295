# topmark:header:start
#
#   project      : ToggleComment
#   file         : test_api_indent.py
#   file_relpath : tests/api/test_api_indent.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""API tests: indent and unindent."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import read_lines, write_bytes, write_lines
from togglecomment import api
from togglecomment.core.errors import InvalidLineRange, LineNotFound

if TYPE_CHECKING:
    from pathlib import Path


def test_indent_and_unindent_line(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "notes.txt", "a", "b")

    api.indent_line(path, 2)
    assert read_lines(path) == ["a", "    b"]

    api.unindent_line(path, 2)
    assert read_lines(path) == ["a", "b"]


def test_indent_works_without_extension(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "Makefile", "all:")

    api.indent_line(path, 1)

    assert read_lines(path) == ["    all:"]


def test_unindent_leaves_tabs_alone(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.py", "\tx", "  \ty", "      z")

    api.unindent_range(path, 1, 3)

    assert read_lines(path) == ["\tx", "\ty", "  z"]


def test_unindent_without_leading_spaces_still_writes(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.py", "x")

    api.unindent_line(path, 1)

    assert read_lines(path) == ["x"]
    assert (tmp_path / "backup_toggle_comment_a.py").read_bytes() == b"x\n"


def test_indent_range_keeps_crlf(tmp_path: Path) -> None:
    path: Path = write_bytes(tmp_path, "a.txt", b"a\r\nb\r\nc")

    api.indent_range(path, 2, 3)

    assert path.read_bytes() == b"a\r\n    b\r\n    c"


def test_indent_line_out_of_bounds(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.txt", "a")

    with pytest.raises(LineNotFound):
        api.indent_line(path, 2)


def test_indent_range_out_of_bounds_only_backs_up(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.txt", "a", "b")

    with pytest.raises(InvalidLineRange):
        api.indent_range(path, 1, 3)

    assert read_lines(path) == ["a", "b"]
    assert (tmp_path / "backup_toggle_comment_a.txt").read_bytes() == b"a\nb\n"
