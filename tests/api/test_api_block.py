# topmark:header:start
#
#   project      : ToggleComment
#   file         : test_api_block.py
#   file_relpath : tests/api/test_api_block.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""API tests: block comment toggling."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.conftest import read_lines, write_bytes, write_lines
from togglecomment import api
from togglecomment.core.errors import (
    InconsistentBlockMarkers,
    InvalidLineRange,
    UnsupportedExtension,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_block_round_trip_on_rust(tmp_path: Path) -> None:
    original: list[str] = ["fn main() {", "    let a = 1;", "    let b = 2;", "}"]
    path: Path = write_lines(tmp_path, "main.rs", *original)

    api.toggle_block_comment(path, 2, 3)
    assert read_lines(path) == ["fn main() {", "/*", "    let a = 1;", "    let b = 2;", "*/", "}"]

    api.toggle_block_comment(path, 2, 5)
    assert read_lines(path) == original


def test_python_block_uses_triple_quotes(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.py", "x = 1", "y = 2")

    api.toggle_block_comment(path, 1, 2)

    assert read_lines(path) == ['"""', "x = 1", "y = 2", '"""']


def test_block_keeps_crlf(tmp_path: Path) -> None:
    path: Path = write_bytes(tmp_path, "a.c", b"int a;\r\nint b;\r\n")

    api.toggle_block_comment(path, 1, 2)

    assert path.read_bytes() == b"/*\r\nint a;\r\nint b;\r\n*/\r\n"


def test_block_unsupported_for_shell(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.sh", "echo a")

    with pytest.raises(UnsupportedExtension) as excinfo:
        api.toggle_block_comment(path, 1, 1)

    assert excinfo.value.feature == "block comments"


def test_half_marked_range_is_refused(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.js", "/*", "a", "b")
    before: bytes = path.read_bytes()

    with pytest.raises(InconsistentBlockMarkers):
        api.toggle_block_comment(path, 1, 3)

    assert path.read_bytes() == before


@pytest.mark.parametrize(("start", "end"), [(3, 1), (0, 2), (2, 9)])
def test_invalid_block_range(tmp_path: Path, start: int, end: int) -> None:
    path: Path = write_lines(tmp_path, "a.java", "a", "b", "c")

    with pytest.raises(InvalidLineRange):
        api.toggle_block_comment(path, start, end)
