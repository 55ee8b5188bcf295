# topmark:header:start
#
#   project      : ToggleComment
#   file         : test_exit_codes.py
#   file_relpath : tests/cli/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""CLI tests: each failure class maps to its documented exit code."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_exit, run_cli
from tests.conftest import write_bytes, write_lines
from togglecomment import api
from togglecomment.constants import MAX_LINE_BYTES
from togglecomment.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: pytest.MarkDecorator = pytest.mark.cli


def test_file_not_found(tmp_path: Path) -> None:
    result = run_cli(["toggle", str(tmp_path / "missing.py"), "1"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "File not found" in result.output


def test_no_extension(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "Makefile", "all:")
    assert_exit(run_cli(["toggle", str(path), "1"]), ExitCode.NO_EXTENSION)


def test_unsupported_extension(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.txt", "x")
    result = run_cli(["toggle", str(path), "1"])
    assert_exit(result, ExitCode.UNSUPPORTED_EXTENSION)
    assert "Error: Unsupported extension: txt" in result.output


def test_line_not_found(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.py", "x")
    assert_exit(run_cli(["toggle", str(path), "2"]), ExitCode.LINE_NOT_FOUND)


def test_path_error(tmp_path: Path) -> None:
    assert_exit(run_cli(["indent", str(tmp_path), "1"]), ExitCode.PATH_ERROR)


def test_line_too_long(tmp_path: Path) -> None:
    path: Path = write_bytes(tmp_path, "a.py", b"x" * (MAX_LINE_BYTES + 1) + b"\n")
    assert_exit(run_cli(["toggle", str(path), "1"]), ExitCode.LINE_TOO_LONG)


def test_inconsistent_block_markers(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.rs", "/*", "x", "y")
    assert_exit(run_cli(["block", str(path), "1", "3"]), ExitCode.INCONSISTENT_BLOCK_MARKERS)


def test_invalid_line_range(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.rs", "x", "y")
    assert_exit(run_cli(["block", str(path), "2", "1"]), ExitCode.INVALID_LINE_RANGE)


def test_batch_too_large(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.py", *["x"] * 200)
    argv: list[str] = ["batch", str(path), *(str(n) for n in range(1, 130))]
    assert_exit(run_cli(argv), ExitCode.INVALID_LINE_RANGE)


@pytest.mark.parametrize(
    "argv",
    [
        ["toggle"],
        ["toggle", "a.py"],
        ["toggle", "a.py", "three"],
        ["no-such-command"],
        ["--bogus-flag"],
        ["batch", "a.py"],
    ],
)
def test_usage_errors_exit_with_usage_code(argv: list[str]) -> None:
    assert_exit(run_cli(argv), ExitCode.USAGE_ERROR)


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    path: Path = write_lines(tmp_path, "a.py", "x")
    assert_exit(run_cli(["-v", "-q", "toggle", str(path), "1"]), ExitCode.USAGE_ERROR)
    assert path.read_bytes() == b"x\n"


def test_unexpected_error_exits_255(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path: Path = write_lines(tmp_path, "a.py", "x")

    def _boom(*args: object) -> None:
        raise RuntimeError("kaboom")

    monkeypatch.setattr(api, "toggle_basic_singleline_comment", _boom)

    result = run_cli(["toggle", str(path), "1"])

    assert_exit(result, ExitCode.UNEXPECTED_ERROR)
    assert "Unexpected error: kaboom" in result.output
