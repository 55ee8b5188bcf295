# topmark:header:start
#
#   project      : ToggleComment
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""CLI test helpers for running ToggleComment through Click's test runner."""

from __future__ import annotations

from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from togglecomment.cli.main import cli
from togglecomment.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI in-process.

    Tests pass absolute paths (under ``tmp_path``), so the working directory does
    not matter.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["toggle", "a.py", "3"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        code (ExitCode): Expected exit code.
    """
    assert result.exit_code == code, result.output
