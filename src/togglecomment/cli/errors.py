# topmark:header:start
#
#   project      : ToggleComment
#   file         : errors.py
#   file_relpath : src/togglecomment/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Exceptions for the ToggleComment CLI.

Library errors (`togglecomment.core.errors.ToggleError`) are converted into
`ToggleCliError` at the command boundary, keeping their message and exit code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from togglecomment.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from togglecomment.cli.console import ConsoleLike
    from togglecomment.core.errors import ToggleError


class ToggleCliError(click.ClickException):
    """Base class for all ToggleComment CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        console: ConsoleLike | None = None,
    ) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code
        self.console = console

    @classmethod
    def from_error(cls, error: ToggleError, *, console: ConsoleLike | None = None) -> ToggleCliError:
        """Wrap a library error, keeping its message and exit code."""
        return cls(str(error), exit_code=error.exit_code, console=console)

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        console: ConsoleLike | None = self.console
        if console is None:
            ctx = click.get_current_context(silent=True)
            if ctx is not None and isinstance(ctx.obj, dict):
                console = ctx.obj.get("console")
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class ToggleUsageError(ToggleCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR
