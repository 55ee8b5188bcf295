# topmark:header:start
#
#   project      : ToggleComment
#   file         : cli_types.py
#   file_relpath : src/togglecomment/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Custom Click types for the ToggleComment CLI."""

from __future__ import annotations

from typing import Any

import click

from togglecomment.cli.errors import ToggleCliError
from togglecomment.config.logging import get_logger
from togglecomment.core.exit_codes import ExitCode

logger = get_logger(__name__)


class ToggleGroup(click.Group):
    """Click group that reports usage errors with `ExitCode.USAGE_ERROR`.

    Click exits with 2 on usage errors, which is ``FILE_NOT_FOUND`` here.
    Subcommand contexts are created inside `invoke`, so overriding
    `make_context` and `invoke` covers parsing at every level.
    """

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        """Create the group context, remapping usage errors."""
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = ExitCode.USAGE_ERROR
            raise

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the group and its subcommand.

        Usage errors get `ExitCode.USAGE_ERROR`; any exception that is not a
        Click control-flow exception becomes a `ToggleCliError` with
        `ExitCode.UNEXPECTED_ERROR`.
        """
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            exc.exit_code = ExitCode.USAGE_ERROR
            raise
        except (click.ClickException, click.exceptions.Exit, click.Abort):
            raise
        except Exception as exc:
            logger.exception("unexpected error")
            raise ToggleCliError(f"Unexpected error: {exc}") from exc
