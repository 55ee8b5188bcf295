# topmark:header:start
#
#   project      : ToggleComment
#   file         : cmd_common.py
#   file_relpath : src/togglecomment/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
retrieving the console and verbosity from the Click context, and running one
library operation with uniform error conversion and reporting.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from togglecomment.cli.console import ClickConsole
from togglecomment.cli.errors import ToggleCliError
from togglecomment.config.logging import get_logger
from togglecomment.core.errors import ToggleError
from togglecomment.files.writer import backup_path_for

if TYPE_CHECKING:
    from collections.abc import Callable

    from togglecomment.cli.console import ConsoleLike

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context, or a plain one."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict) and obj.get("console") is not None:
        return obj["console"]
    return ClickConsole(enable_color=False)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 when unset)."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def run_edit(
    operation: Callable[..., None],
    file: str,
    *args: Any,
    success: str,
) -> None:
    """Run one library operation on ``file`` and report the outcome.

    Args:
        operation (Callable[..., None]): Function from `togglecomment.api`.
        file (str): Path argument as given on the command line.
        *args (Any): Remaining positional arguments for ``operation``.
        success (str): Message printed when the edit succeeds.

    Raises:
        ToggleCliError: Wrapping the library error, with its exit code.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    verbosity: int = get_effective_verbosity(ctx)

    try:
        operation(file, *args)
    except ToggleError as exc:
        logger.debug("%s failed: %r", operation.__name__, exc)
        raise ToggleCliError.from_error(exc, console=console) from exc

    if verbosity >= 0:
        console.print(console.styled(success, fg="green"))
    if verbosity >= 1:
        backup: Path = backup_path_for(Path(file).resolve())
        console.print(f"Backup: {backup}")
