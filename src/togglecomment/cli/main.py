# topmark:header:start
#
#   project      : ToggleComment
#   file         : main.py
#   file_relpath : src/togglecomment/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""ToggleComment CLI entry point.

Group-level options are initialized once and placed into ``ctx.obj``; each
subcommand maps onto one function of `togglecomment.api`. Library errors leave
the process with the exit code of their class (see
`togglecomment.core.exit_codes.ExitCode`).
"""

from __future__ import annotations

import click

from togglecomment.cli.cli_types import ToggleGroup
from togglecomment.cli.commands.block import block_command
from togglecomment.cli.commands.comments import (
    batch_command,
    batch_doc_command,
    doc_command,
    range_command,
    range_doc_command,
    toggle_command,
)
from togglecomment.cli.commands.filetypes import filetypes_command
from togglecomment.cli.commands.indent import (
    indent_command,
    indent_range_command,
    unindent_command,
    unindent_range_command,
)
from togglecomment.cli.commands.version import version_command
from togglecomment.cli.console import ClickConsole
from togglecomment.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from togglecomment.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=ToggleGroup,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Toggle comments and indentation on lines of a source file.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the ToggleComment CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'togglecomment toggle FILE LINE' to toggle a comment.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(toggle_command)
cli.add_command(doc_command)
cli.add_command(batch_command)
cli.add_command(batch_doc_command)
cli.add_command(range_command)
cli.add_command(range_doc_command)
cli.add_command(block_command)
cli.add_command(indent_command)
cli.add_command(unindent_command)
cli.add_command(indent_range_command)
cli.add_command(unindent_range_command)
cli.add_command(filetypes_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
