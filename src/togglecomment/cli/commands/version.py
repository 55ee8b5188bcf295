# topmark:header:start
#
#   project      : ToggleComment
#   file         : version.py
#   file_relpath : src/togglecomment/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""ToggleComment `version` command.

Prints the current ToggleComment version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from togglecomment.cli.cmd_common import get_console, get_effective_verbosity
from togglecomment.constants import TOGGLECOMMENT_VERSION


@click.command(
    name="version",
    help="Show the current version of ToggleComment.",
)
def version_command() -> None:
    """Show the current version of ToggleComment."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(f"ToggleComment version {TOGGLECOMMENT_VERSION}")
    else:
        console.print(TOGGLECOMMENT_VERSION)
