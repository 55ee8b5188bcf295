# topmark:header:start
#
#   project      : ToggleComment
#   file         : block.py
#   file_relpath : src/togglecomment/cli/commands/block.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""ToggleComment ``block`` command."""

from __future__ import annotations

import click

from togglecomment import api
from togglecomment.cli.cmd_common import run_edit


@click.command(
    name="block",
    help="Wrap lines START..END in block markers, or remove the markers.",
    epilog="""
If START holds the open marker (/* or \"\"\") and END the close marker, both marker
lines are removed. Otherwise markers are inserted before START and after END.
""",
)
@click.argument("file", type=click.Path(dir_okay=True, path_type=str))
@click.argument("start", type=int)
@click.argument("end", type=int)
def block_command(file: str, start: int, end: int) -> None:
    """Toggle a block comment around an inclusive range."""
    run_edit(
        api.toggle_block_comment,
        file,
        start,
        end,
        success=f"Toggled block comment on lines {start}-{end} of {file}",
    )
