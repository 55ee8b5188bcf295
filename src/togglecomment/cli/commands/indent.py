# topmark:header:start
#
#   project      : ToggleComment
#   file         : indent.py
#   file_relpath : src/togglecomment/cli/commands/indent.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Indentation commands: ``indent``, ``unindent``, ``indent-range``, ``unindent-range``.

The unit is four spaces. Unindent removes at most four leading spaces and never
touches tabs. These commands work on files of any extension.
"""

from __future__ import annotations

import click

from togglecomment import api
from togglecomment.cli.cmd_common import run_edit

FILE_ARGUMENT = click.argument("file", type=click.Path(dir_okay=True, path_type=str))


@click.command(name="indent", help="Add four spaces at the start of LINE.")
@FILE_ARGUMENT
@click.argument("line", type=int)
def indent_command(file: str, line: int) -> None:
    """Indent one line."""
    run_edit(api.indent_line, file, line, success=f"Indented line {line} of {file}")


@click.command(name="unindent", help="Remove up to four leading spaces from LINE.")
@FILE_ARGUMENT
@click.argument("line", type=int)
def unindent_command(file: str, line: int) -> None:
    """Unindent one line."""
    run_edit(api.unindent_line, file, line, success=f"Unindented line {line} of {file}")


@click.command(name="indent-range", help="Add four spaces to each line from START to END.")
@FILE_ARGUMENT
@click.argument("start", type=int)
@click.argument("end", type=int)
def indent_range_command(file: str, start: int, end: int) -> None:
    """Indent an inclusive range of lines."""
    run_edit(
        api.indent_range,
        file,
        start,
        end,
        success=f"Indented lines {start}-{end} of {file}",
    )


@click.command(
    name="unindent-range", help="Remove up to four leading spaces from each line from START to END."
)
@FILE_ARGUMENT
@click.argument("start", type=int)
@click.argument("end", type=int)
def unindent_range_command(file: str, start: int, end: int) -> None:
    """Unindent an inclusive range of lines."""
    run_edit(
        api.unindent_range,
        file,
        start,
        end,
        success=f"Unindented lines {start}-{end} of {file}",
    )
