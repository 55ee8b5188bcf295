# topmark:header:start
#
#   project      : ToggleComment
#   file         : comments.py
#   file_relpath : src/togglecomment/cli/commands/comments.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Comment toggling commands: ``toggle``, ``doc``, ``batch``, ``batch-doc``, ``range``, ``range-doc``.

Line numbers are 1-indexed. The comment token is derived from the file extension.
"""

from __future__ import annotations

import click

from togglecomment import api
from togglecomment.cli.cmd_common import run_edit

FILE_ARGUMENT = click.argument("file", type=click.Path(dir_okay=True, path_type=str))


@click.command(name="toggle", help="Toggle the line comment (// or #) on LINE.")
@FILE_ARGUMENT
@click.argument("line", type=int)
def toggle_command(file: str, line: int) -> None:
    """Toggle the basic single-line comment on one line."""
    run_edit(
        api.toggle_basic_singleline_comment,
        file,
        line,
        success=f"Toggled comment on line {line} of {file}",
    )


@click.command(name="doc", help="Toggle the doc comment (///) on LINE.")
@FILE_ARGUMENT
@click.argument("line", type=int)
def doc_command(file: str, line: int) -> None:
    """Toggle the doc comment on one line."""
    run_edit(
        api.toggle_rust_docstring_singleline_comment,
        file,
        line,
        success=f"Toggled doc comment on line {line} of {file}",
    )


@click.command(
    name="batch",
    help="Toggle the line comment on several lines in one rewrite (at most 128).",
)
@FILE_ARGUMENT
@click.argument("lines", type=int, nargs=-1, required=True)
def batch_command(file: str, lines: tuple[int, ...]) -> None:
    """Toggle the basic comment on a batch of lines."""
    run_edit(
        api.toggle_multiple_basic_comments,
        file,
        lines,
        success=f"Toggled comments on {len(set(lines))} lines of {file}",
    )


@click.command(
    name="batch-doc",
    help="Toggle the doc comment on several lines in one rewrite (at most 128).",
)
@FILE_ARGUMENT
@click.argument("lines", type=int, nargs=-1, required=True)
def batch_doc_command(file: str, lines: tuple[int, ...]) -> None:
    """Toggle the doc comment on a batch of lines."""
    run_edit(
        api.toggle_multiple_docstring_comments,
        file,
        lines,
        success=f"Toggled doc comments on {len(set(lines))} lines of {file}",
    )


@click.command(name="range", help="Toggle the line comment on each line from START to END.")
@FILE_ARGUMENT
@click.argument("start", type=int)
@click.argument("end", type=int)
def range_command(file: str, start: int, end: int) -> None:
    """Toggle the basic comment on an inclusive range of lines."""
    run_edit(
        api.toggle_range_basic_comments,
        file,
        start,
        end,
        success=f"Toggled comments on lines {start}-{end} of {file}",
    )


@click.command(name="range-doc", help="Toggle the doc comment on each line from START to END.")
@FILE_ARGUMENT
@click.argument("start", type=int)
@click.argument("end", type=int)
def range_doc_command(file: str, start: int, end: int) -> None:
    """Toggle the doc comment on an inclusive range of lines."""
    run_edit(
        api.toggle_range_docstring_comments,
        file,
        start,
        end,
        success=f"Toggled doc comments on lines {start}-{end} of {file}",
    )
