# topmark:header:start
#
#   project      : ToggleComment
#   file         : filetypes.py
#   file_relpath : src/togglecomment/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""ToggleComment `filetypes` command.

Lists the built-in comment profiles: which extensions they claim and which
comment styles (line, doc, block) are available for them.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from togglecomment.cli.cmd_common import get_console
from togglecomment.syntax.registry import iter_profiles

if TYPE_CHECKING:
    from togglecomment.syntax.base import CommentProfile


def _serialize_profile(profile: CommentProfile) -> dict[str, Any]:
    """Serialize a comment profile to a JSON-friendly dict."""
    markers = profile.block_markers
    return {
        "name": profile.name,
        "description": profile.description,
        "extensions": list(profile.extensions),
        "line_token": profile.line_token,
        "doc_token": profile.doc_token,
        "block_markers": [markers.open, markers.close] if markers else None,
    }


@click.command(
    name="filetypes",
    help="List the supported file types and their comment syntax.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["default", "json"]),
    default="default",
    help="Output format (default, json).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extensions and comment tokens for each file type.",
)
def filetypes_command(*, output_format: str = "default", show_details: bool = False) -> None:
    """List supported file types.

    Args:
        output_format (str): ``default`` for a text listing, ``json`` for a JSON array.
        show_details (bool): If True, shows extensions and comment tokens.
    """
    console = get_console(click.get_current_context())
    profiles = list(iter_profiles())

    if output_format == "json":
        if show_details:
            payload = [_serialize_profile(p) for p in profiles]
        else:
            payload = [{"name": p.name, "description": p.description} for p in profiles]
        console.print(json.dumps(payload, indent=2))
        return

    width: int = max(len(p.name) for p in profiles)
    for profile in profiles:
        console.print(f"{console.styled(profile.name.ljust(width), bold=True)}  {profile.description}")
        if not show_details:
            continue
        markers = profile.block_markers
        console.print(f"{'':{width}}    extensions: {', '.join(profile.extensions)}")
        console.print(f"{'':{width}}    line: {profile.line_token}")
        console.print(f"{'':{width}}    doc: {profile.doc_token or '-'}")
        console.print(
            f"{'':{width}}    block: {f'{markers.open} {markers.close}' if markers else '-'}"
        )
