# topmark:header:start
#
#   project      : ToggleComment
#   file         : pound.py
#   file_relpath : src/togglecomment/syntax/builtins/pound.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Scripting and data languages using ``#`` line comments.

Only Python has a block form here: a bare triple-quote line opens and closes the
block. None of these families has a doc-comment token.

Exports:
    PROFILES (list[CommentProfile]): Definitions for Python, shell, TOML, YAML,
        Ruby, Perl and R.
"""

from __future__ import annotations

from ..base import BlockMarkers, CommentProfile

POUND_TOKEN = "#"

PROFILES: list[CommentProfile] = [
    CommentProfile(
        name="python",
        extensions=("py",),
        line_token=POUND_TOKEN,
        block_markers=BlockMarkers(open='"""', close='"""'),
        description="Python sources (*.py)",
    ),
    CommentProfile(
        name="shell",
        extensions=("sh", "bash"),
        line_token=POUND_TOKEN,
        description="Shell scripts (*.sh, *.bash)",
    ),
    CommentProfile(
        name="toml",
        extensions=("toml",),
        line_token=POUND_TOKEN,
        description="TOML documents (*.toml)",
    ),
    CommentProfile(
        name="yaml",
        extensions=("yaml", "yml"),
        line_token=POUND_TOKEN,
        description="YAML documents (*.yaml, *.yml)",
    ),
    CommentProfile(
        name="ruby",
        extensions=("rb",),
        line_token=POUND_TOKEN,
        description="Ruby sources (*.rb)",
    ),
    CommentProfile(
        name="perl",
        extensions=("pl",),
        line_token=POUND_TOKEN,
        description="Perl sources (*.pl)",
    ),
    CommentProfile(
        name="r",
        extensions=("r",),
        line_token=POUND_TOKEN,
        description="R sources (*.r)",
    ),
]
