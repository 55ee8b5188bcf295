# topmark:header:start
#
#   project      : ToggleComment
#   file         : base.py
#   file_relpath : src/togglecomment/syntax/base.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Comment profile definitions.

A `CommentProfile` describes the comment syntax of one language family: the
single-line token, an optional doc-comment token and an optional pair of block
markers. Profiles are immutable and shared process-wide; the registry in
`togglecomment.syntax.registry` resolves them by extension.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BlockMarkers:
    """Open/close pair written on their own lines around a block comment.

    Attributes:
        open (str): Marker placed on the line before the block.
        close (str): Marker placed on the line after the block.
    """

    open: str
    close: str


@dataclass(frozen=True)
class CommentProfile:
    """Comment syntax for a family of file extensions.

    Attributes:
        name (str): Internal identifier of the profile (e.g. ``"python"``).
        extensions (tuple[str, ...]): Extensions without the leading dot, matched
            case-sensitively against the suffix after the last ``.`` of a file name.
        line_token (str): Single-line comment token (e.g. ``"#"`` or ``"//"``).
        doc_token (str | None): Doc-comment token (e.g. ``"///"``), if the family has one.
        block_markers (BlockMarkers | None): Block comment markers, if the family has them.
        description (str): Human-readable description.
    """

    name: str
    extensions: tuple[str, ...]
    line_token: str
    doc_token: str | None = None
    block_markers: BlockMarkers | None = None
    description: str = field(default="", compare=False)
