# topmark:header:start
#
#   project      : ToggleComment
#   file         : slash.py
#   file_relpath : src/togglecomment/syntax/builtins/slash.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Curly-brace and compiled languages.

Groups C-family and similar languages that use ``//`` line comments, ``///``
doc comments and ``/* ... */`` block comments.

Exports:
    PROFILES (list[CommentProfile]): Definitions for Rust, C, C++, JavaScript,
        TypeScript, Go, Java and Swift.
"""

from __future__ import annotations

from ..base import BlockMarkers, CommentProfile

SLASH_TOKEN = "//"
SLASH_DOC_TOKEN = "///"
C_BLOCK = BlockMarkers(open="/*", close="*/")

PROFILES: list[CommentProfile] = [
    CommentProfile(
        name="rust",
        extensions=("rs",),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="Rust sources (*.rs)",
    ),
    CommentProfile(
        name="c",
        extensions=("c", "h"),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="C sources and headers (*.c, *.h)",
    ),
    CommentProfile(
        name="cpp",
        extensions=("cpp", "cc", "cxx", "hpp"),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="C++ sources and headers (*.cpp, *.cc, *.cxx, *.hpp)",
    ),
    CommentProfile(
        name="javascript",
        extensions=("js",),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="JavaScript sources (*.js)",
    ),
    CommentProfile(
        name="typescript",
        extensions=("ts",),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="TypeScript sources (*.ts)",
    ),
    CommentProfile(
        name="go",
        extensions=("go",),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="Go sources (*.go)",
    ),
    CommentProfile(
        name="java",
        extensions=("java",),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="Java sources (*.java)",
    ),
    CommentProfile(
        name="swift",
        extensions=("swift",),
        line_token=SLASH_TOKEN,
        doc_token=SLASH_DOC_TOKEN,
        block_markers=C_BLOCK,
        description="Swift sources (*.swift)",
    ),
]
