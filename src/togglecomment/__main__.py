# topmark:header:start
#
#   project      : ToggleComment
#   file         : __main__.py
#   file_relpath : src/togglecomment/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Module entry point for running ToggleComment via ``python -m togglecomment``.

It delegates directly to :func:`togglecomment.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ToggleComment is launched.

Examples:
    Toggle the comment on line 3 of a Python file::

        python -m togglecomment toggle a.py 3
"""

from __future__ import annotations

from togglecomment.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
