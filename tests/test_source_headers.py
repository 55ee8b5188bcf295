# topmark:header:start
#
#   project      : ToggleComment
#   file         : test_source_headers.py
#   file_relpath : tests/test_source_headers.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Every Python source carries the project header with its own path."""

from __future__ import annotations

from pathlib import Path

import pytest

ROOT: Path = Path(__file__).resolve().parents[1]

SOURCES: list[Path] = sorted(
    [*(ROOT / "src").rglob("*.py"), *(ROOT / "tests").rglob("*.py"), ROOT / "noxfile.py"]
)


def _header(path: Path) -> dict[str, str]:
    fields: dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        if line == "# topmark:header:end":
            break
        key, sep, value = line.lstrip("# ").partition(" : ")
        if sep:
            fields[key.strip()] = value.strip()
    return fields


@pytest.mark.parametrize("path", SOURCES, ids=lambda p: p.relative_to(ROOT).as_posix())
def test_header_names_project_and_path(path: Path) -> None:
    fields: dict[str, str] = _header(path)

    assert fields["project"] == "ToggleComment"
    assert fields["file"] == path.name
    assert fields["file_relpath"] == path.relative_to(ROOT).as_posix()
    assert fields["license"] == "MIT"
    assert fields["copyright"] == "(c) 2025 ToggleComment contributors"
