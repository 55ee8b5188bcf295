# topmark:header:start
#
#   project      : ToggleComment
#   file         : test_target_paths.py
#   file_relpath : tests/files/test_target_paths.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Tests for target path resolution."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from togglecomment.core.errors import FileNotFound, PathError
from togglecomment.files.paths import resolve_target


def test_resolves_relative_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "a.py").write_text("x\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert resolve_target("a.py") == (tmp_path / "a.py").resolve()


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFound) as excinfo:
        resolve_target(tmp_path / "nope.py")
    assert "nope.py" in str(excinfo.value)


def test_directory_is_a_path_error(tmp_path: Path) -> None:
    with pytest.raises(PathError):
        resolve_target(tmp_path)


def test_empty_path_is_a_path_error() -> None:
    with pytest.raises(PathError):
        resolve_target("")


@pytest.mark.skipif(os.name != "posix", reason="symlinks need POSIX permissions")
def test_symlink_resolves_to_real_file(tmp_path: Path) -> None:
    real: Path = tmp_path / "real.py"
    real.write_text("x\n", encoding="utf-8")
    link: Path = tmp_path / "link.py"
    link.symlink_to(real)

    assert resolve_target(link) == real.resolve()


@pytest.mark.skipif(os.name != "posix", reason="symlinks need POSIX permissions")
def test_dangling_symlink_is_not_found(tmp_path: Path) -> None:
    link: Path = tmp_path / "link.py"
    link.symlink_to(tmp_path / "gone.py")

    with pytest.raises(FileNotFound):
        resolve_target(link)
