# topmark:header:start
#
#   project      : ToggleComment
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Pytest configuration for the ToggleComment test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from togglecomment.config import logging

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

F = TypeVar("F", bound="Callable[..., object]")


def as_typed_mark(mark: Any) -> Callable[[F], F]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_togglecomment_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    TOGGLECOMMENT_LOG_LEVEL in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("TOGGLECOMMENT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests so every code path formats its messages.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_bytes(directory: Path, name: str, data: bytes) -> Path:
    """Create ``directory/name`` holding ``data`` and return its path.

    Args:
        directory (Path): Target directory (usually ``tmp_path``).
        name (str): File name, extension included.
        data (bytes): Exact file content.

    Returns:
        Path: The created file.
    """
    path: Path = directory / name
    path.write_bytes(data)
    return path


def write_lines(directory: Path, name: str, *lines: str, newline: str = "\n") -> Path:
    """Create ``directory/name`` from ``lines``, each terminated by ``newline``.

    Args:
        directory (Path): Target directory (usually ``tmp_path``).
        name (str): File name, extension included.
        *lines (str): Line contents without terminators.
        newline (str): Line terminator.

    Returns:
        Path: The created file.
    """
    return write_bytes(directory, name, "".join(f"{line}{newline}" for line in lines).encode())


def read_lines(path: Path) -> list[str]:
    """Return the LF-terminated lines of ``path`` without their terminators."""
    return path.read_bytes().decode("utf-8").split("\n")[:-1]
