# topmark:header:start
#
#   project      : ToggleComment
#   file         : registry.py
#   file_relpath : src/togglecomment/syntax/registry.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Registry of comment profiles keyed by name and by extension.

The registry is built once at import time from the built-in profiles and is
exposed read-only. Lookups never mutate it, so it is safe to share across
concurrent operations on different files.
"""

from __future__ import annotations

from os import PathLike, fspath
from pathlib import PurePath
from types import MappingProxyType
from typing import TYPE_CHECKING

from togglecomment.config.logging import get_logger
from togglecomment.core.errors import NoExtension, UnsupportedExtension
from togglecomment.syntax.builtins import PROFILES

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from togglecomment.config.logging import ToggleLogger
    from togglecomment.syntax.base import CommentProfile

logger: ToggleLogger = get_logger(__name__)


def _build_indexes(
    profiles: Iterable[CommentProfile],
) -> tuple[dict[str, CommentProfile], dict[str, CommentProfile]]:
    """Index profiles by name and by extension.

    Raises:
        ValueError: If a profile name or an extension is declared twice.
    """
    by_name: dict[str, CommentProfile] = {}
    by_ext: dict[str, CommentProfile] = {}
    for profile in profiles:
        if profile.name in by_name:
            raise ValueError(f"Duplicate comment profile: {profile.name}")
        by_name[profile.name] = profile
        for ext in profile.extensions:
            if ext in by_ext:
                raise ValueError(
                    f"Extension '{ext}' claimed by both '{by_ext[ext].name}' and '{profile.name}'"
                )
            by_ext[ext] = profile
    return by_name, by_ext


_by_name, _by_ext = _build_indexes(PROFILES)
_REGISTRY: Mapping[str, CommentProfile] = MappingProxyType(_by_name)
_EXTENSIONS: Mapping[str, CommentProfile] = MappingProxyType(_by_ext)


def get_syntax_registry() -> Mapping[str, CommentProfile]:
    """Return the read-only mapping of profile names to comment profiles."""
    return _REGISTRY


def iter_profiles() -> Iterator[CommentProfile]:
    """Iterate over all built-in profiles, sorted by name."""
    for name in sorted(_REGISTRY):
        yield _REGISTRY[name]


def extension_of(path: str | PathLike[str]) -> str:
    """Return the literal suffix after the last ``.`` of the file name.

    Unlike `PurePath.suffix`, dot-files such as ``.bashrc`` yield ``"bashrc"``.

    Args:
        path (str | PathLike[str]): Path to the file.

    Returns:
        str: The extension without the dot, case preserved.

    Raises:
        NoExtension: If the file name has no ``.`` or ends with one.
    """
    name = PurePath(fspath(path)).name
    _stem, dot, ext = name.rpartition(".")
    if not dot or not ext:
        raise NoExtension(fspath(path))
    return ext


def profile_for(extension: str) -> CommentProfile:
    """Resolve the comment profile for an extension (case-sensitive).

    Args:
        extension (str): Extension without the leading dot.

    Returns:
        CommentProfile: The matching profile.

    Raises:
        UnsupportedExtension: If no built-in profile claims the extension.
    """
    profile = _EXTENSIONS.get(extension)
    if profile is None:
        raise UnsupportedExtension(extension)
    logger.trace("extension %r -> profile %s", extension, profile.name)
    return profile
