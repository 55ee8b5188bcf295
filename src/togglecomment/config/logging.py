# topmark:header:start
#
#   project      : ToggleComment
#   file         : logging.py
#   file_relpath : src/togglecomment/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 ToggleComment contributors
#
# topmark:header:end

"""Internal diagnostics for ToggleComment.

Log output is separate from program output (see `togglecomment.cli.console`).
It is silent unless ``TOGGLECOMMENT_LOG_LEVEL`` names a level. ``TRACE`` sits
below ``DEBUG`` and reports per-line decisions and commits.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from togglecomment.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"


class ToggleLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(ToggleLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by its severity."""

    # Checked top-down; the first threshold the record reaches picks the color.
    _STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the color for its level."""
        message: str = super().format(record)
        for threshold, style in self._STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Read the log level from ``TOGGLECOMMENT_LOG_LEVEL``.

    Accepts a level name in any case (``"trace"``, ``"WARN"``, ``"NOTSET"``) or a
    non-negative number.

    Returns:
        int | None: The level, or None when the variable is unset, empty or unknown.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return logging.getLevelNamesMapping().get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stdout handler on the root logger.

    Args:
        level (int | None): Root level. When None the environment is consulted,
            and an unset or unknown value leaves logging at CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> ToggleLogger:
    """Return the `ToggleLogger` for ``name``."""
    return cast("ToggleLogger", logging.getLogger(name))
