"""Logging helpers."""

from __future__ import annotations

import logging
import sys
from typing import TextIO, Union


class _LevelColorFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    _LEVEL_COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    _RESET = "\033[0m"

    def __init__(self, fmt: str, *, use_color: bool) -> None:
        super().__init__(fmt)
        self._use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color_prefix = self._LEVEL_COLORS.get(record.levelno, "") if self._use_color else ""
        if not color_prefix:
            return super().format(record)

        original_levelname = record.levelname
        record.levelname = f"{color_prefix}{record.levelname}{self._RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Install a single colored stream handler on the root logger.

    ``level`` accepts either a numeric level or a level name such as ``"DEBUG"``.
    Colors are only emitted when ``stream`` is an interactive terminal.
    """

    target = stream if stream is not None else sys.stderr
    use_color = bool(getattr(target, "isatty", lambda: False)())

    handler = logging.StreamHandler(target)
    handler.setFormatter(
        _LevelColorFormatter("%(levelname)s %(name)s: %(message)s", use_color=use_color)
    )

    if isinstance(level, str):
        level = level.upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
