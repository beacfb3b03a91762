from __future__ import annotations

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from codis_config.logging import set_module_level


class RichLogger:
    def __init__(
        self,
        level: logging._Level = logging.INFO,
    ) -> None:
        # stdout is reserved for the JSON result line
        self.console = Console(stderr=True)
        self.handler = RichHandler(
            console=self.console,
            show_path=False,
            markup=False,
            show_time=True,
            rich_tracebacks=True,
        )

        self._logger = logging.getLogger("codis_config.cli")
        self._logger.setLevel(level)
        self._logger.addHandler(self.handler)
        self._logger.propagate = False

    def setLevel(self, level: logging._Level) -> None:
        self._logger.setLevel(level)

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(message, **kwargs)


logger = RichLogger(level=logging.INFO)


def verbosity_to_level(verbosity: int) -> int:
    if verbosity >= 1:
        return logging.DEBUG
    if verbosity == 0:
        return logging.INFO
    return logging.WARNING


def setup_rich_logging(verbosity: int = 0) -> None:
    """Apply ``-v``/``-q`` to the CLI logger and the library loggers."""
    level = verbosity_to_level(verbosity)
    logger.setLevel(level)
    # library loggers stay at WARNING unless asked for debug output
    set_module_level(None, logging.DEBUG if level == logging.DEBUG else logging.WARNING)
