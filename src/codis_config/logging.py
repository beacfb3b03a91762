from __future__ import annotations

import logging
import sys
from typing import TextIO

__all__ = ["configure_logger", "get_logger", "set_module_level"]

_ROOT_NAME = "codis_config"
_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_handler: logging.Handler | None = None


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when a record is emitted."""

    @property
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, _value: TextIO) -> None:
        pass


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    try:
        return logging.getLevelNamesMapping()[name]
    except KeyError:
        raise ValueError(f"Unknown logging level: {level}") from None


def configure_logger(
    *,
    level: int | str = logging.WARNING,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Attach a handler to the ``codis_config`` logger.

    Library logs go to stderr by default; stdout carries command output only.
    Does nothing if already configured, unless ``force`` is set.
    """
    global _handler
    if _handler is not None and not force:
        return

    root = logging.getLogger(_ROOT_NAME)
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    _handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(_handler)
    root.setLevel(_resolve_level(level))
    root.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``codis_config`` or ``codis_config.<name>``, configuring on first use."""
    if _handler is None:
        configure_logger()
    return logging.getLogger(f"{_ROOT_NAME}.{name}" if name else _ROOT_NAME)


def set_module_level(name: str | None, level: int | str) -> None:
    get_logger(name).setLevel(_resolve_level(level))
