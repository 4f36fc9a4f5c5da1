"""Logging setup for resolve_path.

The package logs resolution decisions at DEBUG. Nothing is emitted until
the host application calls ``setup_logging``; after that, records go to
stderr through Rich and optionally to a plain-text file.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from resolve_path.utils.paths import PathInput, as_path

ROOT_LOGGER = "resolve_path"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Loggers already given handlers by setup_logging
_loggers_initialized = set()

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def _level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level}")
        return value
    return level


def _console_handler(level: int) -> logging.Handler:
    # Paths may contain "[...]", which Rich markup would swallow
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    return handler


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[PathInput] = None,
    module_name: str = ROOT_LOGGER,
) -> logging.Logger:
    """
    Attach Rich console output (and a file, if given) to the package logger.

    Args:
        level: Logging level, as a number or a name such as ``"debug"``
        log_file: Optional file that receives a plain-text copy of the log
        module_name: Logger to configure; defaults to the package logger

    Returns:
        The configured logger. Later calls for the same name return it
        untouched.
    """
    logger = get_logger(module_name)
    if logger.name in _loggers_initialized:
        return logger

    level = _level(level)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    logger.addHandler(_console_handler(level))
    if log_file is not None:
        logger.addHandler(_file_handler(as_path(log_file), level))

    _loggers_initialized.add(logger.name)
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Get a logger under the package namespace without configuring it."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
