"""Report logger writing timestamped lines to the console and/or a file.

Each line has the form ``[YYYY-mm-dd HH:MM:SS] [LEVEL] - message``. The level
tag is free text, so custom tags such as ``STEP`` are written verbatim next to
the standard INFO/WARNING/ERROR/DEBUG.

Usage:
    logger = get_logger("report.log")
    logger.info("Reading input table")
    logger.error("Input is not a table")  # logs, then raises LoggedFatalError
"""

import logging
import sys
from collections.abc import Mapping
from typing import Any, NoReturn, Optional, Type

import numpy as np
import pandas as pd

from protein_util.config import LogConfig
from protein_util.constants import LOG_DATE_FORMAT, LOG_FORMAT


class LoggedFatalError(Exception):
    """Raised by Logger.error after the ERROR line has been written."""

    pass


def format_debug_value(value: Any) -> str:
    """Format one debug argument.

    Strings are passed through unchanged. Everything else is rendered as a
    structural dump: the type name followed by its shape.

    Args:
        value: Any object passed to Logger.debug

    Returns:
        Single string describing the value
    """
    if isinstance(value, str):
        return value
    type_name = type(value).__name__
    if isinstance(value, pd.DataFrame):
        columns = ", ".join(str(c) for c in value.columns)
        return f"{type_name}: {value.shape[0]} obs. of {value.shape[1]} variables [{columns}]"
    if isinstance(value, pd.Series):
        return f"{type_name} '{value.name}': {len(value)} values, dtype {value.dtype}"
    if isinstance(value, np.ndarray):
        return f"{type_name}: shape {value.shape}, dtype {value.dtype}"
    if isinstance(value, Mapping):
        keys = ", ".join(str(k) for k in value.keys())
        return f"{type_name} of {len(value)}: [{keys}]"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"{type_name} of {len(value)}: {value!r}"
    return f"{type_name}: {value!r}"


class Logger:
    """Leveled report logger with console and file sinks.

    Wraps a private ``logging.Logger`` so that two Logger instances never share
    handlers. The configuration is fixed at construction.

    Args:
        config: Sink path and console/file switches
    """

    def __init__(self, config: Optional[LogConfig] = None) -> None:
        self._config = config or LogConfig()

        # Unregistered logger: not reachable through logging.getLogger and
        # never propagates to the root handlers
        self._logger = logging.Logger(f"protein_util.{id(self)}", level=logging.DEBUG)
        self._logger.propagate = False

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
        if self._config.console_output:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self._logger.addHandler(console_handler)
        if self._config.file_output:
            file_handler = logging.FileHandler(
                self._config.log_file, mode="a", encoding="utf-8", delay=True
            )
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

    @property
    def config(self) -> LogConfig:
        """Return the configuration this logger was built with."""
        return self._config

    @property
    def log_file(self) -> str:
        return self._config.log_file

    def log_message(self, level: str, message: str) -> None:
        """Write one timestamped line tagged with ``level`` to every enabled sink."""
        levelno = logging.getLevelName(level)
        if not isinstance(levelno, int):
            levelno = logging.INFO
        self._logger.log(levelno, message, extra={"tag": level})

    def info(self, message: str) -> None:
        self.log_message("INFO", message)

    def warning(self, message: str) -> None:
        self.log_message("WARNING", message)

    def custom(self, level: str, message: str) -> None:
        """Log with a caller-chosen level tag."""
        self.log_message(level, message)

    def error(self, message: str, error_cls: Type[LoggedFatalError] = LoggedFatalError) -> NoReturn:
        """Log an ERROR line and abort the current operation.

        Args:
            message: Human-readable description of what went wrong
            error_cls: LoggedFatalError subclass to raise

        Raises:
            LoggedFatalError: Always, after the line has been written
        """
        self.log_message("ERROR", message)
        raise error_cls(message)

    def debug(self, *values: Any) -> None:
        """Log any number of values at DEBUG, one line per value."""
        message = "\n".join(format_debug_value(value) for value in values)
        self.log_message("DEBUG", message)

    def close(self) -> None:
        """Flush and release all sink handlers."""
        for handler in list(self._logger.handlers):
            handler.close()
            self._logger.removeHandler(handler)


# Shared instance returned by get_logger
_instance: Optional[Logger] = None


def get_logger(
    log_file: str = "log.txt",
    console_output: bool = True,
    file_output: bool = True,
) -> Logger:
    """Return the process-wide shared Logger, creating it on first call.

    The first caller's configuration wins. Once the instance exists, the
    arguments of later calls are ignored and the same instance is returned.

    Args:
        log_file: Path of the append-only log file
        console_output: Whether to mirror lines to stdout
        file_output: Whether to append lines to ``log_file``

    Returns:
        The shared Logger instance
    """
    global _instance
    if _instance is None:
        _instance = Logger(LogConfig(
            log_file=log_file,
            console_output=console_output,
            file_output=file_output,
        ))
    return _instance
