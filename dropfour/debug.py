"""
debug.py - Logging for the dropfour rule engine

All dropfour modules report through the shared ``debug`` instance defined
here. It wraps a standard library logger named ``dropfour`` and adds
component filtering, an optional log file and named performance timers.
"""

import logging
import os
import sys
import time
from enum import Enum
from typing import Dict, Iterable, Optional, Set


class DebugLevel(Enum):
    NONE = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5


# TRACE sits just below DEBUG in the logging module's numbering
TRACE_LEVEL = logging.DEBUG - 5
logging.addLevelName(TRACE_LEVEL, "TRACE")

LEVEL_MAP = {
    DebugLevel.NONE: logging.CRITICAL + 10,
    DebugLevel.ERROR: logging.ERROR,
    DebugLevel.WARNING: logging.WARNING,
    DebugLevel.INFO: logging.INFO,
    DebugLevel.DEBUG: logging.DEBUG,
    DebugLevel.TRACE: TRACE_LEVEL,
}

ENV_VAR = "DROPFOUR_DEBUG"
DEFAULT_LEVEL = DebugLevel.WARNING

CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def level_from_string(name: str) -> Optional[DebugLevel]:
    """Look up a DebugLevel by case-insensitive name, None if unknown."""
    try:
        return DebugLevel[name.strip().upper()]
    except KeyError:
        return None


class DebugManager:
    """Routes dropfour log messages to the ``dropfour`` logger."""

    def __init__(self, logger_name: str = "dropfour"):
        self._level = DEFAULT_LEVEL
        self._enabled_components: Set[str] = set()  # empty means every component
        self._timers: Dict[str, float] = {}
        self._logger = self._setup_logger(logger_name)

        env_level = os.environ.get(ENV_VAR)
        if env_level:
            level = level_from_string(env_level)
            if level is not None:
                self.configure(level=level)

    def _setup_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(LEVEL_MAP[self._level])
        logger.propagate = False

        # Module reloads must not stack console handlers
        for handler in logger.handlers[:]:
            if getattr(handler, "_dropfour_console", False):
                logger.removeHandler(handler)

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
        console_handler._dropfour_console = True
        logger.addHandler(console_handler)
        return logger

    @property
    def level(self) -> DebugLevel:
        return self._level

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def configure(self, level: Optional[DebugLevel] = None,
                  log_file: Optional[str] = None,
                  components: Optional[Iterable[str]] = None) -> None:
        """
        Change logging settings.

        Args:
            level: Minimum level to emit
            log_file: Path to append log records to; an empty string removes
                any file handler previously installed
            components: Restrict output to these component tags (empty for all)
        """
        if level is not None:
            self._level = level
            self._logger.setLevel(LEVEL_MAP[level])

        if log_file is not None:
            for handler in self._logger.handlers[:]:
                if isinstance(handler, logging.FileHandler):
                    self._logger.removeHandler(handler)
                    handler.close()

            if log_file:
                file_handler = logging.FileHandler(log_file)
                file_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
                self._logger.addHandler(file_handler)

        if components is not None:
            self._enabled_components = set(components)

    def set_from_string(self, level_str: str) -> bool:
        """Set the level from a command-line string. Returns False if unknown."""
        level = level_from_string(level_str)
        if level is None:
            self.warning(f"Unknown debug level: {level_str}")
            return False
        self.configure(level=level)
        return True

    def _should_log(self, level: DebugLevel, component: Optional[str]) -> bool:
        if self._level == DebugLevel.NONE or level.value > self._level.value:
            return False
        if component and self._enabled_components and component not in self._enabled_components:
            return False
        return True

    def log(self, level: DebugLevel, message: str, component: Optional[str] = None) -> None:
        if level == DebugLevel.NONE or not self._should_log(level, component):
            return

        if component:
            message = f"[{component}] {message}"
        self._logger.log(LEVEL_MAP[level], message)

    def error(self, message: str, component: Optional[str] = None) -> None:
        """Log an error message."""
        self.log(DebugLevel.ERROR, message, component)

    def warning(self, message: str, component: Optional[str] = None) -> None:
        """Log a warning message."""
        self.log(DebugLevel.WARNING, message, component)

    def info(self, message: str, component: Optional[str] = None) -> None:
        """Log an info message."""
        self.log(DebugLevel.INFO, message, component)

    def debug(self, message: str, component: Optional[str] = None) -> None:
        """Log a debug message."""
        self.log(DebugLevel.DEBUG, message, component)

    def trace(self, message: str, component: Optional[str] = None) -> None:
        """Log a trace message."""
        self.log(DebugLevel.TRACE, message, component)

    def start_timer(self, name: str) -> None:
        self._timers[name] = time.perf_counter()

    def end_timer(self, name: str, component: Optional[str] = None) -> Optional[float]:
        """
        Stop a named timer and log the elapsed time at debug level.

        Returns:
            Elapsed seconds, or None if the timer was never started
        """
        started = self._timers.pop(name, None)
        if started is None:
            self.warning(f"Timer '{name}' not started", "debug")
            return None

        elapsed = time.perf_counter() - started
        self.debug(f"Timer [{name}]: {elapsed:.6f} seconds", component)
        return elapsed


debug = DebugManager()
