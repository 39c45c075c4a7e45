"""Logging setup for the depcheck package."""

import logging
import sys
from enum import Enum
from typing import Optional

LOGGER_NAME = "depcheck"

# Scan progress and scan results sit between INFO and WARNING
STEP = 25
RESULT = 24

_verbose_mode = False


class LogLevel(Enum):
    """Console verbosity."""
    NONE = "none"
    INFO = "info"
    VERBOSE = "verbose"


def is_verbose() -> bool:
    """Check if verbose mode is enabled."""
    return _verbose_mode


class ConsoleFormatter(logging.Formatter):
    """One-line records with a level marker, colored on terminals."""

    MARKERS = {
        logging.DEBUG: ("\033[36m", "🔍", "[DEBUG]"),
        logging.INFO: ("\033[0m", "ℹ️ ", "[INFO]"),
        STEP: ("\033[34m", "📋", "[STEP]"),
        RESULT: ("\033[32m", "   -", "  -"),
        logging.WARNING: ("\033[33m", "⚠️ ", "[WARN]"),
        logging.ERROR: ("\033[31m", "❌", "[ERROR]"),
        logging.CRITICAL: ("\033[35m", "💥", "[CRITICAL]"),
    }
    RESET = "\033[0m"

    def __init__(self, colored: bool = False):
        super().__init__()
        self.colored = colored

    def format(self, record: logging.LogRecord) -> str:
        color, emoji, tag = self.MARKERS.get(record.levelno, (self.RESET, "", "[LOG]"))
        if self.colored:
            return f"{color}{emoji} {record.getMessage()}{self.RESET}"
        return f"{tag} {record.getMessage()}"


class VerboseOnlyFilter(logging.Filter):
    """Hide warnings and errors unless verbose mode is on."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.levelno >= logging.CRITICAL:
            return True
        return _verbose_mode or record.levelno not in (logging.ERROR, logging.WARNING)


def setup_logging(
    level: LogLevel = LogLevel.INFO,
    use_colors: Optional[bool] = None,
    show_errors: bool = True,
) -> None:
    """
    Configure the ``depcheck`` logger.

    Args:
        level: Console verbosity
        use_colors: Colored output (auto-detected from stderr when None)
        show_errors: When False, warnings and errors only show in verbose mode
    """
    global _verbose_mode

    logging.addLevelName(STEP, "STEP")
    logging.addLevelName(RESULT, "RESULT")

    _verbose_mode = level == LogLevel.VERBOSE
    log_level = {
        LogLevel.NONE: logging.CRITICAL + 1,
        LogLevel.INFO: logging.INFO,
        LogLevel.VERBOSE: logging.DEBUG,
    }[level]

    if use_colors is None:
        use_colors = sys.stderr.isatty()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(ConsoleFormatter(colored=use_colors))
    if not show_errors:
        handler.addFilter(VerboseOnlyFilter())

    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a logger under the ``depcheck`` hierarchy.

    ``depcheck_py.core.scanner`` becomes ``depcheck.core.scanner`` so that
    ``setup_logging`` controls every module logger.
    """
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name.split('.', 1)[-1]}"
    return logging.getLogger(name)


def _log_step(self: logging.Logger, message: str, *args, **kwargs) -> None:
    if self.isEnabledFor(STEP):
        self._log(STEP, message, args, **kwargs)


def _log_result(self: logging.Logger, message: str, *args, **kwargs) -> None:
    if self.isEnabledFor(RESULT):
        self._log(RESULT, message, args, **kwargs)


def _log_success(self: logging.Logger, message: str, *args, **kwargs) -> None:
    self.info(f"✅ {message}", *args, **kwargs)


logging.Logger.step = _log_step
logging.Logger.result = _log_result
logging.Logger.success = _log_success
