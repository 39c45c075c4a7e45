"""Utility modules for the depcheck package."""

from .logging import (
    get_logger,
    setup_logging,
    LogLevel,
    is_verbose,
)
from .subprocess import (
    run_command,
    CommandResult,
    ProcessRunner,
    check_tool_available,
)
from .progress import Spinner

__all__ = [
    "get_logger",
    "setup_logging",
    "LogLevel",
    "is_verbose",
    "run_command",
    "CommandResult",
    "ProcessRunner",
    "check_tool_available",
    "Spinner",
]
