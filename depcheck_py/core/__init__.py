"""Core functionality for the depcheck package."""

from .interfaces import ProcessExecutor, ProjectHandle
from .project import ProjectFiles
from .report import load_report, parse_report, read_results
from .scanner import DependencyCheckScanner, handles, run

__all__ = [
    "ProcessExecutor",
    "ProjectHandle",
    "ProjectFiles",
    "load_report",
    "parse_report",
    "read_results",
    "DependencyCheckScanner",
    "handles",
    "run",
]
