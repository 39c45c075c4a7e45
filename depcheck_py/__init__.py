"""
depcheck-py - Java dependency vulnerability scanning

Runs OWASP dependency-check against the build artifacts of Java, Kotlin and
Scala projects and normalizes its JSON report into severity-bucketed findings:
- Applicability detection (tool installed, artifacts present)
- Scan command construction and execution
- Report parsing into low/medium/high/critical findings
"""

__version__ = "1.0.0"

from .core.scanner import DependencyCheckScanner, handles, run
from .core.project import ProjectFiles
from .config import ScannerConfig, load_config
from .models.finding import Finding, ResultSet, ScanOutcome, Severity
from .errors import (
    ScannerError,
    CommandError,
    ConfigError,
    ReportError,
    UnrecognizedSeverityError,
)

__all__ = [
    "DependencyCheckScanner",
    "handles",
    "run",
    "ProjectFiles",
    "ScannerConfig",
    "load_config",
    "Finding",
    "ResultSet",
    "ScanOutcome",
    "Severity",
    "ScannerError",
    "CommandError",
    "ConfigError",
    "ReportError",
    "UnrecognizedSeverityError",
]
