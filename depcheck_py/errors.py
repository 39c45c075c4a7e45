"""Exceptions raised by the depcheck package."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .utils.subprocess import CommandResult


class ScannerError(Exception):
    """Base class for all depcheck failures."""


class ConfigError(ScannerError):
    """Invalid or unreadable configuration."""


class CommandError(ScannerError):
    """The external scanner process failed to start or exited unsuccessfully."""

    def __init__(self, message: str, result: Optional["CommandResult"] = None):
        super().__init__(message)
        self.result = result

    @property
    def returncode(self) -> Optional[int]:
        return self.result.returncode if self.result else None


class ReportError(ScannerError):
    """The scanner report is missing, unreadable or malformed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class UnrecognizedSeverityError(ReportError):
    """A vulnerability carries a severity outside low/medium/high/critical."""

    def __init__(self, severity: object, cve_id: str, offender: str):
        super().__init__(
            f"Unrecognized severity {severity!r} for {cve_id} in {offender}"
        )
        self.severity = severity
        self.cve_id = cve_id
        self.offender = offender
