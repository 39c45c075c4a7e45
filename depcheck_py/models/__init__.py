"""Data models for the depcheck package."""

from .finding import (
    Finding,
    ResultSet,
    ScanOutcome,
    Severity,
    MITIGATION,
)

__all__ = [
    "Finding",
    "ResultSet",
    "ScanOutcome",
    "Severity",
    "MITIGATION",
]
