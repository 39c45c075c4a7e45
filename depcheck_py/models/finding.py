"""Data models for normalized scan findings."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Iterator, Tuple
import json

CODE_PREFIX = "java-owasp-"
NVD_DETAIL_URL = "https://nvd.nist.gov/vuln/detail/"
MITIGATION = "See the CVE link on the description column."


class Severity(Enum):
    """Severity buckets of the result set."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @classmethod
    def from_string(cls, value: str) -> "Severity":
        """Convert a report label to a Severity, ignoring case.

        Raises:
            ValueError: If the label is not one of the four known levels
        """
        if not isinstance(value, str):
            raise ValueError(f"Severity must be a string, got {value!r}")
        return cls(value.strip().lower())

    @property
    def rank(self) -> int:
        order = {
            Severity.LOW: 1,
            Severity.MEDIUM: 2,
            Severity.HIGH: 3,
            Severity.CRITICAL: 4,
        }
        return order[self]

    def __lt__(self, other: "Severity") -> bool:
        return self.rank < other.rank


@dataclass(frozen=True)
class Finding:
    """One normalized vulnerability record."""
    code: str
    offender: str
    description: str
    mitigation: str = MITIGATION

    @classmethod
    def from_cve(cls, cve_id: str, offender: str) -> "Finding":
        """Build a finding for ``cve_id`` reported against ``offender``."""
        return cls(
            code=f"{CODE_PREFIX}{cve_id}",
            offender=offender,
            description=f"{NVD_DETAIL_URL}{cve_id}",
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary."""
        return {
            "code": self.code,
            "offender": self.offender,
            "description": self.description,
            "mitigation": self.mitigation,
        }


@dataclass
class ResultSet:
    """Findings partitioned into the four severity buckets."""
    low: List[Finding] = field(default_factory=list)
    medium: List[Finding] = field(default_factory=list)
    high: List[Finding] = field(default_factory=list)
    critical: List[Finding] = field(default_factory=list)

    def add(self, severity: Severity, finding: Finding) -> None:
        """Place ``finding`` in the bucket for ``severity``."""
        getattr(self, severity.value).append(finding)

    def bucket(self, severity: Severity) -> List[Finding]:
        return getattr(self, severity.value)

    def items(self) -> Iterator[Tuple[Severity, Finding]]:
        """Iterate (severity, finding) pairs, most severe first."""
        for severity in sorted(Severity, reverse=True):
            for finding in self.bucket(severity):
                yield severity, finding

    @property
    def total(self) -> int:
        """Total number of findings."""
        return len(self.low) + len(self.medium) + len(self.high) + len(self.critical)

    def counts(self) -> Dict[str, int]:
        return {severity.value: len(self.bucket(severity)) for severity in Severity}

    def has_at_least(self, threshold: Severity) -> bool:
        """Check whether any finding is at or above ``threshold``."""
        return any(
            self.bucket(severity) for severity in Severity if severity.rank >= threshold.rank
        )

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        """Convert to dictionary."""
        return {
            severity.value: [finding.to_dict() for finding in self.bucket(severity)]
            for severity in Severity
        }


@dataclass
class ScanOutcome:
    """Return value of a scan run."""
    results: ResultSet
    output: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary. Raw scanner output is not included."""
        return {"results": self.results.to_dict()}

    def to_json(self) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, filepath: str) -> None:
        """Save outcome to file."""
        with open(filepath, "w") as f:
            f.write(self.to_json())
