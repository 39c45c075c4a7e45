"""Parsing of dependency-check JSON reports into result sets."""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..errors import ReportError, UnrecognizedSeverityError
from ..models.finding import Finding, ResultSet, Severity
from ..utils.logging import get_logger

logger = get_logger(__name__)


def load_report(report_file: Optional[Union[str, Path]]) -> Dict[str, Any]:
    """
    Read a dependency-check JSON report.

    Args:
        report_file: Path to JSON report

    Returns:
        Parsed report data

    Raises:
        ReportError: If the file is missing, unreadable or not a JSON object
    """
    if report_file is None:
        raise ReportError("No report path given")

    path = str(report_file)
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ReportError(f"Report not found: {path}", path)
    except json.JSONDecodeError as e:
        raise ReportError(f"Report is not valid JSON: {path}: {e}", path)
    except (OSError, UnicodeDecodeError) as e:
        raise ReportError(f"Cannot read report {path}: {e}", path)

    if not isinstance(data, dict):
        raise ReportError(f"Report must be a JSON object: {path}", path)
    return data


def parse_report(report: Dict[str, Any]) -> ResultSet:
    """
    Map a raw dependency-check report to a ResultSet.

    Every vulnerability of every dependency yields one Finding in the bucket
    named by its severity. Composite ``outer:inner`` file names are kept as
    the report gives them.

    Raises:
        ReportError: If the report structure is not the expected one
        UnrecognizedSeverityError: If a severity is not low/medium/high/critical
    """
    dependencies = report.get("dependencies")
    if not isinstance(dependencies, list):
        raise ReportError("Report has no 'dependencies' list")

    results = ResultSet()

    for dependency in dependencies:
        if not isinstance(dependency, dict):
            raise ReportError(f"Malformed dependency entry: {dependency!r}")

        vulnerabilities = dependency.get("vulnerabilities") or []
        if not vulnerabilities:
            continue

        offender = dependency.get("fileName")
        if not isinstance(offender, str):
            raise ReportError(f"Dependency without fileName: {dependency!r}")

        for vulnerability in vulnerabilities:
            cve_id = vulnerability.get("name") if isinstance(vulnerability, dict) else None
            if not isinstance(cve_id, str) or not cve_id:
                raise ReportError(f"Vulnerability without name in {offender}")

            label = vulnerability.get("severity")
            try:
                severity = Severity.from_string(label)
            except ValueError:
                raise UnrecognizedSeverityError(label, cve_id, offender)

            results.add(severity, Finding.from_cve(cve_id, offender))

    logger.debug(f"Parsed {results.total} findings: {results.counts()}")
    return results


def read_results(report_file: Optional[Union[str, Path]]) -> ResultSet:
    """Load and parse the report at ``report_file``."""
    return parse_report(load_report(report_file))
