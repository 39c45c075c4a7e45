"""CLI for scanning a project with dependency-check."""

import argparse
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any

from ..config import load_config
from ..core.project import ProjectFiles
from ..core.scanner import DependencyCheckScanner
from ..errors import ConfigError
from ..models.finding import ScanOutcome, Severity
from ..utils.logging import setup_logging, LogLevel, get_logger
from ..utils.progress import Spinner

logger = get_logger(__name__)

SEVERITY_CHOICES = [s.value for s in Severity]

# Exit code when findings at or above --fail-on exist
EXIT_FINDINGS = 2


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--target",
        default=".",
        help="Project root directory (default: current directory)",
    )
    parser.add_argument(
        "--config",
        help="YAML config file (default: <target>/.depcheck.yml if present)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging (shows errors and debug info)",
    )


def create_scan_parser(subparsers: Any) -> argparse.ArgumentParser:
    """Create the scan subparser."""
    parser = subparsers.add_parser(
        "scan",
        help="Scan build artifacts with dependency-check",
        description="""
Run OWASP dependency-check against the packaged artifacts (jar, war, ear,
apk and compressed archives) of a built Java, Kotlin or Scala project and
report vulnerable dependencies grouped by severity.

The project must be built first; source files alone are not scanned.
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    _add_common_arguments(parser)
    parser.add_argument(
        "--report",
        help="Where dependency-check writes its JSON report (default: temporary file)",
    )
    parser.add_argument(
        "--format",
        choices=["table", "json"],
        default="table",
        help="Output format (default: table)",
    )
    parser.add_argument(
        "--output",
        help="Write the findings as JSON to this file",
    )
    parser.add_argument(
        "--fail-on",
        choices=SEVERITY_CHOICES,
        help="Exit with code 2 when a finding at or above this severity exists",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        help="Timeout for the dependency-check run in seconds (default: none)",
    )
    parser.add_argument(
        "--max-findings",
        type=int,
        default=20,
        help="Maximum findings to list in table output (default: 20, 0 = all)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the dependency-check command without executing it",
    )
    return parser


def create_check_parser(subparsers: Any) -> argparse.ArgumentParser:
    """Create the check subparser."""
    parser = subparsers.add_parser(
        "check",
        help="Report whether dependency-check applies to a project",
        description="Exit 0 when the tool is installed and build artifacts exist, 1 otherwise.",
    )
    _add_common_arguments(parser)
    return parser


def _build_scanner(args: argparse.Namespace) -> "tuple[DependencyCheckScanner, ProjectFiles]":
    fail_on = getattr(args, "fail_on", None)
    config = load_config(args.config, args.target).merged(
        timeout=getattr(args, "timeout", None),
        fail_on=Severity.from_string(fail_on) if fail_on else None,
    )
    if not Path(args.target).is_dir():
        raise ConfigError(f"Target is not a directory: {args.target}")
    try:
        project = ProjectFiles(args.target, exclude=config.exclude)
    except ValueError as e:
        raise ConfigError(str(e))
    return DependencyCheckScanner(config=config), project


def print_summary(outcome: ScanOutcome, target: str, max_findings: int = 20) -> None:
    """Print a human-readable summary of the scan outcome."""
    results = outcome.results
    counts = results.counts()

    print()
    print("━" * 66)
    print("📊 SCAN SUMMARY")
    print("━" * 66)
    print()
    print(f"{'Project:':<20} {target}")
    print()
    print("Vulnerabilities:")
    print(f"  🔴 Critical: {counts['critical']}")
    print(f"  🟠 High:     {counts['high']}")
    print(f"  🟡 Medium:   {counts['medium']}")
    print(f"  🟢 Low:      {counts['low']}")

    if results.total:
        print()
        shown = 0
        for severity, finding in results.items():
            if max_findings and shown >= max_findings:
                print(f"  ... and {results.total - shown} more")
                break
            print(f"  [{severity.value.upper():<8}] {finding.code}  {finding.offender}")
            print(f"             {finding.description}")
            shown += 1

    print()
    print("━" * 66)


def run_check(args: argparse.Namespace) -> int:
    """
    Report scanner applicability.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    log_level = LogLevel.VERBOSE if args.verbose else LogLevel.INFO
    setup_logging(log_level, show_errors=args.verbose)

    scanner, project = _build_scanner(args)
    if scanner.handles(project):
        print(f"✅ {scanner.config.tool} applies to {project.root}")
        return 0
    print(f"⏭️  {scanner.config.tool} does not apply to {project.root}")
    return 1


def run_scan(args: argparse.Namespace) -> int:
    """
    Run a dependency-check scan.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    log_level = LogLevel.VERBOSE if args.verbose else LogLevel.INFO
    setup_logging(log_level, show_errors=args.verbose)

    scanner, project = _build_scanner(args)
    config = scanner.config

    # Absolute: dependency-check runs with the project root as cwd
    report_path = str(Path(args.report).resolve()) if args.report else None

    if args.dry_run:
        artifacts = scanner.artifacts(project)
        if not artifacts:
            print(f"[DRY RUN] No build artifacts under {project.root}")
            return 0
        report = report_path or "<temporary report>"
        print(f"[DRY RUN] Would run: {scanner.build_command(project, report, artifacts)}")
        return 0

    if not scanner.handles(project):
        print(f"⏭️  Scan skipped: {config.tool} not installed or no build artifacts found")
        return 0

    work_dir = None
    if report_path is None:
        work_dir = tempfile.mkdtemp(prefix="depcheck-")
        report_path = str(Path(work_dir) / "dependency-check-report.json")

    try:
        spinner = Spinner(f"Running {config.tool}...")
        spinner.spin()
        try:
            outcome = scanner.run(project, report_path)
        except Exception:
            spinner.finish("Scan failed", success=False)
            raise
        spinner.finish("Scan completed", success=True)
    finally:
        if work_dir:
            shutil.rmtree(work_dir, ignore_errors=True)

    if args.format == "json":
        print(outcome.to_json())
    else:
        print_summary(outcome, project.root, args.max_findings)

    if args.output:
        outcome.save(args.output)
        logger.success(f"Findings written to {args.output}")

    if config.fail_on and outcome.results.has_at_least(config.fail_on):
        print(
            f"❌ Found vulnerabilities at or above {config.fail_on.value}",
            file=sys.stderr,
        )
        return EXIT_FINDINGS

    return 0
