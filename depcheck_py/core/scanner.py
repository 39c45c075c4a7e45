"""OWASP dependency-check scanning of Java, Kotlin and Scala build artifacts."""

from pathlib import Path
from typing import List, Optional, Union

from ..config import ScannerConfig
from ..errors import ReportError
from ..models.finding import ScanOutcome
from ..utils.subprocess import ProcessRunner
from ..utils.logging import get_logger
from .interfaces import ProcessExecutor, ProjectHandle
from .report import read_results

logger = get_logger(__name__)

FIXED_FLAGS = ["--noupdate", "--format", "JSON"]


class DependencyCheckScanner:
    """
    Runs dependency-check against the packaged artifacts of a project.

    The scanner keeps no state between calls; collaborators are injected so
    that tests can substitute fakes.
    """

    def __init__(
        self,
        process: Optional[ProcessExecutor] = None,
        config: Optional[ScannerConfig] = None,
    ):
        """
        Initialize scanner.

        Args:
            process: Process collaborator (defaults to a ProcessRunner)
            config: Scanner configuration (defaults to ScannerConfig())
        """
        self.config = config or ScannerConfig()
        self.process = process or ProcessRunner(timeout=self.config.timeout)

    def artifacts(self, project: ProjectHandle) -> List[str]:
        """Return the project's build artifacts in enumeration order."""
        suffixes = tuple(ext.lower() for ext in self.config.extensions)
        return [f for f in project.all() if f.lower().endswith(suffixes)]

    def handles(self, project: ProjectHandle) -> bool:
        """
        Check whether dependency-check should run for ``project``.

        Returns False when the tool is not installed or the project has no
        build artifacts. Never raises.
        """
        try:
            if not self.process.exists(self.config.tool):
                logger.debug(f"{self.config.tool} not found on PATH")
                return False

            artifacts = self.artifacts(project)
            if not artifacts:
                logger.debug(f"No build artifacts found under {project.root}")
                return False

            return True
        except Exception as e:
            logger.debug(f"Applicability check failed: {e}")
            return False

    def build_command(
        self,
        project: ProjectHandle,
        report_path: Union[str, Path],
        artifacts: Optional[List[str]] = None,
    ) -> str:
        """
        Build the dependency-check command line.

        Args:
            project: Project to scan
            report_path: Where the JSON report is written
            artifacts: Artifacts to pass with ``-s`` (enumerated when None)

        Returns:
            Space-joined command string
        """
        if artifacts is None:
            artifacts = self.artifacts(project)

        root = str(project.root)
        args = [self.config.tool, *FIXED_FLAGS, "--out", str(report_path)]
        args.extend(self.config.extra_args)
        for artifact in artifacts:
            args.extend(["-s", f"{root}/{artifact}"])

        return " ".join(args)

    def run(
        self,
        project: ProjectHandle,
        report_path: Optional[Union[str, Path]] = None,
    ) -> ScanOutcome:
        """
        Scan ``project`` and parse the report written to ``report_path``.

        Args:
            project: Project to scan
            report_path: JSON report location

        Returns:
            ScanOutcome with findings bucketed by severity

        Raises:
            CommandError: If dependency-check fails
            ReportError: If no report path is given, or the report is missing or malformed
        """
        if report_path is None:
            raise ReportError("No report path given")

        artifacts = self.artifacts(project)
        command = self.build_command(project, report_path, artifacts)

        logger.step(f"Running {self.config.tool} on {len(artifacts)} artifact(s)")
        logger.debug(f"Command: {command}")

        result = self.process.command(command, cwd=str(project.root))

        outcome = ScanOutcome(results=read_results(report_path), output=result.stdout)
        logger.result(f"Findings: {outcome.results.counts()}")
        return outcome


def handles(project: ProjectHandle) -> bool:
    """Check applicability with the default collaborators."""
    return DependencyCheckScanner().handles(project)


def run(project: ProjectHandle, report_path: Optional[Union[str, Path]] = None) -> ScanOutcome:
    """Run a scan with the default collaborators."""
    return DependencyCheckScanner().run(project, report_path)
