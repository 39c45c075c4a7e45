"""Subprocess utilities with timeout support."""

import shlex
import subprocess
import shutil
from dataclasses import dataclass
from typing import Optional, List, Union

from ..errors import CommandError
from .logging import get_logger, is_verbose

logger = get_logger(__name__)


@dataclass
class CommandResult:
    """Result of a command execution."""
    returncode: int
    stdout: str
    stderr: str
    timed_out: bool = False

    @property
    def success(self) -> bool:
        """Check if command was successful."""
        return self.returncode == 0 and not self.timed_out


def run_command(
    cmd: Union[str, List[str]],
    timeout: Optional[int] = None,
    capture_output: bool = True,
    cwd: Optional[str] = None,
    env: Optional[dict] = None,
) -> CommandResult:
    """
    Run a command with optional timeout.

    Args:
        cmd: Command to run (string or list of arguments)
        timeout: Timeout in seconds (None for no timeout)
        capture_output: Whether to capture stdout/stderr
        cwd: Working directory
        env: Environment variables

    Returns:
        CommandResult with stdout, stderr, and return code
    """
    if isinstance(cmd, str):
        try:
            cmd = shlex.split(cmd)
        except ValueError as e:
            if is_verbose():
                logger.error(f"Command could not be parsed: {e}")
            return CommandResult(returncode=127, stdout="", stderr=f"Cannot parse command: {e}")

    logger.debug(f"Running command: {' '.join(cmd)}")

    try:
        result = subprocess.run(
            cmd,
            capture_output=capture_output,
            text=True,
            timeout=timeout,
            cwd=cwd,
            env=env,
        )
        return CommandResult(
            returncode=result.returncode,
            stdout=result.stdout if capture_output else "",
            stderr=result.stderr if capture_output else "",
        )
    except subprocess.TimeoutExpired:
        if is_verbose():
            logger.warning(f"Command timed out after {timeout}s: {cmd[0]}")
        return CommandResult(
            returncode=-1,
            stdout="",
            stderr=f"Command timed out after {timeout} seconds",
            timed_out=True,
        )
    except (FileNotFoundError, PermissionError, NotADirectoryError) as e:
        if is_verbose():
            logger.error(f"Command could not be started: {cmd[0]}")
        return CommandResult(
            returncode=127,
            stdout="",
            stderr=str(e),
        )


def check_tool_available(tool: str) -> bool:
    """
    Check if a tool is available in PATH.

    Args:
        tool: Tool name to check

    Returns:
        True if tool is available
    """
    return shutil.which(tool) is not None


class ProcessRunner:
    """Process collaborator used by the scanner: tool lookup plus execution."""

    def __init__(self, timeout: Optional[int] = None):
        """
        Initialize runner.

        Args:
            timeout: Timeout in seconds for each command (None waits forever)
        """
        self.timeout = timeout

    def exists(self, tool: str) -> bool:
        return check_tool_available(tool)

    def command(self, cmd: str, cwd: Optional[str] = None) -> CommandResult:
        """
        Run ``cmd`` and raise when it does not succeed.

        Args:
            cmd: Space-joined command line
            cwd: Working directory

        Returns:
            CommandResult of the successful run

        Raises:
            CommandError: On spawn failure, timeout or non-zero exit
        """
        result = run_command(cmd, timeout=self.timeout, cwd=cwd)
        if not result.success:
            if result.timed_out:
                reason = f"timed out after {self.timeout}s"
            else:
                reason = f"exited with code {result.returncode}"
            detail = result.stderr.strip()
            message = f"Command {reason}: {cmd}"
            if detail:
                message = f"{message}\n{detail}"
            raise CommandError(message, result)
        return result
