"""Collaborator contracts consumed by the scanner."""

from pathlib import Path
from typing import Optional, Protocol, Sequence, Union

from ..utils.subprocess import CommandResult


class ProcessExecutor(Protocol):
    """Looks up tools on PATH and runs commands, raising CommandError on failure."""

    def exists(self, tool: str) -> bool: ...

    def command(self, cmd: str, cwd: Optional[str] = None) -> CommandResult: ...


class ProjectHandle(Protocol):
    """A project root able to enumerate its files in a stable order."""

    root: Union[str, Path]

    def all(self) -> Sequence[str]: ...
