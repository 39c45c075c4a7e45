"""Shared test fixtures for depcheck tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional

import pytest

from depcheck_py.errors import CommandError
from depcheck_py.utils.subprocess import CommandResult

SAMPLE_DIR = Path(__file__).parent / "sample"

ALL_ARTIFACTS = [
    "app.jar",
    "app.ear",
    "app.war",
    "app.apk",
    "app.tar",
    "app.gz",
    "app.tgz",
    "app.bz2",
    "app.tbz2",
]


class FakeProcess:
    """Records commands instead of running them."""

    def __init__(self, available: bool = True, stdout: str = "", error: Optional[Exception] = None):
        self.available = available
        self.stdout = stdout
        self.error = error
        self.exists_calls: list[str] = []
        self.calls: list[tuple[str, Optional[str]]] = []

    def exists(self, tool: str) -> bool:
        self.exists_calls.append(tool)
        return self.available

    def command(self, cmd: str, cwd: Optional[str] = None) -> CommandResult:
        self.calls.append((cmd, cwd))
        if self.error is not None:
            raise self.error
        return CommandResult(returncode=0, stdout=self.stdout, stderr="")


@pytest.fixture
def fake_process() -> FakeProcess:
    return FakeProcess()


@pytest.fixture
def failing_process() -> FakeProcess:
    result = CommandResult(returncode=14, stdout="", stderr="some error")
    return FakeProcess(error=CommandError("Command exited with code 14", result))


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create a project tree under tmp_path from relative file paths."""

    def _make(files: Iterable[str], name: str = "project") -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for relpath in files:
            path = root / relpath
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"")
        return root.resolve()

    return _make


@pytest.fixture
def sample_report() -> Callable[[str], Path]:
    def _sample(name: str) -> Path:
        return SAMPLE_DIR / name

    return _sample
