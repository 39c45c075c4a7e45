"""Process collaborator behavior."""

from __future__ import annotations

import subprocess

import pytest

from depcheck_py.core.project import ProjectFiles
from depcheck_py.core.scanner import DependencyCheckScanner
from depcheck_py.errors import CommandError
from depcheck_py.utils import subprocess as subprocess_utils
from depcheck_py.utils.subprocess import CommandResult, ProcessRunner, run_command


class _Completed:
    def __init__(self, returncode: int, stdout: str = "", stderr: str = ""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def test_run_command_splits_string_and_passes_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_run(cmd, **kwargs):
        seen["cmd"] = cmd
        seen.update(kwargs)
        return _Completed(0, stdout="ok")

    monkeypatch.setattr(subprocess_utils.subprocess, "run", fake_run)

    result = run_command("dependency-check --noupdate -s /p/a.jar", cwd="/p")

    assert seen["cmd"] == ["dependency-check", "--noupdate", "-s", "/p/a.jar"]
    assert seen["cwd"] == "/p"
    assert result == CommandResult(returncode=0, stdout="ok", stderr="")
    assert result.success


def test_run_command_reports_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

    monkeypatch.setattr(subprocess_utils.subprocess, "run", fake_run)

    result = run_command(["dependency-check"], timeout=1)

    assert result.timed_out
    assert not result.success


def test_run_command_reports_missing_binary(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(subprocess_utils.subprocess, "run", fake_run)

    result = run_command(["dependency-check"])

    assert result.returncode == 127


def test_runner_raises_on_failure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        subprocess_utils,
        "run_command",
        lambda cmd, timeout=None, cwd=None: CommandResult(1, "", "boom"),
    )

    with pytest.raises(CommandError) as excinfo:
        ProcessRunner().command("dependency-check --noupdate", cwd="/p")

    assert excinfo.value.returncode == 1
    assert "boom" in str(excinfo.value)


def test_runner_returns_result_on_success(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_run_command(cmd, timeout=None, cwd=None):
        calls.append((cmd, timeout, cwd))
        return CommandResult(0, "done", "")

    monkeypatch.setattr(subprocess_utils, "run_command", fake_run_command)

    result = ProcessRunner(timeout=30).command("dependency-check", cwd="/p")

    assert result.stdout == "done"
    assert calls == [("dependency-check", 30, "/p")]


def test_runner_exists_uses_path_lookup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess_utils.shutil, "which", lambda tool: None)

    assert ProcessRunner().exists("dependency-check") is False


def test_run_command_reports_unbalanced_quote(monkeypatch: pytest.MonkeyPatch) -> None:
    def fake_run(cmd, **kwargs):
        raise AssertionError("process must not be started")

    monkeypatch.setattr(subprocess_utils.subprocess, "run", fake_run)

    result = run_command("dependency-check -s /home/o'brien/svc/app.jar")

    assert result.returncode == 127
    assert "No closing quotation" in result.stderr


def test_apostrophe_in_project_path_raises_command_error(tmp_path, monkeypatch) -> None:
    root = tmp_path / "o'brien"
    (root / "target").mkdir(parents=True)
    (root / "target" / "main.jar").write_bytes(b"")
    monkeypatch.setattr(subprocess_utils.subprocess, "run", lambda cmd, **kwargs: _Completed(0))

    with pytest.raises(CommandError) as excinfo:
        DependencyCheckScanner(process=ProcessRunner()).run(
            ProjectFiles(root), tmp_path / "report.json"
        )

    assert excinfo.value.returncode == 127
