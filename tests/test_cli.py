"""End-to-end behavior of the depcheck-py command line."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest

from depcheck_py.cli import main
from depcheck_py.core import scanner as scanner_module
from depcheck_py.utils.subprocess import CommandResult

from conftest import SAMPLE_DIR


@pytest.fixture
def fake_tool(monkeypatch: pytest.MonkeyPatch):
    """Pretend dependency-check is installed and copies a sample report to --out.

    Relative --out paths land under cwd, as with the real tool.
    """
    state = {"sample": "nested_jars.json", "commands": []}

    class Runner:
        def __init__(self, timeout=None):
            state["timeout"] = timeout

        def exists(self, tool: str) -> bool:
            return True

        def command(self, cmd: str, cwd=None) -> CommandResult:
            state["commands"].append((cmd, cwd))
            tokens = cmd.split()
            out = Path(cwd) / tokens[tokens.index("--out") + 1]
            if state["sample"]:
                shutil.copy(SAMPLE_DIR / state["sample"], out)
            return CommandResult(0, "", "")

    monkeypatch.setattr(scanner_module, "ProcessRunner", Runner)
    return state


def test_scan_table_output(make_project, fake_tool, capsys) -> None:
    target = make_project(["pom.xml", "target/main.jar"])

    assert main(["scan", "--target", str(target)]) == 0

    out = capsys.readouterr().out
    assert "SCAN SUMMARY" in out
    assert "java-owasp-CVE-2013-4499" in out
    assert fake_tool["commands"][0][1] == str(target)


def test_scan_json_output_file(make_project, fake_tool, tmp_path: Path, capsys) -> None:
    target = make_project(["pom.xml", "target/main.jar"])
    output = tmp_path / "findings.json"

    assert main(["scan", "--target", str(target), "--format", "json", "--output", str(output)]) == 0

    printed = json.loads(capsys.readouterr().out)
    saved = json.loads(output.read_text(encoding="utf-8"))
    assert printed == saved
    assert saved["results"]["medium"][0]["code"] == "java-owasp-CVE-2013-4499"


def test_scan_fail_on_threshold(make_project, fake_tool) -> None:
    fake_tool["sample"] = "single_jar.json"
    target = make_project(["target/main.jar"])

    assert main(["scan", "--target", str(target), "--fail-on", "high"]) == 2


def test_scan_fail_on_not_reached(make_project, fake_tool) -> None:
    fake_tool["sample"] = "no_issues.json"
    target = make_project(["target/main.jar"])

    assert main(["scan", "--target", str(target), "--fail-on", "low"]) == 0


def test_scan_timeout_reaches_runner(make_project, fake_tool) -> None:
    target = make_project(["target/main.jar"])

    main(["scan", "--target", str(target), "--timeout", "120"])

    assert fake_tool["timeout"] == 120


def test_scan_skips_without_artifacts(make_project, fake_tool, capsys) -> None:
    target = make_project(["pom.xml"])

    assert main(["scan", "--target", str(target)]) == 0

    assert "skipped" in capsys.readouterr().out
    assert fake_tool["commands"] == []


def test_scan_dry_run(make_project, fake_tool, tmp_path: Path, monkeypatch, capsys) -> None:
    target = make_project(["target/main.jar"])
    monkeypatch.chdir(tmp_path)

    assert main(["scan", "--target", str(target), "--report", "r.json", "--dry-run"]) == 0

    out = capsys.readouterr().out
    assert f"--out {tmp_path.resolve() / 'r.json'} -s {target}/target/main.jar" in out
    assert fake_tool["commands"] == []


def test_scan_relative_report_from_another_directory(
    make_project, fake_tool, tmp_path: Path, monkeypatch
) -> None:
    target = make_project(["target/main.jar"])
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    assert main(["scan", "--target", str(target), "--report", "report.json"]) == 0

    assert (elsewhere / "report.json").is_file()
    assert not (target / "report.json").exists()


def test_scan_missing_report_exit_code(make_project, fake_tool, capsys) -> None:
    fake_tool["sample"] = None
    target = make_project(["target/main.jar"])

    assert main(["scan", "--target", str(target)]) == 1

    assert "Report not found" in capsys.readouterr().err


def test_check_command(make_project, fake_tool) -> None:
    assert main(["check", "--target", str(make_project(["target/app.war"], name="a"))]) == 0
    assert main(["check", "--target", str(make_project(["pom.xml"], name="b"))]) == 1


def test_bad_config_exit_code(make_project, fake_tool, capsys) -> None:
    target = make_project(["target/main.jar"])
    (target / ".depcheck.yml").write_text("unknown_key: 1\n", encoding="utf-8")

    assert main(["scan", "--target", str(target)]) == 1

    assert "Unknown configuration keys" in capsys.readouterr().err


def test_no_command_prints_help() -> None:
    assert main([]) == 1
