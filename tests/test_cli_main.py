from __future__ import annotations

import subprocess
import sys
from importlib.metadata import PackageNotFoundError

import pytest

from trainer_cli import cli_main
from trainer_core import version

EXPECTED_STDOUT = (
    "Training type: Swimming\n"
    "Duration: 90 min\n"
    "Distance: 2.76 km\n"
    "Mean speed: 0.17 km/h\n"
    "Calories burned: 323.00\n"
    "\n"
    "Training type: Walking\n"
    "Duration: 225 min\n"
    "Distance: 13.00 km\n"
    "Mean speed: 3.47 km/h\n"
    "Calories burned: 947.38\n"
    "\n"
    "Training type: Running\n"
    "Duration: 30 min\n"
    "Distance: 3.25 km\n"
    "Mean speed: 6.50 km/h\n"
    "Calories burned: 302.91\n"
    "\n"
)


@pytest.fixture(autouse=True)
def _no_git(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli_main, "get_git_version", lambda: "0.0.0")


def test_main_prints_three_blocks(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["trainer"])

    assert cli_main.main() == 0
    assert capsys.readouterr().out == EXPECTED_STDOUT


def test_main_output_is_repeatable(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["trainer"])

    cli_main.main()
    first = capsys.readouterr().out
    cli_main.main()
    assert capsys.readouterr().out == first


def test_debug_flag_keeps_stdout(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["trainer", "--debug"])

    cli_main.main()
    assert capsys.readouterr().out == EXPECTED_STDOUT


@pytest.mark.parametrize("flag", ["--table", "-t"])
def test_unknown_flags_leave_stdout_unchanged(flag: str, monkeypatch: pytest.MonkeyPatch,
                                                capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(sys, "argv", ["trainer", flag])

    cli_main.main()
    assert capsys.readouterr().out == EXPECTED_STDOUT


def test_plain_run_skips_version_lookup(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(cli_main, "get_git_version", lambda: calls.append("git") or "0.0.0")
    monkeypatch.setattr(sys, "argv", ["trainer"])

    cli_main.main()
    assert calls == []


def test_debug_run_reports_version(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []
    monkeypatch.setattr(cli_main, "get_git_version", lambda: calls.append("git") or "0.0.0")
    monkeypatch.setattr(sys, "argv", ["trainer", "-d"])

    cli_main.main()
    assert calls == ["git"]


def test_git_version_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    def no_git(*args, **kwargs):
        raise FileNotFoundError("git")

    def not_installed(name):
        raise PackageNotFoundError(name)

    monkeypatch.setattr(subprocess, "check_output", no_git)
    monkeypatch.setattr(version, "version", not_installed)

    assert version.get_git_version(default="9.9.9") == "9.9.9"


def test_git_version_uses_tag(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(subprocess, "check_output", lambda *a, **k: b"v1.2.3\n")

    assert version.get_git_version() == "v1.2.3"
