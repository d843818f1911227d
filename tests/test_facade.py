"""Tests for the Helpers facade and its exit decision."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from scripty.config.settings import ScriptySettings
from scripty.facade import Helpers
from scripty.services.result import HelperResult
from tests.conftest import make_helpers


class TestExitOnFailure:
    def test_passes_success_through(self) -> None:
        result = HelperResult(ok=True, op="x")
        assert Helpers.exit_on_failure(result) is result

    def test_exits_with_status(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Helpers.exit_on_failure(HelperResult(ok=False, op="x", status=3))
        assert exc_info.value.code == 3


class TestConstruction:
    def test_defaults(self) -> None:
        helpers = Helpers()
        assert isinstance(helpers.settings, ScriptySettings)
        assert helpers.reporter.no_color is False

    def test_no_color_reaches_reporter(self, project_root: Path) -> None:
        helpers = make_helpers(project_root, disable_console_colors=True)
        assert helpers.reporter.no_color is True

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch, project_root: Path) -> None:
        monkeypatch.setenv("CATCH_ERROR", "1")
        helpers = Helpers.from_env(project_root=project_root)
        assert helpers.settings.catch_error is True


class TestEndToEnd:
    def test_script_flow(self, project_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
        helpers = make_helpers(
            project_root, environ={"TARGET": "prod"}, disable_console_colors=True
        )
        helpers.exit_on_failure(helpers.require_commands("true"))
        target = helpers.exit_on_failure(helpers.get_required("TARGET")).data["value"]
        helpers.log_action(f"Deploying to {target}")
        helpers.exit_on_failure(helpers.try_run(f"deploy to {target}", "true"))
        assert capsys.readouterr().out == "Deploying to prod\nSucceeded to deploy to prod\n"

    def test_fatal_try_ends_process(self, project_root: Path) -> None:
        helpers = make_helpers(project_root, disable_console_colors=True)
        with pytest.raises(SystemExit) as exc_info:
            helpers.exit_on_failure(helpers.try_run("x", "false"))
        assert exc_info.value.code == 1

    def test_caught_try_continues(self, project_root: Path) -> None:
        helpers = make_helpers(project_root, disable_console_colors=True, catch_error=True)
        assert helpers.exit_on_failure(helpers.try_run("x", "false")).status == 0

    def test_missing_required_ends_process(
        self, project_root: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        helpers = make_helpers(project_root, environ={})
        with pytest.raises(SystemExit) as exc_info:
            helpers.exit_on_failure(helpers.get_required("TARGET"))
        assert exc_info.value.code == 1
        assert "TARGET" in capsys.readouterr().err

    def test_env_defaults(self, project_root: Path) -> None:
        helpers = make_helpers(project_root, environ={"A": "1", "B": ""})
        assert helpers.get_or_default("A", "x") == "1"
        assert helpers.get_or_default("B", "x") == "x"
        assert helpers.get_or_empty("C") == ""

    def test_random_alnum(self, project_root: Path) -> None:
        helpers = make_helpers(project_root)
        first, second = helpers.random_alnum(), helpers.random_alnum()
        assert re.fullmatch(r"[a-zA-Z0-9]{32}", first)
        assert re.fullmatch(r"[a-zA-Z0-9]{32}", second)
        assert first != second

    def test_print_to_hex(self, project_root: Path) -> None:
        assert make_helpers(project_root).print_to_hex("A").splitlines()[-1] == "00000001"

    def test_execute_and_propagate(self, project_root: Path) -> None:
        helpers = make_helpers(project_root, disable_console_colors=True)
        assert helpers.execute("false").status == 1
        assert helpers.propagate_error("x", "true").ok is True
        assert helpers.raise_error("stop").exit_code == 1
