"""Tests for random and hex commands."""

from __future__ import annotations

import re

import pytest
from click.testing import CliRunner

from scripty.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestRandom:
    def test_prints_identifier(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["random"])
        assert result.exit_code == 0
        assert re.fullmatch(r"[a-zA-Z0-9]{32}\n", result.stdout)

    def test_two_runs_differ(self, cli_runner: CliRunner) -> None:
        first = cli_runner.invoke(cli, ["random"]).stdout
        second = cli_runner.invoke(cli, ["random"]).stdout
        assert first != second


@pytest.mark.usefixtures("_isolated_project")
class TestHex:
    def test_dump(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["hex", "hi"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0].startswith("00000000  68 69")
        assert lines[0].endswith("|hi|")
        assert lines[1] == "00000002"

    def test_empty_value_prints_nothing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["hex", ""])
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_undecodable_byte(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["hex", "\udcff"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[0].startswith("00000000  ff")
