"""Shared pytest fixtures and test helpers for scripty tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from scripty.config.settings import ScriptySettings
from scripty.facade import Helpers

ENV_FLAGS = (
    "DISABLE_CONSOLE_COLORS",
    "SILENT_STDOUT",
    "CATCH_ERROR",
    "SCRIPTY_CONFIG",
    "SCRIPTY_VERBOSE",
    "SCRIPTY_LOG_JSON",
    "SCRIPTY_JSON_OUTPUT",
)


@pytest.fixture(autouse=True)
def _clean_ambient_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test with no ambient flag set."""
    for name in ENV_FLAGS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project directory with no scripty.toml."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so config discovery finds nothing stray.

    Use via ``@pytest.mark.usefixtures("_isolated_project")``.
    """
    monkeypatch.chdir(project_root)


def make_settings(project_root: Path, **flags: Any) -> ScriptySettings:
    """Settings rooted at *project_root* with the given flags."""
    return ScriptySettings(project_root=project_root, **flags)


def make_helpers(project_root: Path, *, environ: dict[str, str] | None = None, **flags: Any) -> Helpers:
    """Helpers over explicit settings and an optional fake environment."""
    return Helpers(make_settings(project_root, **flags), environ=environ)
