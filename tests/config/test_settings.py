"""Tests for ScriptySettings — ambient flags, TOML source, CLI overrides."""

from pathlib import Path

import click
import pytest

from scripty.config.settings import ScriptySettings


class TestDefaults:
    def test_all_flags_off(self, tmp_path: Path) -> None:
        settings = ScriptySettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.config_path is None
        assert settings.disable_console_colors is False
        assert settings.silent_stdout is False
        assert settings.catch_error is False
        assert settings.verbose is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ScriptySettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.catch_error = True  # type: ignore[misc]


class TestAmbientFlags:
    @pytest.mark.parametrize("value", ["1", "true", "false", "no", " "])
    def test_any_non_empty_value_sets_flag(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        monkeypatch.setenv("CATCH_ERROR", value)
        settings = ScriptySettings.from_cli(project_root=tmp_path)
        assert settings.catch_error is True

    def test_empty_value_is_unset(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISABLE_CONSOLE_COLORS", "")
        settings = ScriptySettings.from_cli(project_root=tmp_path)
        assert settings.disable_console_colors is False

    def test_each_flag_reads_its_own_variable(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DISABLE_CONSOLE_COLORS", "yes")
        monkeypatch.setenv("SILENT_STDOUT", "yes")
        settings = ScriptySettings.from_cli(project_root=tmp_path)
        assert settings.disable_console_colors is True
        assert settings.silent_stdout is True
        assert settings.catch_error is False

    def test_cli_flag_off_does_not_mask_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("SILENT_STDOUT", "1")
        settings = ScriptySettings.from_cli(project_root=tmp_path, silent_stdout=False)
        assert settings.silent_stdout is True

    def test_init_kwargs_by_field_name(self, tmp_path: Path) -> None:
        settings = ScriptySettings(project_root=tmp_path, catch_error=True)
        assert settings.catch_error is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "scripty.toml").write_text("silent_stdout = true\n")
        settings = ScriptySettings.from_cli(project_root=tmp_path)
        assert settings.silent_stdout is True
        assert settings.config_path == (tmp_path / "scripty.toml").resolve()

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "scripty.toml").write_text("verbose = false\n")
        monkeypatch.setenv("SCRIPTY_VERBOSE", "true")
        settings = ScriptySettings.from_cli(project_root=tmp_path)
        assert settings.verbose is True

    def test_cli_flags_beat_toml(self, tmp_path: Path) -> None:
        (tmp_path / "scripty.toml").write_text("catch_error = false\n")
        settings = ScriptySettings.from_cli(project_root=tmp_path, catch_error=True)
        assert settings.catch_error is True

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "scripty.toml").write_text("")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        monkeypatch.chdir(child)
        settings = ScriptySettings.from_cli()
        assert settings.project_root == tmp_path.resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("disable_console_colors = true\n")
        settings = ScriptySettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.disable_console_colors is True
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "scripty.toml").write_text("silent_stdout = [\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            ScriptySettings.from_cli(project_root=tmp_path)
