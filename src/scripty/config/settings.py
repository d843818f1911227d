"""Unified settings — CLI flags, ambient flags, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click (only the ones given)
  2. Env vars     — ``DISABLE_CONSOLE_COLORS``, ``SILENT_STDOUT``,
                    ``CATCH_ERROR``, and ``SCRIPTY_*`` for the rest
  3. TOML file    — ``scripty.toml`` discovered via walk-up
  4. Code defaults

The three ambient flags are true exactly when non-empty; their content is
never interpreted, so ``CATCH_ERROR=false`` still enables error catching.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from scripty.config.discovery import find_config

AMBIENT_FLAGS: dict[str, str] = {
    "disable_console_colors": "DISABLE_CONSOLE_COLORS",
    "silent_stdout": "SILENT_STDOUT",
    "catch_error": "CATCH_ERROR",
}


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``scripty.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


def _ambient(name: str) -> Any:
    return Field(default=False, validation_alias=AliasChoices(name, AMBIENT_FLAGS[name]))


class ScriptySettings(BaseSettings):
    """Process-wide configuration, built once and threaded through the helpers.

    Attributes:
        project_root: Directory holding ``scripty.toml``, or CWD if none found.
        config_path: The config file that was loaded, if any.
        disable_console_colors: Emit status lines without ANSI codes.
        silent_stdout: Send executed commands' stdout to the null device.
        catch_error: Let ``try`` swallow failed commands instead of failing.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SCRIPTY_",
        "populate_by_name": True,
        "extra": "ignore",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- Ambient flags ---
    disable_console_colors: bool = _ambient("disable_console_colors")
    silent_stdout: bool = _ambient("silent_stdout")
    catch_error: bool = _ambient("catch_error")

    # --- CLI-only flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @field_validator(*AMBIENT_FLAGS, mode="before")
    @classmethod
    def _set_when_non_empty(cls, value: Any) -> bool:
        if isinstance(value, str):
            return value != ""
        return bool(value)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> ScriptySettings:
        """Construct settings from CLI invocation.

        Discovers ``scripty.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides. Flags that are
        off are dropped so they never mask an ambient env var.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        overrides = {name: value for name, value in cli_flags.items() if value}

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **overrides,
            )
        finally:
            _tls.toml_path = None
