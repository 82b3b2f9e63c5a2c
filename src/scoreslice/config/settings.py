"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SCORESLICE_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``scoreslice.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from scoreslice.config.discovery import find_config
from scoreslice.config.models import DatasetConfig, ExtractConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a discovered ``scoreslice.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc
            self._data = _rebase_dataset_path(self._data, toml_path.parent)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


def _rebase_dataset_path(data: dict[str, Any], base: Path) -> dict[str, Any]:
    """Resolve a relative ``[dataset] path`` against the TOML file's directory."""
    section = data.get("dataset")
    if not isinstance(section, dict) or not isinstance(section.get("path"), str):
        return data
    path = Path(section["path"])
    if path.is_absolute():
        return data
    return {**data, "dataset": {**section, "path": str(base / path)}}


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class ScoreSettings(BaseSettings):
    """Frozen settings for one CLI invocation, stored on ``AppContext``.

    Attributes:
        config_path: The TOML file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SCORESLICE_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    extract: ExtractConfig = Field(default_factory=ExtractConfig)

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
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ScoreSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise walks up from *start*
        (default: cwd). A relative ``[dataset] path`` from the TOML file is
        resolved against the file's directory; env and CLI values are not.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
