"""Resolved settings for one cw20kit invocation.

Sources, strongest first: CLI flags, ``CW20KIT_*`` environment variables
(``__`` reaches into a section), then the ``cw20kit.toml`` in scope.
Anything left unset falls back to the defaults in :mod:`cw20kit.config.models`.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    InitSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from cw20kit.config.discovery import find_config
from cw20kit.config.models import ExportConfig
from cw20kit.output.formatters import OutputSettings


class Cw20Settings(BaseSettings):
    """Output mode flags plus the ``[export]`` section.

    ``project_root`` anchors relative export paths: the directory holding
    the config file, or the working directory when there is none.
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="CW20KIT_",
        env_nested_delimiter="__",
    )

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    export: ExportConfig = Field(default_factory=ExportConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = None
        if isinstance(init_settings, InitSettingsSource):
            toml_file = init_settings.init_kwargs.get("config_path")
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | Path | None = None,
        project_root: Path | None = None,
        **flags: Any,
    ) -> Cw20Settings:
        """Build settings for a command line run.

        An explicit *config_path* must exist; otherwise the config is
        discovered by walking up from *project_root* (or the CWD).

        Raises:
            click.ClickException: The config file is missing or not valid TOML.
        """
        if config_path is not None:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(project_root)

        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        try:
            return cls(project_root=project_root, config_path=toml_path, **flags)
        except tomllib.TOMLDecodeError as exc:
            raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def output_settings(self) -> OutputSettings:
        """The subset of flags the formatters care about."""
        return OutputSettings(
            json_output=self.json_output,
            quiet=self.quiet,
            verbose=self.verbose,
        )
