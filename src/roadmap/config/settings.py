"""RoadmapSettings — one frozen object for every configuration source.

Sources, strongest first: keyword overrides, ``ROADMAP_*`` environment
variables (``__`` separates nested sections, e.g.
``ROADMAP_GRAPH__AUTO_REGISTER=false``), the ``roadmap.toml`` located by
:func:`~roadmap.config.discovery.find_config`, then model defaults.
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    TomlConfigSettingsSource,
)

from roadmap.config.discovery import ConfigError, find_config
from roadmap.config.models import GraphConfig, LoggingConfig

# TOML file for the settings object currently being built by ``load``.
_active_toml: ContextVar[Path | None] = ContextVar("roadmap_active_toml", default=None)


class RoadmapSettings(BaseSettings):
    """Resolved configuration for building roadmaps.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
        graph: Write policy handed to ``DirectedGraph.from_config``.
        logging: Output options handed to ``configure_from_config``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ROADMAP_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    graph: GraphConfig = Field(default_factory=GraphConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        sources: list[PydanticBaseSettingsSource] = [init_settings, env_settings]
        toml_path = _active_toml.get()
        if toml_path is not None:
            sources.append(TomlConfigSettingsSource(settings_cls, toml_file=toml_path))
        return tuple(sources)

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> RoadmapSettings:
        """Resolve settings, reading *config_path* or the discovered ``roadmap.toml``.

        An explicit *config_path* that does not exist is ignored and the
        search is skipped. Malformed TOML raises :class:`ConfigError`.
        """
        if config_path:
            candidate = Path(config_path)
            toml_path = candidate if candidate.is_file() else None
        else:
            toml_path = find_config(start)

        token = _active_toml.set(toml_path)
        try:
            return cls(config_path=toml_path, **overrides)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {toml_path}: {exc}") from exc
        finally:
            _active_toml.reset(token)
