"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (DOCSMCP__SITE__ROOT_URL=https://docs.example.com)
  2. docsmcp.yaml           (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional; every field has a default that targets the
Tambo documentation site.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from docsmcp.models.docs import DocSection

_DEFAULT_FALLBACK_SECTIONS = [
    DocSection(path="/getting-started/quickstart", title="Quickstart"),
    DocSection(path="/concepts/components", title="Components"),
    DocSection(path="/api-reference/react-hooks", title="React Hooks"),
]


def _find_config_file() -> str | None:
    """Return the path of the first docsmcp.yaml found, or None."""
    candidates = [
        Path("docsmcp.yaml"),
        Path(platformdirs.user_config_dir("docsmcp")) / "docsmcp.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class SiteSettings(BaseModel):
    root_url: str = "https://docs.tambo.co"
    # Searched when discovery has produced no sections
    fallback_sections: list[DocSection] = list(_DEFAULT_FALLBACK_SECTIONS)

    @field_validator("root_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"root_url must be an http(s) URL: {v!r}")
        return v.rstrip("/")


class CacheSettings(BaseModel):
    ttl_minutes: int = 10


class FetcherSettings(BaseModel):
    timeout_seconds: float = 30.0


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: DOCSMCP__CACHE__TTL_MINUTES=5
        env_prefix="DOCSMCP__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    site: SiteSettings = SiteSettings()
    cache: CacheSettings = CacheSettings()
    fetcher: FetcherSettings = FetcherSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
