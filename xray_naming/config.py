"""
Configuration module.
Owns: Environment variables, settings validation, segment name override resolution.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Mapping, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root
BASE_DIR = Path(__file__).resolve().parents[1]

NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY = "AWS_XRAY_TRACING_NAME"
NAME_OVERRIDE_SYSTEM_PROPERTY_KEY = "com.amazonaws.xray.strategy.tracingName"

STRATEGY_FIXED = "fixed"
STRATEGY_DYNAMIC = "dynamic"


class Settings(BaseSettings):
    # ======================
    # Segment naming
    # ======================
    segment_name: str = Field(default="default", alias="XRAY_SEGMENT_NAME")
    naming_strategy: str = Field(
        default=STRATEGY_DYNAMIC,
        alias="XRAY_NAMING_STRATEGY",
        description="Naming strategy: 'fixed' or 'dynamic'",
    )
    recognized_hosts: Optional[str] = Field(
        default="*",
        alias="XRAY_RECOGNIZED_HOSTS",
        description="Glob pattern a Host header must match to be used as the segment name",
    )
    tracing_name: Optional[str] = Field(
        default=None,
        alias=NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY,
        description="Process-wide fallback name override, also read from the .env file",
    )
    properties: dict[str, str] = Field(
        default_factory=dict,
        alias="XRAY_PROPERTIES",
        description="Configuration properties as a JSON object, "
                    f"e.g. {{\"{NAME_OVERRIDE_SYSTEM_PROPERTY_KEY}\": \"checkout\"}}",
    )

    # ======================
    # Service
    # ======================
    service_env: str = Field(default="dev", alias="SERVICE_ENV")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


@dataclass(frozen=True)
class ConfigSources:
    """
    Snapshot of the places a segment name override can come from.

    environ mirrors the process environment; properties holds
    configuration properties keyed by dotted name.
    """

    environ: Mapping[str, str] = field(default_factory=dict)
    properties: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_process(cls, properties: Optional[Mapping[str, str]] = None) -> "ConfigSources":
        return cls(environ=dict(os.environ), properties=dict(properties or {}))

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigSources":
        sources = cls.from_process(settings.properties)
        if settings.tracing_name is None:
            return sources
        # Settings already merged the environment over the .env file
        environ = dict(sources.environ)
        environ[NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY] = settings.tracing_name
        return cls(environ=environ, properties=sources.properties)


def non_blank(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value


def resolve_override(sources: ConfigSources) -> Optional[str]:
    """
    Return the process-wide segment name override, if any.

    The environment variable wins over the configuration property.
    Empty or whitespace-only values count as unset.
    """
    return (
        non_blank(sources.environ.get(NAME_OVERRIDE_ENVIRONMENT_VARIABLE_KEY))
        or non_blank(sources.properties.get(NAME_OVERRIDE_SYSTEM_PROPERTY_KEY))
    )
