"""Centralised settings definitions for SimpleMemoryStore.

A single Pydantic-based source of truth for configuration. Values come from an
optional JSON/YAML file, ``SMS_`` prefixed environment variables and explicit
overrides.
"""

from __future__ import annotations

import json
from json import JSONDecodeError
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SMSBaseSettings(BaseSettings):
    """Base settings class for SimpleMemoryStore components.

    * ``env_prefix`` ensures environment variables follow ``SMS_`` naming.
    * ``env_nested_delimiter`` allows structured values such as
      ``SMS_SECTION__KEY``.
    """

    model_config = SettingsConfigDict(env_prefix="SMS_", env_nested_delimiter="__")


class StoreSettings(SMSBaseSettings):
    """Settings for the in-memory store and its command line."""

    service_name: str = Field(default="simplememorystore")
    log_level: str = Field(default="INFO", description="Logging level for the service")
    id_start: int = Field(
        default=100,
        ge=0,
        description="Counter value before the first insert; the first id is id_start + 1.",
    )
    seed_default_data: bool = Field(
        default=False,
        description="Seed the default tweets and users when a store is created.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        return value.strip().upper()


def _load_file_data(config_file: Path | None) -> dict[str, Any]:
    """Load settings data from JSON or YAML, returning an empty dict when absent."""

    if not config_file:
        return {}
    if not config_file.exists():
        return {}

    suffix = config_file.suffix.lower()
    raw: dict[str, Any] = {}
    if suffix in {".yaml", ".yml"}:
        data = yaml.safe_load(config_file.read_text())
        if isinstance(data, dict):
            raw = data
    elif suffix == ".json":
        try:
            raw = json.loads(config_file.read_text())
        except JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in config file {config_file}: {exc}") from exc
    else:
        raise ValueError(
            f"Unsupported config file extension '{suffix}' for {config_file}. Use .json or .yaml/.yml."
        )
    return raw


def load_settings(
    *,
    config_file: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> StoreSettings:
    """Construct :class:`StoreSettings` from the provided sources.

    Precedence (highest first):
    1. ``overrides`` dict passed explicitly.
    2. Data from ``config_file`` (JSON or YAML).
    3. Environment variables (handled by ``StoreSettings``).

    Init arguments win over the environment in pydantic-settings, so file values
    take precedence over ``SMS_`` variables.
    """

    path = Path(config_file).expanduser() if config_file else None
    file_data = _load_file_data(path)
    payload = {**file_data, **(overrides or {})}
    return StoreSettings(**payload)


__all__ = [
    "SMSBaseSettings",
    "StoreSettings",
    "load_settings",
]
