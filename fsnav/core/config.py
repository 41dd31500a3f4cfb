from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fsnav.core.paths import default_log_dir

LOG_FORMATS = ("json", "text")


class RuntimeConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="FSNAV_", case_sensitive=False)

    log_level: str = "info"
    log_format: str = "json"
    log_to_file: bool = False
    log_dir: Path = Field(default_factory=default_log_dir)
    show_hidden: bool = True
    open_command: str | None = None

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        return value.strip().lower() or "info"

    @field_validator("log_format")
    @classmethod
    def _normalize_format(cls, value: str) -> str:
        text = value.strip().lower()
        return text if text in LOG_FORMATS else "json"

    @field_validator("open_command")
    @classmethod
    def _blank_command_is_unset(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


@lru_cache
def get_runtime_config() -> RuntimeConfig:
    return RuntimeConfig()
