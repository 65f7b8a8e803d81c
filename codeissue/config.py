"""Configuration loading from YAML and environment.

Values come from config.yaml (or the given path), then environment variables
with the section prefix (ISSUE_*, LOGGING_*). Strings of the form ${VAR} or
$VAR in the YAML are replaced with the environment value.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from codeissue.message import MAX_BYTES_PER_CHAR, MESSAGE_STORAGE_BYTES, max_message_length


class _EnvFirstSettings(BaseSettings):
    """Settings section where env vars win over values passed in (from YAML)."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, init_settings, dotenv_settings, file_secret_settings


class IssueConfig(_EnvFirstSettings):
    """Issue record settings."""

    model_config = SettingsConfigDict(env_prefix="ISSUE_", extra="ignore")

    message_storage_bytes: int = Field(
        default=MESSAGE_STORAGE_BYTES,
        ge=1,
        description="Size in bytes of the storage column holding issue messages",
    )
    # Worst case of the storage encoding (3 for the BMP in UTF-8)
    max_bytes_per_char: int = Field(
        default=MAX_BYTES_PER_CHAR,
        ge=1,
        le=4,
        description="Maximum bytes one character takes in storage",
    )

    @property
    def max_message_length(self) -> int:
        """Message length in characters that always fits the storage column."""
        return max_message_length(self.message_storage_bytes, self.max_bytes_per_char)


class LoggingConfig(_EnvFirstSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    issue: IssueConfig = Field(default_factory=IssueConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any, env: dict[str, str]) -> Any:
    """Replace ${VAR} and $VAR in strings with values from ``env``."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return env.get(key, value)
        # Simple $VAR
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v, env) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v, env) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields defaults (env still applies).
    """
    env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    raw = _substitute_env(raw, env)

    issue = IssueConfig(**(raw.get("issue") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))

    return AppConfig(issue=issue, logging=logging)
