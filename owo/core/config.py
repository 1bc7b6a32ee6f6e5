"""
Configuration Management.

Loads secrets and per-user defaults from the environment (or <config_dir>/.env)
and settings from <config_dir>/settings/*.yaml.

The config directory is $OWO_CONFIG_DIR when set, otherwise the defaults
bundled with the package.

Environment (.env):
    OWO_KEY, OWO_RESULT_DOMAIN, OWO_ASSOCIATED

Settings (YAML):
    application.yaml   - Client identity, API endpoint, upload and listing defaults
    logging.yaml       - Logging configuration

Everything is resolved once into a ClientConfig, which is passed explicitly
to the API client and commands.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from owo.core.config_schema import ApplicationSchema, LoggingSchema

CONFIG_DIR_ENV = "OWO_CONFIG_DIR"

_BUNDLED_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"


def find_config_dir() -> Path:
    """Return $OWO_CONFIG_DIR if set, else the bundled config directory."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return _BUNDLED_CONFIG_DIR


def load_yaml_config(filename: str) -> dict[str, Any]:
    """Load a YAML configuration file from <config_dir>/settings/."""
    config_path = find_config_dir() / "settings" / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Values read from OWO_* environment variables. Only the token is secret."""

    key: str | None = None
    result_domain: str | None = None
    associated: bool = False

    model_config = SettingsConfigDict(
        env_prefix="OWO_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance. Reads <config_dir>/.env when present."""
    env_path = find_config_dir() / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


@dataclass(frozen=True)
class ClientConfig:
    """Everything a single invocation needs to talk to the API."""

    token: str | None = field(repr=False)
    base_url: str
    user_agent: str
    timeout: float
    result_domain: str
    associated: bool = False
    sniff_bytes: int = 1024
    default_name: str = "owo"
    default_entries: int = 8
    default_offset: int = 0


def build_client_config(
    token: str | None = None,
    result_domain: str | None = None,
    associated: bool | None = None,
) -> ClientConfig:
    """
    Resolve the ClientConfig for this process.

    Explicit arguments win over OWO_* environment values, which win over
    application.yaml defaults.
    """
    settings = get_settings()
    app = get_app_config().application

    if associated is None:
        associated = settings.associated

    return ClientConfig(
        token=token or settings.key,
        base_url=app.api.base_url.rstrip("/"),
        user_agent=app.user_agent,
        timeout=app.api.timeout,
        result_domain=result_domain or settings.result_domain or app.upload.result_domain,
        associated=associated,
        sniff_bytes=app.upload.sniff_bytes,
        default_name=app.upload.default_name,
        default_entries=app.listing.default_entries,
        default_offset=app.listing.default_offset,
    )
