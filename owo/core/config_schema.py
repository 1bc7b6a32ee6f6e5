"""
Configuration Schemas.

Pydantic models defining the expected structure of each YAML config file.
Used by AppConfig to validate configuration at load time. If a YAML file
has missing keys, wrong types, or unknown fields, a clear ValidationError
is raised at startup instead of a cryptic KeyError deep in application code.

Each top-level class corresponds to one file in <config_dir>/settings/:
    ApplicationSchema  → application.yaml
    LoggingSchema      → logging.yaml
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class _StrictBase(BaseModel):
    """Base with extra='forbid' so unknown YAML keys are caught immediately."""

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# application.yaml
# =============================================================================


class ApiSchema(_StrictBase):
    base_url: str
    user_agent: str
    timeout: float


class UploadSchema(_StrictBase):
    result_domain: str
    sniff_bytes: int
    default_name: str


class ListingSchema(_StrictBase):
    default_entries: int
    default_offset: int


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    api: ApiSchema
    upload: UploadSchema
    listing: ListingSchema

    @property
    def user_agent(self) -> str:
        """User-Agent header with the client version substituted in."""
        return self.api.user_agent.format(version=self.version)


# =============================================================================
# logging.yaml
# =============================================================================


class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int
    backup_count: int


class LoggingHandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["console", "json"]
    handlers: LoggingHandlersSchema
