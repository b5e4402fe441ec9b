"""Configuration models using Pydantic."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ServiceLevel(str, Enum):
    """Where a service is installed and which systemd instance manages it."""

    USER = "user"
    SYSTEM = "system"


class ServiceConfig(BaseModel):
    """Description of a single service to install.

    Name syntax is checked by the CLI before a ServiceConfig is built.
    Environment entries are kept in lexicographic key order so the
    rendered unit is reproducible regardless of how they were supplied.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    command: tuple[str, ...] = ()
    env: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    level: ServiceLevel = ServiceLevel.SYSTEM

    @field_validator("env")
    @classmethod
    def _sort_env(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(sorted(v.items())))


class ToolsConfig(BaseModel):
    """External executables used to talk to systemd."""

    systemctl: str = "systemctl"
    systemd_escape: str = "systemd-escape"


class ConfigError(Exception):
    """Configuration error."""

    pass


class MkserviceConfig(BaseModel):
    """Root configuration model."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    # Defaults for CLI flags that were not given explicitly
    level: ServiceLevel = ServiceLevel.SYSTEM
    start: bool = False
    # Console log output through rich instead of plain text
    rich_logs: bool = False
    # Mask credentials in logged unit content
    redact_logs: bool = True
    tools: ToolsConfig = Field(default_factory=ToolsConfig)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v
