"""Configuration module."""

from mkservice.config.loader import load_config
from mkservice.config.models import (
    ConfigError,
    MkserviceConfig,
    ServiceConfig,
    ServiceLevel,
    ToolsConfig,
)
from mkservice.config.paths import (
    SYSTEM_UNIT_DIR,
    SYSTEMD_RUNTIME_DIR,
    get_config_path,
    get_home_dir,
    get_user_unit_dir,
)

__all__ = [
    "SYSTEMD_RUNTIME_DIR",
    "SYSTEM_UNIT_DIR",
    "ConfigError",
    "MkserviceConfig",
    "ServiceConfig",
    "ServiceLevel",
    "ToolsConfig",
    "get_config_path",
    "get_home_dir",
    "get_user_unit_dir",
    "load_config",
]
