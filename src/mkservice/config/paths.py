"""Centralized path management for mkservice.

Unit files live in one of two fixed places depending on the service level:
- system: /etc/systemd/system
- user: $HOME/.config/systemd/user

The tool's own configuration file is optional and resolved from the
MKSERVICE_CONFIG environment variable or the XDG config directory.
"""

import os
from pathlib import Path

ENV_VAR = "MKSERVICE_CONFIG"

# Present only when systemd is the running init system
SYSTEMD_RUNTIME_DIR = Path("/run/systemd/system")

SYSTEM_UNIT_DIR = Path("/etc/systemd/system")

UNIT_SUFFIX = ".service"


def get_home_dir() -> Path | None:
    """Get the invoking user's home directory from $HOME.

    Returns:
        Path to the home directory, or None if HOME is unset or empty.
    """
    if home := os.environ.get("HOME"):
        return Path(home)
    return None


def get_user_unit_dir(home: Path) -> Path:
    """Get the systemd user unit directory under a home directory."""
    return home / ".config" / "systemd" / "user"


def get_config_path() -> Path:
    """Get the config file path.

    Resolution order:
    1. MKSERVICE_CONFIG environment variable (if set)
    2. $XDG_CONFIG_HOME/mkservice/config.toml
    3. ~/.config/mkservice/config.toml
    """
    if env_path := os.environ.get(ENV_VAR):
        return Path(env_path).expanduser()

    if xdg_config := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_config) / "mkservice" / "config.toml"

    return Path.home() / ".config" / "mkservice" / "config.toml"
