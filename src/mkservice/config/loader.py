"""Configuration loading from TOML files."""

import logging
import tomllib
from pathlib import Path

from pydantic import ValidationError

from mkservice.config.models import ConfigError, MkserviceConfig
from mkservice.config.paths import get_config_path

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> MkserviceConfig:
    """Load configuration from a TOML file.

    Args:
        path: Explicit path to config file. If None, uses the default
            location and falls back to built-in defaults when it is absent.

    Returns:
        Validated MkserviceConfig instance.

    Raises:
        FileNotFoundError: If an explicit config file does not exist.
        ConfigError: If the config file is not valid TOML or fails validation.
    """
    if path is not None:
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = get_config_path()
        if not config_path.exists():
            logger.debug("No config file at %s, using defaults", config_path)
            return MkserviceConfig()

    try:
        with config_path.open("rb") as f:
            raw_config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    try:
        return MkserviceConfig.model_validate(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e
