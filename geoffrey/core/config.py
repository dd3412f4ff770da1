"""
Configuration: optional YAML settings for geoff.

Lookup order:
1. explicit path (--config)
2. $GEOFF_CONFIG
3. built-in defaults

geoff never writes configuration; the only persisted state is the marker file.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from geoffrey.domain.errors import ErrorCodes, GeoffError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GEOFF_CONFIG"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GeoffConfig:
    """geoff settings."""
    require_marker: bool = True  # `add` only inside a .geoff project
    log_level: str = "WARNING"


def _parse_config(data: dict[str, Any], config_path: Path) -> GeoffConfig:
    """dict → GeoffConfig (unknown keys ignored)."""
    defaults = GeoffConfig()

    require_marker = data.get("require_marker", defaults.require_marker)
    if not isinstance(require_marker, bool):
        raise GeoffError(
            ErrorCodes.CONFIG_INVALID,
            f"require_marker must be true or false in {config_path}",
            path=config_path,
            value=require_marker,
        )

    log_level = str(data.get("log_level", defaults.log_level)).upper()
    if log_level not in LOG_LEVELS:
        raise GeoffError(
            ErrorCodes.CONFIG_INVALID,
            f"log_level must be one of {', '.join(LOG_LEVELS)} in {config_path}",
            path=config_path,
            value=log_level,
        )

    return GeoffConfig(require_marker=require_marker, log_level=log_level)


def load_config(config_path: Path | None = None) -> GeoffConfig:
    """
    Load settings.

    Args:
        config_path: YAML file (None → $GEOFF_CONFIG → defaults)

    Returns:
        GeoffConfig

    Raises:
        GeoffError: CONFIG_NOT_FOUND, CONFIG_INVALID
    """
    if config_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return GeoffConfig()
        config_path = Path(env_path)

    if not config_path.exists():
        raise GeoffError(
            ErrorCodes.CONFIG_NOT_FOUND,
            f"Config file {config_path} doesn't exist",
            path=config_path,
        )

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise GeoffError(
            ErrorCodes.CONFIG_INVALID,
            f"Config file {config_path} is not valid YAML",
            path=config_path,
            cause=e,
        ) from e

    # empty file
    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise GeoffError(
            ErrorCodes.CONFIG_INVALID,
            f"Config file {config_path} must contain a mapping",
            path=config_path,
        )

    logger.debug(f"Loaded config from {config_path}")
    return _parse_config(data, config_path)
