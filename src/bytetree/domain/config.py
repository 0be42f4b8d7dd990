from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences (last rendered path,
logging verbosity, default report destination) as JSON inside the user
data directory, with default fallback on missing or corrupt files.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from bytetree.domain.constants import CURRENT_CONFIG_VERSION
from bytetree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "config_version": CURRENT_CONFIG_VERSION,
        "last_path": os.getcwd(),
        "log_level": "INFO",
        "save_path": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Unknown keys in the stored file are ignored.

    Args:
        path: Optional config file location. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: The loaded configuration or defaults on failure.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8", errors="surrogateescape") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in config:
        if key in data and data[key] is not None:
            config[key] = data[key]

    config["config_version"] = CURRENT_CONFIG_VERSION
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Optional config file location. Defaults to the user data dir.

    Returns:
        bool: True if the file was written.
    """
    config_path = path or get_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        payload = dict(config)
        payload["config_version"] = CURRENT_CONFIG_VERSION
        with open(config_path, "w", encoding="utf-8", errors="surrogateescape") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
        return True
    except (OSError, TypeError, ValueError) as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
