from __future__ import annotations

"""
Configuration Domain Management.

Dict-based runtime configuration with defaults, plus loading of an optional
JSON config file (by default `config.json` in the user data directory).
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from imageassetgen.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILENAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_config_path() -> str:
    return os.path.join(get_user_data_dir(), CONFIG_FILENAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "assets_path": "",
        "output_dir": "",

        # Namespace policy
        "namespace_default": True,
        "namespace_fallback": False,

        # Output
        "verbose": False,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file merged over the defaults.

    Unknown keys are dropped. A missing or corrupted file yields the
    defaults.

    Args:
        path: Config file to read. Defaults to the user data config.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    config_path = path or get_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found at {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}'. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist `config` as JSON, stamped with the config version.

    Args:
        config: Configuration to save.
        path: Target file. Defaults to the user data config.
    """
    config_path = path or get_config_path()
    payload = {k: config[k] for k in get_default_config() if k in config}
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
