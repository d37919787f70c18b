# pastebininit/config/config.py

import os
import json
import logging

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PASTEBININIT_CONFIG"
CONFIG_FILE = os.path.join("~", ".config", "pastebininit", "config.json")

DEFAULT_CONFIG = {
    "api_dev_key": None,
    "format": "text",
    "privacy": "0",
    "expiration": "N",
    "timeout": 30,
    "log_file": None,
}


def config_path(path=None):
    """Resolves the config file location: explicit path, then env var, then the default."""
    return os.path.expanduser(path or os.getenv(CONFIG_ENV_VAR) or CONFIG_FILE)


def load_config(path=None):
    """Loads upload defaults from the JSON file, falling back to built-in values."""
    config_file = config_path(path)
    data = dict(DEFAULT_CONFIG)

    if not os.path.exists(config_file):
        logger.debug(f"No configuration file at {config_file}. Using defaults.")
        return data

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON from {config_file}: {e}")
        return data
    except OSError as e:
        logger.error(f"Could not read {config_file}: {e}")
        return data

    if not isinstance(stored, dict):
        logger.error(f"Configuration file {config_file} must contain a JSON object.")
        return data

    for key, value in stored.items():
        if key in DEFAULT_CONFIG:
            data[key] = value
        else:
            logger.warning(f"Ignoring unknown configuration key: {key}")

    logger.debug(f"Configuration file {config_file} loaded successfully.")
    return data
