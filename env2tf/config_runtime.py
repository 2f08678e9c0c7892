"""Runtime configuration for env2tf - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from env2tf.utils.logging import logger

CONFIG_FILE_NAME = ".env2tf.json"

DEFAULTS = {
    "paths": {
        "env_file": "./.env",
        "tfvars_file": "./terraform.tfvars",
        "variables_file": "./variables.tf",
    },
    "render": {
        "description_fallback": "",
        "order": "sorted",
    },
}


def load_runtime_config(root: str = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .env2tf.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (ENV2TF_<SECTION>_<KEY>)
    2. .env2tf.json file in root
    3. Built-in defaults

    Args:
        root: Root directory to look for config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_FILE_NAME
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section in cfg:
                    if section in user and isinstance(user[section], dict):
                        for key, value in user[section].items():
                            if key in cfg[section] and isinstance(value, type(cfg[section][key])):
                                cfg[section][key] = value
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {path}: {err}", path=str(path), err=str(e))
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"ENV2TF_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                cfg[section][key] = os.environ[env_var]

    return cfg
