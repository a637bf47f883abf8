#!/usr/bin/env python3

import copy
import json
import logging

from moresuits.common import error
from moresuits.constants import _const as CONSTANTS


logger = logging.getLogger(__name__)

export_config = {
    "skin_name": CONSTANTS().SKIN_NAME,
    "price": CONSTANTS().PRICE,
    "ignore_list": list(CONSTANTS().IGNORE_PROPERTIES),
    "required_shader": CONSTANTS().REQUIRED_SHADER,
    "main_texture_property": CONSTANTS().MAIN_TEXTURE_PROPERTY,
    "export_main_texture": True,
    "advanced_dir": CONSTANTS().ADVANCED_DIR,
}


def get_export_config():
    return copy.deepcopy(export_config)


def load_export_config(path):
    """Load a config file over the default export config.

    Args:
        path (str): JSON file holding a subset of the default config keys.

    Returns:
        config (dict): Merged export config.

    Raises:
        error.ConfigError: Unreadable file, invalid JSON or unknown keys.
    """
    config = get_export_config()
    try:
        with open(path, encoding="utf-8-sig") as f:
            overrides = json.load(f)
    except (OSError, ValueError) as e:
        logger.error("Config Load Error")
        raise error.ConfigError({"path": path, "reason": e}) from e

    if not isinstance(overrides, dict):
        raise error.ConfigError({"path": path, "reason": "not a JSON object"})
    unknown = sorted(set(overrides) - set(config))
    if unknown:
        raise error.ConfigError({
            "path": path,
            "reason": f"unknown keys {', '.join(unknown)}",
        })
    config.update(overrides)
    logger.debug(f"export_config: {config}")
    return config
