"""Configuration loading for the optionsengine CLI.

Settings live in ``~/.config/optionsengine/config.toml``. Only CLI defaults
are configurable; engine constants are fixed in their modules.
"""

import copy
import logging
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "optionsengine" / "config.toml"

DEFAULT_CONFIG = {
    "market": {
        "risk_free_rate": "0.05",
        "volatility": "0.25",
    },
    "volatility": {
        "periods_per_year": 365,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    Args:
        path: Config file location; defaults to DEFAULT_CONFIG_PATH.

    Returns:
        Configuration dictionary with every section present.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = path or DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return config

    try:
        loaded = toml.load(config_path)
    except toml.TomlDecodeError as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return config

    for section, values in loaded.items():
        if isinstance(values, dict) and section in config:
            config[section].update(values)
        else:
            config[section] = values
    return config
