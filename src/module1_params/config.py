# file: src/module1_params/config.py

"""
YAML configuration loading.

The bundled default_config.yaml sits beside this module; callers may point
at their own file with the same layout.
"""

import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigurationError


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to configuration YAML file.
                     If None, uses the bundled default configuration.

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    return config


def get_section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    """
    Return config[name] as a dictionary; an absent or empty section is {}.

    Raises:
        ConfigurationError: If the section is present but not a mapping
    """
    section = config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Config section '{name}' must be a mapping, got {type(section).__name__}"
        )
    return section
