# file: src/module1_params/__init__.py

"""
Module 1: Coding Parameters

Derives the Reed-Solomon block layout from error tolerance and block width,
and loads the YAML codec configuration.

Public API:
    - derive_parameters(error_rate, block_width) -> CodingParameters
    - CodecConfig.from_dict(config) -> CodecConfig
    - load_config(path=None) -> dict
    - get_section(config, name) -> dict
"""

from .params import (
    CodingParameters,
    CodecConfig,
    derive_parameters,
    DEFAULT_ERROR_RATE,
    DEFAULT_BLOCK_WIDTH,
    MAX_BLOCK_WIDTH,
)
from .config import load_config, get_section, DEFAULT_CONFIG_PATH
from .errors import CodecError, ConfigurationError

__version__ = "1.0.0"

__all__ = [
    "CodingParameters",
    "CodecConfig",
    "derive_parameters",
    "DEFAULT_ERROR_RATE",
    "DEFAULT_BLOCK_WIDTH",
    "MAX_BLOCK_WIDTH",
    "load_config",
    "get_section",
    "DEFAULT_CONFIG_PATH",
    "CodecError",
    "ConfigurationError",
]
