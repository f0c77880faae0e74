"""Configuration system for the cartprod package.

Examples
--------
>>> from cartprod.config import CartProdConfig, get_profile
>>> get_profile("dev").logging.level
'DEBUG'
>>> CartProdConfig().product.output_format
'text'
"""

from __future__ import annotations

from cartprod.config.config import CartProdConfig
from cartprod.config.defaults import DEFAULT_CONFIG, get_default_config
from cartprod.config.env import load_from_env
from cartprod.config.loader import load_config, load_yaml_file, merge_configs
from cartprod.config.logging import LoggingConfig, configure_logging
from cartprod.config.product import ProductConfig
from cartprod.config.profiles import (
    DEV_CONFIG,
    PROFILES,
    TEST_CONFIG,
    get_profile,
    list_profiles,
)
from cartprod.config.serialization import save_yaml, to_yaml

__all__ = [
    # Main config
    "CartProdConfig",
    # Config sections
    "ProductConfig",
    "LoggingConfig",
    # Defaults
    "DEFAULT_CONFIG",
    "get_default_config",
    # Profiles
    "DEV_CONFIG",
    "TEST_CONFIG",
    "PROFILES",
    "get_profile",
    "list_profiles",
    # Loading
    "load_config",
    "load_yaml_file",
    "merge_configs",
    # Environment
    "load_from_env",
    # Logging
    "configure_logging",
    # Serialization
    "to_yaml",
    "save_yaml",
]
