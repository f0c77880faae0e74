"""Default configurations for the cartprod package."""

from __future__ import annotations

from cartprod.config.config import CartProdConfig
from cartprod.config.logging import LoggingConfig
from cartprod.config.product import ProductConfig

DEFAULT_CONFIG = CartProdConfig(
    profile="default",
    product=ProductConfig(),
    logging=LoggingConfig(),
)
"""Default configuration instance.

It's the base configuration used when no config file is provided.

Examples
--------
>>> from cartprod.config.defaults import DEFAULT_CONFIG
>>> DEFAULT_CONFIG.profile
'default'
"""


def get_default_config() -> CartProdConfig:
    """Get a copy of the default configuration.

    Returns
    -------
    CartProdConfig
        A deep copy of the default configuration.

    Notes
    -----
    Returns a deep copy to ensure modifications don't affect the original
    DEFAULT_CONFIG instance.
    """
    return DEFAULT_CONFIG.model_copy(deep=True)
