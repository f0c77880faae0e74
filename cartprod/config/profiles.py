"""Configuration profiles for the cartprod package.

This module provides pre-configured profiles for development and testing
alongside the defaults.
"""

from __future__ import annotations

from cartprod.config.config import CartProdConfig
from cartprod.config.logging import LoggingConfig
from cartprod.config.product import ProductConfig

# development profile: verbose logging, tabular output
DEV_CONFIG = CartProdConfig(
    profile="dev",
    product=ProductConfig(output_format="table"),
    logging=LoggingConfig(level="DEBUG", console=True),
)

# test profile: quiet logging, small output cap
TEST_CONFIG = CartProdConfig(
    profile="test",
    product=ProductConfig(default_limit=100),
    logging=LoggingConfig(level="WARNING", console=False),
)
"""Test configuration profile.

Examples
--------
>>> from cartprod.config.profiles import TEST_CONFIG
>>> TEST_CONFIG.product.default_limit
100
"""

PROFILES: dict[str, CartProdConfig] = {
    "default": CartProdConfig(),
    "dev": DEV_CONFIG,
    "test": TEST_CONFIG,
}
"""Registry of all available configuration profiles.

Examples
--------
>>> from cartprod.config.profiles import PROFILES
>>> list(PROFILES.keys())
['default', 'dev', 'test']
"""


def get_profile(name: str) -> CartProdConfig:
    """Get configuration profile by name.

    Parameters
    ----------
    name : str
        Profile name. Must be one of: 'default', 'dev', 'test'.

    Returns
    -------
    CartProdConfig
        Configuration for the specified profile.

    Raises
    ------
    ValueError
        If profile name is not found in the registry.

    Examples
    --------
    >>> get_profile("dev").logging.level
    'DEBUG'
    >>> try:
    ...     get_profile("invalid")
    ... except ValueError as e:
    ...     print(str(e))
    Profile 'invalid' not found. Available profiles: default, dev, test
    """
    if name not in PROFILES:
        available = ", ".join(sorted(PROFILES.keys()))
        msg = f"Profile {name!r} not found. Available profiles: {available}"
        raise ValueError(msg)

    return PROFILES[name].model_copy(deep=True)


def list_profiles() -> list[str]:
    """Return list of available profile names, sorted alphabetically."""
    return sorted(PROFILES.keys())
