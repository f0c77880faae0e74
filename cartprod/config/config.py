"""Main configuration model for the cartprod package."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cartprod.config.logging import LoggingConfig
from cartprod.config.product import ProductConfig


class CartProdConfig(BaseModel):
    """Main configuration for the cartprod package.

    Parameters
    ----------
    profile : str
        Configuration profile name.
    product : ProductConfig
        Product enumeration configuration.
    logging : LoggingConfig
        Logging configuration.

    Examples
    --------
    >>> config = CartProdConfig()
    >>> config.profile
    'default'
    >>> config.product.output_format
    'text'
    >>> config.logging.level
    'INFO'
    """

    profile: str = Field(default="default", description="Configuration profile name")
    product: ProductConfig = Field(
        default_factory=ProductConfig, description="Product configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary.

        Returns
        -------
        dict[str, Any]
            Configuration as a dictionary.
        """
        return self.model_dump()

    def to_yaml(self) -> str:
        """Convert configuration to YAML string.

        Returns
        -------
        str
            Configuration as YAML string.

        Examples
        --------
        >>> config = CartProdConfig(profile="dev")
        >>> 'profile: dev' in config.to_yaml()
        True
        """
        from cartprod.config.serialization import to_yaml  # noqa: PLC0415

        return to_yaml(self, include_defaults=False)

    def validate_paths(self) -> list[str]:
        """Validate all path fields.

        Returns
        -------
        list[str]
            List of validation errors. Empty if all paths are valid.
        """
        errors: list[str] = []
        if self.logging.file is not None and not self.logging.file.parent.exists():
            parent_dir = self.logging.file.parent
            errors.append(f"logging file parent directory does not exist: {parent_dir}")
        return errors
