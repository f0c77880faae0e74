"""Product configuration model for the cartprod package."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from cartprod.size_hint import USIZE_MAX


class ProductConfig(BaseModel):
    """Configuration for product enumeration.

    Parameters
    ----------
    max_count : int
        Largest representable count for size estimates.
    default_limit : int | None
        Default cap on tuples printed by the CLI. None for no cap.
    output_format : str
        Default CLI output format.

    Examples
    --------
    >>> config = ProductConfig()
    >>> config.max_count == 2**64 - 1
    True
    >>> config.output_format
    'text'
    """

    max_count: int = Field(
        default=USIZE_MAX, ge=1, description="Largest representable count"
    )
    default_limit: int | None = Field(
        default=None, ge=0, description="Default cap on printed tuples"
    )
    output_format: Literal["text", "json", "table"] = Field(
        default="text", description="Default output format"
    )
