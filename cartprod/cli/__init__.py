"""Command-line interface for the cartprod package."""

from __future__ import annotations

from cartprod.cli.main import cli

__all__ = ["cli"]
