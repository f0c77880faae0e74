"""Main CLI entry point for cartprod package.

This module provides the main CLI command group and registers the product
and configuration commands.
"""

from __future__ import annotations

from pathlib import Path

import click

from cartprod import __version__
from cartprod.cli.config import config
from cartprod.cli.product import estimate, product


@click.group()
@click.version_option(version=__version__, prog_name="cartprod")
@click.option(
    "--config-file",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to configuration file (default: use profile defaults)",
)
@click.option(
    "--profile",
    "-p",
    type=click.Choice(["default", "dev", "test"], case_sensitive=False),
    default="default",
    help="Configuration profile to use",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    default=False,
    help="Suppress all output except errors",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    profile: str,
    verbose: bool,
    quiet: bool,
) -> None:
    r"""Lazy Cartesian products of homogeneous sequences.

    \b
    Examples:
        # Enumerate a product
        $ cartprod product 0,1 0,1

        # Estimate its size without enumerating it
        $ cartprod estimate 0:4 0:3 0:2

        # Use development profile
        $ cartprod --profile dev config show
    """
    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file
    ctx.obj["profile"] = profile.lower()
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet


cli.add_command(product)
cli.add_command(estimate)
cli.add_command(config)
