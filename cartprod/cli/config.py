"""Configuration commands for cartprod CLI.

This module provides commands for viewing, listing and exporting configuration.
"""

from __future__ import annotations

from pathlib import Path

import click

from cartprod.cli.utils import (
    format_output,
    get_nested_value,
    load_config_for_cli,
    print_error,
    print_info,
    print_success,
)


@click.group()
def config() -> None:
    r"""Manage configuration commands.

    \b
    Examples:
        $ cartprod config show
        $ cartprod config show --format json
        $ cartprod config show --key logging.level
        $ cartprod config profiles
        $ cartprod config export --output cartprod.yaml
    """


@config.command()
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["yaml", "json", "table"], case_sensitive=False),
    default="yaml",
    help="Output format (default: yaml)",
)
@click.option(
    "--key",
    "-k",
    type=str,
    default=None,
    help="Show specific config value (e.g., logging.level)",
)
@click.pass_context
def show(ctx: click.Context, format_type: str, key: str | None) -> None:
    r"""Display current configuration.

    Shows the merged configuration from profile, file, and environment variables.

    \b
    Examples:
        $ cartprod config show
        $ cartprod config show --format json
        $ cartprod config show --key product.max_count
    """
    cfg = load_config_for_cli(ctx)
    config_dict = cfg.model_dump(mode="json")

    if key:
        try:
            value = get_nested_value(config_dict, key)
        except KeyError as e:
            print_error(f"Configuration key not found: {e}")
            return
        click.echo(value)
        return

    try:
        output = format_output(config_dict, format_type.lower())  # type: ignore[arg-type]
    except ValueError as e:
        print_error(f"Failed to format output: {e}")
        return
    click.echo(output)


@config.command()
def profiles() -> None:
    r"""List available configuration profiles.

    \b
    Examples:
        $ cartprod config profiles
        $ cartprod config export --output cartprod.yaml
    """
    # Lazy import to avoid circular import
    from cartprod.config import list_profiles

    print_info("Available configuration profiles:")
    for profile_name in list_profiles():
        click.echo(f"  • {profile_name}")


@config.command()
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file (default: stdout)",
)
@click.option(
    "--include-defaults",
    is_flag=True,
    default=False,
    help="Also write values equal to the defaults",
)
@click.pass_context
def export(ctx: click.Context, output: Path | None, include_defaults: bool) -> None:
    r"""Export current configuration to YAML.

    Exports the merged configuration (profile + file + env). Values equal to
    the defaults are left out unless --include-defaults is given, so the
    result can be passed back with --config-file.

    \b
    Examples:
        $ cartprod config export
        $ cartprod --profile dev config export --output dev.yaml
    """
    from cartprod.config import save_yaml, to_yaml

    cfg = load_config_for_cli(ctx)

    if output is None:
        click.echo(to_yaml(cfg, include_defaults=include_defaults), nl=False)
        return

    try:
        path = save_yaml(cfg, output, include_defaults=include_defaults)
    except OSError as e:
        print_error(f"Failed to export configuration: {e}")
        return
    print_success(f"Configuration exported to: {path}")
