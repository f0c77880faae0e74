"""CLI utility functions for the cartprod package.

This module provides utility functions for the CLI including configuration
loading, sequence parsing, output formatting, and error reporting.
"""

from __future__ import annotations

import json
import sys
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

import click
import yaml
from rich.console import Console
from rich.table import Table

from cartprod.errors import SequenceError
from cartprod.sequences import CountSequence, SliceSequence, SourceSequence

if TYPE_CHECKING:
    from cartprod.config import CartProdConfig

# Type alias for JSON values (recursive type)
type JsonValue = (
    str | int | float | bool | None | list[JsonValue] | dict[str, JsonValue]
)

console = Console()


def load_config_for_cli(ctx: click.Context) -> CartProdConfig:
    """Load configuration from the CLI context and apply its logging settings.

    ``--verbose`` forces DEBUG logging and ``--quiet`` forces ERROR logging,
    whatever the configuration says.

    Parameters
    ----------
    ctx : click.Context
        Context whose ``obj`` holds the global CLI options.

    Returns
    -------
    CartProdConfig
        Loaded configuration object.
    """
    # Lazy import to avoid circular import
    from cartprod.config import configure_logging, load_config

    options: dict[str, Any] = ctx.obj or {}
    config_file: Path | None = options.get("config_file")
    profile: str = options.get("profile", "default")
    verbose: bool = options.get("verbose", False)
    quiet: bool = options.get("quiet", False)

    try:
        config = load_config(config_path=config_file, profile=profile)
    except FileNotFoundError:
        print_error(f"Configuration file not found: {config_file}", exit_code=1)
        raise  # For type checking
    except Exception as e:
        print_error(f"Failed to load configuration: {e}", exit_code=1)
        raise  # For type checking

    if verbose:
        config.logging.level = "DEBUG"
    elif quiet:
        config.logging.level = "ERROR"
    configure_logging(config.logging)

    if verbose:
        console.print(f"[green]✓[/green] Loaded configuration from profile: {profile}")
        if config_file:
            console.print(f"[green]✓[/green] Applied overrides from: {config_file}")

    return config


def parse_sequence(expression: str) -> SourceSequence[Any]:
    """Parse a command-line sequence expression.

    Accepted forms:

    - ``start:stop`` or ``start:stop:step``: integer range, stop excluded
    - ``start:`` or ``start::step``: unbounded integer count
    - ``a,b,c``: comma-separated items, integers if every item is one
    - empty string: empty sequence

    Parameters
    ----------
    expression : str
        Expression to parse.

    Returns
    -------
    SourceSequence[Any]
        Parsed sequence.

    Raises
    ------
    SequenceError
        If the expression is malformed.

    Examples
    --------
    >>> list(parse_sequence("0:3"))
    [0, 1, 2]
    >>> list(parse_sequence("a,b"))
    ['a', 'b']
    >>> next(parse_sequence("5:"))
    5
    """
    text = expression.strip()
    if ":" not in text:
        if not text:
            return SliceSequence(())
        items = [item.strip() for item in text.split(",")]
        try:
            return SliceSequence(tuple(int(item) for item in items))
        except ValueError:
            return SliceSequence(tuple(items))

    parts = text.split(":")
    if len(parts) > 3 or not parts[0]:
        raise SequenceError("Invalid range expression", text=expression)
    try:
        start = int(parts[0])
        step = int(parts[2]) if len(parts) == 3 and parts[2] else 1
        stop = int(parts[1]) if parts[1] else None
    except ValueError as e:
        raise SequenceError("Range bounds must be integers", text=expression) from e

    if step == 0:
        raise SequenceError("Range step must not be zero", text=expression)
    if stop is None:
        return CountSequence(start, step)
    return SliceSequence(range(start, stop, step))


def format_output(
    data: dict[str, JsonValue] | list[JsonValue],
    format_type: Literal["yaml", "json", "table"],
) -> str:
    """Format data for CLI output.

    Parameters
    ----------
    data : dict[str, JsonValue] | list[JsonValue]
        Data to format.
    format_type : {"yaml", "json", "table"}
        Output format type.

    Returns
    -------
    str
        Formatted output string.

    Raises
    ------
    ValueError
        If format_type is invalid or data cannot be formatted.
    """
    if format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "json":
        return json.dumps(data, indent=2)
    elif format_type == "table":
        if not isinstance(data, dict):
            raise ValueError("Table format requires dict data")
        return _dict_to_table(data)
    else:
        raise ValueError(f"Invalid format type: {format_type}")


def render_table(table: Table) -> str:
    """Render a rich table to a string.

    Parameters
    ----------
    table : Table
        Table to render.

    Returns
    -------
    str
        Rendered table.
    """
    string_io = StringIO()
    temp_console = Console(file=string_io, force_terminal=True, width=120)
    temp_console.print(table)
    return string_io.getvalue()


def _dict_to_table(data: dict[str, JsonValue], title: str | None = None) -> str:
    """Convert dictionary to rich table string."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Key", style="yellow", no_wrap=True)
    table.add_column("Value", style="white")

    for key, value in data.items():
        if isinstance(value, dict):
            value_str = _format_nested_dict(value)
        elif isinstance(value, list):
            value_str = "\n".join(str(item) for item in value)
        else:
            value_str = str(value)

        table.add_row(key, value_str)

    return render_table(table)


def _format_nested_dict(data: dict[str, JsonValue], indent: int = 0) -> str:
    """Format nested dictionary for display."""
    lines: list[str] = []
    for key, value in data.items():
        prefix = "  " * indent
        if isinstance(value, dict):
            lines.append(f"{prefix}{key}:")
            lines.append(_format_nested_dict(value, indent + 1))
        else:
            lines.append(f"{prefix}{key}: {value}")
    return "\n".join(lines)


def get_nested_value(data: dict[str, JsonValue], key_path: str) -> JsonValue:
    """Get nested dictionary value using dot notation.

    Parameters
    ----------
    data : dict[str, JsonValue]
        Dictionary to search.
    key_path : str
        Dot-separated key path (e.g., "logging.level").

    Returns
    -------
    JsonValue
        Value at key path.

    Raises
    ------
    KeyError
        If key path doesn't exist.

    Examples
    --------
    >>> data = {"a": {"b": {"c": 42}}}
    >>> get_nested_value(data, "a.b.c")
    42
    """
    current: JsonValue = data
    for key in key_path.split("."):
        if not isinstance(current, dict):
            raise KeyError(
                f"Cannot access key '{key}' in non-dict value at path '{key_path}'"
            )
        if key not in current:
            raise KeyError(f"Key '{key}' not found in path '{key_path}'")
        current = current[key]
    return current


def print_error(message: str, exit_code: int = 1) -> None:
    """Print error message and exit.

    Parameters
    ----------
    message : str
        Error message to display.
    exit_code : int
        Exit code (default: 1). Pass 0 to not exit.
    """
    console.print(f"[red]✗ Error:[/red] {message}")
    if exit_code != 0:
        sys.exit(exit_code)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[green]✓ {message}[/green]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠ Warning:[/yellow] {message}")


def print_info(message: str) -> None:
    """Print info message."""
    console.print(f"[blue]ℹ Info:[/blue] {message}")
