"""Product commands for cartprod CLI.

This module provides commands for enumerating Cartesian products and
estimating their size.
"""

from __future__ import annotations

import itertools
import json
from typing import Any

import click
from rich.table import Table

from cartprod.cli.utils import (
    load_config_for_cli,
    parse_sequence,
    print_error,
    print_warning,
    render_table,
)
from cartprod.errors import CartProdError
from cartprod.product import HomCartProd

# table output is rendered once every row is in; warn above this many rows
TABLE_ROW_WARNING = 10_000


def _build_product(expressions: tuple[str, ...], max_count: int) -> HomCartProd[Any]:
    """Parse sequence expressions and build a product, exiting on bad input."""
    try:
        sequences = [parse_sequence(expression) for expression in expressions]
        return HomCartProd(*sequences, max_count=max_count)
    except CartProdError as e:
        print_error(str(e))
        raise  # For type checking


@click.command()
@click.argument("sequences", nargs=-1, required=True)
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(min=0),
    default=None,
    help="Stop after this many tuples (default: from configuration)",
)
@click.option(
    "--format",
    "-f",
    "format_type",
    type=click.Choice(["text", "json", "table"], case_sensitive=False),
    default=None,
    help="Output format (default: from configuration)",
)
@click.option(
    "--count",
    "count_only",
    is_flag=True,
    default=False,
    help="Print only the number of tuples enumerated",
)
@click.pass_context
def product(
    ctx: click.Context,
    sequences: tuple[str, ...],
    limit: int | None,
    format_type: str | None,
    count_only: bool,
) -> None:
    r"""Enumerate the Cartesian product of SEQUENCES.

    Each sequence is a comma-separated list (a,b,c), an integer range
    (start:stop[:step]) or an unbounded count (start: or start::step).
    Tuples are produced lazily with the last sequence varying fastest.
    Text and JSON rows are written as they are produced; table output keeps
    every row in memory until the table is rendered, so pass --limit for
    large products.

    \b
    Examples:
        $ cartprod product 0,1 0,1
        $ cartprod product 0:4 0:3 0:2 --format table
        $ cartprod product 1: a,b --limit 6
        $ cartprod product 0:1000 0:1000 --count
    """
    cfg = load_config_for_cli(ctx)
    it = _build_product(sequences, cfg.product.max_count)

    if limit is None:
        limit = cfg.product.default_limit
    if limit is None and it.remaining_estimate().upper is None:
        print_error("Product may be unbounded; pass --limit to cap the output")

    format_type = (format_type or cfg.product.output_format).lower()
    if (
        format_type == "table"
        and not count_only
        and limit is None
        and it.remaining_estimate().lower > TABLE_ROW_WARNING
    ):
        print_warning(
            "Table output holds every row in memory; pass --limit to cap the output"
        )

    table = Table(show_header=True, header_style="bold cyan")
    for position in range(it.arity):
        table.add_column(str(position + 1))

    count = 0
    for values in itertools.islice(it, limit):
        count += 1
        if count_only:
            continue
        if format_type == "json":
            click.echo(json.dumps(list(values)))
        elif format_type == "table":
            table.add_row(*(str(value) for value in values))
        else:
            click.echo(" ".join(str(value) for value in values))

    if count_only:
        click.echo(count)
    elif format_type == "table":
        click.echo(render_table(table), nl=False)


@click.command()
@click.argument("sequences", nargs=-1, required=True)
@click.pass_context
def estimate(ctx: click.Context, sequences: tuple[str, ...]) -> None:
    r"""Estimate the size of the Cartesian product of SEQUENCES.

    Prints the lower bound and the upper bound, or "unknown" when the
    product may be unbounded or too large to represent.

    \b
    Examples:
        $ cartprod estimate 0:4 0:3 0:2
        $ cartprod estimate 0: a,b
    """
    cfg = load_config_for_cli(ctx)
    it = _build_product(sequences, cfg.product.max_count)

    hint = it.remaining_estimate()
    upper = "unknown" if hint.upper is None else str(hint.upper)
    click.echo(f"lower: {hint.lower}")
    click.echo(f"upper: {upper}")
