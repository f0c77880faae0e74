"""CLI entry point for cartprod package.

Allows running via: python -m cartprod
"""

from __future__ import annotations

from cartprod.cli.main import cli

if __name__ == "__main__":
    cli()
