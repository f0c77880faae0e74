"""Test fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide Click CLI test runner.

    Returns
    -------
    CliRunner
        Click test runner.
    """
    return CliRunner()


@pytest.fixture
def mock_config_file(tmp_path: Path) -> Path:
    """Create a configuration file for CLI tests.

    Parameters
    ----------
    tmp_path : Path
        Pytest temporary directory.

    Returns
    -------
    Path
        Path to configuration file.
    """
    config_file = tmp_path / "cartprod.yaml"
    config_file.write_text(
        "profile: custom\nproduct:\n  default_limit: 3\nlogging:\n  console: false\n"
    )
    return config_file
