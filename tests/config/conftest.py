"""Pytest fixtures for config module tests."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture
def sample_yaml_file(tmp_path: Path) -> Path:
    """Create a sample YAML config file for testing.

    Parameters
    ----------
    tmp_path : Path
        Temporary directory path provided by pytest.

    Returns
    -------
    Path
        Path to the created YAML config file.
    """
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        """
profile: custom
product:
  default_limit: 25
  output_format: json
logging:
  level: WARNING
"""
    )
    return config_file
