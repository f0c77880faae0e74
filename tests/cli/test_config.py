"""Tests for config CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from cartprod.cli.main import cli


def test_config_help(cli_runner: CliRunner) -> None:
    """Test config command help."""
    result = cli_runner.invoke(cli, ["config", "--help"])
    assert result.exit_code == 0
    assert "config" in result.output.lower()


def test_config_show_default(cli_runner: CliRunner) -> None:
    """Test config show with default profile."""
    result = cli_runner.invoke(cli, ["config", "show"])
    assert result.exit_code == 0
    assert "profile: default" in result.output


def test_config_show_json_format(cli_runner: CliRunner) -> None:
    """Test config show with JSON format."""
    result = cli_runner.invoke(cli, ["config", "show", "--format", "json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["profile"] == "default"


def test_config_show_table_format(cli_runner: CliRunner) -> None:
    """Test config show with table format."""
    result = cli_runner.invoke(cli, ["config", "show", "--format", "table"])
    assert result.exit_code == 0
    assert "profile" in result.output


def test_config_show_nested_key(cli_runner: CliRunner) -> None:
    """Test config show with nested key."""
    result = cli_runner.invoke(
        cli, ["--profile", "dev", "config", "show", "--key", "logging.level"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == "DEBUG"


def test_config_show_nonexistent_key(cli_runner: CliRunner) -> None:
    """Test config show with nonexistent key."""
    result = cli_runner.invoke(cli, ["config", "show", "--key", "nonexistent.key"])
    assert result.exit_code != 0
    assert "not found" in result.output.lower()


def test_config_show_with_file(cli_runner: CliRunner, mock_config_file: Path) -> None:
    """Test config show with config file."""
    result = cli_runner.invoke(
        cli,
        ["--config-file", str(mock_config_file), "config", "show", "-k", "profile"],
    )
    assert result.exit_code == 0
    assert result.output.strip() == "custom"


def test_config_profiles(cli_runner: CliRunner) -> None:
    """Test listing profiles."""
    result = cli_runner.invoke(cli, ["config", "profiles"])
    assert result.exit_code == 0
    for name in ("default", "dev", "test"):
        assert name in result.output


def test_config_export_stdout(cli_runner: CliRunner) -> None:
    """Test export prints only values that differ from the defaults."""
    result = cli_runner.invoke(cli, ["--profile", "dev", "config", "export"])
    assert result.exit_code == 0
    assert "profile: dev" in result.output
    assert "DEBUG" in result.output
    assert "max_count" not in result.output


def test_config_export_to_file_round_trips(
    cli_runner: CliRunner, tmp_path: Path
) -> None:
    """Test an exported file loads back as the same configuration."""
    output = tmp_path / "nested" / "exported.yaml"
    result = cli_runner.invoke(
        cli, ["--profile", "test", "config", "export", "--output", str(output)]
    )
    assert result.exit_code == 0
    assert "exported" in result.output
    assert output.exists()

    shown = cli_runner.invoke(
        cli,
        ["--config-file", str(output), "config", "show", "-k", "product.default_limit"],
    )
    assert shown.exit_code == 0
    assert shown.output.strip() == "100"


def test_config_export_include_defaults(cli_runner: CliRunner) -> None:
    """Test --include-defaults writes every field."""
    result = cli_runner.invoke(cli, ["config", "export", "--include-defaults"])
    assert result.exit_code == 0
    assert "max_count" in result.output
    assert "output_format" in result.output
