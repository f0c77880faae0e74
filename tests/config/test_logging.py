"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cartprod.config.logging import LoggingConfig, configure_logging
from cartprod.product import HomCartProd


def test_configure_sets_level() -> None:
    """Test the configured level is applied."""
    logger = configure_logging(LoggingConfig(level="WARNING", console=False))

    assert logger.name == "cartprod"
    assert logger.level == logging.WARNING
    assert logger.handlers == []


def test_configure_is_idempotent() -> None:
    """Test repeated configuration does not duplicate handlers."""
    configure_logging(LoggingConfig(console=True))
    logger = configure_logging(LoggingConfig(console=True))

    assert len(logger.handlers) == 1


def test_file_handler_receives_product_logs(tmp_path: Path) -> None:
    """Test debug logs from products reach the configured file."""
    log_file = tmp_path / "cartprod.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, file=log_file))

    list(HomCartProd([0, 1], [0]))
    for handler in logging.getLogger("cartprod").handlers:
        handler.flush()

    content = log_file.read_text()
    assert "Created 2-ary product" in content
    assert "Carry into position 1" in content
    assert "exhausted" in content


def test_product_logs_with_caplog(caplog: pytest.LogCaptureFixture) -> None:
    """Test product logging through pytest's capture."""
    with caplog.at_level(logging.DEBUG, logger="cartprod"):
        list(HomCartProd([0], [0], [0]))

    assert any("3-ary" in record.getMessage() for record in caplog.records)
