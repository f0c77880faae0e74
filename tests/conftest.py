"""Root pytest configuration for cartprod package tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(scope="session")
def tests_dir() -> Path:
    """Get tests directory path.

    Returns
    -------
    Path
        Path to tests directory
    """
    return Path(__file__).parent


@pytest.fixture
def three_factor_sources() -> tuple[range, range, range]:
    """Provide sources of sizes 4, 3 and 2.

    Returns
    -------
    tuple[range, range, range]
        Three integer ranges starting at zero.
    """
    return range(4), range(3), range(2)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove cartprod environment variables so tests see profile defaults.

    Parameters
    ----------
    monkeypatch : pytest.MonkeyPatch
        Pytest's monkeypatch fixture
    """
    for key in list(os.environ):
        if key.startswith("CARTPROD_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Restore the package logger after each test."""
    logger = logging.getLogger("cartprod")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)
