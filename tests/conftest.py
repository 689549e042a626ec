"""
Pytest configuration and shared fixtures for rpmver tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import yaml

from rpmver.logging import SilentLogger, get_global_logger, set_global_logger


@pytest.fixture(autouse=True)
def _restore_global_logger() -> Iterator[None]:
    """Keep tests that configure the global logger from leaking output."""
    previous = get_global_logger()
    set_global_logger(SilentLogger())
    yield
    set_global_logger(previous)


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Provide a partial configuration overriding a few defaults."""
    return {
        "policy": {
            "allow_downgrade": True,
        },
        "validation": {
            "require_leading_digit": True,
        },
    }


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
