"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from dayweather.config.schema import AppConfig, ArchiveConfig

TEST_ARCHIVE_URL = "https://test-archive.example.com/v1/era5"


@pytest.fixture
def archive_config() -> ArchiveConfig:
    return ArchiveConfig(base_url=TEST_ARCHIVE_URL)


@pytest.fixture
def default_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def berlin_day(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "era5_berlin_2023-01-01.json") as f:
        return json.load(f)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "archive": {"base_url": TEST_ARCHIVE_URL, "timeout_seconds": 2.5},
        "logging": {"level": "debug"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
