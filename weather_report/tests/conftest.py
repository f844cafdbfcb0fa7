"""Shared test fixtures."""

from collections.abc import Callable
from datetime import date
from pathlib import Path

import pytest
import yaml

from weather_report.config.schema import AnalyzerConfig
from weather_report.models.record import WeatherRecord

HEADER = "date,temperature,humidity,precipitation"

AUGUST_ROWS = [
    "2024-08-01,29.4,55,0.0",
    "2024-08-15,34.1,40,0.0",
    "2024-08-20,12.0,60,5.2",
]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a headed CSV and returns its path."""

    def _write(rows: list[str], name: str = "weather.csv", header: str = HEADER) -> Path:
        path = tmp_path / name
        path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def august_csv(write_csv) -> Path:
    """The three-row August example file."""
    return write_csv(AUGUST_ROWS)


@pytest.fixture
def august_records() -> list[WeatherRecord]:
    return [
        WeatherRecord(date(2024, 8, 1), 29.4, 55, 0.0),
        WeatherRecord(date(2024, 8, 15), 34.1, 40, 0.0),
        WeatherRecord(date(2024, 8, 20), 12.0, 60, 5.2),
    ]


@pytest.fixture
def default_config() -> AnalyzerConfig:
    return AnalyzerConfig()


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "report": {"month": 7, "hot_threshold_c": 25.0},
        "loader": {"skip_malformed": True},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
