"""YAML config loader."""

from pathlib import Path

import yaml

from weather_report.config.schema import AnalyzerConfig


def load_config(path: str | Path) -> AnalyzerConfig:
    """Load and validate config from a YAML file.

    An empty file yields the defaults.
    """
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return AnalyzerConfig.model_validate(raw)
