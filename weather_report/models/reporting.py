"""Report summary model handed from the pipeline to the formatters."""

from dataclasses import dataclass

from weather_report.models.record import WeatherRecord


@dataclass(frozen=True)
class WeatherSummary:
    month: int
    hot_threshold_c: float
    average_temperature: float
    hot_days: list[WeatherRecord]
    rainy_days: int
    records: list[WeatherRecord]
