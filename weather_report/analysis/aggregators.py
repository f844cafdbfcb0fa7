"""Pure aggregate statistics over a sequence of weather records."""

from collections.abc import Sequence

from weather_report.models.record import WeatherRecord


def average_temperature_for_month(
    records: Sequence[WeatherRecord], month: int
) -> float:
    """Mean temperature of records in the given month (1-12), 0.0 if none."""
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    temps = [r.temperature for r in records if r.date.month == month]
    if not temps:
        return 0.0
    return sum(temps) / len(temps)


def days_above_temperature(
    records: Sequence[WeatherRecord], threshold: float
) -> list[WeatherRecord]:
    """Records strictly hotter than threshold, in their original order."""
    return [r for r in records if r.temperature > threshold]


def count_rainy_days(records: Sequence[WeatherRecord]) -> int:
    """Number of records with precipitation strictly above zero."""
    return sum(1 for r in records if r.precipitation > 0)
