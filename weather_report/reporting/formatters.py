"""Output formatters for weather reports."""

import calendar

from weather_report.models.reporting import WeatherSummary


def format_report_text(s: WeatherSummary) -> str:
    """Plain text report: aggregates first, then one line per record."""
    month_name = calendar.month_name[s.month]
    lines = [
        "Weather Analysis Results:",
        "--------------------------",
        f"Average {month_name} Temperature: {s.average_temperature:.2f} °C",
        f"Days above {s.hot_threshold_c:g} °C: {s.hot_days}",
        f"Rainy Days: {s.rainy_days}",
        "",
    ]
    for r in s.records:
        lines.append(
            f"Date: {r.date.isoformat()}, Category: {r.weather_category}"
        )
    return "\n".join(lines)
