"""Report pipeline: load, aggregate, summarize."""

import logging
from pathlib import Path

from weather_report.analysis.aggregators import (
    average_temperature_for_month,
    count_rainy_days,
    days_above_temperature,
)
from weather_report.config.schema import AnalyzerConfig
from weather_report.ingest.csv_loader import parse_weather_data
from weather_report.models.reporting import WeatherSummary

logger = logging.getLogger(__name__)


class ReportPipeline:
    def __init__(self, config: AnalyzerConfig):
        self.config = config

    def run(self, csv_path: str | Path) -> WeatherSummary:
        """Load the file and compute the report aggregates.

        Loader errors propagate to the caller; nothing is summarized
        from a partial load.
        """
        report = self.config.report
        records = parse_weather_data(
            csv_path, skip_malformed=self.config.loader.skip_malformed
        )

        summary = WeatherSummary(
            month=report.month,
            hot_threshold_c=report.hot_threshold_c,
            average_temperature=average_temperature_for_month(
                records, report.month
            ),
            hot_days=days_above_temperature(records, report.hot_threshold_c),
            rainy_days=count_rainy_days(records),
            records=records,
        )
        logger.info(
            "Summarized %d records: month %d avg %.2f, %d above %.1f, %d rainy",
            len(records),
            summary.month,
            summary.average_temperature,
            len(summary.hot_days),
            summary.hot_threshold_c,
            summary.rainy_days,
        )
        return summary
