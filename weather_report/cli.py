"""CLI entry point for the weather report generator."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from weather_report.config.loader import load_config
from weather_report.config.schema import AnalyzerConfig
from weather_report.ingest.csv_loader import WeatherDataError
from weather_report.pipeline.report_pipeline import ReportPipeline
from weather_report.reporting.formatters import format_report_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="weather-report",
        description="Daily weather observation report",
    )
    parser.add_argument("--config", help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # report
    report_p = sub.add_parser("report", help="Analyze a CSV file")
    report_p.add_argument("csv_path", help="Observations CSV path")
    report_p.add_argument(
        "--month", type=int, choices=range(1, 13), metavar="N",
        help="Month (1-12) to average",
    )
    report_p.add_argument(
        "--threshold", type=float, help="Hot day threshold in °C"
    )
    report_p.add_argument(
        "--skip-malformed", action="store_true",
        help="Skip and log malformed rows instead of failing",
    )

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display effective config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else AnalyzerConfig()
    except (OSError, yaml.YAMLError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.command == "report":
        return _cmd_report(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_report(config: AnalyzerConfig, args) -> int:
    report = config.report
    if args.month is not None:
        report = report.model_copy(update={"month": args.month})
    if args.threshold is not None:
        report = report.model_copy(update={"hot_threshold_c": args.threshold})
    loader = config.loader
    if args.skip_malformed:
        loader = loader.model_copy(update={"skip_malformed": True})
    config = config.model_copy(update={"report": report, "loader": loader})

    pipeline = ReportPipeline(config)
    try:
        summary = pipeline.run(args.csv_path)
    except WeatherDataError as e:
        print(f"Error parsing file: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return 1

    print(format_report_text(summary))
    return 0


def _cmd_config(config: AnalyzerConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    print("Use: config show")
    return 1


if __name__ == "__main__":
    sys.exit(main())
