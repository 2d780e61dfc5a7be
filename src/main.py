#!/usr/bin/env python3
"""Command line entry point for the blood pressure analytics engine.

Reads a CSV record file and prints statistics, trend series or the
category distribution, and can generate sample data or export reports.

Usage:
    # Averages, extremes and trend
    pdm run python -m src.main stats

    # Weekly chart series
    pdm run python -m src.main trend --period week

    # Category distribution
    pdm run python -m src.main distribution

    # Write 60 simulated readings
    pdm run python -m src.main generate --count 60 --seed 1

    # HTML report
    pdm run python -m src.main export --format html
"""

from __future__ import annotations

import argparse
import copy
import logging
import sys
from pathlib import Path

import yaml

from src.bp_analytics import EmptyInputError, analyze, bucket, distribution
from src.exporter import default_export_name, export_csv, export_html, load_csv
from src.models import PERIODS, BloodPressureReading
from src.reading_log import ReadingLog
from src.sample_data import generate_readings

logger = logging.getLogger(__name__)

# Default configuration
DEFAULT_CONFIG = {
    "records": {
        "csv_path": "./data/readings.csv",
    },
    "analysis": {
        "default_period": "week",
    },
    "sample_data": {
        "count": 30,
        "days": 30,
        "seed": None,
    },
    "export": {
        "output_dir": "./data/exports",
    },
    "logging": {
        "level": "INFO",
        "file": None,
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    },
}


def load_config(config_path: str | None = None) -> dict:
    """Load configuration from file or use defaults.

    Args:
        config_path: Path to YAML config file

    Returns:
        Configuration dictionary
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            user_config = yaml.safe_load(f)
            if user_config and isinstance(user_config, dict):
                # Merge user sections into defaults, one level deep
                for section, values in user_config.items():
                    section_config = config.get(section)
                    if (
                        section_config is not None
                        and isinstance(section_config, dict)
                        and isinstance(values, dict)
                    ):
                        section_config.update(values)
                    elif values is None and isinstance(section_config, dict):
                        # Empty section in YAML keeps the defaults
                        continue
                    else:
                        config[section] = values

    return config


def setup_logging(config: dict) -> None:
    """Setup logging based on configuration.

    Args:
        config: Configuration dictionary
    """
    log_config = config.get("logging", {})
    level = getattr(logging, log_config.get("level", "INFO").upper())
    format_str = log_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_file = log_config.get("file")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=level, format=format_str, handlers=handlers)


def load_records(args: argparse.Namespace, config: dict) -> ReadingLog:
    """Load the record file named on the command line or in config."""
    csv_path = getattr(args, "input", None) or config.get("records", {}).get(
        "csv_path", "./data/readings.csv"
    )
    return ReadingLog(load_csv(csv_path))


def _format_reading(reading: BloodPressureReading) -> str:
    return (
        f"{reading.timestamp:%Y-%m-%d %H:%M} | "
        f"{reading.systolic}/{reading.diastolic} mmHg | "
        f"{reading.heart_rate} bpm | {reading.category}"
    )


def cmd_stats(args: argparse.Namespace, config: dict) -> int:
    """Handle stats command.

    Args:
        args: Parsed command line arguments
        config: Configuration dictionary

    Returns:
        Exit code
    """
    records = load_records(args, config)
    stats = analyze(records.readings())

    print(f"\n{'=' * 60}")
    print("Blood Pressure Statistics")
    print(f"{'=' * 60}")
    print(f"Records:        {len(records)}")
    print(
        f"Average:        {stats.average.systolic}/{stats.average.diastolic} mmHg, "
        f"{stats.average.heart_rate} bpm"
    )
    print(f"Highest:        {_format_reading(stats.max)}")
    print(f"Lowest:         {_format_reading(stats.min)}")
    print(f"Trend:          {stats.trend}")
    print(f"{'=' * 60}\n")
    return 0


def cmd_trend(args: argparse.Namespace, config: dict) -> int:
    """Handle trend command."""
    records = load_records(args, config)
    period = args.period or config.get("analysis", {}).get("default_period", "week")
    points = bucket(records.readings(), period)

    if not points:
        print("No readings yet.")
        return 0

    print(f"\nTrend ({period}):")
    for point in points:
        print(
            f"  {point.time:>6} | {point.systolic}/{point.diastolic} mmHg | "
            f"{point.heart_rate} bpm"
        )
    print()
    return 0


def cmd_distribution(args: argparse.Namespace, config: dict) -> int:
    """Handle distribution command."""
    records = load_records(args, config)
    entries = distribution(records.readings())

    print("\nCategory distribution:")
    for entry in entries:
        print(f"  {entry.category:<9} {entry.count:>5}  {entry.percentage:>3}%")
    print()
    return 0


def cmd_generate(args: argparse.Namespace, config: dict) -> int:
    """Handle generate command."""
    sample_config = config.get("sample_data", {})
    readings = generate_readings(
        count=args.count if args.count is not None else sample_config.get("count", 30),
        days=args.days if args.days is not None else sample_config.get("days", 30),
        seed=args.seed if args.seed is not None else sample_config.get("seed"),
    )
    output = args.output or config.get("records", {}).get("csv_path", "./data/readings.csv")
    path = export_csv(readings, output)
    print(f"Wrote {len(readings)} readings to {path}")
    return 0


def cmd_export(args: argparse.Namespace, config: dict) -> int:
    """Handle export command."""
    records = load_records(args, config)
    output = args.output or str(
        Path(config.get("export", {}).get("output_dir", "./data/exports"))
        / default_export_name(args.format)
    )

    if args.format == "html":
        path = export_html(records.readings(), output)
    else:
        path = export_csv(records.readings(), output)

    print(f"Exported {len(records)} records to {path}")
    return 0


COMMANDS = {
    "stats": cmd_stats,
    "trend": cmd_trend,
    "distribution": cmd_distribution,
    "generate": cmd_generate,
    "export": cmd_export,
}


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        description="Blood pressure statistics and trend analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default="config/config.yaml",
        help="Path to config file (default: config/config.yaml)",
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    for name, help_text in (
        ("stats", "Show averages, extremes and trend"),
        ("distribution", "Show category distribution"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--input", "-i", type=str, help="CSV record file (overrides config)")

    trend_parser = subparsers.add_parser("trend", help="Show chart series for a period")
    trend_parser.add_argument("--input", "-i", type=str, help="CSV record file (overrides config)")
    trend_parser.add_argument(
        "--period",
        "-p",
        choices=PERIODS,
        help="Chart period (default from config)",
    )

    generate_parser = subparsers.add_parser("generate", help="Write simulated readings")
    generate_parser.add_argument("--count", "-n", type=int, help="Number of readings")
    generate_parser.add_argument("--days", type=int, help="Days covered by the readings")
    generate_parser.add_argument("--seed", type=int, help="Random seed")
    generate_parser.add_argument("--output", "-o", type=str, help="Output CSV path")

    export_parser = subparsers.add_parser("export", help="Export records as CSV or HTML")
    export_parser.add_argument("--input", "-i", type=str, help="CSV record file (overrides config)")
    export_parser.add_argument("--format", "-f", choices=("csv", "html"), default="csv")
    export_parser.add_argument("--output", "-o", type=str, help="Output file path")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Load config
    config = load_config(args.config)

    # Setup logging
    if args.debug:
        config["logging"]["level"] = "DEBUG"
    setup_logging(config)

    try:
        exit_code = COMMANDS[args.command](args, config)
        sys.exit(exit_code)

    except EmptyInputError:
        print("No readings yet.")
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        if args.debug:
            raise
        sys.exit(1)


if __name__ == "__main__":
    main()
