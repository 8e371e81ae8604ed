"""Command-line weather dashboard: load a CSV and print the requested results."""
import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from dashboard import Dashboard
from layout import format_table

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
DEFAULT_LOG_FILE = os.path.join(BASE_DIR, "weather-dashboard.log")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("Weather data dashboard")
    parser.add_argument("csv_file", nargs="?", help="CSV file (defaults to WEATHER_CSV_FILE)")
    parser.add_argument("--month", help="Month name or number for the average temperature")
    parser.add_argument("--threshold", help="List days warmer than this temperature")
    parser.add_argument("--classify", metavar="TEMP", help="Print the category of a temperature")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser.parse_args(argv)


def setup_logging(log_file: str, verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
            logging.FileHandler(log_file)
        ]
    )


def load_config(args: argparse.Namespace) -> Tuple[Optional[str], str]:
    """Resolve the CSV path and log file from flags, then environment / .env."""
    load_dotenv()
    csv_file = args.csv_file or os.getenv("WEATHER_CSV_FILE")
    log_file = args.log_file or os.getenv("WEATHER_LOG_FILE", DEFAULT_LOG_FILE)
    return csv_file, log_file


def run(dashboard: Dashboard, args: argparse.Namespace, csv_file: Optional[str]) -> int:
    """Drive the dashboard the way the view would and print each result. Returns exit status."""
    if not dashboard.load_file(csv_file):
        print(dashboard.result_label)
        return 1
    print(f"File: {csv_file}")
    print(dashboard.rainy_days_label)

    status = 0
    if args.month is not None:
        if dashboard.calculate_average(args.month) is None:
            status = 1
        print(dashboard.result_label)

    if args.threshold is not None:
        rows = dashboard.find_days_above(args.threshold)
        if rows is None:
            print(dashboard.result_label)
            status = 1
        else:
            print(f"Days above {args.threshold}°C: {len(rows)}")
            for line in format_table(rows):
                print(line)

    if args.classify is not None:
        if dashboard.classify(args.classify) is None:
            status = 1
        print(dashboard.result_label)

    return status


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    csv_file, log_file = load_config(args)
    setup_logging(log_file, args.verbose)
    logging.info("Configuration loaded: csv_file=%s log_file=%s", csv_file, log_file)

    dashboard = Dashboard()
    status = run(dashboard, args, csv_file)
    logging.info("Dashboard finished with status %s", status)
    return status


if __name__ == "__main__":
    sys.exit(main())
