import argparse
import logging

from airportinfo.aggregate import aggregate_routes
from airportinfo.config import Settings
from airportinfo.errors import AirportInfoError
from airportinfo.load_data import load_routes
from airportinfo.logging_setup import setup_logging
from airportinfo.reports import REPORT_MODES, run_report


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Flight activity reports over an OpenFlights-style route file."
    )
    parser.add_argument(
        "input_file",
        help="Comma-separated route file; the first line is a header and is skipped."
    )
    parser.add_argument(
        "mode",
        help=f"Report to print: {', '.join(REPORT_MODES)}. Any other value prints nothing."
    )
    parser.add_argument(
        "limit",
        nargs="?",
        help="Flight-count threshold for LIMIT; airports with strictly more flights are listed."
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(default_level=logging.WARNING)
    settings = Settings.from_env()

    try:
        routes_df = load_routes(args.input_file, encoding=settings.encoding)
        aggregates = aggregate_routes(routes_df)
        report = run_report(args.mode, aggregates, args.limit)
    except AirportInfoError as exc:
        raise SystemExit(str(exc)) from exc

    if report is not None:
        print(report)


if __name__ == "__main__":
    main()
