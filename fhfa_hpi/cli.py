"""
Command line entry point for FHFA HPI lookups
"""

import argparse
import logging
import sys
from typing import List, Optional

from .aggregation import best
from .config import Settings, get_default_settings
from .data import detect_geo_level, load, load_many, read_grid
from .utils import HPIError, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(
        prog="fhfa-hpi",
        description="Look up FHFA quarterly house price indexes",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings JSON file"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides settings)"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    index_parser = subparsers.add_parser("index", help="Index value for a geo and quarter")
    index_parser.add_argument("source", help="Workbook path or geo level (e.g. state)")
    index_parser.add_argument("geo", help="Geography key (e.g. CA, 837, 10180)")
    index_parser.add_argument("date", type=int, help="Quarter as CCYYQ")

    change_parser = subparsers.add_parser("change", help="Index ratio between two quarters")
    change_parser.add_argument("source", help="Workbook path or geo level")
    change_parser.add_argument("geo", help="Geography key")
    change_parser.add_argument("start", type=int, help="Start quarter as CCYYQ")
    change_parser.add_argument("end", type=int, help="End quarter as CCYYQ")

    best_parser = subparsers.add_parser("best", help="Index from the most preferred geo level with data")
    best_parser.add_argument("date", type=int, help="Quarter as CCYYQ")
    best_parser.add_argument(
        "--pair",
        nargs=2,
        action="append",
        metavar=("SOURCE", "KEY"),
        help="Source and key, in order of preference (repeatable)"
    )
    best_parser.add_argument(
        "--key",
        default=None,
        help="Key to use with every level of the configured preference order"
    )

    level_parser = subparsers.add_parser("level", help="Geo level of a workbook")
    level_parser.add_argument("source", help="Workbook path")

    export_parser = subparsers.add_parser("export", help="Write index data as CSV")
    export_parser.add_argument("source", help="Workbook path or geo level")
    export_parser.add_argument("output", help="CSV file to create")

    return parser


def run(args: argparse.Namespace, settings: Settings) -> None:
    """Execute one command"""
    if args.command == "index":
        data = load(args.source, settings)
        print(f"{data.index(args.geo, args.date):.2f}")

    elif args.command == "change":
        data = load(args.source, settings)
        print(f"{data.change(args.geo, args.start, args.end):.4f}")

    elif args.command == "best":
        if args.pair:
            sources = [source for source, _ in args.pair]
            keys = [key for _, key in args.pair]
        elif args.key:
            sources = list(settings.preference_order)
            keys = [args.key] * len(sources)
        else:
            raise HPIError("Give --pair SOURCE KEY or --key KEY")

        value, geo_level = best(args.date, keys, load_many(sources, settings))
        print(f"{value:.2f} {geo_level}")

    elif args.command == "level":
        grid = read_grid(args.source)
        print(detect_geo_level(grid[0][0] if grid and grid[0] else ""))

    elif args.command == "export":
        data = load(args.source, settings)
        data.save(args.output)


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function"""
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_json(args.config) if args.config else get_default_settings()
        if args.log_level:
            settings.log_level = args.log_level
        settings.validate()
    except (OSError, ValueError, TypeError, HPIError) as e:
        logging.getLogger("fhfa_hpi").error(f"Invalid configuration: {e}")
        return 1

    logger = setup_logging("fhfa_hpi", settings.log_level, log_file=settings.log_file)

    try:
        run(args, settings)
    except (HPIError, OSError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
