#!/usr/bin/env python3
"""Print the risk analysis for one location of the property catalog.

Loads the catalog, builds the query engine, and prints the risk profile
histogram and the filtered/sorted property table for ``--location``.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_risk.config import PropertyRiskConfig
from property_risk.engine import PropertyQueryEngine
from property_risk.exceptions import PropertyRiskError
from property_risk.logging import get_logger, setup_logging
from property_risk.models import ALL, QuerySpec
from property_risk.presentation import ConsoleReport
from property_risk.sources import JsonFileSource

logger = get_logger(__name__)


def build_parser(config: PropertyRiskConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Property risk analysis for a location")
    parser.add_argument(
        "--data",
        type=Path,
        default=config.source.path,
        help=f"Property catalog JSON file (default: {config.source.path})",
    )
    parser.add_argument(
        "--location",
        type=str,
        help="City/municipality to analyze (exact match)",
    )
    parser.add_argument(
        "--list-locations",
        action="store_true",
        help="List available locations, property types and statuses, then exit",
    )
    parser.add_argument(
        "--status",
        type=str,
        default=ALL,
        help="Status filter, e.g. Occupied (default: all)",
    )
    parser.add_argument(
        "--type",
        dest="property_type",
        type=str,
        default=ALL,
        help="Property type filter, e.g. Residential (default: all)",
    )
    parser.add_argument(
        "--sort",
        type=str,
        default=config.query.sort_field.value,
        help="Sort field: price, lot_area, floor_area, required_gross, property_type, status",
    )
    parser.add_argument(
        "--order",
        type=str,
        default=config.query.sort_order.value,
        help="Sort order: asc or desc",
    )
    parser.add_argument(
        "--max-rows",
        type=int,
        default=config.display.max_rows,
        help="Maximum table rows to print (default: all)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    return parser


def run(args: argparse.Namespace, config: PropertyRiskConfig) -> int:
    source = JsonFileSource(args.data)
    engine = PropertyQueryEngine(source.load())

    if args.list_locations:
        print("Locations:")
        for location in engine.locations():
            print(f"  {location}")
        print("Property types:")
        for prop_type in engine.property_types():
            print(f"  {prop_type}")
        print("Statuses:")
        for status in engine.statuses():
            print(f"  {status}")
        return 0

    spec = QuerySpec(
        location=args.location,
        status_filter=args.status,
        property_type_filter=args.property_type,
        sort_field=args.sort,
        sort_order=args.order,
    )
    if not engine.subset(spec.location):
        logger.warning("No properties found for location %r", spec.location)

    report = ConsoleReport(currency_symbol=config.display.currency_symbol, max_rows=args.max_rows)
    records = engine.query(spec)
    distribution = engine.distribution(spec.location)
    if args.json:
        report.write_json(spec.location, records, distribution)
    else:
        report.write(spec.location, records, distribution)
    return 0


def main() -> None:
    """Main entry point."""
    try:
        config = PropertyRiskConfig.from_env()
    except PropertyRiskError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    parser = build_parser(config)
    args = parser.parse_args()
    if not args.list_locations and not args.location:
        parser.error("--location is required unless --list-locations is given")

    setup_logging(config.log_level, config.log_format)

    try:
        sys.exit(run(args, config))
    except PropertyRiskError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
