#!/usr/bin/env python3
"""Generate a sample property catalog.

Writes a JSON array of synthetic properties in the same snake_case format
as ``data/processed_data.json`` so the analysis script can be tried without
the real catalog.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from property_risk.config import PropertyRiskConfig
from property_risk.engine import list_locations, risk_distribution
from property_risk.exceptions import PropertyRiskError
from property_risk.generators import PropertyGenerator
from property_risk.logging import get_logger, setup_logging
from property_risk.sources import write_catalog

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    try:
        config = PropertyRiskConfig.from_env()
    except PropertyRiskError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    parser = argparse.ArgumentParser(description="Generate a sample property catalog")
    parser.add_argument(
        "--count",
        type=int,
        default=200,
        help="Number of properties to generate (default: 200)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.seed if config.seed is not None else 42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=config.source.path,
        help=f"Output file (default: {config.source.path})",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty-print JSON output",
    )
    args = parser.parse_args()

    setup_logging(config.log_level, config.log_format)

    generator = PropertyGenerator(seed=args.seed)
    properties = list(generator.generate_batch(args.count))

    try:
        path = write_catalog(args.output, properties, pretty=args.pretty)
    except (OSError, PropertyRiskError) as e:
        logger.error("Could not write catalog: %s", e)
        sys.exit(1)

    distribution = risk_distribution(properties)
    print("=" * 60)
    print(f"Saved {len(properties)} properties to {path}")
    print(f"  Locations: {', '.join(list_locations(properties))}")
    print(
        f"  Risk tiers: low={distribution.low} "
        f"moderate={distribution.moderate} high={distribution.high}"
    )
    print("=" * 60)


if __name__ == "__main__":
    main()
