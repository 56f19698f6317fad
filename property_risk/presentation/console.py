"""Console report for a location's risk analysis."""

import json
from typing import Any

from property_risk.models import Property, RiskDistribution
from property_risk.presentation.views import chart_payload, table_rows

COLUMNS = [
    ("property_type", "Property Type"),
    ("price", "Price"),
    ("lot_area", "Lot Area"),
    ("floor_area", "Floor Area"),
    ("status", "Status"),
    ("risk_profile", "Risk Profile"),
]


class ConsoleReport:
    """Print a location's risk histogram and property table to stdout."""

    def __init__(
        self,
        currency_symbol: str = "₱",
        max_rows: int | None = None,
        bar_width: int = 40,
    ) -> None:
        """Initialize console report.

        Parameters
        ----------
        currency_symbol : str
            Prefix for prices.
        max_rows : int | None
            Maximum table rows to print (None for all).
        bar_width : int
            Width of the longest histogram bar.
        """
        self.currency_symbol = currency_symbol
        self.max_rows = max_rows
        self.bar_width = bar_width

    def write(self, location: str, records: list[Property], distribution: RiskDistribution) -> None:
        """Print the full report."""
        print(f"\n{'='*60}")
        print(f"Property Analysis: {location}")
        print("=" * 60)
        self.write_distribution(distribution)
        self.write_table(records)

    def write_distribution(self, distribution: RiskDistribution) -> None:
        """Print the risk profile histogram."""
        payload = chart_payload(distribution)
        peak = max(payload["data"]) if any(payload["data"]) else 1
        label_width = max(len(label) for label in payload["labels"])

        print("\nRisk Profile Distribution")
        for label, count in zip(payload["labels"], payload["data"]):
            bar = "#" * round(self.bar_width * count / peak)
            print(f"  {label:<{label_width}} | {bar} {count}")

    def write_table(self, records: list[Property]) -> None:
        """Print the property table."""
        rows = table_rows(records, self.currency_symbol)
        display_rows = rows[: self.max_rows] if self.max_rows is not None else rows

        print(f"\nProperties ({len(rows)})")
        if not rows:
            print("  No properties match the current filters.")
            return

        widths = {
            key: max([len(title)] + [len(str(row[key])) for row in display_rows])
            for key, title in COLUMNS
        }
        print("  " + "  ".join(f"{title:<{widths[key]}}" for key, title in COLUMNS))
        print("  " + "  ".join("-" * widths[key] for key, _ in COLUMNS))
        for row in display_rows:
            print("  " + "  ".join(f"{str(row[key]):<{widths[key]}}" for key, _ in COLUMNS))

        if self.max_rows is not None and len(rows) > self.max_rows:
            print(f"  ... and {len(rows) - self.max_rows} more properties")

    def write_json(self, location: str, records: list[Property], distribution: RiskDistribution) -> None:
        """Print the report as a single JSON document."""
        data: dict[str, Any] = {
            "location": location,
            "distribution": distribution.as_dict(),
            "chart": chart_payload(distribution),
            "properties": table_rows(records, self.currency_symbol),
        }
        print(json.dumps(data, indent=2, ensure_ascii=False))
