"""Shape query results for tables and charts."""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from property_risk.models import Property, RiskDistribution, RiskTier
from property_risk.risk import classify

CHART_LABEL = "Number of Properties"

TIER_COLORS = {
    RiskTier.LOW: "#4CAF50",
    RiskTier.MODERATE: "#FFC107",
    RiskTier.HIGH: "#F44336",
}


def format_currency(value: Decimal | float | int, symbol: str = "₱") -> str:
    """Format an amount with thousands separators.

    Whole amounts are shown without decimals (``₱1,500,000``), others with
    two (``₱623,205.54``).
    """
    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if amount == amount.to_integral_value():
        return f"{symbol}{int(amount):,}"
    return f"{symbol}{amount:,.2f}"


def format_area(value: float | None) -> str:
    if value is None:
        return "-"
    if float(value).is_integer():
        return f"{int(value)} sqm"
    return f"{value} sqm"


def table_rows(records: Iterable[Property], currency_symbol: str = "₱") -> list[dict[str, Any]]:
    """One display row per record, in the order given."""
    return [
        {
            "id": record.id,
            "property_type": record.prop_group_type,
            "price": format_currency(record.min_sell_price, currency_symbol),
            "lot_area": format_area(record.lot_area),
            "floor_area": format_area(record.floor_area),
            "status": record.status,
            "risk_profile": classify(record.min_sell_price).label,
        }
        for record in records
    ]


def chart_payload(distribution: RiskDistribution) -> dict[str, Any]:
    """Bar chart input: three labels and counts in Low, Moderate, High order."""
    tiers = list(RiskTier)
    return {
        "label": CHART_LABEL,
        "labels": [tier.label for tier in tiers],
        "data": [distribution.count(tier) for tier in tiers],
        "colors": [TIER_COLORS[tier] for tier in tiers],
    }
