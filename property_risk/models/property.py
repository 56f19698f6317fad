"""Property record as published in the catalog."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Property:
    """Real estate property offered for sale.

    Records are read-only once loaded; views are derived, never written back.
    Optional numeric fields stay ``None`` when the catalog omits them.
    """

    id: str
    min_sell_price: Decimal
    city_municipality: str
    prop_group_type: str = ""
    status: str = ""
    lot_area: float | None = None  # Square meters
    floor_area: float | None = None  # Square meters
    required_gross: Decimal | None = None
    appr_date: date | None = None
    inspection_date: date | None = None
    appr_days_ago: int | None = None
    inspection_days_ago: int | None = None
