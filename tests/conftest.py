"""Pytest configuration and fixtures."""

from collections.abc import Callable
from decimal import Decimal
from typing import Any

import pytest

from property_risk.models import Property


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def make_property() -> Callable[..., Property]:
    """Factory for properties with sensible defaults."""
    counter = iter(range(1, 10_000))

    def _make(**overrides: Any) -> Property:
        fields: dict[str, Any] = {
            "id": f"prop-{next(counter):03d}",
            "min_sell_price": Decimal("1000000"),
            "city_municipality": "Quezon City",
            "prop_group_type": "Residential",
            "status": "Unoccupied",
            "lot_area": 120.0,
            "floor_area": 80.0,
        }
        fields.update(overrides)
        if not isinstance(fields["min_sell_price"], Decimal):
            fields["min_sell_price"] = Decimal(str(fields["min_sell_price"]))
        return Property(**fields)

    return _make


@pytest.fixture
def catalog(make_property: Callable[..., Property]) -> list[Property]:
    """Small catalog spanning two locations and all risk tiers."""
    return [
        make_property(id="qc-1", min_sell_price=500000, status="Occupied", lot_area=200.0),
        make_property(id="qc-2", min_sell_price=1000000, status="Unoccupied", prop_group_type="Commercial"),
        make_property(id="qc-3", min_sell_price=6000000, status="Occupied", lot_area=None),
        make_property(id="cebu-1", min_sell_price=623205.54, city_municipality="Cebu City"),
        make_property(id="cebu-2", min_sell_price=3072416.50, city_municipality="Cebu City", prop_group_type="Industrial"),
    ]


@pytest.fixture
def sample_record() -> dict[str, Any]:
    """Catalog object as it appears in processed_data.json."""
    return {
        "id": "a1b2c3",
        "min_sell_price": 1250000.5,
        "lot_area": 150,
        "floor_area": 96.5,
        "required_gross": 125000.05,
        "prop_group_type": "Residential",
        "status": "Occupied",
        "city_municipality": "Bacoor City",
        "appr_date": "2024-03-15",
        "inspection_date": "2024-05-02T00:00:00",
        "appr_days_ago": 410,
        "inspection_days_ago": 362,
    }
