"""Tests for domain models."""

import dataclasses
from decimal import Decimal

import pytest

from property_risk.exceptions import InvalidQuerySpecError
from property_risk.models import ALL, Property, QuerySpec, RiskDistribution, RiskTier, SortField, SortOrder


class TestProperty:
    """Tests for Property model."""

    def test_defaults(self) -> None:
        prop = Property(id="p-1", min_sell_price=Decimal("100"), city_municipality="Cebu City")

        assert prop.prop_group_type == ""
        assert prop.status == ""
        assert prop.lot_area is None
        assert prop.floor_area is None
        assert prop.required_gross is None
        assert prop.appr_date is None
        assert prop.inspection_days_ago is None

    def test_is_immutable(self) -> None:
        prop = Property(id="p-1", min_sell_price=Decimal("100"), city_municipality="Cebu City")
        with pytest.raises(dataclasses.FrozenInstanceError):
            prop.status = "Occupied"  # type: ignore[misc]


class TestRiskTier:
    """Tests for RiskTier."""

    def test_labels(self) -> None:
        assert [tier.label for tier in RiskTier] == ["Low Risk", "Moderate Risk", "High Risk"]

    def test_order(self) -> None:
        assert list(RiskTier) == [RiskTier.LOW, RiskTier.MODERATE, RiskTier.HIGH]


class TestSortField:
    """Tests for SortField parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("price", SortField.PRICE),
            ("min_sell_price", SortField.PRICE),
            ("lot-area", SortField.LOT_AREA),
            ("FLOOR_AREA", SortField.FLOOR_AREA),
            ("required_gross", SortField.REQUIRED_GROSS),
            ("property_type", SortField.PROPERTY_TYPE),
            ("prop_group_type", SortField.PROPERTY_TYPE),
            ("status", SortField.STATUS),
            ("lotArea", SortField.LOT_AREA),
            ("floorArea", SortField.FLOOR_AREA),
            ("propertyType", SortField.PROPERTY_TYPE),
            ("minSellPrice", SortField.PRICE),
            ("requiredGross", SortField.REQUIRED_GROSS),
        ],
    )
    def test_parse(self, raw: str, expected: SortField) -> None:
        assert SortField.parse(raw) == expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidQuerySpecError, match="Unknown sort field"):
            SortField.parse("bedrooms")

    def test_attribute(self) -> None:
        assert SortField.PRICE.attribute == "min_sell_price"
        assert SortField.PROPERTY_TYPE.attribute == "prop_group_type"

    def test_is_text(self) -> None:
        assert SortField.STATUS.is_text
        assert SortField.PROPERTY_TYPE.is_text
        assert not SortField.PRICE.is_text


class TestSortOrder:
    """Tests for SortOrder parsing."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("asc", SortOrder.ASC), ("Descending", SortOrder.DESC), (SortOrder.DESC, SortOrder.DESC)],
    )
    def test_parse(self, raw: str, expected: SortOrder) -> None:
        assert SortOrder.parse(raw) == expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(InvalidQuerySpecError, match="Unknown sort order"):
            SortOrder.parse("sideways")


class TestQuerySpec:
    """Tests for QuerySpec."""

    def test_defaults(self) -> None:
        spec = QuerySpec(location="Cebu City")

        assert spec.status_filter == ALL
        assert spec.property_type_filter == ALL
        assert spec.sort_field == SortField.PRICE
        assert spec.sort_order == SortOrder.ASC

    def test_coerces_strings(self) -> None:
        spec = QuerySpec(location="Cebu City", sort_field="lot_area", sort_order="desc")  # type: ignore[arg-type]

        assert spec.sort_field is SortField.LOT_AREA
        assert spec.sort_order is SortOrder.DESC

    def test_equal_specs_hash_equal(self) -> None:
        a = QuerySpec(location="Cebu City", sort_field="price")  # type: ignore[arg-type]
        b = QuerySpec(location="Cebu City", sort_field=SortField.PRICE)

        assert a == b
        assert hash(a) == hash(b)

    def test_rejects_unknown_sort_field(self) -> None:
        with pytest.raises(InvalidQuerySpecError):
            QuerySpec(location="Cebu City", sort_field="bedrooms")  # type: ignore[arg-type]

    def test_accepts_camel_case_sort_field(self) -> None:
        spec = QuerySpec(location="Cebu City", sort_field="propertyType")  # type: ignore[arg-type]

        assert spec.sort_field is SortField.PROPERTY_TYPE

    def test_rejects_unknown_sort_order(self) -> None:
        with pytest.raises(InvalidQuerySpecError):
            QuerySpec(location="Cebu City", sort_order="up")  # type: ignore[arg-type]

    @pytest.mark.parametrize("location", ["", None])
    def test_requires_location(self, location: object) -> None:
        with pytest.raises(InvalidQuerySpecError, match="location"):
            QuerySpec(location=location)  # type: ignore[arg-type]

    def test_rejects_non_string_filter(self) -> None:
        with pytest.raises(InvalidQuerySpecError, match="status_filter"):
            QuerySpec(location="Cebu City", status_filter=None)  # type: ignore[arg-type]


class TestRiskDistribution:
    """Tests for RiskDistribution."""

    def test_total_and_counts(self) -> None:
        dist = RiskDistribution(low=3, moderate=2, high=1)

        assert dist.total == 6
        assert dist.counts() == [3, 2, 1]
        assert dist.count(RiskTier.MODERATE) == 2
        assert dist.as_dict() == {"low": 3, "moderate": 2, "high": 1}

    def test_empty(self) -> None:
        assert RiskDistribution().total == 0
