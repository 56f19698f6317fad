"""Tests for price-based risk classification."""

from decimal import Decimal

import pytest

from property_risk.exceptions import InvalidPriceError, PreconditionViolationError
from property_risk.models import RiskTier
from property_risk.risk import HIGH_MAX, LOW_MAX, MODERATE_MAX, classify, to_price


class TestThresholds:
    """Tests for the published thresholds."""

    def test_values(self) -> None:
        assert LOW_MAX == Decimal("623205.54")
        assert MODERATE_MAX == Decimal("3072416.49")
        assert HIGH_MAX == Decimal("5058425.08")

    def test_ordered(self) -> None:
        assert LOW_MAX < MODERATE_MAX < HIGH_MAX


class TestClassify:
    """Tests for classify."""

    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            (0, RiskTier.LOW),
            (500000, RiskTier.LOW),
            (623205.54, RiskTier.LOW),
            (Decimal("623205.54"), RiskTier.LOW),
            (623205.55, RiskTier.MODERATE),
            (1000000, RiskTier.MODERATE),
            (3072416.49, RiskTier.MODERATE),
            (3072416.50, RiskTier.HIGH),
            (6000000, RiskTier.HIGH),
        ],
    )
    def test_tiers(self, price: Decimal | float | int, expected: RiskTier) -> None:
        assert classify(price) == expected

    def test_high_tier_is_unbounded(self) -> None:
        """Prices above HIGH_MAX are still HIGH, there is no fourth tier."""
        assert classify(HIGH_MAX + 1) == RiskTier.HIGH
        assert classify(Decimal("1e12")) == RiskTier.HIGH

    def test_boundaries_partition_without_gap(self) -> None:
        step = Decimal("0.01")
        assert classify(LOW_MAX) == RiskTier.LOW
        assert classify(LOW_MAX + step) == RiskTier.MODERATE
        assert classify(MODERATE_MAX) == RiskTier.MODERATE
        assert classify(MODERATE_MAX + step) == RiskTier.HIGH

    @pytest.mark.parametrize(
        "price",
        [-1, -0.01, Decimal("-5"), float("nan"), float("inf"), float("-inf"), Decimal("NaN")],
    )
    def test_rejects_invalid_prices(self, price: Decimal | float | int) -> None:
        with pytest.raises(InvalidPriceError):
            classify(price)

    @pytest.mark.parametrize("price", ["1000", None, True, [1]])
    def test_rejects_non_numbers(self, price: object) -> None:
        with pytest.raises(PreconditionViolationError):
            classify(price)  # type: ignore[arg-type]


class TestToPrice:
    """Tests for to_price."""

    def test_float_uses_shortest_repr(self) -> None:
        assert to_price(623205.54) == Decimal("623205.54")

    def test_decimal_passthrough(self) -> None:
        value = Decimal("10.5")
        assert to_price(value) is value

    def test_int(self) -> None:
        assert to_price(42) == Decimal(42)
