"""Price-based risk classification."""

from decimal import Decimal, InvalidOperation

from property_risk.exceptions import InvalidPriceError
from property_risk.models.enums import RiskTier

# Upper bounds in currency units, inclusive on the lower tiers
LOW_MAX = Decimal("623205.54")
MODERATE_MAX = Decimal("3072416.49")
# Published cutoff of the high band. Not used as a bound: HIGH is open-ended.
HIGH_MAX = Decimal("5058425.08")


def classify(min_sell_price: Decimal | float | int) -> RiskTier:
    """Map a minimum selling price to its risk tier.

    Parameters
    ----------
    min_sell_price : Decimal | float | int
        Non-negative, finite price. Floats are compared through their
        shortest decimal representation so ``623205.54`` lands on the
        boundary exactly.

    Returns
    -------
    RiskTier
        ``LOW`` up to ``LOW_MAX``, ``MODERATE`` up to ``MODERATE_MAX``,
        ``HIGH`` above.

    Raises
    ------
    InvalidPriceError
        If the price is negative, NaN, infinite or not a number.
    """
    price = to_price(min_sell_price)
    if price <= LOW_MAX:
        return RiskTier.LOW
    if price <= MODERATE_MAX:
        return RiskTier.MODERATE
    return RiskTier.HIGH


def to_price(value: Decimal | float | int) -> Decimal:
    """Validate a price and return it as a Decimal."""
    if isinstance(value, bool) or not isinstance(value, (Decimal, float, int)):
        raise InvalidPriceError(f"Price must be a number, got {value!r}")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise InvalidPriceError(f"Price must be a number, got {value!r}") from exc
    if not price.is_finite():
        raise InvalidPriceError(f"Price must be finite, got {value!r}")
    if price < 0:
        raise InvalidPriceError(f"Price must be non-negative, got {value!r}")
    return price
