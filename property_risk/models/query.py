"""Query and summary value objects."""

from dataclasses import dataclass

from property_risk.exceptions import InvalidQuerySpecError
from property_risk.models.enums import RiskTier, SortField, SortOrder

ALL = "all"


@dataclass(frozen=True)
class QuerySpec:
    """Filters and sort directive applied to one location's records.

    ``status_filter`` and ``property_type_filter`` are either ``"all"`` or an
    exact value to match. Plain strings for ``sort_field``/``sort_order`` are
    coerced to their enums; unknown values raise ``InvalidQuerySpecError``.
    """

    location: str
    status_filter: str = ALL
    property_type_filter: str = ALL
    sort_field: SortField = SortField.PRICE
    sort_order: SortOrder = SortOrder.ASC

    def __post_init__(self) -> None:
        if not isinstance(self.location, str) or not self.location:
            raise InvalidQuerySpecError("location is required")
        for name in ("status_filter", "property_type_filter"):
            if not isinstance(getattr(self, name), str):
                raise InvalidQuerySpecError(f"{name} must be a string")
        # frozen: bypass __setattr__ to store the coerced enums
        object.__setattr__(self, "sort_field", SortField.parse(self.sort_field))
        object.__setattr__(self, "sort_order", SortOrder.parse(self.sort_order))


@dataclass(frozen=True)
class RiskDistribution:
    """Number of properties per risk tier."""

    low: int = 0
    moderate: int = 0
    high: int = 0

    @property
    def total(self) -> int:
        return self.low + self.moderate + self.high

    def counts(self) -> list[int]:
        """Counts in fixed Low, Moderate, High order."""
        return [self.low, self.moderate, self.high]

    def count(self, tier: RiskTier) -> int:
        return getattr(self, tier.value.lower())

    def as_dict(self) -> dict[str, int]:
        return {"low": self.low, "moderate": self.moderate, "high": self.high}
