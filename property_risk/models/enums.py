"""Enumeration types for property-risk entities."""

import re
from enum import Enum

from property_risk.exceptions import InvalidQuerySpecError


class RiskTier(str, Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Moderate Risk"``."""
        return f"{self.value.capitalize()} Risk"


class SortField(str, Enum):
    PRICE = "price"
    LOT_AREA = "lot_area"
    FLOOR_AREA = "floor_area"
    REQUIRED_GROSS = "required_gross"
    PROPERTY_TYPE = "property_type"
    STATUS = "status"

    @property
    def attribute(self) -> str:
        """Name of the Property attribute this field sorts on."""
        return _SORT_ATTRIBUTES[self]

    @property
    def is_text(self) -> bool:
        return self in (SortField.PROPERTY_TYPE, SortField.STATUS)

    @classmethod
    def parse(cls, value: "str | SortField") -> "SortField":
        """Resolve a sort field from its name or its wire attribute name.

        Raises
        ------
        InvalidQuerySpecError
            If the value names no known field.
        """
        if isinstance(value, cls):
            return value
        # lotArea, lot-area and lot_area all name the same field
        key = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", str(value).strip()).lower().replace("-", "_")
        for member in cls:
            if key in (member.value, member.attribute):
                return member
        raise InvalidQuerySpecError(f"Unknown sort field: {value!r}")


_SORT_ATTRIBUTES = {
    SortField.PRICE: "min_sell_price",
    SortField.LOT_AREA: "lot_area",
    SortField.FLOOR_AREA: "floor_area",
    SortField.REQUIRED_GROSS: "required_gross",
    SortField.PROPERTY_TYPE: "prop_group_type",
    SortField.STATUS: "status",
}


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: "str | SortOrder") -> "SortOrder":
        """Resolve ``asc``/``desc`` (also ``ascending``/``descending``)."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        if key in ("asc", "ascending"):
            return cls.ASC
        if key in ("desc", "descending"):
            return cls.DESC
        raise InvalidQuerySpecError(f"Unknown sort order: {value!r}")
