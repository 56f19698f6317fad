"""Pure query functions over property records.

Nothing here mutates its input: every function returns a new list or value
object, so callers can re-run them on each filter or sort change.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from property_risk.models import ALL, Property, QuerySpec, RiskDistribution, RiskTier, SortField, SortOrder
from property_risk.risk import classify


def select_location(records: Iterable[Property], location: str) -> list[Property]:
    """Return the records whose ``city_municipality`` equals ``location``.

    Matching is exact and case-sensitive. An unknown location yields an
    empty list.
    """
    return [record for record in records if record.city_municipality == location]


def risk_distribution(subset: Iterable[Property]) -> RiskDistribution:
    """Count records per risk tier."""
    counts = {tier: 0 for tier in RiskTier}
    for record in subset:
        counts[classify(record.min_sell_price)] += 1
    return RiskDistribution(
        low=counts[RiskTier.LOW],
        moderate=counts[RiskTier.MODERATE],
        high=counts[RiskTier.HIGH],
    )


def filter_and_sort(subset: Sequence[Property], spec: QuerySpec) -> list[Property]:
    """Apply the status and property type filters, then sort.

    The sort is stable in both directions: records with equal keys keep
    their input order. ``spec.location`` is not applied here; pass a subset
    from :func:`select_location`.

    Parameters
    ----------
    subset : Sequence[Property]
        Records of one location.
    spec : QuerySpec
        Filters and sort directive.

    Returns
    -------
    list[Property]
        New ordered list.
    """
    filtered = [
        record
        for record in subset
        if _matches(record.status, spec.status_filter)
        and _matches(record.prop_group_type, spec.property_type_filter)
    ]
    return sorted(
        filtered,
        key=sort_key(spec.sort_field),
        reverse=spec.sort_order == SortOrder.DESC,
    )


def sort_key(field: SortField):
    """Key function for ``sorted``.

    Text fields compare case-insensitively with a missing value read as
    ``""``; numeric fields compare numerically with a missing value read as
    ``0``. These are the only places missing values get a default.
    """
    attribute = field.attribute

    if field.is_text:

        def text_key(record: Property) -> str:
            return (getattr(record, attribute) or "").casefold()

        return text_key

    def numeric_key(record: Property) -> Any:
        value = getattr(record, attribute)
        return 0 if value is None else value

    return numeric_key


def list_locations(records: Iterable[Property]) -> list[str]:
    """Sorted unique locations."""
    return _unique_sorted(record.city_municipality for record in records)


def list_property_types(records: Iterable[Property]) -> list[str]:
    """Sorted unique property types."""
    return _unique_sorted(record.prop_group_type for record in records)


def list_statuses(records: Iterable[Property]) -> list[str]:
    """Sorted unique statuses."""
    return _unique_sorted(record.status for record in records)


def _matches(value: str, wanted: str) -> bool:
    return wanted == ALL or value == wanted


def _unique_sorted(values: Iterable[str]) -> list[str]:
    return sorted({value for value in values if value})
