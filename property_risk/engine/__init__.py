"""Classification-backed query engine for property records."""

from property_risk.engine.catalog import PropertyQueryEngine
from property_risk.engine.query import (
    filter_and_sort,
    list_locations,
    list_property_types,
    list_statuses,
    risk_distribution,
    select_location,
    sort_key,
)

__all__ = [
    "PropertyQueryEngine",
    "filter_and_sort",
    "list_locations",
    "list_property_types",
    "list_statuses",
    "risk_distribution",
    "select_location",
    "sort_key",
]
