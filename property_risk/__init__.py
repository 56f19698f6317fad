"""Risk classification and query engine for real-estate property catalogs."""

from property_risk.engine import PropertyQueryEngine, filter_and_sort, risk_distribution, select_location
from property_risk.models import Property, QuerySpec, RiskDistribution, RiskTier, SortField, SortOrder
from property_risk.risk import classify

__version__ = "0.1.0"

__all__ = [
    "Property",
    "PropertyQueryEngine",
    "QuerySpec",
    "RiskDistribution",
    "RiskTier",
    "SortField",
    "SortOrder",
    "classify",
    "filter_and_sort",
    "risk_distribution",
    "select_location",
]
