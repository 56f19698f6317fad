"""Domain models for property risk analysis."""

from property_risk.models.enums import RiskTier, SortField, SortOrder
from property_risk.models.property import Property
from property_risk.models.query import ALL, QuerySpec, RiskDistribution

__all__ = [
    "ALL",
    "Property",
    "QuerySpec",
    "RiskDistribution",
    "RiskTier",
    "SortField",
    "SortOrder",
]
