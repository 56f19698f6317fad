"""In-memory property catalog with memoized queries."""

from collections.abc import Iterable
from functools import lru_cache

from property_risk.engine.query import (
    filter_and_sort,
    list_locations,
    list_property_types,
    list_statuses,
    risk_distribution,
    select_location,
)
from property_risk.logging import get_logger
from property_risk.models import Property, QuerySpec, RiskDistribution

logger = get_logger(__name__)


class PropertyQueryEngine:
    """Query engine bound to one immutable record set.

    Location subsets, distributions and query results are kept in
    least-recently-used caches of ``cache_size`` entries each. Results are
    handed out as fresh lists, so callers may modify what they receive.
    """

    def __init__(self, records: Iterable[Property], cache_size: int = 128) -> None:
        self._records: tuple[Property, ...] = tuple(records)
        # Per-instance caches, released with the engine
        self._subset = lru_cache(maxsize=cache_size)(self._select)
        self._distribution = lru_cache(maxsize=cache_size)(self._count_tiers)
        self._query = lru_cache(maxsize=cache_size)(self._run_query)

    @property
    def records(self) -> tuple[Property, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def locations(self) -> list[str]:
        """Locations available for selection, sorted."""
        return list_locations(self._records)

    def property_types(self) -> list[str]:
        """Property types across the whole catalog, sorted."""
        return list_property_types(self._records)

    def statuses(self) -> list[str]:
        """Statuses across the whole catalog, sorted."""
        return list_statuses(self._records)

    def subset(self, location: str) -> list[Property]:
        """Records of one location in catalog order."""
        return list(self._subset(location))

    def distribution(self, location: str) -> RiskDistribution:
        """Risk tier counts for one location."""
        return self._distribution(location)

    def query(self, spec: QuerySpec) -> list[Property]:
        """Filtered and sorted records of ``spec.location``."""
        return list(self._query(spec))

    def cache_info(self) -> dict[str, tuple]:
        """Hit/miss statistics of the subset, distribution and query caches."""
        return {
            "subsets": self._subset.cache_info(),
            "distributions": self._distribution.cache_info(),
            "queries": self._query.cache_info(),
        }

    def _select(self, location: str) -> tuple[Property, ...]:
        subset = tuple(select_location(self._records, location))
        if not subset:
            logger.debug("No properties for location %r", location)
        return subset

    def _count_tiers(self, location: str) -> RiskDistribution:
        return risk_distribution(self._subset(location))

    def _run_query(self, spec: QuerySpec) -> tuple[Property, ...]:
        logger.debug("Query cache miss: %s", spec)
        return tuple(filter_and_sort(self._subset(spec.location), spec))
