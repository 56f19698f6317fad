"""Configuration management for property-risk."""

from dataclasses import dataclass, field
from pathlib import Path

from property_risk.exceptions import ConfigurationError, InvalidQuerySpecError
from property_risk.models.enums import SortField, SortOrder


@dataclass
class DataSourceConfig:
    """Location of the property catalog."""

    path: Path = field(default_factory=lambda: Path("data") / "processed_data.json")


@dataclass
class DisplayConfig:
    """Presentation settings for reports."""

    currency_symbol: str = "₱"
    max_rows: int | None = None


@dataclass
class QueryDefaults:
    """Sort applied when the caller does not pick one."""

    sort_field: SortField = SortField.PRICE
    sort_order: SortOrder = SortOrder.ASC


@dataclass
class PropertyRiskConfig:
    """Main configuration for property-risk."""

    source: DataSourceConfig = field(default_factory=DataSourceConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    query: QueryDefaults = field(default_factory=QueryDefaults)
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "PropertyRiskConfig":
        """Create config from environment variables."""
        import os

        source = DataSourceConfig(
            path=Path(os.getenv("PROPERTY_DATA_PATH", str(Path("data") / "processed_data.json"))),
        )

        display = DisplayConfig(
            currency_symbol=os.getenv("CURRENCY_SYMBOL", "₱"),
            max_rows=_int_or_none("MAX_ROWS", os.getenv("MAX_ROWS")),
        )

        try:
            query = QueryDefaults(
                sort_field=SortField.parse(os.getenv("DEFAULT_SORT_FIELD", "price")),
                sort_order=SortOrder.parse(os.getenv("DEFAULT_SORT_ORDER", "asc")),
            )
        except InvalidQuerySpecError as exc:
            raise ConfigurationError(str(exc)) from exc

        log_format = os.getenv("LOG_FORMAT", "standard")
        if log_format not in ("standard", "json"):
            raise ConfigurationError(f"LOG_FORMAT must be 'standard' or 'json', got {log_format!r}")

        return cls(
            source=source,
            display=display,
            query=query,
            seed=_int_or_none("SEED", os.getenv("SEED")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _int_or_none(name: str, raw: str | None) -> int | None:
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
