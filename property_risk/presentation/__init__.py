"""Presentation adapters for query results."""

from property_risk.presentation.console import ConsoleReport
from property_risk.presentation.views import chart_payload, format_area, format_currency, table_rows

__all__ = ["ConsoleReport", "chart_payload", "format_area", "format_currency", "table_rows"]
