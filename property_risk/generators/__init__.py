"""Synthetic data generators."""

from property_risk.generators.property import PropertyGenerator

__all__ = ["PropertyGenerator"]
