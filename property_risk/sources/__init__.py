"""Data sources for loading the property catalog."""

from property_risk.sources.json_file import JsonFileSource, write_catalog
from property_risk.sources.serialization import property_from_dict, property_to_dict

__all__ = ["JsonFileSource", "property_from_dict", "property_to_dict", "write_catalog"]
