"""JSON file source for the property catalog."""

import json
from pathlib import Path
from typing import Any

from property_risk.exceptions import DataSourceError, RecordValidationError
from property_risk.logging import get_logger
from property_risk.models import Property
from property_risk.sources.serialization import property_from_dict, property_to_dict

logger = get_logger(__name__)


class JsonFileSource:
    """Read property records from a JSON array file.

    Records that fail validation are skipped and kept in ``rejected`` as
    ``(index, reason)`` pairs.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize JSON file source.

        Parameters
        ----------
        path : str | Path
            Catalog file, e.g. ``data/processed_data.json``.
        """
        self.path = Path(path)
        self.rejected: list[tuple[int, str]] = []

    def load(self) -> list[Property]:
        """Load and validate every record in the file.

        Raises
        ------
        DataSourceError
            If the file is missing, is not valid JSON, or its top level is
            not an array.
        """
        raw = self._read()
        if not isinstance(raw, list):
            raise DataSourceError(f"{self.path}: expected a JSON array, got {type(raw).__name__}")

        self.rejected = []
        records: list[Property] = []
        for index, item in enumerate(raw):
            try:
                records.append(property_from_dict(item))
            except RecordValidationError as exc:
                logger.warning(
                    "Skipping record %d in %s: %s",
                    index,
                    self.path,
                    exc,
                    extra={"context": {"index": index, "source": str(self.path)}},
                )
                self.rejected.append((index, str(exc)))

        logger.info(
            "Loaded %d properties from %s (%d rejected)",
            len(records),
            self.path,
            len(self.rejected),
        )
        return records

    def _read(self) -> Any:
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except FileNotFoundError as exc:
            raise DataSourceError(f"Property catalog not found: {self.path}") from exc
        except json.JSONDecodeError as exc:
            raise DataSourceError(f"{self.path}: invalid JSON ({exc})") from exc
        except OSError as exc:
            raise DataSourceError(f"Cannot read {self.path}: {exc}") from exc


def write_catalog(path: str | Path, records: list[Property], pretty: bool = False) -> Path:
    """Write records as a catalog JSON array."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    data = [property_to_dict(record) for record in records]

    with open(file_path, "w", encoding="utf-8") as f:
        if pretty:
            json.dump(data, f, indent=2, ensure_ascii=False)
        else:
            json.dump(data, f, ensure_ascii=False)

    logger.info("Wrote %d properties to %s", len(records), file_path)
    return file_path
