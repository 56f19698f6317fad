"""Conversion between catalog JSON objects and Property records."""

import math
from collections.abc import Mapping
from dataclasses import fields
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from property_risk.exceptions import RecordValidationError
from property_risk.logging import get_logger
from property_risk.models import Property

logger = get_logger(__name__)


def property_from_dict(data: Any) -> Property:
    """Build a Property from a snake_case catalog object.

    Parameters
    ----------
    data : Any
        Decoded JSON object.

    Returns
    -------
    Property
        Validated record.

    Raises
    ------
    RecordValidationError
        If ``id`` or ``min_sell_price`` is missing, or a present value has
        the wrong type or is negative.
    """
    if not isinstance(data, Mapping):
        raise RecordValidationError(f"Expected an object, got {type(data).__name__}")

    record_id = data.get("id")
    if isinstance(record_id, bool) or not isinstance(record_id, (str, int)) or record_id == "":
        raise RecordValidationError(f"Missing or invalid id: {record_id!r}")
    record_id = str(record_id)

    price = _decimal(data, "min_sell_price", record_id)
    if price is None:
        raise RecordValidationError(f"Property {record_id}: min_sell_price is required")

    return Property(
        id=record_id,
        min_sell_price=price,
        city_municipality=_text(data, "city_municipality", record_id),
        prop_group_type=_text(data, "prop_group_type", record_id),
        status=_text(data, "status", record_id),
        lot_area=_float(data, "lot_area", record_id),
        floor_area=_float(data, "floor_area", record_id),
        required_gross=_decimal(data, "required_gross", record_id),
        appr_date=_date(data, "appr_date", record_id),
        inspection_date=_date(data, "inspection_date", record_id),
        appr_days_ago=_int(data, "appr_days_ago", record_id),
        inspection_days_ago=_int(data, "inspection_days_ago", record_id),
    )


def property_to_dict(prop: Property) -> dict:
    """Convert a Property to its catalog JSON object."""
    return {f.name: serialize_value(getattr(prop, f.name)) for f in fields(prop)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def _decimal(data: Mapping, key: str, record_id: str) -> Decimal | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str, Decimal)):
        raise RecordValidationError(f"Property {record_id}: {key} must be numeric, got {value!r}")
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise RecordValidationError(f"Property {record_id}: {key} must be numeric, got {value!r}") from exc
    if not number.is_finite() or number < 0:
        raise RecordValidationError(f"Property {record_id}: {key} must be finite and non-negative, got {value!r}")
    return number


def _float(data: Mapping, key: str, record_id: str) -> float | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise RecordValidationError(f"Property {record_id}: {key} must be numeric, got {value!r}")
    try:
        number = float(value)
    except ValueError as exc:
        raise RecordValidationError(f"Property {record_id}: {key} must be numeric, got {value!r}") from exc
    if not math.isfinite(number) or number < 0:
        raise RecordValidationError(f"Property {record_id}: {key} must be finite and non-negative, got {value!r}")
    return number


def _int(data: Mapping, key: str, record_id: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        _drop_field(record_id, key, value, "a non-negative integer")
        return None
    return value


def _text(data: Mapping, key: str, record_id: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise RecordValidationError(f"Property {record_id}: {key} must be text, got {value!r}")
    return value


def _date(data: Mapping, key: str, record_id: str) -> date | None:
    value = data.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        _drop_field(record_id, key, value, "an ISO date")
        return None
    try:
        # Accept full timestamps; only the calendar date is kept
        return date.fromisoformat(value[:10])
    except ValueError:
        _drop_field(record_id, key, value, "an ISO date")
        return None


def _drop_field(record_id: str, key: str, value: Any, expected: str) -> None:
    # Informational fields only: the record is kept with the field unset
    logger.warning(
        "Property %s: ignoring %s=%r, expected %s",
        record_id,
        key,
        value,
        expected,
        extra={"context": {"record_id": record_id, "field": key}},
    )
