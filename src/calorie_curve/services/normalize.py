"""Coerce loosely typed generator records into ``NutrientRecord``."""

import math
from collections.abc import Iterable

from calorie_curve.domain.nutrition import (
    DEFAULT_PORTION,
    NUTRIENT_FIELDS,
    WIRE_KEYS,
    NutrientRecord,
)


def normalize_record(raw: dict[str, object], fallback_name: str) -> NutrientRecord:
    """Return a complete record, defaulting missing or invalid values."""
    name = raw.get("name")
    portion = raw.get("portion")
    values: dict[str, object] = {
        "name": str(name) if name else fallback_name,
        "portion": str(portion) if portion else DEFAULT_PORTION,
    }
    for field_name in NUTRIENT_FIELDS:
        values[field_name] = _to_amount(raw.get(WIRE_KEYS[field_name]))
    return NutrientRecord.model_validate(values)


def normalize_records(
    candidates: Iterable[object], fallback_name: str
) -> list[NutrientRecord]:
    """Normalize every object entry, dropping entries that are not objects."""
    return [
        normalize_record(candidate, fallback_name)
        for candidate in candidates
        if isinstance(candidate, dict)
    ]


def _to_amount(value: object) -> float:
    """Convert a raw value to a non-negative finite float, else 0."""
    if isinstance(value, bool) or value is None:
        return 0.0
    if isinstance(value, int | float):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount
