"""Proportional rescaling of nutrient records to a requested amount."""

import math
from decimal import ROUND_HALF_UP, Decimal

from calorie_curve.domain.nutrition import NUTRIENT_FIELDS, NutrientRecord
from calorie_curve.services.quantity import (
    DEFAULT_ML_DENSITY,
    extract_portion_grams,
    unit_label,
)

REFERENCE_GRAMS = 100.0
_CENTS = Decimal("0.01")


def scale_record(
    record: NutrientRecord,
    desired_grams: float | None,
    display_amount: float | None,
    unit_token: str | None,
    ml_density: float = DEFAULT_ML_DENSITY,
) -> NutrientRecord:
    """Scale every nutrient field from the record's portion to ``desired_grams``.

    The reference amount comes from the portion label; labels without a
    parenthesized g/mL amount are treated as 100 g servings. Records pass
    through untouched when no desired amount is given.
    """
    if not desired_grams:
        return record

    reference = extract_portion_grams(record.portion, ml_density)
    if not reference or reference <= 0:
        reference = REFERENCE_GRAMS
    ratio = desired_grams / reference

    update: dict[str, object] = {
        field_name: round_amount(getattr(record, field_name) * ratio)
        for field_name in NUTRIENT_FIELDS
    }
    update["portion"] = (
        f"custom serving ({format_amount(display_amount)}{unit_label(unit_token)})"
    )
    return record.model_copy(update=update)


def round_amount(value: float) -> float:
    """Round to two decimals, halves away from zero; non-finite values become 0."""
    if not math.isfinite(value):
        return 0.0
    return float(Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def format_amount(value: float | None) -> str:
    """Format an amount without a trailing ``.0`` for whole numbers."""
    if value is None:
        return ""
    if float(value).is_integer():
        return str(int(value))
    return str(value)
