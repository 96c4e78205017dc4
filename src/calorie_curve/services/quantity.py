"""Parsing of amounts and units from queries and portion labels."""

import math
import re

from calorie_curve.domain.nutrition import ParsedQuantity

DEFAULT_ML_DENSITY = 1.0

_MASS_FACTORS = {
    "g": 1.0,
    "gm": 1.0,
    "gms": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "kgs": 1000.0,
}
_VOLUME_FACTORS = {
    "ml": 1.0,
    "mls": 1.0,
    "milliliter": 1.0,
    "milliliters": 1.0,
    "l": 1000.0,
    "ltr": 1000.0,
    "ltrs": 1000.0,
}

# Longest tokens first so "grams" is not cut short at "g". A unit glued to
# further letters ("2 large", "2 glasses") is not a unit.
_UNIT_ALTERNATION = "|".join(
    sorted({**_MASS_FACTORS, **_VOLUME_FACTORS}, key=len, reverse=True)
)
_QUANTITY_PATTERN = re.compile(
    rf"(\d+(?:\.\d+)?)\s*({_UNIT_ALTERNATION})(?![a-z])",
    re.IGNORECASE,
)
_PORTION_PATTERN = re.compile(r"\((\d+(?:\.\d+)?)\s*(g|ml)\)", re.IGNORECASE)


def parse_quantity(
    query: str | None, ml_density: float = DEFAULT_ML_DENSITY
) -> ParsedQuantity:
    """Split the first amount+unit out of a query.

    ``grams`` is the mass-equivalent of the amount, using ``ml_density``
    grams per millilitre for volume units. ``base_amount`` is the amount in
    grams or millilitres before any density is applied.
    """
    text = (query or "").strip()
    unmatched = ParsedQuantity(
        amount_value=None, unit_token=None, grams=None, remainder_text=text
    )
    match = _QUANTITY_PATTERN.search(text)
    if not match:
        return unmatched

    amount = float(match.group(1))
    unit_token = match.group(2)
    unit = unit_token.lower()
    if unit in _MASS_FACTORS:
        base_amount = amount * _MASS_FACTORS[unit]
        grams = base_amount
    else:
        base_amount = amount * _VOLUME_FACTORS[unit]
        grams = base_amount * ml_density
    if not math.isfinite(grams):
        return unmatched

    remainder = (text[: match.start()] + text[match.end() :]).strip()
    return ParsedQuantity(
        amount_value=amount,
        unit_token=unit_token,
        grams=grams,
        remainder_text=remainder,
        base_amount=base_amount,
    )


def extract_portion_grams(
    portion: str | None, ml_density: float = DEFAULT_ML_DENSITY
) -> float | None:
    """Return the parenthesized gram or mL amount of a portion label."""
    if not portion:
        return None
    match = _PORTION_PATTERN.search(portion)
    if not match:
        return None
    value = float(match.group(1))
    if match.group(2).lower() == "ml":
        return value * ml_density
    return value


def unit_label(unit_token: str | None) -> str:
    """Return the label used for rewritten portions: ``ml`` or ``g``."""
    if unit_token and "l" in unit_token.lower():
        return "ml"
    return "g"
