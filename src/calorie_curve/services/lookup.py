"""Food lookup backed by a text generator."""

import logging
from dataclasses import dataclass

from calorie_curve.domain.errors import UpstreamFormatError, ValidationError
from calorie_curve.domain.nutrition import NutrientRecord
from calorie_curve.services.extraction import extract_json_array
from calorie_curve.services.generator import TextGenerator, call_generator
from calorie_curve.services.normalize import normalize_records
from calorie_curve.services.quantity import DEFAULT_ML_DENSITY, parse_quantity
from calorie_curve.services.scaling import scale_record

_logger = logging.getLogger(__name__)

_LOOKUP_PROMPT = """You are a nutrition assistant. For the food: "{food}", return a concise JSON array of up to 3 plausible matches with complete nutrition per standard portion.
Return ONLY valid JSON, no markdown, no explanations.
Each item must have these fields:
- name (string)
- portion (string, include grams in parentheses like "1 serving (100g)")
- calories (number)
- protein (number, grams)
- carbs (number, grams)
- fat (number, grams)
- fiber (number, grams)
- sugar (number, grams)
- sodium (number, mg)
- iron (number, mg)
- zinc (number, mg)
- calcium (number, mg)
- vitaminB12 (number, µg)
- vitaminD (number, µg)
- vitaminA (number, µg)
- omega3 (number, grams)
- vitaminC (number, mg)
- magnesium (number, mg)
- potassium (number, mg)"""  # noqa: E501

_LOG_TEXT_LIMIT = 500


def build_lookup_prompt(food: str) -> str:
    """Return the lookup prompt for a food description."""
    return _LOOKUP_PROMPT.format(food=food)


@dataclass
class LookupService:
    """Turns free-text food queries into scaled nutrient records."""

    generator: TextGenerator | None
    timeout_seconds: float | None = 30.0
    ml_density: float = DEFAULT_ML_DENSITY

    async def lookup(self, query: str) -> list[NutrientRecord]:
        """Look up nutrition for a query such as ``"banana 150g"``."""
        query = (query or "").strip()
        if not query:
            raise ValidationError("Missing query parameter")

        quantity = parse_quantity(query, self.ml_density)
        prompt = build_lookup_prompt(quantity.remainder_text or query)
        text = await call_generator(
            self.generator,
            prompt,
            timeout_seconds=self.timeout_seconds,
            action="lookup",
        )

        candidates = extract_json_array(text)
        if candidates is None:
            _logger.error(
                "Invalid generator foods JSON (could not parse array): %s",
                text[:_LOG_TEXT_LIMIT],
            )
            raise UpstreamFormatError("Invalid AI response format")

        records = normalize_records(candidates, fallback_name=query)
        if quantity.grams:
            records = [
                scale_record(
                    record,
                    quantity.grams,
                    quantity.base_amount,
                    quantity.unit_token,
                    self.ml_density,
                )
                for record in records
            ]
        _logger.info(
            "Lookup: query=%s grams=%s results=%s", query, quantity.grams, len(records)
        )
        return records
