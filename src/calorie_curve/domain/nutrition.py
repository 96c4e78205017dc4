"""Nutrition domain models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PORTION = "1 serving (100g)"


class NutrientRecord(BaseModel):
    """Nutrition facts for a food at a given portion.

    Units are fixed per field: calories in kcal; protein, carbs, fat, fiber,
    sugar and omega3 in grams; sodium, iron, zinc, calcium, vitamin C,
    magnesium and potassium in mg; vitamins B12, D and A in µg.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    portion: str = DEFAULT_PORTION
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    sugar: float = 0.0
    sodium: float = 0.0
    iron: float = 0.0
    zinc: float = 0.0
    calcium: float = 0.0
    vitamin_b12: float = Field(default=0.0, alias="vitaminB12")
    vitamin_d: float = Field(default=0.0, alias="vitaminD")
    vitamin_a: float = Field(default=0.0, alias="vitaminA")
    omega3: float = 0.0
    vitamin_c: float = Field(default=0.0, alias="vitaminC")
    magnesium: float = 0.0
    potassium: float = 0.0


NUTRIENT_FIELDS: tuple[str, ...] = tuple(
    name for name in NutrientRecord.model_fields if name not in {"name", "portion"}
)

# Attribute name -> key used in generator output and API payloads.
WIRE_KEYS: dict[str, str] = {
    name: field.alias or name for name, field in NutrientRecord.model_fields.items()
}


@dataclass(frozen=True)
class ParsedQuantity:
    """Amount and unit found in a free-text query."""

    amount_value: float | None
    unit_token: str | None
    grams: float | None
    remainder_text: str
    base_amount: float | None = None
