"""Pydantic models for API payloads."""

from pydantic import BaseModel, ConfigDict, Field

from calorie_curve.domain.nutrition import NutrientRecord


class SuggestionRequest(BaseModel):
    """Request body for meal suggestions."""

    model_config = ConfigDict(populate_by_name=True)

    total_nutrients: object | None = Field(default=None, alias="totalNutrients")
    daily_goals: object | None = Field(default=None, alias="dailyGoals")
    meals: object | None = None


class SuggestionResponse(BaseModel):
    """Ordered suggestions for the user."""

    suggestions: list[str]


class FoodsResponse(BaseModel):
    """Nutrient records matching a food query."""

    results: list[NutrientRecord]
