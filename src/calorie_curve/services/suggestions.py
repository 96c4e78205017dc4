"""Meal improvement suggestions backed by a text generator."""

import json
from dataclasses import dataclass

from calorie_curve.domain.errors import SchemaError, ValidationError
from calorie_curve.services.extraction import extract_json_object
from calorie_curve.services.generator import TextGenerator, call_generator

MAX_SUGGESTIONS = 6
MAX_MEALS = 10

_SUGGESTION_PROMPT = """You are a nutrition assistant. Based on the user's logged food (meals if provided), their total intake and daily goals, provide an ordered list of up to {limit} concise, actionable suggestions to improve nutrient balance today.
Return ONLY valid JSON in this exact shape:
{{"suggestions": ["<tip>", "<tip>"]}}
Guidelines:
- Use short, specific, food-based actions (e.g., "Add 1 cup Greek yogurt for protein").
- Prioritize the largest deficiencies first; also warn if sugar/sodium are excessive.
- Consider realistic Indian foods when relevant.
Data:
{summary}"""  # noqa: E501


def build_suggestion_prompt(
    total_nutrients: object,
    daily_goals: object,
    meals: list[object] | None,
) -> str:
    """Return the suggestions prompt with the user's data embedded as JSON."""
    summary: dict[str, object] = {
        "totalNutrients": total_nutrients,
        "dailyGoals": daily_goals,
    }
    if meals is not None:
        summary["meals"] = meals[:MAX_MEALS]
    return _SUGGESTION_PROMPT.format(
        limit=MAX_SUGGESTIONS,
        summary=json.dumps(summary, ensure_ascii=False, default=str),
    )


@dataclass
class SuggestionService:
    """Produces prioritized suggestions from totals and goals."""

    generator: TextGenerator | None
    timeout_seconds: float | None = 30.0

    async def suggest(
        self,
        total_nutrients: object | None,
        daily_goals: object | None,
        meals: object | None = None,
    ) -> list[str]:
        """Return up to six non-blank suggestions in model order."""
        if _is_missing(total_nutrients) or _is_missing(daily_goals):
            raise ValidationError("Missing totalNutrients or dailyGoals")

        prompt = build_suggestion_prompt(
            total_nutrients,
            daily_goals,
            meals if isinstance(meals, list) else None,
        )
        text = await call_generator(
            self.generator,
            prompt,
            timeout_seconds=self.timeout_seconds,
            action="suggestions",
        )

        parsed = extract_json_object(text)
        if parsed is None or not isinstance(parsed.get("suggestions"), list):
            raise SchemaError("AI response missing suggestions array")

        suggestions = [str(entry) for entry in parsed["suggestions"]]
        return [entry for entry in suggestions if entry.strip()][:MAX_SUGGESTIONS]


def _is_missing(value: object) -> bool:
    """Return true for absent or scalar-falsy values; empty containers count."""
    if value is None or value is False:
        return True
    return isinstance(value, int | float | str) and not value
