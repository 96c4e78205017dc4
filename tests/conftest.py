"""Shared test fixtures."""

import json
from dataclasses import dataclass, field

import pytest

from calorie_curve.config import Settings
from calorie_curve.containers import AppContainer
from calorie_curve.services.generator import TextGenerator
from calorie_curve.services.lookup import LookupService
from calorie_curve.services.suggestions import SuggestionService

BANANA = {
    "name": "Banana",
    "portion": "1 medium (118g)",
    "calories": 105,
    "protein": 1.3,
    "carbs": 27,
    "fat": 0.4,
    "fiber": 3.1,
    "sugar": 14.4,
    "sodium": 1,
    "iron": 0.3,
    "zinc": 0.2,
    "calcium": 6,
    "vitaminB12": 0,
    "vitaminD": 0,
    "vitaminA": 4,
    "omega3": 0.03,
    "vitaminC": 10.3,
    "magnesium": 32,
    "potassium": 422,
}


@dataclass
class FakeTextGenerator(TextGenerator):
    """Fake generator returning canned text and recording prompts."""

    text: str = field(default_factory=lambda: json.dumps([BANANA]))
    prompts: list[str] = field(default_factory=list)

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


@dataclass
class FailingTextGenerator(TextGenerator):
    """Fake generator that always raises."""

    error: Exception = field(default_factory=lambda: RuntimeError("model down"))

    async def generate(self, prompt: str) -> str:
        raise self.error


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", cors_origins="")


@pytest.fixture
def generator() -> FakeTextGenerator:
    return FakeTextGenerator()


@pytest.fixture
def container(settings: Settings, generator: FakeTextGenerator) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        lookup_service=LookupService(generator=generator, timeout_seconds=1.0),
        suggestion_service=SuggestionService(generator=generator, timeout_seconds=1.0),
        close_resources=close_resources,
    )
