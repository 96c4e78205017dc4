"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_curve.adapters.openai_text_client import OpenAITextGenerator
from calorie_curve.config import Settings
from calorie_curve.services.lookup import LookupService
from calorie_curve.services.suggestions import SuggestionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    lookup_service: LookupService
    suggestion_service: SuggestionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    generator: OpenAITextGenerator | None = None
    if resolved_settings.openai_api_key:
        generator = OpenAITextGenerator.create(
            resolved_settings.openai_api_key,
            resolved_settings.openai_model,
            reasoning_effort=resolved_settings.openai_reasoning_effort,
            store=resolved_settings.openai_store,
            timeout_seconds=resolved_settings.generator_timeout_seconds,
        )
    lookup_service = LookupService(
        generator=generator,
        timeout_seconds=resolved_settings.generator_timeout_seconds,
        ml_density=resolved_settings.ml_density_g_per_ml,
    )
    suggestion_service = SuggestionService(
        generator=generator,
        timeout_seconds=resolved_settings.generator_timeout_seconds,
    )

    async def close_resources() -> None:
        if generator is not None:
            await generator.close()

    return AppContainer(
        settings=resolved_settings,
        lookup_service=lookup_service,
        suggestion_service=suggestion_service,
        close_resources=close_resources,
    )
