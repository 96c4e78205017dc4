"""Text generator interface and guarded invocation."""

import asyncio
import logging
from typing import Protocol

from calorie_curve.domain.errors import GeneratorError, GeneratorNotConfiguredError

_logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Interface for a generative text model."""

    async def generate(self, prompt: str) -> str:
        """Return the raw model text for a prompt."""


async def call_generator(
    generator: TextGenerator | None,
    prompt: str,
    *,
    timeout_seconds: float | None,
    action: str,
) -> str:
    """Invoke the generator once, mapping every failure to ``GeneratorError``."""
    if generator is None:
        raise GeneratorNotConfiguredError("OPENAI_API_KEY not configured on server")
    try:
        text = await asyncio.wait_for(generator.generate(prompt), timeout_seconds)
    except TimeoutError as exc:
        _logger.exception("Generator %s timed out after %ss", action, timeout_seconds)
        raise GeneratorError(f"Generator {action} request timed out") from exc
    except Exception as exc:
        _logger.exception("Generator %s request failed", action)
        raise GeneratorError(f"Generator {action} request failed") from exc
    return text or ""
