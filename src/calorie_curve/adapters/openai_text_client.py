"""OpenAI Responses API client for text generation."""

from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from calorie_curve.services.generator import TextGenerator


@dataclass
class OpenAITextGenerator(TextGenerator):
    """Text generator backed by the OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    reasoning_effort: str | None = None
    store: bool = False
    http_client: httpx.AsyncClient | None = None

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        *,
        reasoning_effort: str | None = None,
        store: bool = False,
        timeout_seconds: float = 30.0,
    ) -> "OpenAITextGenerator":
        """Create a generator with a managed httpx session."""
        http_client = httpx.AsyncClient(timeout=timeout_seconds)
        return cls(
            client=AsyncOpenAI(api_key=api_key, http_client=http_client),
            model=model,
            reasoning_effort=reasoning_effort,
            store=store,
            http_client=http_client,
        )

    async def generate(self, prompt: str) -> str:
        """Send a single prompt and return the raw output text."""
        request_payload: dict[str, object] = {
            "model": self.model,
            "input": prompt,
            "store": self.store,
        }
        if self.reasoning_effort:
            request_payload["reasoning"] = {"effort": self.reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        return response.output_text or ""

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self.http_client is not None:
            await self.http_client.aclose()
