"""
Adapter: OpenAI-compatible text generation.

Talks to any OpenAI-compatible chat completions endpoint (OpenRouter by
default) through the official ``openai`` SDK.
"""

import logging
from collections.abc import AsyncIterator

from openai import AsyncOpenAI

from cats_api.domain.ai.ports import TextGenerator

logger = logging.getLogger(__name__)


class OpenAITextGenerator(TextGenerator):
    """Single-turn chat completions against one model."""

    def __init__(
        self,
        client: AsyncOpenAI,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 4000,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens

    def _messages(self, prompt: str) -> list[dict[str, str]]:
        return [{"role": "user", "content": prompt}]

    async def complete(self, prompt: str) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=self._messages(prompt),
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return response.choices[0].message.content or ""

    async def stream(self, prompt: str) -> AsyncIterator[str]:
        stream = await self._client.chat.completions.create(
            model=self._model,
            messages=self._messages(prompt),
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            stream=True,
        )
        async for chunk in stream:
            if not chunk.choices:
                continue
            content = chunk.choices[0].delta.content
            if content:
                yield content


def build_openai_client(
    api_key: str,
    base_url: str,
    referer: str,
    app_name: str,
    timeout: float = 60.0,
) -> AsyncOpenAI:
    """Create the async client with OpenRouter attribution headers."""
    logger.info("Initializing LLM client base_url=%s", base_url)
    return AsyncOpenAI(
        api_key=api_key,
        base_url=base_url,
        timeout=timeout,
        default_headers={"HTTP-Referer": referer, "X-Title": app_name},
    )
