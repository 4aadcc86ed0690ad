"""
AI assistant use cases.

Thin orchestration over the TextGenerator port: render a prompt,
forward it, return the text. Provider failures propagate unchanged
and are reported once by the exception translator.
"""

import logging
from collections.abc import AsyncIterator
from typing import Optional

from cats_api.application.ai import prompts
from cats_api.domain.ai.ports import TextGenerator

logger = logging.getLogger(__name__)

DEFAULT_TARGET_LANGUAGE = "Chinese"
DEFAULT_CODE_LANGUAGE = "TypeScript"


class AiAssistant:
    """Chat, summarize, translate and explain code with one LLM."""

    def __init__(self, generator: TextGenerator) -> None:
        self._generator = generator

    async def chat(self, message: str) -> str:
        """Send the message to the model as-is."""
        logger.info("Processing chat message (%d chars)", len(message))
        return await self._generator.complete(message)

    async def chat_with_template(self, topic: str, context: Optional[str] = None) -> str:
        """Answer a question, framed by optional context."""
        logger.info("Processing templated chat")
        prompt = prompts.TEMPLATED_CHAT.format(
            topic=topic, context=context or prompts.NO_CONTEXT
        )
        return await self._generator.complete(prompt)

    async def summarize(self, text: str) -> str:
        logger.info("Summarizing text")
        return await self._generator.complete(prompts.SUMMARIZE.format(text=text))

    async def translate(
        self, text: str, target_language: str = DEFAULT_TARGET_LANGUAGE
    ) -> str:
        logger.info("Translating text to %s", target_language)
        prompt = prompts.TRANSLATE.format(text=text, target_language=target_language)
        return await self._generator.complete(prompt)

    async def explain_code(
        self, code: str, language: str = DEFAULT_CODE_LANGUAGE
    ) -> str:
        logger.info("Explaining %s code", language)
        prompt = prompts.EXPLAIN_CODE.format(code=code, language=language)
        return await self._generator.complete(prompt)

    async def chat_stream(self, message: str) -> AsyncIterator[str]:
        """Yield non-empty chunks of the model's reply."""
        logger.info("Starting stream chat")
        async for chunk in self._generator.stream(message):
            if chunk:
                yield chunk
