"""
Dependency injection for the AI bounded context.

One LLM client is shared by the whole process.
"""

from functools import lru_cache

from fastapi import Depends

from cats_api.application.ai.assistant import AiAssistant
from cats_api.core.config import settings
from cats_api.domain.ai.ports import TextGenerator
from cats_api.infrastructure.ai.openai_generator import (
    OpenAITextGenerator,
    build_openai_client,
)


@lru_cache(maxsize=1)
def get_text_generator() -> TextGenerator:
    client = build_openai_client(
        api_key=settings.openrouter_api_key,
        base_url=settings.ai_base_url,
        referer=settings.openrouter_referer,
        app_name=settings.openrouter_app_name,
        timeout=settings.ai_timeout_seconds,
    )
    return OpenAITextGenerator(
        client=client,
        model=settings.openrouter_model,
        temperature=settings.ai_temperature,
        max_tokens=settings.ai_max_tokens,
    )


def get_assistant(
    generator: TextGenerator = Depends(get_text_generator),
) -> AiAssistant:
    return AiAssistant(generator)
