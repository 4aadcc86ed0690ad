"""
Pydantic schemas for the AI assistant endpoints.
"""

from typing import Optional

from pydantic import Field

from cats_api.application.ai.assistant import (
    DEFAULT_CODE_LANGUAGE,
    DEFAULT_TARGET_LANGUAGE,
)
from cats_api.interfaces.schemas import CamelModel

MAX_INPUT_LEN = 20_000


class ChatRequest(CamelModel):
    message: str = Field(..., min_length=1, max_length=MAX_INPUT_LEN)
    context: Optional[str] = Field(default=None, max_length=MAX_INPUT_LEN)


class SummarizeRequest(CamelModel):
    text: str = Field(..., min_length=1, max_length=MAX_INPUT_LEN)


class TranslateRequest(CamelModel):
    text: str = Field(..., min_length=1, max_length=MAX_INPUT_LEN)
    target_language: str = Field(default=DEFAULT_TARGET_LANGUAGE, min_length=1)


class ExplainCodeRequest(CamelModel):
    code: str = Field(..., min_length=1, max_length=MAX_INPUT_LEN)
    language: str = Field(default=DEFAULT_CODE_LANGUAGE, min_length=1)


class ChatResponse(CamelModel):
    response: str


class SummaryResponse(CamelModel):
    summary: str


class TranslationResponse(CamelModel):
    translation: str


class ExplanationResponse(CamelModel):
    explanation: str
