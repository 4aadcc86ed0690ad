"""
FastAPI router for the AI assistant.

Every route is rate limited with the heavy limit because each call
costs an upstream LLM request. slowapi needs the raw ``Request`` in the
signature, so request bodies are named ``body`` here.
"""

import json
import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import StreamingResponse

from cats_api.application.ai.assistant import AiAssistant
from cats_api.interfaces.ai.dependencies import get_assistant
from cats_api.interfaces.ai.schemas import (
    MAX_INPUT_LEN,
    ChatRequest,
    ChatResponse,
    ExplainCodeRequest,
    ExplanationResponse,
    SummarizeRequest,
    SummaryResponse,
    TranslateRequest,
    TranslationResponse,
)
from cats_api.shared.routing import EnvelopeRoute
from cats_api.shared.security.rate_limiting import HEAVY_RATE_LIMIT, limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"], route_class=EnvelopeRoute)

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}

STREAM_ERROR_MESSAGE = "Stream interrupted"


@router.post("/chat", summary="Chat with the assistant")
@limiter.limit(HEAVY_RATE_LIMIT)
async def chat(
    request: Request,
    body: ChatRequest,
    assistant: AiAssistant = Depends(get_assistant),
) -> ChatResponse:
    return ChatResponse(response=await assistant.chat(body.message))


@router.post(
    "/chat/template",
    summary="Chat with context",
    description="Frame the question with optional context before asking.",
)
@limiter.limit(HEAVY_RATE_LIMIT)
async def chat_with_template(
    request: Request,
    body: ChatRequest,
    assistant: AiAssistant = Depends(get_assistant),
) -> ChatResponse:
    answer = await assistant.chat_with_template(body.message, body.context)
    return ChatResponse(response=answer)


@router.post("/summarize", summary="Summarize text")
@limiter.limit(HEAVY_RATE_LIMIT)
async def summarize(
    request: Request,
    body: SummarizeRequest,
    assistant: AiAssistant = Depends(get_assistant),
) -> SummaryResponse:
    return SummaryResponse(summary=await assistant.summarize(body.text))


@router.post("/translate", summary="Translate text")
@limiter.limit(HEAVY_RATE_LIMIT)
async def translate(
    request: Request,
    body: TranslateRequest,
    assistant: AiAssistant = Depends(get_assistant),
) -> TranslationResponse:
    translation = await assistant.translate(body.text, body.target_language)
    return TranslationResponse(translation=translation)


@router.post("/explain-code", summary="Explain a code snippet")
@limiter.limit(HEAVY_RATE_LIMIT)
async def explain_code(
    request: Request,
    body: ExplainCodeRequest,
    assistant: AiAssistant = Depends(get_assistant),
) -> ExplanationResponse:
    explanation = await assistant.explain_code(body.code, body.language)
    return ExplanationResponse(explanation=explanation)


async def _sse_events(chunks: AsyncIterator[str]) -> AsyncIterator[str]:
    """Format chunks as SSE ``data:`` events.

    Headers are already sent once streaming starts, so a provider failure
    is logged and reported as a final ``event: error`` frame.
    """
    try:
        async for chunk in chunks:
            yield f"data: {json.dumps({'content': chunk}, ensure_ascii=False)}\n\n"
    except Exception:
        logger.exception("LLM stream aborted")
        yield f"event: error\ndata: {json.dumps({'message': STREAM_ERROR_MESSAGE})}\n\n"


@router.get(
    "/chat/stream",
    summary="Stream a chat reply",
    description="Server-Sent Events; one event per chunk of the reply.",
)
@limiter.limit(HEAVY_RATE_LIMIT)
async def chat_stream(
    request: Request,
    message: str = Query(..., min_length=1, max_length=MAX_INPUT_LEN),
    assistant: AiAssistant = Depends(get_assistant),
) -> StreamingResponse:
    """SSE endpoint: streams the reply as text/event-stream."""
    return StreamingResponse(
        _sse_events(assistant.chat_stream(message)),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )
