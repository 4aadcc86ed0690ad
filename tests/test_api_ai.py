"""
Tests for the AI assistant endpoints and use cases.

The LLM is replaced by a generator that echoes prompts.
"""

import json

import pytest
from fastapi.testclient import TestClient

from cats_api.application.ai.assistant import AiAssistant
from cats_api.interfaces.ai.router import STREAM_ERROR_MESSAGE

from tests.conftest import FakeTextGenerator

AI_URL = "/api/v1/ai"


class TestAiEndpoints:
    """Tests for the JSON endpoints under /api/v1/ai."""

    def test_chat(self, client: TestClient, text_generator) -> None:
        body = client.post(f"{AI_URL}/chat", json={"message": "hi"}).json()
        assert body == {"data": {"response": "echo: hi"}, "code": 200, "message": "success"}
        assert text_generator.prompts == ["hi"]

    def test_chat_template_includes_context(self, client: TestClient, text_generator) -> None:
        payload = {"message": "What do cats eat?", "context": "Vet clinic"}
        client.post(f"{AI_URL}/chat/template", json=payload)
        prompt = text_generator.prompts[0]
        assert "Vet clinic" in prompt
        assert "User's question: What do cats eat?" in prompt

    def test_chat_template_without_context(self, client: TestClient, text_generator) -> None:
        client.post(f"{AI_URL}/chat/template", json={"message": "Hello"})
        assert "No additional context provided." in text_generator.prompts[0]

    def test_summarize(self, client: TestClient, text_generator) -> None:
        data = client.post(f"{AI_URL}/summarize", json={"text": "Long text"}).json()["data"]
        assert data["summary"].startswith("echo: Please summarize")

    def test_translate_defaults_to_chinese(self, client: TestClient, text_generator) -> None:
        data = client.post(f"{AI_URL}/translate", json={"text": "cat"}).json()["data"]
        assert "translation" in data
        assert "Translate the following text to Chinese" in text_generator.prompts[0]

    def test_translate_target_language(self, client: TestClient, text_generator) -> None:
        client.post(f"{AI_URL}/translate", json={"text": "cat", "targetLanguage": "French"})
        assert "to French" in text_generator.prompts[0]

    def test_explain_code(self, client: TestClient, text_generator) -> None:
        payload = {"code": "print(1)", "language": "Python"}
        data = client.post(f"{AI_URL}/explain-code", json=payload).json()["data"]
        assert "explanation" in data
        assert "```Python\nprint(1)\n```" in text_generator.prompts[0]

    def test_empty_message_rejected(self, client: TestClient, text_generator) -> None:
        response = client.post(f"{AI_URL}/chat", json={"message": ""})
        assert response.status_code == 400
        assert text_generator.prompts == []

    def test_provider_failure_is_internal_error(self, client: TestClient, text_generator) -> None:
        text_generator.error = RuntimeError("upstream timeout")
        response = client.post(f"{AI_URL}/chat", json={"message": "hi"})
        body = response.json()
        assert response.status_code == 500
        assert body["code"] == "INTERNAL_SERVER_ERROR"
        assert body["details"] == "upstream timeout"


class TestChatStream:
    """Tests for the SSE endpoint."""

    def test_events(self, client: TestClient, text_generator) -> None:
        response = client.get(f"{AI_URL}/chat/stream", params={"message": "hi"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")

        events = [
            json.loads(line.removeprefix("data: "))
            for line in response.text.split("\n\n")
            if line
        ]
        # Empty chunks are skipped
        assert events == [{"content": "Hel"}, {"content": "lo"}]

    def test_provider_failure_ends_with_error_event(
        self, client: TestClient, text_generator
    ) -> None:
        text_generator.error = RuntimeError("connection reset")
        response = client.get(f"{AI_URL}/chat/stream", params={"message": "hi"})
        assert response.status_code == 200

        frames = [frame for frame in response.text.split("\n\n") if frame]
        assert frames[:2] == [
            'data: {"content": "Hel"}',
            'data: {"content": "lo"}',
        ]
        assert frames[-1] == (
            f'event: error\ndata: {{"message": "{STREAM_ERROR_MESSAGE}"}}'
        )
        assert "connection reset" not in response.text

    def test_missing_message(self, client: TestClient, text_generator) -> None:
        assert client.get(f"{AI_URL}/chat/stream").status_code == 400


class TestAiAssistant:
    """Tests for the assistant use cases without HTTP."""

    @pytest.fixture
    def generator(self) -> FakeTextGenerator:
        return FakeTextGenerator(chunks=("a", "", "b"))

    @pytest.mark.anyio
    async def test_chat_passes_message_through(self, generator) -> None:
        assert await AiAssistant(generator).chat("hello") == "echo: hello"

    @pytest.mark.anyio
    async def test_stream_skips_empty_chunks(self, generator) -> None:
        chunks = [chunk async for chunk in AiAssistant(generator).chat_stream("x")]
        assert chunks == ["a", "b"]

    @pytest.mark.anyio
    async def test_explain_code_defaults_to_typescript(self, generator) -> None:
        await AiAssistant(generator).explain_code("let x = 1")
        assert "following TypeScript code" in generator.prompts[0]


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
