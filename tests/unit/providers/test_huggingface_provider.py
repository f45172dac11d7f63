"""
Unit tests for the Hugging Face adapter.

HTTP traffic is served by httpx.MockTransport so the outbound request body
can be inspected.
"""

import json
from typing import Any, Dict, List

import httpx
import pytest

from visiontalk.config import ProviderConfig
from visiontalk.models.chat import ChatMessage
from visiontalk.providers.errors import ProviderError
from visiontalk.providers.huggingface import HuggingFaceProvider


class RecordingTransport:
    """Collects requests and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body if body is not None else {"choices": [{"message": {"content": "A red bicycle."}}]}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def provider(huggingface_config: ProviderConfig, recorder: RecordingTransport) -> HuggingFaceProvider:
    return HuggingFaceProvider(huggingface_config, transport=httpx.MockTransport(recorder))


class TestImageTurn:
    @pytest.mark.asyncio
    async def test_embeds_image_as_data_uri(
        self, provider: HuggingFaceProvider, recorder: RecordingTransport, image_conversation: List[ChatMessage]
    ) -> None:
        text = await provider.translate(image_conversation, "Describe.", "French")

        assert text == "A red bicycle."
        payload = recorder.payload
        system, user = payload["messages"]
        assert system["role"] == "system"
        assert system["content"].endswith("French.")
        assert system["content"].startswith("Describe.")
        assert user["role"] == "user"
        assert user["content"] == [
            {"type": "image_url", "image_url": {"url": "data:image/png;base64,AAA"}},
            {"type": "text", "text": "What is this?"},
        ]
        assert payload["max_tokens"] == 1000
        assert payload["model"] == "meta-llama/Llama-3.2-11B-Vision-Instruct"

    @pytest.mark.asyncio
    async def test_sends_bearer_token_to_router(
        self, provider: HuggingFaceProvider, recorder: RecordingTransport, image_conversation: List[ChatMessage]
    ) -> None:
        await provider.translate(image_conversation, "Describe.", "English")

        request = recorder.requests[0]
        assert request.headers["Authorization"] == "Bearer hf-test"
        assert str(request.url) == "https://router.huggingface.co/v1/chat/completions"


class TestTextOnlyTurn:
    @pytest.mark.asyncio
    async def test_follow_up_without_image_is_text_only(
        self, provider: HuggingFaceProvider, recorder: RecordingTransport, follow_up_conversation: List[ChatMessage]
    ) -> None:
        await provider.translate(follow_up_conversation, "Describe.", "English")

        payload = recorder.payload
        assert payload["max_tokens"] == 500
        assert "image_url" not in json.dumps(payload)
        assert "AAA" not in json.dumps(payload)
        assert [m["content"] for m in payload["messages"][1:]] == [
            " What is this?",
            "A red bicycle.",
            "What colour is the seat?",
        ]


class TestFailures:
    @pytest.mark.asyncio
    async def test_http_error_becomes_provider_error(self, image_conversation: List[ChatMessage]) -> None:
        recorder = RecordingTransport(status_code=401, body={"error": "Invalid credentials in Authorization header"})
        provider = HuggingFaceProvider(
            ProviderConfig(huggingface_api_key="bad"), transport=httpx.MockTransport(recorder)
        )

        with pytest.raises(ProviderError) as exc_info:
            await provider.translate(image_conversation, "Describe.", "English")

        assert exc_info.value.provider == "Hugging Face"
        assert "401" in str(exc_info.value)
        assert "Invalid credentials" in str(exc_info.value)
        assert str(exc_info.value).startswith("Hugging Face Error: ")

    @pytest.mark.asyncio
    async def test_empty_choice_is_an_error(self, image_conversation: List[ChatMessage]) -> None:
        recorder = RecordingTransport(body={"choices": []})
        provider = HuggingFaceProvider(
            ProviderConfig(huggingface_api_key="hf-test"), transport=httpx.MockTransport(recorder)
        )

        with pytest.raises(ProviderError, match="Empty response"):
            await provider.translate(image_conversation, "Describe.", "English")

    @pytest.mark.asyncio
    async def test_missing_key_fails_without_request(
        self, recorder: RecordingTransport, image_conversation: List[ChatMessage]
    ) -> None:
        provider = HuggingFaceProvider(ProviderConfig(), transport=httpx.MockTransport(recorder))

        with pytest.raises(ProviderError, match="HUGGINGFACE_API_KEY"):
            await provider.translate(image_conversation, "Describe.", "English")

        assert recorder.requests == []
