"""
Unit tests for the OpenAI-compatible adapter.
"""

import json
from typing import Any, Dict, List

import httpx
import pytest

from visiontalk.config import ProviderConfig
from visiontalk.models.chat import ChatMessage
from visiontalk.providers.errors import ProviderError
from visiontalk.providers.openai_compatible import OpenAICompatibleProvider


def _capture(requests: List[httpx.Request], content: str = "It is a cat.") -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"choices": [{"message": {"role": "assistant", "content": content}}]})

    return httpx.MockTransport(handler)


def _body(request: httpx.Request) -> Dict[str, Any]:
    return json.loads(request.content)


class TestHostedOpenAI:
    @pytest.mark.asyncio
    async def test_sends_entire_conversation_with_images(self, follow_up_conversation: List[ChatMessage]) -> None:
        requests: List[httpx.Request] = []
        provider = OpenAICompatibleProvider(ProviderConfig(openai_api_key="sk-test"), transport=_capture(requests))

        text = await provider.translate(follow_up_conversation, "Describe.", "German")

        assert text == "It is a cat."
        body = _body(requests[0])
        assert body["model"] == "gpt-4o"
        assert body["max_tokens"] == 1000
        assert str(requests[0].url) == "https://api.openai.com/v1/chat/completions"
        assert requests[0].headers["Authorization"] == "Bearer sk-test"

        roles = [m["role"] for m in body["messages"]]
        assert roles == ["system", "user", "assistant", "user"]
        assert body["messages"][0]["content"].endswith("in German.")
        # earlier images stay in the history
        assert body["messages"][1]["content"][0] == {
            "type": "image_url",
            "image_url": {"url": "data:image/png;base64,AAA"},
        }
        assert body["messages"][3]["content"] == [{"type": "text", "text": "What colour is the seat?"}]


class TestLocalOllama:
    @pytest.mark.asyncio
    async def test_base_url_selects_local_model(self, image_conversation: List[ChatMessage]) -> None:
        requests: List[httpx.Request] = []
        config = ProviderConfig(ollama_base_url="http://localhost:11434/v1")
        provider = OpenAICompatibleProvider(config, transport=_capture(requests))

        await provider.translate(image_conversation, "Describe.", "English")

        assert provider.label == "Ollama"
        assert str(requests[0].url) == "http://localhost:11434/v1/chat/completions"
        assert _body(requests[0])["model"] == "llava"
        assert requests[0].headers["Authorization"] == "Bearer dummy-key-for-ollama"

    @pytest.mark.asyncio
    async def test_ollama_key_takes_precedence(self, image_conversation: List[ChatMessage]) -> None:
        requests: List[httpx.Request] = []
        config = ProviderConfig(
            ollama_base_url="http://gpu-box:11434/v1", ollama_api_key="ollama-key", openai_api_key="sk-test"
        )
        provider = OpenAICompatibleProvider(config, transport=_capture(requests))

        await provider.translate(image_conversation, "Describe.", "English")

        assert requests[0].headers["Authorization"] == "Bearer ollama-key"


class TestFailures:
    @pytest.mark.asyncio
    async def test_server_error_is_reported(self, image_conversation: List[ChatMessage]) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(500, json={"error": {"message": "model overloaded"}})
        )
        provider = OpenAICompatibleProvider(ProviderConfig(openai_api_key="sk-test"), transport=transport)

        with pytest.raises(ProviderError) as exc_info:
            await provider.translate(image_conversation, "Describe.", "English")

        assert str(exc_info.value) == "OpenAI Error: HTTP 500: model overloaded"

    @pytest.mark.asyncio
    async def test_connection_error_is_reported(self, image_conversation: List[ChatMessage]) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        provider = OpenAICompatibleProvider(
            ProviderConfig(ollama_base_url="http://localhost:11434/v1"), transport=httpx.MockTransport(refuse)
        )

        with pytest.raises(ProviderError, match="Ollama Error: Connection refused"):
            await provider.translate(image_conversation, "Describe.", "English")

    @pytest.mark.asyncio
    async def test_non_json_body_is_reported(self, image_conversation: List[ChatMessage]) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>gateway</html>"))
        provider = OpenAICompatibleProvider(ProviderConfig(openai_api_key="sk-test"), transport=transport)

        with pytest.raises(ProviderError, match="Malformed response"):
            await provider.translate(image_conversation, "Describe.", "English")
