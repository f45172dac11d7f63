"""OpenAI-compatible adapter (OpenAI or a self-hosted Ollama server)."""

from typing import List, Optional

import httpx

from .base import ProviderKind, VisionProvider
from .chat_completions import describe_http_error, extract_choice_text, request_chat_completion, to_multimodal_messages
from .errors import ProviderError
from ..config import ProviderConfig
from ..logging_config import get_logger
from ..models.chat import ChatMessage
from ..prompts import build_system_instruction

logger = get_logger(__name__)

# Ollama ignores the bearer token but OpenAI-style clients always send one
_PLACEHOLDER_KEY = "dummy-key-for-ollama"


class OpenAICompatibleProvider(VisionProvider):
    """Sends the entire conversation, every image inlined as a data URI."""

    kind = ProviderKind.OPENAI_COMPATIBLE
    label = "OpenAI"

    def __init__(self, config: ProviderConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.api_key = config.ollama_api_key or config.openai_api_key
        self.is_local = config.uses_local_endpoint
        self.base_url = config.ollama_base_url if self.is_local else config.openai_base_url
        self.model = config.ollama_model if self.is_local else config.openai_model
        self.max_tokens = config.openai_max_tokens
        self.timeout = config.request_timeout
        self.transport = transport
        if self.is_local:
            self.label = "Ollama"

    async def translate(self, messages: List[ChatMessage], system_instruction: str, language: str) -> str:
        if not self.api_key and not self.is_local:
            raise ProviderError(self.label, "OPENAI_API_KEY is not configured.")

        logger.debug(f"{self.label} request: model={self.model}, {len(messages)} messages")

        try:
            response = await request_chat_completion(
                base_url=self.base_url,
                model=self.model,
                messages=to_multimodal_messages(messages),
                api_key=self.api_key or _PLACEHOLDER_KEY,
                system=build_system_instruction(system_instruction, language),
                max_tokens=self.max_tokens,
                timeout=self.timeout,
                transport=self.transport,
            )
        except httpx.HTTPError as e:
            raise ProviderError(self.label, describe_http_error(e)) from e
        except ValueError as e:
            raise ProviderError(self.label, f"Malformed response: {e}") from e

        text = extract_choice_text(response) if isinstance(response, dict) else ""
        if not text:
            raise ProviderError(self.label, "Empty response from model")
        return text
