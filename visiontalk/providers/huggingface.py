"""Hugging Face hosted inference adapter."""

from typing import List, Optional

import httpx

from .base import ProviderKind, VisionProvider
from .chat_completions import (
    describe_http_error,
    extract_choice_text,
    request_chat_completion,
    to_multimodal_messages,
    to_text_messages,
)
from .errors import ProviderError
from ..config import ProviderConfig
from ..logging_config import get_logger
from ..models.chat import ChatMessage, last_user_message
from ..prompts import build_system_instruction

logger = get_logger(__name__)


class HuggingFaceProvider(VisionProvider):
    """Vision chat through the Hugging Face inference router.

    When the latest user turn carries no image the whole conversation is sent
    as plain text, so images from earlier turns are not seen again.
    """

    kind = ProviderKind.HUGGINGFACE
    label = "Hugging Face"

    def __init__(self, config: ProviderConfig, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self.api_key = config.huggingface_api_key
        self.base_url = config.huggingface_base_url
        self.model = config.huggingface_model
        self.text_max_tokens = config.huggingface_text_max_tokens
        self.vision_max_tokens = config.huggingface_vision_max_tokens
        self.timeout = config.request_timeout
        self.transport = transport

    async def translate(self, messages: List[ChatMessage], system_instruction: str, language: str) -> str:
        if not self.api_key:
            raise ProviderError(self.label, "HUGGINGFACE_API_KEY is not configured.")

        latest = last_user_message(messages)
        if latest is not None and latest.has_image:
            formatted = to_multimodal_messages(messages)
            max_tokens = self.vision_max_tokens
        else:
            formatted = to_text_messages(messages)
            max_tokens = self.text_max_tokens

        logger.debug(f"Hugging Face request: {len(messages)} messages, max_tokens={max_tokens}")

        try:
            response = await request_chat_completion(
                base_url=self.base_url,
                model=self.model,
                messages=formatted,
                api_key=self.api_key,
                system=build_system_instruction(system_instruction, language),
                max_tokens=max_tokens,
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
