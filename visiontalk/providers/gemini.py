"""Google Gemini generation adapter."""

import base64
from functools import lru_cache
from typing import Any, List, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from .base import ProviderKind, VisionProvider
from .errors import ProviderError
from ..config import ProviderConfig
from ..logging_config import get_logger
from ..models.chat import ChatMessage
from ..prompts import build_system_instruction

logger = get_logger(__name__)


@lru_cache(maxsize=8)
def client_for_key(api_key: str) -> genai.Client:
    """One SDK client per API key, shared across requests."""
    return genai.Client(api_key=api_key)


def _decode_image(data: str) -> bytes:
    # unpadded base64 is accepted
    return base64.b64decode(data + "=" * (-len(data) % 4), validate=True)


def to_gemini_contents(messages: List[ChatMessage]) -> List[types.Content]:
    """Map the conversation onto Gemini contents; assistant turns become ``model``."""
    contents: List[types.Content] = []
    for message in messages:
        parts: List[types.Part] = []
        for part in message.parts:
            if part.image is not None:
                image_bytes = _decode_image(part.image.data)
                parts.append(types.Part.from_bytes(data=image_bytes, mime_type=part.image.mime_type))
            else:
                parts.append(types.Part.from_text(text=part.text or ""))
        role = "model" if message.role == "assistant" else "user"
        contents.append(types.Content(role=role, parts=parts))
    return contents


class GeminiProvider(VisionProvider):
    """Single non-streaming ``generate_content`` call per conversation."""

    kind = ProviderKind.GEMINI
    label = "Gemini"

    def __init__(self, config: ProviderConfig, client: Optional[Any] = None) -> None:
        self.api_key = config.gemini_api_key
        self.model = config.gemini_model
        self.temperature = config.gemini_temperature
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            self._client = client_for_key(self.api_key)
        return self._client

    async def translate(self, messages: List[ChatMessage], system_instruction: str, language: str) -> str:
        if not self.api_key:
            raise ProviderError(self.label, "GEMINI_API_KEY is not configured.")

        try:
            contents = to_gemini_contents(messages)
        except ValueError as e:
            raise ProviderError(self.label, f"Invalid image data: {e}") from e

        config = types.GenerateContentConfig(
            system_instruction=build_system_instruction(system_instruction, language),
            temperature=self.temperature,
        )

        logger.debug(f"Gemini request: model={self.model}, {len(contents)} contents")

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
        except genai_errors.APIError as e:
            raise ProviderError(self.label, e.message or str(e)) from e

        if not response or not response.text:
            raise ProviderError(self.label, "Empty response from model")
        return response.text
