"""Provider capability interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List

from ..models.chat import ChatMessage


class ProviderKind(str, Enum):
    """Known providers, declared in routing priority order."""

    HUGGINGFACE = "huggingface"
    OPENAI_COMPATIBLE = "openai"
    GEMINI = "gemini"


class VisionProvider(ABC):
    """Translates a conversation into one provider's request and returns its text."""

    kind: ProviderKind
    label: str

    @abstractmethod
    async def translate(self, messages: List[ChatMessage], system_instruction: str, language: str) -> str:
        """Send the conversation and return the first candidate's text.

        Raises ``ProviderError`` on any failure, including an empty reply.
        """
