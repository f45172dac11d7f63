"""Multimodal inference providers and the router that selects between them."""

from .base import ProviderKind, VisionProvider
from .errors import ConfigurationError, ProviderError, VisionTalkError
from .gemini import GeminiProvider
from .huggingface import HuggingFaceProvider
from .openai_compatible import OpenAICompatibleProvider
from .router import NO_PROVIDER_MESSAGE, RequestRouter

__all__ = [
    "ProviderKind",
    "VisionProvider",
    "ConfigurationError",
    "ProviderError",
    "VisionTalkError",
    "GeminiProvider",
    "HuggingFaceProvider",
    "OpenAICompatibleProvider",
    "NO_PROVIDER_MESSAGE",
    "RequestRouter",
]
