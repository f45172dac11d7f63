"""
Pytest configuration and fixtures for the test suite.

Provider credentials are stripped from the environment for every test so a
developer's real keys never leak into requests made by the suite.
"""

from typing import List

import pytest

from visiontalk.config import ProviderConfig, get_settings
from visiontalk.models.chat import ChatMessage

PROVIDER_ENV_VARS = (
    "HUGGINGFACE_API_KEY",
    "OPENAI_API_KEY",
    "OLLAMA_API_KEY",
    "OLLAMA_BASE_URL",
    "GEMINI_API_KEY",
    "VISIONTALK_PROVIDER_FALLBACK",
)


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch: pytest.MonkeyPatch):
    """Remove provider credentials and reset cached settings."""
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def image_conversation() -> List[ChatMessage]:
    """A single user turn holding an image and a question."""
    return [
        ChatMessage.model_validate(
            {
                "id": "1",
                "role": "user",
                "parts": [
                    {"image": {"data": "AAA", "mimeType": "image/png"}},
                    {"text": "What is this?"},
                ],
                "timestamp": 1700000000000,
            }
        )
    ]


@pytest.fixture
def follow_up_conversation(image_conversation: List[ChatMessage]) -> List[ChatMessage]:
    """Image turn, assistant reply, then a text-only follow-up question."""
    return image_conversation + [
        ChatMessage.model_validate(
            {"id": "2", "role": "assistant", "parts": [{"text": "A red bicycle."}], "timestamp": 1700000001000}
        ),
        ChatMessage.model_validate(
            {"id": "3", "role": "user", "parts": [{"text": "What colour is the seat?"}], "timestamp": 1700000002000}
        ),
    ]


@pytest.fixture
def huggingface_config() -> ProviderConfig:
    return ProviderConfig(huggingface_api_key="hf-test")
