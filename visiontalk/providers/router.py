"""Request router - picks the provider that answers an analysis request."""

from typing import Callable, Dict, List, Optional

from .base import ProviderKind, VisionProvider
from .errors import ConfigurationError, ProviderError
from .gemini import GeminiProvider
from .huggingface import HuggingFaceProvider
from .openai_compatible import OpenAICompatibleProvider
from ..config import ProviderConfig
from ..logging_config import get_logger
from ..models.chat import ChatMessage

logger = get_logger(__name__)

NO_PROVIDER_MESSAGE = (
    "No API keys configured. Please set HUGGINGFACE_API_KEY, OPENAI_API_KEY, "
    "OLLAMA_BASE_URL or GEMINI_API_KEY."
)

ProviderFactory = Callable[[ProviderConfig], VisionProvider]

DEFAULT_FACTORIES: Dict[ProviderKind, ProviderFactory] = {
    ProviderKind.HUGGINGFACE: HuggingFaceProvider,
    ProviderKind.OPENAI_COMPATIBLE: OpenAICompatibleProvider,
    ProviderKind.GEMINI: GeminiProvider,
}


class RequestRouter:
    """Routes a conversation to the highest-priority configured provider.

    Providers are tried in ``ProviderKind`` declaration order. Without
    ``fallback_on_error`` only the first configured provider is called and its
    failure is returned as is; with it, each configured provider is tried in
    turn until one answers.
    """

    def __init__(
        self,
        config: ProviderConfig,
        providers: Optional[Dict[ProviderKind, VisionProvider]] = None,
    ) -> None:
        self.config = config
        self._providers: Dict[ProviderKind, VisionProvider] = dict(providers or {})

    def available_providers(self) -> List[ProviderKind]:
        """Configured providers in priority order."""
        enabled = {
            ProviderKind.HUGGINGFACE: self.config.huggingface_enabled,
            ProviderKind.OPENAI_COMPATIBLE: self.config.openai_enabled,
            ProviderKind.GEMINI: self.config.gemini_enabled,
        }
        return [kind for kind in ProviderKind if enabled[kind]]

    def provider_for(self, kind: ProviderKind) -> VisionProvider:
        if kind not in self._providers:
            self._providers[kind] = DEFAULT_FACTORIES[kind](self.config)
        return self._providers[kind]

    async def analyze(self, messages: List[ChatMessage], system_instruction: str, language: str) -> str:
        """Return the response text for a conversation or raise.

        Raises ``ConfigurationError`` before any network call when no provider
        is configured, and ``ProviderError`` when the selected provider fails.
        """
        candidates = self.available_providers()
        if not candidates:
            raise ConfigurationError(NO_PROVIDER_MESSAGE)

        if not self.config.fallback_on_error:
            candidates = candidates[:1]

        last_error: Optional[ProviderError] = None
        for index, kind in enumerate(candidates):
            provider = self.provider_for(kind)
            logger.info(f"Routing analysis to {provider.label} ({len(messages)} messages, language={language})")
            try:
                return await provider.translate(messages, system_instruction, language)
            except ProviderError as e:
                logger.error(f"{provider.label} call failed: {e.detail}")
                last_error = e
            except Exception as e:
                logger.exception(f"Unexpected {provider.label} failure")
                last_error = ProviderError(provider.label, str(e) or e.__class__.__name__)
                last_error.__cause__ = e

            if index + 1 < len(candidates):
                logger.warning(f"Falling back from {provider.label} to the next configured provider")

        raise last_error
