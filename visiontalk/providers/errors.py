"""Error taxonomy for the provider layer."""


class VisionTalkError(Exception):
    """Base class for errors reported to API callers."""


class ConfigurationError(VisionTalkError):
    """No usable provider credentials or endpoints are configured."""


class ProviderError(VisionTalkError):
    """The selected provider rejected the call or returned unusable data."""

    def __init__(self, provider: str, message: str) -> None:
        self.provider = provider
        self.detail = message
        super().__init__(f"{provider} Error: {message}")
