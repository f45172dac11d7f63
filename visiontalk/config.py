"""Configuration management for VisionTalk."""

import os
from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


def _load_env_file() -> None:
    """Load .env from root directory if present."""
    env_path = Path(__file__).parent.parent / ".env"
    if not env_path.is_file():
        return
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except OSError:
        return
    for line in lines:
        stripped = line.strip()
        if stripped and not stripped.startswith("#") and "=" in stripped:
            key, value = stripped.split("=", 1)
            key, value = key.strip(), value.strip().strip("'\"")
            if key and value and key not in os.environ:
                os.environ[key] = value


_load_env_file()


DEFAULT_APP_NAME = "VisionTalk"
DEFAULT_APP_VERSION = "1.0.0"

DEFAULT_HUGGINGFACE_BASE_URL = "https://router.huggingface.co/v1"
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"


def _env_int(name: str, fallback: int) -> int:
    try:
        return int(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _env_float(name: str, fallback: float) -> float:
    try:
        return float(os.getenv(name, str(fallback)))
    except (TypeError, ValueError):
        return fallback


def _env_flag(name: str, fallback: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return fallback
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class ProviderConfig(BaseModel):
    """Credentials and model choices handed to the request router."""

    model_config = ConfigDict(frozen=True)

    huggingface_api_key: Optional[str] = None
    huggingface_base_url: str = DEFAULT_HUGGINGFACE_BASE_URL
    huggingface_model: str = "meta-llama/Llama-3.2-11B-Vision-Instruct"
    huggingface_text_max_tokens: int = 500
    huggingface_vision_max_tokens: int = 1000

    openai_api_key: Optional[str] = None
    ollama_api_key: Optional[str] = None
    ollama_base_url: Optional[str] = None
    openai_base_url: str = DEFAULT_OPENAI_BASE_URL
    openai_model: str = "gpt-4o"
    ollama_model: str = "llava"
    openai_max_tokens: int = 1000

    gemini_api_key: Optional[str] = None
    gemini_model: str = "gemini-3-flash-preview"
    gemini_temperature: float = 0.7

    request_timeout: float = 120.0
    fallback_on_error: bool = False

    @property
    def huggingface_enabled(self) -> bool:
        return bool(self.huggingface_api_key)

    @property
    def openai_enabled(self) -> bool:
        """OpenAI-compatible path is usable with any key or a local base URL."""
        return bool(self.ollama_api_key or self.openai_api_key or self.ollama_base_url)

    @property
    def gemini_enabled(self) -> bool:
        return bool(self.gemini_api_key)

    @property
    def uses_local_endpoint(self) -> bool:
        return bool(self.ollama_base_url)


class Settings(BaseModel):
    """Application settings with environment fallbacks."""

    # App metadata
    app_name: str = Field(default=DEFAULT_APP_NAME)
    app_version: str = Field(default=DEFAULT_APP_VERSION)

    # Server runtime
    server_host: str = Field(default_factory=lambda: os.getenv("VISIONTALK_HOST", "0.0.0.0"))
    server_port: int = Field(default_factory=lambda: _env_int("VISIONTALK_PORT", 3000))

    # Credentials / providers
    huggingface_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("HUGGINGFACE_API_KEY"))
    openai_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("OPENAI_API_KEY"))
    ollama_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("OLLAMA_API_KEY"))
    ollama_base_url: Optional[str] = Field(default_factory=lambda: os.getenv("OLLAMA_BASE_URL"))
    gemini_api_key: Optional[str] = Field(default_factory=lambda: os.getenv("GEMINI_API_KEY"))

    # Model selection
    huggingface_model: str = Field(default="meta-llama/Llama-3.2-11B-Vision-Instruct")
    openai_model: str = Field(default="gpt-4o")
    ollama_model: str = Field(default="llava")
    gemini_model: str = Field(default="gemini-3-flash-preview")

    # Provider behaviour
    provider_fallback: bool = Field(default_factory=lambda: _env_flag("VISIONTALK_PROVIDER_FALLBACK"))
    request_timeout: float = Field(default_factory=lambda: _env_float("VISIONTALK_REQUEST_TIMEOUT", 120.0))

    # HTTP behaviour
    max_payload_bytes: int = Field(default_factory=lambda: _env_int("VISIONTALK_MAX_PAYLOAD_BYTES", 50 * 1024 * 1024))
    cors_allow_origins_raw: str = Field(default_factory=lambda: os.getenv("VISIONTALK_CORS_ALLOW_ORIGINS", "*"))
    enable_docs: bool = Field(default_factory=lambda: os.getenv("VISIONTALK_ENABLE_DOCS", "1") != "0")
    docs_url: Optional[str] = Field(default_factory=lambda: os.getenv("VISIONTALK_DOCS_URL", "/docs"))

    @property
    def cors_allow_origins(self) -> List[str]:
        """Parse CORS origins from comma-separated string."""
        if self.cors_allow_origins_raw.strip() in {"", "*"}:
            return ["*"]
        return [origin.strip() for origin in self.cors_allow_origins_raw.split(",") if origin.strip()]

    @property
    def resolved_docs_url(self) -> Optional[str]:
        """Return documentation URL when docs are enabled."""
        return (self.docs_url or "/docs") if self.enable_docs else None

    def provider_config(self) -> ProviderConfig:
        """Snapshot the provider-related settings for the request router."""
        return ProviderConfig(
            huggingface_api_key=self.huggingface_api_key or None,
            huggingface_model=self.huggingface_model,
            openai_api_key=self.openai_api_key or None,
            ollama_api_key=self.ollama_api_key or None,
            ollama_base_url=self.ollama_base_url or None,
            openai_model=self.openai_model,
            ollama_model=self.ollama_model,
            gemini_api_key=self.gemini_api_key or None,
            gemini_model=self.gemini_model,
            request_timeout=self.request_timeout,
            fallback_on_error=self.provider_fallback,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
