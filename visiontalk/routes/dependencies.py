"""FastAPI dependencies shared by the API routes."""

from ..config import get_settings
from ..providers import RequestRouter


def get_request_router() -> RequestRouter:
    """Build a router from the current provider configuration."""
    return RequestRouter(get_settings().provider_config())
