"""Client bootstrap information."""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from .dependencies import get_request_router
from ..config import get_settings
from ..prompts import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, SYSTEM_INSTRUCTION
from ..providers import RequestRouter

router = APIRouter(tags=["meta"])


class MetaResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    app_name: str = Field(alias="appName")
    version: str
    languages: List[str]
    default_language: str = Field(alias="defaultLanguage")
    system_instruction: str = Field(alias="systemInstruction")
    providers: List[str]


@router.get("/meta", response_model=MetaResponse)
async def get_meta(request_router: RequestRouter = Depends(get_request_router)) -> MetaResponse:
    """Languages, default prompt and configured providers (highest priority first)."""
    settings = get_settings()
    return MetaResponse(
        app_name=settings.app_name,
        version=settings.app_version,
        languages=SUPPORTED_LANGUAGES,
        default_language=DEFAULT_LANGUAGE,
        system_instruction=SYSTEM_INSTRUCTION,
        providers=[kind.value for kind in request_router.available_providers()],
    )


__all__ = ["router"]
