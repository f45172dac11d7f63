"""Image analysis route."""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, Field

from .dependencies import get_request_router
from ..logging_config import get_logger
from ..models.chat import ChatMessage
from ..prompts import DEFAULT_LANGUAGE, SYSTEM_INSTRUCTION
from ..providers import RequestRouter, VisionTalkError
from ..utils.responses import error_response

logger = get_logger(__name__)

router = APIRouter(tags=["analyze"])


class AnalyzeRequest(BaseModel):
    """Conversation plus the instructions for the model."""

    model_config = ConfigDict(populate_by_name=True)

    messages: List[ChatMessage]
    system_instruction: str = Field(default=SYSTEM_INSTRUCTION, alias="systemInstruction")
    language: str = DEFAULT_LANGUAGE


class AnalyzeResponse(BaseModel):
    """Text produced by the selected provider."""

    text: str


class ErrorResponse(BaseModel):
    error: str


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    responses={500: {"model": ErrorResponse}},
)
async def analyze(request: AnalyzeRequest, request_router: RequestRouter = Depends(get_request_router)):
    """Describe or discuss the uploaded image(s) in the requested language."""

    image_count = sum(len(message.images) for message in request.messages)
    logger.info(f"🖼️ ANALYZE: {len(request.messages)} messages, {image_count} images, language={request.language}")

    try:
        text = await request_router.analyze(request.messages, request.system_instruction, request.language)
    except VisionTalkError as e:
        logger.error(f"Analysis failed: {e}")
        return error_response(str(e))

    logger.info(f"🖼️ ANALYZE: returning {len(text)} characters")
    return AnalyzeResponse(text=text)


__all__ = ["router"]
