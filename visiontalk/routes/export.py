"""Conversation export route."""

from typing import List

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

from ..export import EXPORT_FORMATS, export_filename, render_transcript
from ..logging_config import get_logger
from ..models.chat import ChatMessage

logger = get_logger(__name__)

router = APIRouter(tags=["export"])


class ExportRequest(BaseModel):
    messages: List[ChatMessage]


@router.post("/export")
async def export_conversation(request: ExportRequest, fmt: str = Query(default="txt", alias="format")) -> Response:
    """Download the conversation as a text or JSON file."""

    if fmt not in EXPORT_FORMATS:
        raise HTTPException(status_code=400, detail=f"Unsupported export format: {fmt}")
    if not request.messages:
        raise HTTPException(status_code=400, detail="Nothing to export")

    content = render_transcript(request.messages, fmt)
    filename = export_filename(fmt)
    logger.info(f"📄 EXPORT: {len(request.messages)} messages as {filename}")

    return Response(
        content=content,
        media_type=f"{EXPORT_FORMATS[fmt]}; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


__all__ = ["router"]
