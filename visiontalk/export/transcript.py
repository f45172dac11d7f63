"""Conversation transcript rendering for downloads."""

import json
from datetime import datetime
from typing import List, Optional

from ..models.chat import ChatMessage

EXPORT_FORMATS = {
    "txt": "text/plain",
    "json": "application/json",
}

ASSISTANT_NAME = "VisionTalk"


def export_filename(fmt: str, when: Optional[datetime] = None) -> str:
    """``VisionTalk_Chat_<YYYY-MM-DD>.<fmt>``"""
    when = when or datetime.now()
    return f"{ASSISTANT_NAME}_Chat_{when.strftime('%Y-%m-%d')}.{fmt}"


def _speaker(message: ChatMessage) -> str:
    return "User" if message.role == "user" else ASSISTANT_NAME


def _clock(timestamp_ms: Optional[int]) -> str:
    if timestamp_ms is None:
        return "--:--:--"
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime("%H:%M:%S")


def render_text(messages: List[ChatMessage], when: Optional[datetime] = None) -> str:
    """Plain-text transcript; image parts are shown as a placeholder line."""
    when = when or datetime.now()
    lines = [f"{ASSISTANT_NAME} Conversation - {when.strftime('%Y-%m-%d %H:%M:%S')}", ""]
    for message in messages:
        lines.append(f"[{_clock(message.timestamp)}] {_speaker(message)}:")
        for part in message.parts:
            if part.text:
                lines.append(part.text)
            if part.image is not None:
                lines.append("[Image Uploaded]")
        lines.extend(["", "---", ""])
    return "\n".join(lines) + "\n"


def render_json(messages: List[ChatMessage]) -> str:
    return json.dumps([message.to_wire() for message in messages], indent=2, ensure_ascii=False)


def render_transcript(messages: List[ChatMessage], fmt: str, when: Optional[datetime] = None) -> str:
    if fmt == "txt":
        return render_text(messages, when)
    if fmt == "json":
        return render_json(messages)
    raise ValueError(f"Unsupported export format: {fmt}")
