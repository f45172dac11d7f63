"""HTTP client for OpenAI-style chat completion endpoints."""

from typing import Any, Dict, List, Optional

import httpx

from ..logging_config import get_logger
from ..models.chat import ChatMessage

logger = get_logger(__name__)


def to_multimodal_messages(messages: List[ChatMessage]) -> List[Dict[str, Any]]:
    """Convert the conversation into content-array chat messages.

    Images become ``image_url`` entries carrying a base64 data URI, everything
    else a ``text`` entry.
    """
    formatted: List[Dict[str, Any]] = []
    for message in messages:
        content: List[Dict[str, Any]] = []
        for part in message.parts:
            if part.image is not None:
                content.append({"type": "image_url", "image_url": {"url": part.image.to_data_uri()}})
            else:
                content.append({"type": "text", "text": part.text or ""})
        formatted.append({"role": message.role, "content": content})
    return formatted


def to_text_messages(messages: List[ChatMessage]) -> List[Dict[str, Any]]:
    """Flatten every message to plain text, dropping image parts."""
    return [{"role": message.role, "content": message.plain_text()} for message in messages]


async def request_chat_completion(
    base_url: str,
    model: str,
    messages: List[Dict[str, Any]],
    api_key: Optional[str] = None,
    system: Optional[str] = None,
    max_tokens: Optional[int] = None,
    timeout: float = 120.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Dict[str, Any]:
    """Make a single chat completion request and return the decoded body."""

    url = f"{base_url.rstrip('/')}/chat/completions"

    headers = {"Content-Type": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"

    payload: Dict[str, Any] = {
        "model": model,
        "messages": messages,
    }

    if system:
        payload["messages"] = [{"role": "system", "content": system}] + messages

    if max_tokens:
        payload["max_tokens"] = max_tokens

    logger.debug(f"Making chat completion request to {model} at {base_url}")

    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        response = await client.post(url, headers=headers, json=payload)
        response.raise_for_status()
        result = response.json()

    logger.debug("Chat completion response received")
    return result


def extract_choice_text(response: Dict[str, Any]) -> str:
    """Return the first choice's message content, or an empty string."""
    choices = response.get("choices")
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message")
    if not isinstance(message, dict):
        return ""
    content = message.get("content")
    return content if isinstance(content, str) else ""


def describe_http_error(error: httpx.HTTPError) -> str:
    """Render an httpx failure as a short, caller-facing message."""
    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        detail = ""
        try:
            body = response.json()
        except ValueError:
            detail = response.text[:200]
        else:
            reported = body.get("error") if isinstance(body, dict) else None
            if isinstance(reported, dict):
                detail = str(reported.get("message") or "")
            elif reported:
                detail = str(reported)
        status_line = f"HTTP {response.status_code}"
        return f"{status_line}: {detail}" if detail else status_line
    return str(error) or error.__class__.__name__
