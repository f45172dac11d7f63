"""Chat and conversation models."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

MessageRole = Literal["user", "assistant"]


class ImagePayload(BaseModel):
    """Base64 image bytes with their declared mime type."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data: str
    mime_type: str = Field(alias="mimeType")

    def to_data_uri(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"


class MessagePart(BaseModel):
    """One piece of a message: text, an image, or (rarely) both."""

    model_config = ConfigDict(frozen=True)

    text: Optional[str] = None
    image: Optional[ImagePayload] = None


class ChatMessage(BaseModel):
    """A single chat message as exchanged with the web client."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    role: MessageRole
    parts: List[MessagePart]
    timestamp: Optional[int] = None  # epoch milliseconds

    @property
    def images(self) -> List[ImagePayload]:
        return [part.image for part in self.parts if part.image is not None]

    @property
    def has_image(self) -> bool:
        return any(part.image is not None for part in self.parts)

    def plain_text(self, separator: str = " ") -> str:
        """Join the text of every part, images contributing empty strings."""
        return separator.join(part.text or "" for part in self.parts)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize with the client's camelCase names, omitting absent fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


def last_user_message(messages: List[ChatMessage]) -> Optional[ChatMessage]:
    """Return the most recent message authored by the user, if any."""
    for message in reversed(messages):
        if message.role == "user":
            return message
    return None
