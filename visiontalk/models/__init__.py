"""Conversation data models."""

from .chat import ChatMessage, ImagePayload, MessagePart, MessageRole, last_user_message

__all__ = ["ChatMessage", "ImagePayload", "MessagePart", "MessageRole", "last_user_message"]
