"""Data models for Guessr."""

from .conversation import Conversation, ImageRef, MessageRole, RelayRequest, Turn
from .providers import Provider

__all__ = [
    # Conversation
    "Conversation",
    "ImageRef",
    "MessageRole",
    "Provider",
    "RelayRequest",
    "Turn",
]
