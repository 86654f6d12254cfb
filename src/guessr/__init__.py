"""
guessr - Geolocation chat relay

Forwards a conversation of text and inline images to a hosted multimodal
model (Gemini or Anthropic) and returns its free-text location guess.

Key components:
- Models: Conversation, Turn and ImageRef value types
- LLM: Provider relay with Gemini (chat session) and Anthropic (message list) adapters
- Agents: In-memory chat session with a single-flight guard
- Server: FastAPI app exposing POST /api/analyze
"""

__version__ = "0.1.0"

from .agents import *
from .llm import *
from .models import *

__all__ = [
    "agents",
    "llm",
    "models",
]
