"""
Google Gemini provider (chat-session style).

The chat session is created with every prior turn as history and then
sent the newest turn.
"""

import base64
import logging
from typing import Any, Dict, List, Optional

import orjson

from guessr.models.conversation import Conversation, MessageRole, Turn

from .base import BaseProvider
from .config import RelayConfig
from .errors import ConfigurationError, TransportError, UpstreamError

logger = logging.getLogger(__name__)


class GeminiProvider(BaseProvider):
    """Google Gemini provider."""

    def __init__(self, config: RelayConfig):
        super().__init__(config)
        self._client = None

    @property
    def client(self):
        """Lazy initialization of Gemini client."""
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self.config.api_key)
        return self._client

    def validate_config(self) -> None:
        if not self.config.api_key:
            raise ConfigurationError(
                "GOOGLE_AI_API_KEY environment variable is required for Gemini"
            )

    def _to_gemini_parts(self, turn: Turn) -> List[Dict[str, Any]]:
        return self._turn_parts(
            turn,
            image_part=lambda mime_type, data: {
                "inline_data": {"mime_type": mime_type, "data": data}
            },
            text_part=lambda text: {"text": text},
        )

    def to_wire(self, conversation: Conversation) -> Dict[str, Any]:
        """Convert conversation to Gemini ``history`` + ``current`` parts."""
        request = conversation.split()
        history = []
        for turn in request.history:
            role = "model" if turn.role == MessageRole.ASSISTANT else "user"
            history.append({"role": role, "parts": self._to_gemini_parts(turn)})
        return {"history": history, "current": self._to_gemini_parts(request.current)}

    def build_request(self, conversation: Conversation) -> Dict[str, Any]:
        wire = self.to_wire(conversation)
        logger.debug(
            "Gemini request: model=%s history=%d current_parts=%d",
            self.model,
            len(wire["history"]),
            len(wire["current"]),
        )
        return {
            "model": self.model,
            "system_instruction": self.system_prompt,
            "max_output_tokens": self.max_tokens,
            **wire,
        }

    @staticmethod
    def _to_sdk_parts(parts: List[Dict[str, Any]]) -> List[Any]:
        """Wire parts to ``google.genai`` Part objects (inline data as bytes)."""
        from google.genai import types

        sdk_parts = []
        for part in parts:
            if "inline_data" in part:
                blob = part["inline_data"]
                sdk_parts.append(
                    types.Part.from_bytes(
                        data=base64.b64decode(blob["data"], validate=True),
                        mime_type=blob["mime_type"],
                    )
                )
            else:
                sdk_parts.append(types.Part.from_text(text=part["text"]))
        return sdk_parts

    async def dispatch(self, request: Dict[str, Any]) -> Any:
        from google.genai import errors, types

        try:
            history = [
                types.Content(role=content["role"], parts=self._to_sdk_parts(content["parts"]))
                for content in request["history"]
            ]
            chat = self.client.aio.chats.create(
                model=request["model"],
                config=types.GenerateContentConfig(
                    system_instruction=request["system_instruction"],
                    max_output_tokens=request["max_output_tokens"],
                ),
                history=history,
            )
            return await chat.send_message(self._to_sdk_parts(request["current"]))
        except errors.APIError as e:
            raise UpstreamError(_api_error_message(e)) from e
        except Exception as e:
            raise TransportError(str(e) or type(e).__name__) from e

    def extract_text(self, response: Any) -> Optional[str]:
        return getattr(response, "text", None)


def _api_error_message(error: Any) -> str:
    """Provider's own error description, else the raw error body."""
    message = getattr(error, "message", None)
    if message:
        return message

    details = getattr(error, "details", None)
    if isinstance(details, dict):
        nested = details.get("error")
        if isinstance(nested, dict) and nested.get("message"):
            return nested["message"]
    if details is not None:
        return orjson.dumps(details, default=str).decode()
    return str(error)
