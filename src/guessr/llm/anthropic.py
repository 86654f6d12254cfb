"""
Anthropic provider (flat message-list style).
"""

import logging
from typing import Any, Dict, List, Optional

from guessr.models.conversation import Conversation, Turn

from .base import BaseProvider
from .config import RelayConfig
from .errors import ConfigurationError, TransportError, UpstreamError

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"


class AnthropicProvider(BaseProvider):
    """Anthropic Messages API provider (direct API or a compatible base URL)."""

    def __init__(self, config: RelayConfig):
        super().__init__(config)
        self._client = None

    @property
    def client(self):
        """Lazy initialization of Anthropic client."""
        if self._client is None:
            import anthropic

            # No SDK retries: one relay call is one HTTP request
            self._client = anthropic.AsyncAnthropic(
                api_key=self.config.api_key,
                auth_token=self.config.auth_token,
                base_url=self.config.base_url,
                max_retries=0,
                default_headers={"anthropic-version": ANTHROPIC_VERSION},
            )
        return self._client

    def validate_config(self) -> None:
        if not (self.config.auth_token or self.config.api_key):
            raise ConfigurationError(
                "ANTHROPIC_AUTH_TOKEN or ANTHROPIC_API_KEY environment variable "
                "is required for Anthropic"
            )

    def _to_anthropic_blocks(self, turn: Turn) -> List[Dict[str, Any]]:
        return self._turn_parts(
            turn,
            image_part=lambda media_type, data: {
                "type": "image",
                "source": {"type": "base64", "media_type": media_type, "data": data},
            },
            text_part=lambda text: {"type": "text", "text": text},
        )

    def to_wire(self, conversation: Conversation) -> Dict[str, Any]:
        """Convert conversation to a flat Anthropic ``messages`` list."""
        messages = [
            {"role": turn.role.value, "content": self._to_anthropic_blocks(turn)}
            for turn in conversation.split().turns()
        ]
        return {"messages": messages}

    def build_request(self, conversation: Conversation) -> Dict[str, Any]:
        wire = self.to_wire(conversation)
        logger.debug(
            "Anthropic request: model=%s messages=%d", self.model, len(wire["messages"])
        )
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "system": self.system_prompt,
            **wire,
        }

    async def dispatch(self, request: Dict[str, Any]) -> Any:
        import anthropic

        try:
            response = await self.client.messages.create(**request)
        except anthropic.APIStatusError as e:
            raise UpstreamError(_status_error_message(e)) from e
        except Exception as e:
            raise TransportError(str(e) or type(e).__name__) from e

        # A proxy may answer 200 with an error envelope
        if getattr(response, "type", None) == "error":
            raise UpstreamError(_error_body_message(getattr(response, "error", None), response))
        return response

    def extract_text(self, response: Any) -> Optional[str]:
        """Concatenate the text blocks of the response, in order."""
        return "".join(
            block.text
            for block in getattr(response, "content", None) or []
            if getattr(block, "type", None) == "text"
        )


def _error_body_message(error: Any, raw: Any) -> str:
    """``error.message`` from an error envelope, else the raw body."""
    if isinstance(error, dict) and error.get("message"):
        return error["message"]
    if getattr(error, "message", None):
        return error.message
    if isinstance(error, str) and error:
        return error
    return str(raw)


def _status_error_message(error: Any) -> str:
    body = getattr(error, "body", None)
    if isinstance(body, dict):
        return _error_body_message(body.get("error") or body, _raw_body(error))
    return _raw_body(error)


def _raw_body(error: Any) -> str:
    response = getattr(error, "response", None)
    if response is not None and response.text:
        return response.text
    return str(error)
