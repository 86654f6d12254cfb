"""
Base provider interface for Guessr.

A provider adapter owns three steps of a relay call: translating a
conversation into its wire format, dispatching the request, and pulling
the answer text back out of the response.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

from guessr.models.conversation import Conversation, Turn
from guessr.utils.data_uri import MalformedImageError

from .config import RelayConfig
from .errors import RelayError
from .schemas import NO_RESPONSE_TEXT, RelayResult

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """Abstract base class for model providers."""

    def __init__(self, config: RelayConfig):
        self.config = config
        self.model = config.model
        self.max_tokens = config.max_tokens
        self.system_prompt = config.system_prompt

    @abstractmethod
    def validate_config(self) -> None:
        """
        Check that every setting needed for a call is present.

        Raises:
            ConfigurationError: Naming the missing setting.
        """
        pass

    @abstractmethod
    def to_wire(self, conversation: Conversation) -> Dict[str, Any]:
        """Convert a conversation into the provider's message structure."""
        pass

    @abstractmethod
    def build_request(self, conversation: Conversation) -> Dict[str, Any]:
        """Wire payload plus model, token limit and system instruction."""
        pass

    @abstractmethod
    async def dispatch(self, request: Dict[str, Any]) -> Any:
        """
        Send one request to the provider and return its raw response.

        Raises:
            UpstreamError: Non-success status or an error payload.
            TransportError: Network failure or unparseable response.
        """
        pass

    @abstractmethod
    def extract_text(self, response: Any) -> Optional[str]:
        """Answer text from a raw response, or None if there is none."""
        pass

    def _turn_parts(
        self,
        turn: Turn,
        image_part: Callable[[str, str], Dict[str, Any]],
        text_part: Callable[[str], Dict[str, Any]],
    ) -> List[Dict[str, Any]]:
        """
        Images first (in order), then the text if it is non-empty.

        Images that are not valid data URIs are skipped.
        """
        parts = []
        for index, image in enumerate(turn.images):
            try:
                mime_type, payload = image.mime_type, image.payload
            except MalformedImageError as e:
                logger.warning("Dropping image %d of %s turn: %s", index, turn.role.value, e)
                continue
            parts.append(image_part(mime_type, payload))
        if turn.text:
            parts.append(text_part(turn.text))
        return parts

    async def relay(self, conversation: Conversation) -> RelayResult:
        """
        Send the conversation to the provider and normalize the outcome.

        Never raises for provider, transport or configuration failures;
        those come back as ``RelayResult.error``.
        """
        try:
            self.validate_config()
            request = self.build_request(conversation)
            response = await self.dispatch(request)
            text = self.extract_text(response)
        except RelayError as e:
            logger.error("%s relay failed: %s", type(self).__name__, e.message)
            return RelayResult.from_error(e.message)
        except ValueError as e:
            logger.error("%s relay rejected conversation: %s", type(self).__name__, e)
            return RelayResult.from_error(str(e))

        return RelayResult.from_text(text or NO_RESPONSE_TEXT)
