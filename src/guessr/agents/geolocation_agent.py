"""
Geolocation Agent - in-memory chat session over a provider relay.

Holds the conversation and the not-yet-sent draft images, and allows one
relay call in flight at a time.
"""

import asyncio
import logging
from typing import List, Optional, Union

from guessr.llm import BaseProvider, RelayConfig, get_provider
from guessr.models.conversation import Conversation, ImageRef, MessageRole, Turn
from guessr.prompts import DEFAULT_IMAGE_QUESTION

from .schemas import AgentResult

logger = logging.getLogger(__name__)


class AgentBusyError(RuntimeError):
    """Raised when a question is asked while another is still in flight."""

    pass


class GeolocationAgent:
    """
    Chat session that relays the whole conversation on every question.

    Failed relays still produce an assistant turn (``Error: <message>``) so
    the conversation stays continuous and the user can simply ask again.
    """

    def __init__(
        self,
        provider: Optional[BaseProvider] = None,
        relay_config: Optional[RelayConfig] = None,
    ):
        self.provider = provider or get_provider(relay_config)
        self.conversation = Conversation()
        self._draft_images: List[ImageRef] = []
        self._lock = asyncio.Lock()

    @property
    def name(self) -> str:
        return "geolocation_agent"

    @property
    def busy(self) -> bool:
        return self._lock.locked()

    @property
    def draft_images(self) -> List[ImageRef]:
        return list(self._draft_images)

    def attach_image(self, image: Union[str, ImageRef]) -> None:
        """Add an image (data URI or ImageRef) to the next question."""
        if isinstance(image, str):
            image = ImageRef(data_uri=image)
        self._draft_images.append(image)

    def remove_image(self, index: int) -> None:
        """Remove a draft image. Sent turns are never edited."""
        del self._draft_images[index]

    def clear(self) -> None:
        self.conversation = self.conversation.clear()
        self._draft_images = []

    async def ask(self, text: str = "") -> Optional[AgentResult]:
        """
        Send the draft images and *text* as a new user turn.

        Returns None without calling the provider when there is nothing to
        send.

        Raises:
            AgentBusyError: If a previous call has not finished yet.
        """
        text = (text or "").strip()
        if not text and not self._draft_images:
            return None
        if self.busy:
            raise AgentBusyError("A question is already being answered")

        async with self._lock:
            user_turn = Turn(
                role=MessageRole.USER,
                text=text or DEFAULT_IMAGE_QUESTION,
                images=tuple(self._draft_images),
            )
            self._draft_images = []
            conversation = self.conversation.append(user_turn)
            self.conversation = conversation

            result = await self.provider.relay(conversation)
            if result.is_ok:
                reply = result.text
            else:
                logger.warning("Relay returned error: %s", result.error)
                reply = f"Error: {result.error}"

            self.conversation = conversation.append(
                Turn(role=MessageRole.ASSISTANT, text=reply)
            )
            return AgentResult(result=result, conversation=self.conversation)
