from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator

from guessr.utils.data_uri import build_data_uri, encode_image_bytes, parse_data_uri

# --------- ENUMS ---------


class MessageRole(str, Enum):
    """Role of message sender."""

    USER = "user"
    ASSISTANT = "assistant"


# --------- CONTENT TYPES ---------


class ImageRef(BaseModel):
    """
    Inline image carried as a self-describing data URI.

    The URI is stored verbatim. It is only checked against the
    ``data:<mime>;base64,<payload>`` pattern when `mime_type` or `payload`
    is read, so a malformed image can still travel inside a Turn and be
    dropped at translation time.
    """

    model_config = {"frozen": True}

    data_uri: str

    @property
    def mime_type(self) -> str:
        return parse_data_uri(self.data_uri)[0]

    @property
    def payload(self) -> str:
        return parse_data_uri(self.data_uri)[1]

    @classmethod
    def from_parts(cls, mime_type: str, payload: str) -> "ImageRef":
        return cls(data_uri=build_data_uri(mime_type, payload))

    @classmethod
    def from_bytes(cls, data: bytes, mime_type: str) -> "ImageRef":
        return cls(data_uri=encode_image_bytes(data, mime_type))


# --------- TURN MODEL ---------


class Turn(BaseModel):
    """
    A single message in a conversation.

    User turns carry text and/or images. Assistant turns carry the text
    returned by the model (or an ``Error: ...`` notice).
    """

    model_config = {"frozen": True}

    role: MessageRole
    text: Optional[str] = None
    images: Tuple[ImageRef, ...] = ()

    @field_validator("images", mode="before")
    @classmethod
    def coerce_images(cls, value: Any) -> Any:
        """Accept bare data-URI strings alongside ImageRef instances."""
        if value is None:
            return ()
        return tuple(
            ImageRef(data_uri=item) if isinstance(item, str) else item
            for item in value
        )

    @model_validator(mode="after")
    def validate_not_empty(self) -> "Turn":
        if not self.text and not self.images:
            raise ValueError("A turn needs text or at least one image")
        return self


class RelayRequest(BaseModel):
    """A conversation split into prior context and the newest turn."""

    history: List[Turn] = Field(default_factory=list)
    current: Turn

    def turns(self) -> List[Turn]:
        """All turns in chronological order."""
        return [*self.history, self.current]


# --------- CONVERSATION ---------


class Conversation(BaseModel):
    """
    Ordered, append-only sequence of turns.

    Instances are immutable: `append` and `clear` return new
    conversations and leave the receiver untouched, so a relay call can
    safely hold on to the snapshot it was given.
    """

    model_config = {"frozen": True}

    turns: Tuple[Turn, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.turns

    @property
    def last(self) -> Optional[Turn]:
        return self.turns[-1] if self.turns else None

    def append(self, turn: Turn) -> "Conversation":
        """Return a new conversation with *turn* added at the end."""
        return Conversation(turns=(*self.turns, turn))

    def clear(self) -> "Conversation":
        return Conversation()

    def split(self) -> RelayRequest:
        """
        Split into ``history`` (every turn but the last) and ``current``.

        Raises:
            ValueError: If the conversation has no turns.
        """
        if not self.turns:
            raise ValueError("Conversation must contain at least one turn")
        return RelayRequest(history=list(self.turns[:-1]), current=self.turns[-1])
