"""Request models for the HTTP API."""

from typing import List

from pydantic import BaseModel, Field

from guessr.models.conversation import Conversation, Turn


class AnalyzeRequest(BaseModel):
    """Body of ``POST /api/analyze``: the whole conversation, oldest first."""

    messages: List[Turn] = Field(min_length=1)

    def to_conversation(self) -> Conversation:
        return Conversation(turns=tuple(self.messages))
