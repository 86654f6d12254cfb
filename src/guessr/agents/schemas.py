"""
Result models for Guessr agents.
"""

from pydantic import BaseModel, Field

from guessr.llm.schemas import RelayResult
from guessr.models.conversation import Conversation


class AgentResult(BaseModel):
    """Outcome of one question asked through an agent."""

    result: RelayResult = Field(description="Relay outcome for the question")
    conversation: Conversation = Field(
        description="Conversation after the user and assistant turns were appended"
    )

    @property
    def reply(self) -> str:
        """Text of the appended assistant turn."""
        return self.conversation.last.text
