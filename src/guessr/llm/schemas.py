from typing import Dict, Optional

from pydantic import BaseModel, model_validator

# Returned as a successful answer when the provider sent no text content.
NO_RESPONSE_TEXT = "No response"


class RelayResult(BaseModel):
    """Normalized outcome of one relay call: answer text or an error message."""

    text: Optional[str] = None
    error: Optional[str] = None

    @model_validator(mode="after")
    def validate_exactly_one(self) -> "RelayResult":
        if (self.text is None) == (self.error is None):
            raise ValueError("RelayResult needs exactly one of text or error")
        return self

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_text(cls, text: str) -> "RelayResult":
        return cls(text=text)

    @classmethod
    def from_error(cls, error: str) -> "RelayResult":
        """Create a failed result from an error message."""
        return cls(error=error)

    def to_response(self) -> Dict[str, str]:
        """Body for the HTTP API: ``{"text": ...}`` or ``{"error": ...}``."""
        if self.is_ok:
            return {"text": self.text}
        return {"error": self.error}
