"""
Relay configuration for Guessr.

Pydantic model for the active provider. Values not passed explicitly are
read from the environment when the config is constructed; a missing
credential is only reported when a relay call is made.
"""

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

from guessr.prompts import GEOLOCATION_SYSTEM_PROMPT

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_ANTHROPIC_MODEL = "claude-sonnet-4-20250514"


def _env_int(name: str, default: int) -> int:
    """Integer setting from the environment, with an error naming the variable."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class RelayConfig(BaseModel):
    """Provider configuration. Defaults to Gemini."""

    provider: Literal["gemini", "anthropic"] = Field(
        default_factory=lambda: os.getenv("GUESSR_PROVIDER", "gemini").lower()
    )
    model: Optional[str] = None
    max_tokens: int = Field(
        default_factory=lambda: _env_int("GUESSR_MAX_TOKENS", 4096)
    )
    system_prompt: str = GEOLOCATION_SYSTEM_PROMPT

    # Credentials (fall back to env vars if None)
    api_key: Optional[str] = None  # Gemini, or Anthropic x-api-key
    auth_token: Optional[str] = None  # Anthropic bearer token
    base_url: Optional[str] = None  # Anthropic only

    @model_validator(mode="after")
    def apply_provider_env(self):
        """Fill provider-specific settings from the environment."""
        if self.provider == "gemini":
            self.model = self.model or os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL)
            self.api_key = (
                self.api_key
                or os.getenv("GOOGLE_AI_API_KEY")
                or os.getenv("GOOGLE_API_KEY")
            )
        elif self.provider == "anthropic":
            self.model = self.model or os.getenv(
                "ANTHROPIC_MODEL", DEFAULT_ANTHROPIC_MODEL
            )
            self.api_key = self.api_key or os.getenv("ANTHROPIC_API_KEY")
            self.auth_token = self.auth_token or os.getenv("ANTHROPIC_AUTH_TOKEN")
            self.base_url = self.base_url or os.getenv("ANTHROPIC_BASE_URL")
        return self
