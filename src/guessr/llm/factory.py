"""
Provider factory for Guessr.

Creates provider instances based on configuration.
"""

from typing import Optional

from guessr.models.providers import Provider

from .base import BaseProvider
from .config import RelayConfig


def get_provider(config: Optional[RelayConfig] = None) -> BaseProvider:
    """
    Get a provider instance based on configuration.

    Args:
        config: Relay configuration. Defaults to one built from the environment.

    Returns:
        BaseProvider instance

    Raises:
        ValueError: If provider is not supported
        ImportError: If provider dependencies are not installed
    """
    config = config or RelayConfig()
    provider = config.provider.lower()

    if provider == Provider.GEMINI:
        try:
            from .gemini import GeminiProvider

            return GeminiProvider(config)
        except ImportError:
            raise ImportError(
                "google-genai is required for Gemini. Install with: pip install google-genai"
            )

    elif provider == Provider.ANTHROPIC:
        try:
            from .anthropic import AnthropicProvider

            return AnthropicProvider(config)
        except ImportError:
            raise ImportError(
                "anthropic is required for Anthropic. Install with: pip install anthropic"
            )

    else:
        raise ValueError(
            f"Unsupported provider: {provider}. Supported providers: gemini, anthropic"
        )
