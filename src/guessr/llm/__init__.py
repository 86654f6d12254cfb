"""Provider relay for Guessr."""

from .base import BaseProvider
from .config import RelayConfig
from .errors import ConfigurationError, RelayError, TransportError, UpstreamError
from .factory import get_provider
from .schemas import NO_RESPONSE_TEXT, RelayResult

__all__ = [
    "BaseProvider",
    "ConfigurationError",
    "NO_RESPONSE_TEXT",
    "RelayConfig",
    "RelayError",
    "RelayResult",
    "TransportError",
    "UpstreamError",
    "get_provider",
]
