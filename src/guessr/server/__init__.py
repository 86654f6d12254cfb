"""HTTP surface for Guessr."""

from .app import app, create_app, get_relay_provider

__all__ = [
    "app",
    "create_app",
    "get_relay_provider",
]
