"""Prompts for Guessr."""

from .geolocation import DEFAULT_IMAGE_QUESTION, GEOLOCATION_SYSTEM_PROMPT

__all__ = [
    "DEFAULT_IMAGE_QUESTION",
    "GEOLOCATION_SYSTEM_PROMPT",
]
