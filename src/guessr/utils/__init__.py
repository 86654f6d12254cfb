"""Helpers for Guessr."""

from .data_uri import (
    MalformedImageError,
    build_data_uri,
    encode_image_bytes,
    parse_data_uri,
)

__all__ = [
    "MalformedImageError",
    "build_data_uri",
    "encode_image_bytes",
    "parse_data_uri",
]
