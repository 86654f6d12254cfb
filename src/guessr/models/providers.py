from enum import Enum


class Provider(str, Enum):
    GEMINI = "gemini"
    ANTHROPIC = "anthropic"
