"""
Pytest configuration for tests.

Provider settings are cleared from the environment for every test so a
local .env never leaks real credentials into the suite.
"""

import pytest
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROVIDER_ENV_VARS = (
    "GUESSR_PROVIDER",
    "GUESSR_MAX_TOKENS",
    "GEMINI_MODEL",
    "GOOGLE_AI_API_KEY",
    "GOOGLE_API_KEY",
    "ANTHROPIC_MODEL",
    "ANTHROPIC_API_KEY",
    "ANTHROPIC_AUTH_TOKEN",
    "ANTHROPIC_BASE_URL",
)


@pytest.fixture(autouse=True)
def clean_provider_env(monkeypatch):
    for name in PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
