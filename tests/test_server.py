"""Tests for the HTTP API."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from guessr.llm import BaseProvider, RelayResult
from guessr.server import create_app, get_relay_provider

PNG_URI = "data:image/png;base64,AAAA"


@pytest.fixture
def provider():
    provider = MagicMock(spec=BaseProvider)
    provider.relay = AsyncMock(return_value=RelayResult.from_text("Paris, France"))
    return provider


@pytest.fixture
def client(provider):
    app = create_app()
    app.dependency_overrides[get_relay_provider] = lambda: provider
    return TestClient(app)


class TestAnalyzeEndpoint:
    def test_success(self, client, provider):
        response = client.post(
            "/api/analyze",
            json={"messages": [{"role": "user", "text": "Where is this?", "images": [PNG_URI]}]},
        )

        assert response.status_code == 200
        assert response.json() == {"text": "Paris, France"}
        conversation = provider.relay.await_args.args[0]
        (turn,) = conversation.turns
        assert turn.text == "Where is this?"
        assert turn.images[0].mime_type == "image/png"

    def test_history_order_preserved(self, client, provider):
        client.post(
            "/api/analyze",
            json={
                "messages": [
                    {"role": "user", "images": [PNG_URI]},
                    {"role": "assistant", "text": "Paris"},
                    {"role": "user", "text": "Are you sure?"},
                ]
            },
        )

        conversation = provider.relay.await_args.args[0]
        assert [t.role.value for t in conversation.turns] == ["user", "assistant", "user"]

    def test_malformed_image_is_passed_through_for_translation(self, client, provider):
        response = client.post(
            "/api/analyze",
            json={"messages": [{"role": "user", "text": "hi", "images": ["nope"]}]},
        )

        assert response.status_code == 200

    def test_relay_error(self, client, provider):
        provider.relay.return_value = RelayResult.from_error("rate limited")

        response = client.post(
            "/api/analyze", json={"messages": [{"role": "user", "text": "Where?"}]}
        )

        assert response.status_code == 500
        assert response.json() == {"error": "rate limited"}

    @pytest.mark.parametrize(
        "body",
        [
            {"messages": []},
            {},
            {"messages": [{"role": "user"}]},
            {"messages": [{"role": "system", "text": "hi"}]},
        ],
    )
    def test_invalid_body(self, client, provider, body):
        response = client.post("/api/analyze", json=body)

        assert response.status_code == 500
        assert "error" in response.json()
        provider.relay.assert_not_awaited()


class TestProviderResolution:
    def test_missing_credential_is_request_time_error(self):
        client = TestClient(create_app())

        response = client.post(
            "/api/analyze", json={"messages": [{"role": "user", "text": "Where?"}]}
        )

        assert response.status_code == 500
        assert "GOOGLE_AI_API_KEY" in response.json()["error"]

    def test_unsupported_provider(self, monkeypatch):
        monkeypatch.setenv("GUESSR_PROVIDER", "openai")
        client = TestClient(create_app())

        response = client.post(
            "/api/analyze", json={"messages": [{"role": "user", "text": "Where?"}]}
        )

        assert response.status_code == 500
        assert "Unsupported provider" in response.json()["error"]

    def test_non_integer_max_tokens_is_request_time_error(self, monkeypatch):
        monkeypatch.setenv("GUESSR_MAX_TOKENS", "lots")
        client = TestClient(create_app())

        response = client.post(
            "/api/analyze", json={"messages": [{"role": "user", "text": "Where?"}]}
        )

        assert response.status_code == 500
        assert "GUESSR_MAX_TOKENS" in response.json()["error"]
