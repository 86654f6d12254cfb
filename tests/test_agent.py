"""Tests for the in-memory geolocation chat session."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from guessr.agents import AgentBusyError, GeolocationAgent
from guessr.llm import BaseProvider, RelayConfig, RelayResult
from guessr.llm.gemini import GeminiProvider
from guessr.models.conversation import ImageRef, MessageRole
from guessr.prompts import DEFAULT_IMAGE_QUESTION

PNG_URI = "data:image/png;base64,AAAA"


def _provider(result: RelayResult) -> MagicMock:
    provider = MagicMock(spec=BaseProvider)
    provider.relay = AsyncMock(return_value=result)
    return provider


class TestDraftImages:
    def test_attach_and_remove(self):
        agent = GeolocationAgent(provider=_provider(RelayResult.from_text("x")))
        agent.attach_image(PNG_URI)
        agent.attach_image(ImageRef.from_parts("image/jpeg", "/9j/"))

        agent.remove_image(0)

        assert [img.mime_type for img in agent.draft_images] == ["image/jpeg"]

    def test_clear_resets_everything(self):
        agent = GeolocationAgent(provider=_provider(RelayResult.from_text("x")))
        agent.attach_image(PNG_URI)

        agent.clear()

        assert agent.draft_images == []
        assert agent.conversation.is_empty


class TestAsk:
    @pytest.mark.asyncio
    async def test_nothing_to_send(self):
        provider = _provider(RelayResult.from_text("x"))
        agent = GeolocationAgent(provider=provider)

        assert await agent.ask("   ") is None
        provider.relay.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_success_appends_user_and_assistant_turns(self):
        provider = _provider(RelayResult.from_text("Paris, France"))
        agent = GeolocationAgent(provider=provider)
        agent.attach_image(PNG_URI)

        outcome = await agent.ask("  Where is this?  ")

        assert outcome.result.is_ok
        assert outcome.reply == "Paris, France"
        user, assistant = agent.conversation.turns
        assert user.role == MessageRole.USER
        assert user.text == "Where is this?"
        assert user.images == (ImageRef(data_uri=PNG_URI),)
        assert assistant.role == MessageRole.ASSISTANT
        assert assistant.text == "Paris, France"
        assert agent.draft_images == []

    @pytest.mark.asyncio
    async def test_relay_receives_conversation_ending_with_user_turn(self):
        provider = _provider(RelayResult.from_text("ok"))
        agent = GeolocationAgent(provider=provider)

        await agent.ask("first")
        await agent.ask("second")

        sent = provider.relay.await_args.args[0]
        assert [t.text for t in sent.turns] == ["first", "ok", "second"]

    @pytest.mark.asyncio
    async def test_images_without_text_use_default_question(self):
        agent = GeolocationAgent(provider=_provider(RelayResult.from_text("ok")))
        agent.attach_image(PNG_URI)

        await agent.ask()

        assert agent.conversation.turns[0].text == DEFAULT_IMAGE_QUESTION

    @pytest.mark.asyncio
    async def test_error_becomes_assistant_turn(self):
        agent = GeolocationAgent(provider=_provider(RelayResult.from_error("rate limited")))

        outcome = await agent.ask("Where?")

        assert not outcome.result.is_ok
        assert agent.conversation.last.role == MessageRole.ASSISTANT
        assert agent.conversation.last.text == "Error: rate limited"
        assert not agent.busy

    @pytest.mark.asyncio
    async def test_second_question_while_busy_is_rejected(self):
        release = asyncio.Event()

        async def slow_relay(conversation):
            await release.wait()
            return RelayResult.from_text("done")

        provider = MagicMock(spec=BaseProvider)
        provider.relay = AsyncMock(side_effect=slow_relay)
        agent = GeolocationAgent(provider=provider)

        first = asyncio.create_task(agent.ask("one"))
        await asyncio.sleep(0)
        assert agent.busy

        with pytest.raises(AgentBusyError):
            await agent.ask("two")

        release.set()
        await first
        assert not agent.busy
        assert [t.text for t in agent.conversation.turns] == ["one", "done"]

    @pytest.mark.asyncio
    async def test_missing_configuration_surfaces_as_error_turn(self):
        agent = GeolocationAgent(provider=GeminiProvider(RelayConfig(provider="gemini")))

        outcome = await agent.ask("Where?")

        assert "GOOGLE_AI_API_KEY" in outcome.result.error
        assert agent.conversation.last.text.startswith("Error: ")
