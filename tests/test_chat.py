"""
Unit tests for ChatService and transcript reconstruction.
"""

import pytest

from vitutor.domain.errors import ChatError, InvalidInputError
from vitutor.domain.features import ChatService, build_transcript
from vitutor.domain.prompts import CHAT_ACKNOWLEDGEMENT
from vitutor.providers import AIGenerationError
from vitutor.schemas.learning import ChatMessage


def test_build_transcript_order():
    history = [
        ChatMessage(role="user", text="Q1"),
        ChatMessage(role="model", text="A1"),
    ]

    turns = build_transcript("CTX", history, "Q2")

    assert len(turns) == 5
    assert turns[0].role == "user"
    assert "CTX" in turns[0].text
    assert turns[0].text.startswith("You are an AI assistant.")
    assert turns[1] == ChatMessage(role="model", text=CHAT_ACKNOWLEDGEMENT)
    assert [(t.role, t.text) for t in turns[2:]] == [
        ("user", "Q1"),
        ("model", "A1"),
        ("user", "Q2"),
    ]


def test_build_transcript_accepts_plain_dicts():
    turns = build_transcript("CTX", [{"role": "user", "text": "Q1"}], "Q2")
    assert turns[2] == ChatMessage(role="user", text="Q1")


def test_build_transcript_does_not_mutate_history():
    history = [ChatMessage(role="user", text="Q1"), ChatMessage(role="model", text="A1")]
    build_transcript("CTX", history, "Q2")
    assert len(history) == 2


@pytest.mark.asyncio
async def test_ask_follow_up_replays_full_transcript(mock_ai_provider):
    mock_ai_provider.generate_chat.return_value = "  Answer two.  "
    history = [{"role": "user", "text": "Q1"}, {"role": "model", "text": "A1"}]

    service = ChatService(mock_ai_provider)
    answer = await service.ask_follow_up("CTX", history, "Q2")

    assert answer == "Answer two."
    turns = mock_ai_provider.generate_chat.call_args.args[0]
    assert [(t.role, t.text) for t in turns[2:]] == [
        ("user", "Q1"),
        ("model", "A1"),
        ("user", "Q2"),
    ]
    assert len(turns) == 5


@pytest.mark.asyncio
@pytest.mark.parametrize("question", ["", "   "])
async def test_ask_follow_up_blank_question(mock_ai_provider, question):
    service = ChatService(mock_ai_provider)

    with pytest.raises(InvalidInputError):
        await service.ask_follow_up("CTX", [], question)
    assert mock_ai_provider.generate_chat.call_count == 0


@pytest.mark.asyncio
async def test_ask_follow_up_failure(mock_ai_provider):
    mock_ai_provider.generate_chat.side_effect = AIGenerationError("down")

    service = ChatService(mock_ai_provider)
    with pytest.raises(ChatError):
        await service.ask_follow_up("CTX", [], "Why?")


@pytest.mark.asyncio
async def test_ask_follow_up_unexpected_failure(mock_ai_provider):
    mock_ai_provider.generate_chat.side_effect = RuntimeError("boom")

    service = ChatService(mock_ai_provider)
    with pytest.raises(ChatError):
        await service.ask_follow_up("CTX", [], "Why?")


@pytest.mark.asyncio
async def test_identical_questions_are_not_cached(mock_ai_provider):
    mock_ai_provider.generate_chat.side_effect = ["First", AIGenerationError("down")]
    service = ChatService(mock_ai_provider)

    assert await service.ask_follow_up("CTX", [], "Why?") == "First"
    with pytest.raises(ChatError):
        await service.ask_follow_up("CTX", [], "Why?")

    assert mock_ai_provider.generate_chat.await_count == 2
