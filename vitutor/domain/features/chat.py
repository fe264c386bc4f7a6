"""
Follow-up chat about a primary result.

The provider keeps no session between calls, so the whole transcript is
rebuilt from the caller's history on every question.
"""

from collections.abc import Mapping, Sequence

from vitutor.domain.errors import ChatError
from vitutor.domain.prompts import CHAT_ACKNOWLEDGEMENT, CHAT_CONTEXT_PROMPT
from vitutor.domain.tasks import require_text
from vitutor.logger import logger
from vitutor.providers import AIProviderInterface, get_ai_provider
from vitutor.schemas.learning import ChatMessage


def build_transcript(
    context_prompt: str,
    history: Sequence[ChatMessage | Mapping],
    question: str,
) -> list[ChatMessage]:
    """
    Return the full turn sequence for one follow-up call.

    Order: context turn, acknowledgement turn, history as given, new question.
    """
    turns = [
        ChatMessage(role="user", text=CHAT_CONTEXT_PROMPT.format(context_prompt=context_prompt)),
        ChatMessage(role="model", text=CHAT_ACKNOWLEDGEMENT),
    ]
    turns.extend(ChatMessage.model_validate(msg) for msg in history)
    turns.append(ChatMessage(role="user", text=question))
    return turns


class ChatService:
    """AI chat service answering questions about a translation, correction or definition."""

    def __init__(self, ai_provider: AIProviderInterface | None = None):
        self.ai_provider = ai_provider or get_ai_provider()

    async def ask_follow_up(
        self,
        context_prompt: str,
        history: Sequence[ChatMessage | Mapping],
        question: str,
    ) -> str:
        """
        Answer a follow-up question.

        Args:
            context_prompt: Snapshot of the primary task and its result
            history: Earlier turns of this conversation, oldest first
            question: The new user question

        Returns:
            The trimmed answer text
        """
        question = require_text(question)
        turns = build_transcript(context_prompt or "", history, question)

        try:
            logger.debug(
                "Processing chat request",
                extra={"question_length": len(question), "history_size": len(history)},
            )
            answer = await self.ai_provider.generate_chat(turns)
        except Exception as e:
            logger.exception(
                "Chat request failed",
                extra={"error": str(e), "question_preview": question[:50]},
            )
            raise ChatError() from e

        logger.info(
            "Chat response generated",
            extra={"response_length": len(answer), "turns": len(turns)},
        )
        return answer.strip()
