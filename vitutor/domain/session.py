"""
Caller-side owner of the task context and the follow-up conversation.

The services in ``vitutor.domain.features`` hold no state between calls.
TutorSession is the piece a front end keeps for one learner: it snapshots
the latest primary result and records every chat turn against it.
"""

from enum import Enum

from vitutor.domain.context import grammar_context, translation_context, word_meaning_context
from vitutor.domain.errors import ChatError, InvalidInputError
from vitutor.domain.features import (
    ChatService,
    GrammarService,
    TranslationService,
    WordMeaningService,
)
from vitutor.domain.tasks import require_text
from vitutor.logger import get_service_logger
from vitutor.providers import AIProviderInterface, get_ai_provider
from vitutor.schemas.learning import (
    ChatMessage,
    GrammarCorrection,
    TranslationCandidate,
    WordMeaning,
)

log = get_service_logger("Session")

CHAT_ERROR_TURN = "Sorry, I encountered an error: {message}"


class ConversationState(str, Enum):
    EMPTY = "empty"
    ACTIVE = "active"
    AWAITING_ANSWER = "awaiting_answer"


class TutorSession:
    """One learner's current primary result and its follow-up conversation."""

    def __init__(self, ai_provider: AIProviderInterface | None = None):
        provider = ai_provider or get_ai_provider()
        self.translation_service = TranslationService(provider)
        self.grammar_service = GrammarService(provider)
        self.word_meaning_service = WordMeaningService(provider)
        self.chat_service = ChatService(provider)

        self.context_prompt: str | None = None
        self.messages: list[ChatMessage] = []
        self.state = ConversationState.EMPTY

    def reset(self) -> None:
        """Drop the task context and start an empty conversation."""
        self.context_prompt = None
        self.messages = []
        self.state = ConversationState.EMPTY

    def _activate(self, context_prompt: str) -> None:
        self.context_prompt = context_prompt
        self.state = ConversationState.ACTIVE
        log.info("activate", "Conversation ready", context_length=len(context_prompt))

    async def translate(self, text: str) -> list[TranslationCandidate]:
        text = require_text(text)
        self.reset()
        candidates = await self.translation_service.translate_and_check(text)
        self._activate(translation_context(text, candidates))
        return candidates

    async def correct_grammar(self, text: str) -> GrammarCorrection:
        text = require_text(text)
        self.reset()
        correction = await self.grammar_service.correct_grammar(text)
        self._activate(grammar_context(text, correction))
        return correction

    async def lookup_word(self, word: str) -> WordMeaning:
        word = require_text(word)
        self.reset()
        meaning = await self.word_meaning_service.get_word_meaning(word)
        self._activate(word_meaning_context(word, meaning))
        return meaning

    async def ask(self, question: str) -> bool:
        """
        Ask a follow-up question about the current result.

        The question is recorded before the provider is called. A failed
        answer is recorded as a visible model turn instead of being dropped.

        Returns:
            True when the model answered, False when an error turn was recorded
            or the conversation was reset while the answer was pending.
        """
        if self.state is not ConversationState.ACTIVE:
            raise InvalidInputError("There is no result to ask about yet.")
        question = require_text(question)

        conversation = self.messages
        history = list(conversation)
        conversation.append(ChatMessage(role="user", text=question))
        self.state = ConversationState.AWAITING_ANSWER

        try:
            try:
                reply = await self.chat_service.ask_follow_up(
                    self.context_prompt or "", history, question
                )
                answered = True
            except ChatError as e:
                reply = CHAT_ERROR_TURN.format(message=e)
                answered = False
            except Exception as e:
                log.exception("ask", "Unexpected follow-up failure", error=str(e))
                reply = CHAT_ERROR_TURN.format(message=ChatError())
                answered = False

            if conversation is not self.messages:
                log.warning("ask", "Conversation reset while awaiting answer; reply dropped")
                return False

            conversation.append(ChatMessage(role="model", text=reply))
            return answered
        finally:
            # A cancelled or failed answer never leaves the session waiting.
            if conversation is self.messages:
                self.state = ConversationState.ACTIVE
