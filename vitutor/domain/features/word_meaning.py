"""
Word lookup: one definition call and two pronunciation calls, run concurrently.

The definition is mandatory; each pronunciation clip is optional and degrades
to null on its own.
"""

import asyncio
import base64
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from vitutor.domain.errors import DefinitionUnavailableError
from vitutor.domain.tasks import TaskKind, build_task
from vitutor.logger import get_service_logger
from vitutor.providers import AIProviderInterface, VoiceProfile, get_ai_provider
from vitutor.schemas.learning import WordMeaning, WordMeaningText

log = get_service_logger("WordMeaning")

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failed:
    reason: BaseException


Outcome = Union[Success[Any], Failed]


def settle(result: Any) -> Outcome:
    """Tag one asyncio.gather(return_exceptions=True) result."""
    if isinstance(result, BaseException):
        return Failed(result)
    return Success(result)


class WordMeaningService:
    """Dictionary entry plus UK and US pronunciation audio for an English word."""

    def __init__(self, ai_provider: AIProviderInterface | None = None):
        self.ai_provider = ai_provider or get_ai_provider()

    async def get_word_meaning(self, word: str) -> WordMeaning:
        """
        Look up an English word.

        The three provider calls are issued together and all of them are
        awaited to completion before the results are merged.

        Raises:
            InvalidInputError: word is blank (no provider call is made)
            DefinitionUnavailableError: the definition call failed
        """
        task = build_task(TaskKind.WORD_MEANING, word)
        log.debug("lookup", "Dispatching definition and speech calls", word=task.text)

        results = await asyncio.gather(
            self.ai_provider.generate_structured(task.prompt, task.response_model),
            self.ai_provider.generate_speech(task.text, VoiceProfile.UK),
            self.ai_provider.generate_speech(task.text, VoiceProfile.US),
            return_exceptions=True,
        )
        text_outcome, uk_outcome, us_outcome = (settle(r) for r in results)

        return self.merge(task.text, text_outcome, uk_outcome, us_outcome)

    def merge(
        self,
        word: str,
        text_outcome: Outcome,
        uk_outcome: Outcome,
        us_outcome: Outcome,
    ) -> WordMeaning:
        """Combine the three outcomes; only a failed definition is fatal."""
        if isinstance(text_outcome, Failed):
            log.error(
                "merge",
                "Definition unavailable",
                word=word,
                error=str(text_outcome.reason),
                error_type=type(text_outcome.reason).__name__,
            )
            raise DefinitionUnavailableError() from text_outcome.reason

        entry: WordMeaningText = text_outcome.value
        meaning = WordMeaning.model_validate(
            {
                **entry.model_dump(),
                "uk_audio": self._audio_field(word, VoiceProfile.UK, uk_outcome),
                "us_audio": self._audio_field(word, VoiceProfile.US, us_outcome),
            }
        )
        log.info(
            "merge",
            "Word meaning ready",
            word=word,
            uk_audio=meaning.uk_audio is not None,
            us_audio=meaning.us_audio is not None,
        )
        return meaning

    def _audio_field(self, word: str, voice: VoiceProfile, outcome: Outcome) -> str | None:
        if isinstance(outcome, Failed):
            log.warning(
                "speech",
                f"Could not generate {voice.name} audio",
                word=word,
                error=str(outcome.reason),
            )
            return None
        if not outcome.value:
            return None
        return base64.b64encode(outcome.value).decode("ascii")
