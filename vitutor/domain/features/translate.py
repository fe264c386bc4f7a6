"""
Vietnamese to English translation with three context-specific candidates.
"""

from vitutor.domain.errors import TranslationError
from vitutor.domain.tasks import TaskKind, build_task
from vitutor.logger import logger
from vitutor.providers import AIProviderInterface, get_ai_provider
from vitutor.schemas.learning import TranslationCandidate


class TranslationService:
    """Translation service using AI provider."""

    def __init__(self, ai_provider: AIProviderInterface | None = None):
        self.ai_provider = ai_provider or get_ai_provider()

    async def translate_and_check(self, text: str) -> list[TranslationCandidate]:
        """
        Translate a Vietnamese sentence into English for three usage contexts.

        Returns:
            Exactly three candidates in the order the model produced them.

        Raises:
            InvalidInputError: text is blank (no provider call is made)
            TranslationError: the provider call failed or returned garbage
        """
        task = build_task(TaskKind.TRANSLATE, text)

        try:
            logger.debug(f"Translating sentence of {len(task.text)} chars")
            result = await self.ai_provider.generate_structured(
                task.prompt, task.response_model
            )
        except Exception as e:
            logger.exception(
                "Translation failed",
                extra={"error": str(e), "text_length": len(task.text)},
            )
            raise TranslationError() from e

        candidates = list(result.root)
        logger.info(
            "Translation completed",
            extra={"contexts": [c.context for c in candidates]},
        )
        return candidates
