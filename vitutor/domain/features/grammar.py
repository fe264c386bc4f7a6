from vitutor.domain.errors import GrammarError
from vitutor.domain.tasks import TaskKind, build_task
from vitutor.logger import logger
from vitutor.providers import AIProviderInterface, get_ai_provider
from vitutor.schemas.learning import GrammarCorrection


class GrammarService:
    """English grammar checker with Vietnamese explanations."""

    def __init__(self, ai_provider: AIProviderInterface | None = None):
        self.ai_provider = ai_provider or get_ai_provider()

    async def correct_grammar(self, text: str) -> GrammarCorrection:
        """Correct an English sentence and explain each fix."""
        task = build_task(TaskKind.GRAMMAR, text)

        try:
            correction = await self.ai_provider.generate_structured(
                task.prompt, task.response_model
            )
        except Exception as e:
            logger.exception(
                "Grammar correction failed",
                extra={"error": str(e), "text_length": len(task.text)},
            )
            raise GrammarError() from e

        if len(correction.alternatives) != 3:
            logger.warning(
                "Unexpected number of alternatives",
                extra={"count": len(correction.alternatives)},
            )
        logger.info(
            "Grammar correction completed",
            extra={"errors_found": len(correction.explanations)},
        )
        return correction
