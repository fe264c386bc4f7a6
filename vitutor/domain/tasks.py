"""
Builds the prompt and response contract for each primary learning task.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from vitutor.domain.errors import InvalidInputError
from vitutor.domain.prompts import GRAMMAR_PROMPT, TRANSLATE_PROMPT, WORD_MEANING_PROMPT
from vitutor.schemas.learning import GrammarCorrection, TranslationResult, WordMeaningText


class TaskKind(str, Enum):
    TRANSLATE = "translate"
    GRAMMAR = "grammar"
    WORD_MEANING = "wordMeaning"


_TASKS: dict[TaskKind, tuple[str, type[BaseModel]]] = {
    TaskKind.TRANSLATE: (TRANSLATE_PROMPT, TranslationResult),
    TaskKind.GRAMMAR: (GRAMMAR_PROMPT, GrammarCorrection),
    TaskKind.WORD_MEANING: (WORD_MEANING_PROMPT, WordMeaningText),
}


@dataclass(frozen=True)
class TaskRequest:
    """Prompt and response contract handed verbatim to the provider."""

    kind: TaskKind
    text: str
    prompt: str
    response_model: type[BaseModel]

    @property
    def schema(self) -> dict[str, Any]:
        return self.response_model.model_json_schema(by_alias=True)


def require_text(text: Any) -> str:
    """Return text stripped, or raise InvalidInputError when it is blank."""
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError()
    return text.strip()


def build_task(kind: TaskKind | str, text: Any) -> TaskRequest:
    """
    Build the prompt and structured-output contract for one task.

    Args:
        kind: "translate", "grammar" or "wordMeaning"
        text: Raw user input (a sentence, or a single word for wordMeaning)

    Raises:
        InvalidInputError: blank input or unknown task kind
    """
    try:
        task_kind = TaskKind(kind)
    except ValueError as e:
        raise InvalidInputError(f"Unknown task: {kind}") from e

    clean = require_text(text)
    template, response_model = _TASKS[task_kind]
    return TaskRequest(
        kind=task_kind,
        text=clean,
        prompt=template.format(text=clean),
        response_model=response_model,
    )
