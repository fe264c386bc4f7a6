"""
Task context snapshots that ground follow-up questions.

A snapshot is taken once per primary result and never changes afterwards.
"""

import json
from typing import Sequence

from vitutor.domain.prompts import (
    GRAMMAR_CONTEXT_TEMPLATE,
    TRANSLATE_CONTEXT_TEMPLATE,
    WORD_MEANING_CONTEXT_TEMPLATE,
)
from vitutor.schemas.learning import GrammarCorrection, TranslationCandidate, WordMeaning


def _dump(data) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def translation_context(text: str, candidates: Sequence[TranslationCandidate]) -> str:
    result_json = _dump([c.model_dump() for c in candidates])
    return TRANSLATE_CONTEXT_TEMPLATE.format(text=text, result_json=result_json)


def grammar_context(text: str, correction: GrammarCorrection) -> str:
    result_json = _dump(correction.model_dump(by_alias=True))
    return GRAMMAR_CONTEXT_TEMPLATE.format(text=text, result_json=result_json)


def word_meaning_context(word: str, meaning: WordMeaning) -> str:
    # Audio fields are never part of the snapshot.
    result_json = _dump(
        meaning.model_dump(by_alias=True, exclude={"uk_audio", "us_audio"})
    )
    return WORD_MEANING_CONTEXT_TEMPLATE.format(text=word, result_json=result_json)
