"""
Tests for the translation and grammar services.
"""

import pytest
from pydantic import ValidationError

from vitutor.domain.errors import GrammarError, InvalidInputError, TranslationError
from vitutor.domain.features import GrammarService, TranslationService
from vitutor.providers import EmptyResponseError, MalformedResponseError
from vitutor.schemas.learning import TranslationResult


@pytest.mark.asyncio
async def test_translate_returns_three_candidates_in_order(mock_ai_provider, sample_translation):
    mock_ai_provider.generate_structured.return_value = sample_translation

    service = TranslationService(mock_ai_provider)
    candidates = await service.translate_and_check("Chúc bạn một ngày tốt lành!")

    assert len(candidates) == 3
    assert [c.context for c in candidates] == ["Formal", "Informal", "Business"]
    assert all(c.context and c.translation and c.explanation for c in candidates)

    prompt, response_model = mock_ai_provider.generate_structured.call_args.args
    assert "Chúc bạn một ngày tốt lành!" in prompt
    assert response_model is TranslationResult


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["", "   "])
async def test_translate_blank_input_makes_no_call(mock_ai_provider, text):
    service = TranslationService(mock_ai_provider)

    with pytest.raises(InvalidInputError):
        await service.translate_and_check(text)
    assert mock_ai_provider.generate_structured.call_count == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [EmptyResponseError("empty"), MalformedResponseError("bad")])
async def test_translate_provider_failure(mock_ai_provider, error):
    mock_ai_provider.generate_structured.side_effect = error

    service = TranslationService(mock_ai_provider)
    with pytest.raises(TranslationError) as exc_info:
        await service.translate_and_check("Xin chào")

    assert exc_info.value.__cause__ is error
    assert "translation" in str(exc_info.value)


def test_translation_result_rejects_wrong_count():
    with pytest.raises(ValueError):
        TranslationResult.model_validate(
            [{"context": "Formal", "translation": "Hello", "explanation": "Chào"}]
        )


def test_translation_result_rejects_blank_translation():
    candidates = [
        {"context": "Formal", "translation": "Hello", "explanation": "Chào"},
        {"context": "Casual", "translation": "   ", "explanation": "Chào"},
        {"context": "Friendly", "translation": "Hi", "explanation": "Chào"},
    ]

    with pytest.raises(ValidationError):
        TranslationResult.model_validate(candidates)


@pytest.mark.asyncio
async def test_translate_unexpected_failure_is_wrapped(mock_ai_provider):
    error = RuntimeError("boom")
    mock_ai_provider.generate_structured.side_effect = error

    service = TranslationService(mock_ai_provider)
    with pytest.raises(TranslationError) as exc_info:
        await service.translate_and_check("Xin chào")

    assert exc_info.value.__cause__ is error


@pytest.mark.asyncio
async def test_correct_grammar(mock_ai_provider, sample_correction):
    mock_ai_provider.generate_structured.return_value = sample_correction

    service = GrammarService(mock_ai_provider)
    correction = await service.correct_grammar("He don't know what to do.")

    assert "doesn't" in correction.corrected_sentence
    assert correction.explanations[0].original == "don't"
    assert len(correction.alternatives) == 3


@pytest.mark.asyncio
async def test_correct_grammar_blank_input_makes_no_call(mock_ai_provider):
    service = GrammarService(mock_ai_provider)

    with pytest.raises(InvalidInputError):
        await service.correct_grammar("  ")
    assert mock_ai_provider.generate_structured.call_count == 0


@pytest.mark.asyncio
async def test_correct_grammar_failure(mock_ai_provider):
    mock_ai_provider.generate_structured.side_effect = MalformedResponseError("bad")

    service = GrammarService(mock_ai_provider)
    with pytest.raises(GrammarError):
        await service.correct_grammar("He go home.")


@pytest.mark.asyncio
async def test_correct_grammar_unexpected_failure_is_wrapped(mock_ai_provider):
    mock_ai_provider.generate_structured.side_effect = KeyError("correctedSentence")

    service = GrammarService(mock_ai_provider)
    with pytest.raises(GrammarError):
        await service.correct_grammar("He go home.")
