from typing import Annotated, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel

# --- Translation ---


class TranslationCandidate(BaseModel):
    """One English rendering of the Vietnamese input for a usage context."""

    model_config = ConfigDict(str_strip_whitespace=True)

    context: str = Field(
        ...,
        min_length=1,
        description="The context of the translation (e.g., Formal, Informal, Technical).",
    )
    translation: str = Field(..., min_length=1, description="The English translation.")
    explanation: str = Field(
        ...,
        min_length=1,
        description="A brief explanation in Vietnamese of why this translation fits the context.",
    )


class TranslationResult(
    RootModel[
        Annotated[List[TranslationCandidate], Field(min_length=3, max_length=3)]
    ]
):
    """An array of three translation objects, each for a different context."""


# --- Grammar ---


class GrammarExplanation(BaseModel):
    original: str = Field(
        ..., description="The incorrect word or phrase from the original sentence."
    )
    corrected: str = Field(..., description="The corrected word or phrase.")
    explanation: str = Field(
        ..., description="A detailed explanation of the error, in Vietnamese."
    )


class GrammarCorrection(BaseModel):
    """Grammar check result for one English sentence."""

    model_config = ConfigDict(populate_by_name=True)

    corrected_sentence: str = Field(
        ...,
        alias="correctedSentence",
        description="The grammatically correct version of the sentence.",
    )
    explanations: List[GrammarExplanation] = Field(
        ...,
        description="An array of objects, where each object explains a specific grammar error.",
    )
    alternatives: List[str] = Field(
        ...,
        description=(
            "An array of three alternative ways to phrase the sentence "
            "(e.g., more natural, formal, or concise)."
        ),
    )


# --- Word meaning ---


class Pronunciations(BaseModel):
    uk: str = Field(
        ...,
        description="The phonetic transcription for UK English, wrapped in slashes (e.g., /bəˈnevələnt/).",
    )
    us: str = Field(
        ...,
        description="The phonetic transcription for US English, wrapped in slashes (e.g., /bəˈnevələnt/).",
    )


class WordForm(BaseModel):
    form: str = Field(..., description="The word form.")
    type: str = Field(
        ...,
        description='The part of speech for the word form (e.g., "Noun", "Adverb", "Adjective").',
    )


class ExampleSentence(BaseModel):
    english: str = Field(..., description="The example sentence in English.")
    vietnamese: str = Field(
        ..., description="The Vietnamese translation of the example sentence."
    )


class WordMeaningText(BaseModel):
    """Structured dictionary entry produced by the text model."""

    model_config = ConfigDict(populate_by_name=True)

    definition: str = Field(..., description="The definition of the word in Vietnamese.")
    word_type: str = Field(
        ...,
        alias="wordType",
        description="The part of speech (e.g., Noun, Verb, Adjective).",
    )
    pronunciations: Pronunciations
    word_forms: List[WordForm] = Field(
        ...,
        alias="wordForms",
        description=(
            "A list of objects, where each object contains a different form of "
            "the word and its part of speech (e.g., Noun, Verb, Adverb)."
        ),
    )
    example_sentences: List[ExampleSentence] = Field(
        ...,
        alias="exampleSentences",
        min_length=2,
        description="An array of at least two example sentence objects.",
    )


class WordMeaning(WordMeaningText):
    """Dictionary entry merged with the two pronunciation clips (base64, may be null)."""

    uk_audio: Optional[str] = Field(None, alias="ukAudio")
    us_audio: Optional[str] = Field(None, alias="usAudio")


# --- Follow-up chat ---


class ChatMessage(BaseModel):
    role: Literal["user", "model"]
    text: str
