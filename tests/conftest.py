"""
Pytest configuration and fixtures for vitutor tests.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment before importing app modules
os.environ["GEMINI_API_KEY"] = "test-api-key"
os.environ.setdefault("LOG_LEVEL", "WARNING")

from vitutor.schemas.learning import (  # noqa: E402
    GrammarCorrection,
    TranslationResult,
    WordMeaningText,
)


@pytest.fixture
def mock_ai_provider():
    """Create a mock AI provider for testing."""
    provider = MagicMock()
    provider.generate_structured = AsyncMock()
    provider.generate_speech = AsyncMock(return_value=b"audio-bytes")
    provider.generate_chat = AsyncMock(return_value="Mock AI response")
    return provider


@pytest.fixture
def sample_translation():
    return TranslationResult.model_validate(
        [
            {
                "context": "Formal",
                "translation": "I wish you a pleasant day!",
                "explanation": "Dùng trong văn viết hoặc tình huống trang trọng.",
            },
            {
                "context": "Informal",
                "translation": "Have a great day!",
                "explanation": "Cách nói thân mật với bạn bè.",
            },
            {
                "context": "Business",
                "translation": "Wishing you a productive day.",
                "explanation": "Phù hợp trong email công việc.",
            },
        ]
    )


@pytest.fixture
def sample_correction():
    return GrammarCorrection.model_validate(
        {
            "correctedSentence": "He doesn't know what to do.",
            "explanations": [
                {
                    "original": "don't",
                    "corrected": "doesn't",
                    "explanation": "Chủ ngữ ngôi thứ ba số ít dùng 'doesn't'.",
                }
            ],
            "alternatives": [
                "He has no idea what to do.",
                "He is unsure what to do.",
                "He doesn't know how to proceed.",
            ],
        }
    )


@pytest.fixture
def sample_word_entry():
    return WordMeaningText.model_validate(
        {
            "definition": "nhân từ, rộng lượng",
            "wordType": "Adjective",
            "pronunciations": {"uk": "/bəˈnevələnt/", "us": "/bəˈnevələnt/"},
            "wordForms": [
                {"form": "benevolence", "type": "Noun"},
                {"form": "benevolently", "type": "Adverb"},
            ],
            "exampleSentences": [
                {
                    "english": "She was a benevolent old lady.",
                    "vietnamese": "Bà ấy là một bà cụ nhân hậu.",
                },
                {
                    "english": "The king was benevolent to his people.",
                    "vietnamese": "Nhà vua nhân từ với thần dân.",
                },
            ],
        }
    )
