"""
Feature package containing the AI-powered learning services.
"""

from .chat import ChatService, build_transcript
from .grammar import GrammarService
from .translate import TranslationService
from .word_meaning import WordMeaningService

__all__ = [
    "ChatService",
    "GrammarService",
    "TranslationService",
    "WordMeaningService",
    "build_transcript",
]
