"""
Provider package wrapping the generative-language API.
"""

from .ai_provider import (
    AIGenerationError,
    AIProviderError,
    AIProviderInterface,
    ConfigurationError,
    EmptyResponseError,
    GeminiProvider,
    MalformedResponseError,
    VoiceProfile,
    get_ai_provider,
)

__all__ = [
    "AIGenerationError",
    "AIProviderError",
    "AIProviderInterface",
    "ConfigurationError",
    "EmptyResponseError",
    "GeminiProvider",
    "MalformedResponseError",
    "VoiceProfile",
    "get_ai_provider",
]
