"""
Environment configuration.

Values are read on every call so tests and deployments can change the
environment without re-importing the package.
"""

import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TTS_MODEL = "gemini-2.5-flash-preview-tts"


def get_api_key() -> str | None:
    """Return the Gemini API key, or None when it is not configured."""
    return os.getenv("GEMINI_API_KEY") or None


def get_text_model() -> str:
    return os.getenv("GEMINI_MODEL", DEFAULT_MODEL)


def get_tts_model() -> str:
    return os.getenv("GEMINI_TTS_MODEL", DEFAULT_TTS_MODEL)


def get_allowed_origins() -> list[str]:
    """Comma-separated ALLOWED_ORIGINS, defaulting to every origin."""
    raw = os.getenv("ALLOWED_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]
