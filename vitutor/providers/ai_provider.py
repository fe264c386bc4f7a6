from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Sequence, TypedDict, TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from vitutor import config
from vitutor.logger import logger
from vitutor.schemas.learning import ChatMessage

ModelT = TypeVar("ModelT", bound=BaseModel)


class AIProviderError(Exception):
    """Base exception for AI Provider errors."""

    pass


class ConfigurationError(AIProviderError):
    """The provider cannot be constructed because configuration is missing."""

    pass


class AIGenerationError(AIProviderError):
    """Exception for generation failures."""

    pass


class EmptyResponseError(AIProviderError):
    """The provider fulfilled the call but returned no text payload."""

    pass


class MalformedResponseError(AIProviderError):
    """The text payload does not parse against the expected response model."""

    pass


class VoiceProfile(str, Enum):
    """Prebuilt Gemini voices used to approximate a regional accent."""

    UK = "Puck"
    US = "Zephyr"


class GenConfig(TypedDict, total=False):
    """Configuration for AI generation."""

    temperature: float
    max_output_tokens: int
    response_mime_type: str
    response_json_schema: Any
    response_modalities: list[str]
    speech_config: Any
    system_instruction: str


def strip_code_fence(text: str) -> str:
    """Remove a markdown code fence the model sometimes wraps JSON in."""
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:].strip("` \n")
    elif text.startswith("```"):
        text = text[3:].strip("` \n")
    return text


class AIProviderInterface(ABC):
    """Abstract interface for AI providers."""

    @abstractmethod
    async def generate_structured(
        self,
        prompt: str,
        response_model: type[ModelT],
        model: str | None = None,
    ) -> ModelT:
        """Generate a response constrained to the JSON schema of response_model."""
        ...

    @abstractmethod
    async def generate_speech(
        self,
        text: str,
        voice: VoiceProfile,
        model: str | None = None,
    ) -> bytes | None:
        """Synthesize speech for a short literal string; None when no audio came back."""
        ...

    @abstractmethod
    async def generate_chat(
        self,
        turns: Sequence[ChatMessage],
        model: str | None = None,
    ) -> str:
        """Generate the next model turn for an ordered sequence of chat turns."""
        ...


class GeminiProvider(AIProviderInterface):
    """Gemini API provider implementation."""

    def __init__(
        self,
        api_key: str | None = None,
        client: genai.Client | None = None,
        model: str | None = None,
        tts_model: str | None = None,
    ):
        self.model = model or config.get_text_model()
        self.tts_model = tts_model or config.get_tts_model()
        if client is None:
            api_key = api_key or config.get_api_key()
            if not api_key:
                raise ConfigurationError("GEMINI_API_KEY environment variable is required")
            client = genai.Client(api_key=api_key, vertexai=False)
        self.client = client
        logger.info(
            f"GeminiProvider initialized with model: {self.model}",
            extra={"tts_model": self.tts_model},
        )

    async def generate_structured(
        self,
        prompt: str,
        response_model: type[ModelT],
        model: str | None = None,
    ) -> ModelT:
        """Generate JSON constrained to the response model and validate it."""
        target_model = model or self.model
        logger.debug(
            "Gemini structured request",
            extra={
                "prompt_length": len(prompt),
                "model": target_model,
                "response_model": response_model.__name__,
            },
        )

        config_params: GenConfig = {
            "response_mime_type": "application/json",
            "response_json_schema": response_model.model_json_schema(by_alias=True),
        }

        try:
            response = await self.client.aio.models.generate_content(
                model=target_model,
                contents=prompt,
                config=types.GenerateContentConfig(**config_params),
            )
        except Exception as e:
            logger.exception(
                "Gemini generation failed",
                extra={"error": str(e), "model": target_model},
            )
            raise AIGenerationError(f"Generation failed: {e}") from e

        text = (response.text or "").strip()
        if not text:
            logger.warning(
                "Empty structured response received",
                extra={"model": target_model},
            )
            raise EmptyResponseError("Empty response from API")

        try:
            result = response_model.model_validate_json(strip_code_fence(text))
        except ValidationError as e:
            logger.error(
                f"Failed to parse structured output: {e}",
                extra={"response_model": response_model.__name__},
            )
            raise MalformedResponseError(
                f"Response does not match {response_model.__name__}"
            ) from e

        logger.debug(
            "Gemini structured response",
            extra={"response_length": len(text)},
        )
        return result

    async def generate_speech(
        self,
        text: str,
        voice: VoiceProfile,
        model: str | None = None,
    ) -> bytes | None:
        """Synthesize audio for text with a prebuilt voice."""
        target_model = model or self.tts_model
        voice_name = VoiceProfile(voice).value
        logger.debug(
            "Gemini speech request",
            extra={"text_length": len(text), "voice": voice_name, "model": target_model},
        )

        config_params: GenConfig = {
            "response_modalities": ["AUDIO"],
            "speech_config": types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(voice_name=voice_name)
                )
            ),
        }

        try:
            response = await self.client.aio.models.generate_content(
                model=target_model,
                contents=[types.Content(parts=[types.Part(text=text)])],
                config=types.GenerateContentConfig(**config_params),
            )
        except Exception as e:
            logger.exception(
                "Gemini speech generation failed",
                extra={"error": str(e), "voice": voice_name},
            )
            raise AIGenerationError(f"Speech generation failed: {e}") from e

        audio = _first_inline_data(response)
        if audio is None:
            logger.warning("Speech response carried no audio", extra={"voice": voice_name})
            return None

        logger.debug(
            "Gemini speech response",
            extra={"audio_size": len(audio), "voice": voice_name},
        )
        return audio

    async def generate_chat(
        self,
        turns: Sequence[ChatMessage],
        model: str | None = None,
    ) -> str:
        """Send the full ordered turn sequence and return the trimmed reply."""
        target_model = model or self.model
        contents = [
            types.Content(role=turn.role, parts=[types.Part(text=turn.text)])
            for turn in turns
        ]
        logger.debug(
            "Gemini chat request",
            extra={"turns": len(contents), "model": target_model},
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=target_model,
                contents=contents,
            )
        except Exception as e:
            logger.exception(
                "Gemini chat failed",
                extra={"error": str(e), "model": target_model},
            )
            raise AIGenerationError(f"Chat generation failed: {e}") from e

        result = (response.text or "").strip()
        if not result:
            logger.warning("Empty chat response received", extra={"model": target_model})
            raise EmptyResponseError("Empty response from API")

        logger.debug("Gemini chat response", extra={"response_length": len(result)})
        return result


def _first_inline_data(response: Any) -> bytes | None:
    """Return the first inline audio payload of a response, if any."""
    for candidate in response.candidates or []:
        content = candidate.content
        if content is None:
            continue
        for part in content.parts or []:
            inline = part.inline_data
            if inline is not None and inline.data:
                return inline.data
    return None


# Singleton instance cache
_ai_provider_instance: AIProviderInterface | None = None


def get_ai_provider() -> AIProviderInterface:
    """
    Return the process-wide default provider, creating it on first use.

    Services accept an explicit provider; this factory is only the fallback
    when none is passed in. Raises ConfigurationError when GEMINI_API_KEY is
    not set, and leaves the cache empty so a later call can succeed once the
    key is configured.
    """
    global _ai_provider_instance

    if _ai_provider_instance is None:
        _ai_provider_instance = GeminiProvider()
    return _ai_provider_instance
