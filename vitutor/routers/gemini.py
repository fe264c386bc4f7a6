"""
Gemini Router
Single action endpoint proxying the learning features to the provider.
"""

from typing import Any, Awaitable, Callable

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vitutor.domain.errors import InvalidInputError, TutorError
from vitutor.domain.features import (
    ChatService,
    GrammarService,
    TranslationService,
    WordMeaningService,
)
from vitutor.logger import get_service_logger
from vitutor.providers import AIProviderInterface, ConfigurationError, get_ai_provider
from vitutor.schemas.learning import ChatMessage

log = get_service_logger("Gemini")

router = APIRouter(tags=["Gemini"])


class ActionRequest(BaseModel):
    action: str | None = None
    payload: dict[str, Any] | None = None


class TextPayload(BaseModel):
    text: str


class WordPayload(BaseModel):
    word: str


class ChatPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    context_prompt: str = Field("", alias="contextPrompt")
    chat_history: list[ChatMessage] = Field(default_factory=list, alias="chatHistory")
    new_question: str = Field(..., alias="newQuestion")


def get_provider() -> AIProviderInterface | None:
    """Resolve the provider; None when the API key is not configured."""
    try:
        return get_ai_provider()
    except ConfigurationError as e:
        log.error("config", "GEMINI_API_KEY not configured", error=str(e))
        return None


def _parse(model: type[BaseModel], payload: dict[str, Any], message: str):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise InvalidInputError(message) from e


async def handle_translate(provider: AIProviderInterface, payload: dict[str, Any]):
    body = _parse(TextPayload, payload, "Invalid text input")
    candidates = await TranslationService(provider).translate_and_check(body.text)
    return [c.model_dump() for c in candidates]


async def handle_grammar(provider: AIProviderInterface, payload: dict[str, Any]):
    body = _parse(TextPayload, payload, "Invalid text input")
    correction = await GrammarService(provider).correct_grammar(body.text)
    return correction.model_dump(by_alias=True)


async def handle_word_meaning(provider: AIProviderInterface, payload: dict[str, Any]):
    body = _parse(WordPayload, payload, "Invalid word input")
    meaning = await WordMeaningService(provider).get_word_meaning(body.word)
    return meaning.model_dump(by_alias=True)


async def handle_chat(provider: AIProviderInterface, payload: dict[str, Any]):
    body = _parse(ChatPayload, payload, "Invalid question input")
    return await ChatService(provider).ask_follow_up(
        body.context_prompt, body.chat_history, body.new_question
    )


ACTIONS: dict[str, Callable[[AIProviderInterface, dict[str, Any]], Awaitable[Any]]] = {
    "translate": handle_translate,
    "grammar": handle_grammar,
    "wordMeaning": handle_word_meaning,
    "chat": handle_chat,
}


def failure(status_code: int, error: str) -> JSONResponse:
    return JSONResponse({"success": False, "error": error}, status_code=status_code)


@router.options("/gemini")
async def gemini_preflight():
    return JSONResponse({})


@router.post("/gemini")
async def gemini(
    request: ActionRequest,
    provider: AIProviderInterface | None = Depends(get_provider),
):
    if provider is None:
        return failure(500, "Server configuration error")

    if not request.action or request.payload is None:
        return failure(400, "Missing action or payload")

    handler = ACTIONS.get(request.action)
    if handler is None:
        return failure(400, "Invalid action")

    try:
        data = await handler(provider, request.payload)
    except InvalidInputError as e:
        log.warning("dispatch", "Rejected input", action=request.action, error=str(e))
        return failure(400, str(e))
    except TutorError as e:
        log.error(
            "dispatch",
            "Action failed",
            action=request.action,
            error=str(e),
            error_type=type(e).__name__,
        )
        return failure(502, str(e))

    log.info("dispatch", "Action completed", action=request.action)
    return JSONResponse({"success": True, "data": data})
