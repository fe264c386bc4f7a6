"""
Domain errors raised by the learning features.

Each error carries a message that is safe to show to the learner as-is.
"""


class TutorError(Exception):
    """Base exception for learning feature errors."""

    pass


class InvalidInputError(TutorError):
    """Input was empty or whitespace-only; raised before any provider call."""

    def __init__(self, message: str = "Please enter some text."):
        super().__init__(message)


class TranslationError(TutorError):
    """Translation-specific exception."""

    def __init__(
        self,
        message: str = "Sorry, an error occurred during translation. Please try again.",
    ):
        super().__init__(message)


class GrammarError(TutorError):
    """Grammar-correction-specific exception."""

    def __init__(
        self,
        message: str = "Sorry, an error occurred during grammar correction. Please try again.",
    ):
        super().__init__(message)


class DefinitionUnavailableError(TutorError):
    """The definition call of a word lookup failed, so the lookup is unusable."""

    def __init__(
        self,
        message: str = "Sorry, an error occurred while checking word meaning. Please try again.",
    ):
        super().__init__(message)


class ChatError(TutorError):
    """Follow-up chat exception."""

    def __init__(
        self,
        message: str = "Sorry, an error occurred while answering your question. Please try again.",
    ):
        super().__init__(message)
