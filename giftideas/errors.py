"""
Failures that end a generation run in the fallback catalog.
str(exc) is the message shown to the user.
"""


class GiftGenerationError(Exception):
    default_message = "An unexpected error occurred while generating gift ideas. Please try again."

    def __init__(self, message: str = ""):
        super().__init__(message or self.default_message)


class MissingCredentialsError(GiftGenerationError):
    default_message = "API key not configured. Please check your environment variables."


class CompletionError(GiftGenerationError):
    default_message = "Failed to communicate with the AI service. Please try again."


class CompletionTimeoutError(CompletionError):
    pass


class ExtractionError(GiftGenerationError):
    default_message = "Failed to parse gift ideas from AI response. The response format was unexpected."


class ParseError(GiftGenerationError):
    default_message = "Failed to parse the AI response. Please try again."


class ShapeValidationError(GiftGenerationError):
    default_message = "The AI response is missing required information. Please try again."
