"""Errors raised while talking to the chat model."""


class ChatError(Exception):
    """Base class for chat failures."""

    code = "CHAT_ERROR"


class ModelConfigurationError(ChatError):
    """Azure OpenAI settings are incomplete."""

    code = "CLIENT_ERROR"


class ChatCompletionError(ChatError):
    """The model call failed or returned nothing usable."""

    code = "PROCESSING_ERROR"
