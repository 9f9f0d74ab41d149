"""Chat client and errors."""
from chat.client import ChatClient, build_messages
from chat.errors import ChatError, ChatCompletionError, ModelConfigurationError

__all__ = [
    "ChatClient",
    "build_messages",
    "ChatError",
    "ChatCompletionError",
    "ModelConfigurationError",
]
