"""Chat client forwarding prompts to the Azure OpenAI deployment."""
import logging
from typing import Callable, List, Optional

from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from chat.errors import ChatCompletionError
from config.env import AzureOpenAISettings
from config.llm import get_llm
from models.request import ChatRequest

logger = logging.getLogger("chatdemo.chat")


def build_messages(user_message: str, system_message: Optional[str] = None) -> List[BaseMessage]:
    """Build the prompt: optional system turn followed by the user turn."""
    if not user_message or not user_message.strip():
        raise ValueError("User message cannot be empty")

    messages: List[BaseMessage] = []
    if system_message and system_message.strip():
        messages.append(SystemMessage(content=system_message))
    messages.append(HumanMessage(content=user_message))
    return messages


class ChatClient:
    """Sends chat prompts to the configured model and returns the reply text."""

    def __init__(
        self,
        settings: Optional[AzureOpenAISettings] = None,
        llm_factory: Callable = get_llm,
    ):
        """
        Initialize the chat client.

        Args:
            settings: Azure OpenAI settings, read from the environment when omitted
            llm_factory: Callable(settings, temperature) returning a chat model
        """
        self.settings = settings or AzureOpenAISettings.from_env()
        self.llm_factory = llm_factory
        self.llm = llm_factory(self.settings, None)

    def simple(self, message: str) -> str:
        """Send message as a single user turn."""
        return self._call(self.llm, build_messages(message))

    def detailed(self, request: ChatRequest) -> str:
        """Send the request's system and user messages, honouring its temperature."""
        messages = build_messages(request.user_message, request.system_message)
        llm = self.llm
        if request.temperature is not None:
            llm = self.llm_factory(self.settings, request.temperature)
        return self._call(llm, messages)

    def _call(self, llm, messages: List[BaseMessage]) -> str:
        logger.info(
            f"[ChatClient] Calling deployment={self.settings.deployment_name} "
            f"turns={len(messages)}"
        )
        try:
            res = llm.invoke(messages)
        except Exception as e:
            logger.warning(f"[ChatClient] Model call failed: {e}")
            raise ChatCompletionError(f"Model call failed: {e}") from e

        content = getattr(res, "content", res)
        if isinstance(content, list):
            # content blocks from multi-part replies
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        return content or ""
