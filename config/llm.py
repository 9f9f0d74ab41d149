"""LLM (Language Model) configuration."""
from typing import Optional

from langchain_openai import AzureChatOpenAI

from .env import AzureOpenAISettings


def get_llm(settings: Optional[AzureOpenAISettings] = None, temperature: Optional[float] = None):
    """Create and return an Azure OpenAI chat model instance."""
    from chat.errors import ModelConfigurationError

    settings = settings or AzureOpenAISettings.from_env()
    missing = settings.missing()
    if missing:
        raise ModelConfigurationError(
            f"Azure OpenAI is not configured, missing: {', '.join(missing)}"
        )

    kwargs = {}
    if temperature is None:
        temperature = settings.temperature
    if temperature is not None:
        kwargs["temperature"] = temperature

    return AzureChatOpenAI(
        azure_deployment=settings.deployment_name,
        api_version=settings.api_version,
        azure_endpoint=settings.endpoint,
        api_key=settings.api_key,
        **kwargs,
    )
