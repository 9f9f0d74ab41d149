import os
from unittest.mock import patch

import pytest
from langchain_core.messages import AIMessage

from config.env import AzureOpenAISettings, load_env_file


def pytest_configure(config):
    # Tests see the same environment as the running service
    load_env_file()


class FakeChatModel:
    """Stands in for AzureChatOpenAI and records what it was sent."""

    def __init__(self, reply="Hello from Azure", error=None, temperature=None):
        self.reply = reply
        self.error = error
        self.temperature = temperature
        self.calls = []

    def invoke(self, messages):
        self.calls.append(messages)
        if self.error:
            raise self.error
        return AIMessage(content=self.reply)


class FakeLLMFactory:
    """Builds FakeChatModels and remembers the temperatures asked for."""

    def __init__(self, reply="Hello from Azure", error=None):
        self.reply = reply
        self.error = error
        self.models = []

    def __call__(self, settings, temperature=None):
        model = FakeChatModel(self.reply, self.error, temperature)
        self.models.append(model)
        return model


@pytest.fixture
def isolated_env():
    with patch.dict(os.environ, clear=True):
        yield os.environ


@pytest.fixture
def azure_settings():
    return AzureOpenAISettings(
        endpoint="https://example.openai.azure.com/",
        api_key="abcd1234secret",
        deployment_name="gpt-4o",
    )


@pytest.fixture
def llm_factory():
    return FakeLLMFactory()


@pytest.fixture
def failing_llm_factory():
    return FakeLLMFactory(error=RuntimeError("upstream 429: rate limited"))
