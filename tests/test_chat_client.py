import pytest
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import AzureChatOpenAI

from chat.client import ChatClient, build_messages
from chat.errors import ChatCompletionError, ModelConfigurationError
from config.env import AzureOpenAISettings
from config.llm import get_llm
from models.request import ChatRequest


def test_build_messages_puts_system_first():
    messages = build_messages("What is Azure?", "Answer briefly.")

    assert [type(m) for m in messages] == [SystemMessage, HumanMessage]
    assert messages[0].content == "Answer briefly."
    assert messages[1].content == "What is Azure?"


@pytest.mark.parametrize("system_message", [None, "", "   "])
def test_build_messages_skips_blank_system(system_message):
    messages = build_messages("Hi", system_message)

    assert len(messages) == 1
    assert isinstance(messages[0], HumanMessage)


def test_build_messages_rejects_empty_user_message():
    with pytest.raises(ValueError):
        build_messages("  ")


def test_simple_sends_single_user_turn(azure_settings, llm_factory):
    client = ChatClient(azure_settings, llm_factory)

    reply = client.simple("Hello")

    assert reply == "Hello from Azure"
    (sent,) = client.llm.calls
    assert len(sent) == 1
    assert sent[0].content == "Hello"


def test_detailed_uses_default_model_without_temperature(azure_settings, llm_factory):
    client = ChatClient(azure_settings, llm_factory)

    client.detailed(ChatRequest(userMessage="Hi", systemMessage="Be terse."))

    assert len(llm_factory.models) == 1
    assert len(client.llm.calls) == 1
    assert isinstance(client.llm.calls[0][0], SystemMessage)


def test_detailed_builds_model_with_requested_temperature(azure_settings, llm_factory):
    client = ChatClient(azure_settings, llm_factory)

    reply = client.detailed(ChatRequest(userMessage="Hi", temperature=0.2))

    assert reply == "Hello from Azure"
    default_model, tuned_model = llm_factory.models
    assert tuned_model.temperature == 0.2
    assert default_model.calls == []
    assert len(tuned_model.calls) == 1


def test_provider_failure_is_wrapped(azure_settings, failing_llm_factory):
    client = ChatClient(azure_settings, failing_llm_factory)

    with pytest.raises(ChatCompletionError) as exc_info:
        client.simple("Hello")

    assert "rate limited" in str(exc_info.value)
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_get_llm_requires_configuration():
    with pytest.raises(ModelConfigurationError) as exc_info:
        get_llm(AzureOpenAISettings(endpoint="https://example.openai.azure.com/"))

    assert "api_key" in str(exc_info.value)
    assert "deployment_name" in str(exc_info.value)


def test_get_llm_builds_azure_chat_model(azure_settings):
    llm = get_llm(azure_settings, temperature=0.3)

    assert isinstance(llm, AzureChatOpenAI)
    assert llm.deployment_name == "gpt-4o"
    assert llm.temperature == 0.3
