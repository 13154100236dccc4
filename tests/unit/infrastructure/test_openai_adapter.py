"""Tests for OpenAIChatAdapter."""

from unittest.mock import MagicMock

from langchain_core.messages import AIMessage, HumanMessage

from src.infrastructure.llm.openai_adapter import OpenAIChatAdapter


def test_builds_chat_openai_with_fixed_request_settings():
    adapter = OpenAIChatAdapter(api_key="sk-test")

    llm = adapter._llm
    assert llm.model_name == "gpt-4"
    assert llm.temperature == 0.7
    assert llm.request_timeout == 40.0
    assert llm.max_retries == 0


def test_model_settings_are_configurable():
    adapter = OpenAIChatAdapter(api_key="sk-test", model="gpt-4o", temperature=0.1, timeout=5)

    assert adapter._llm.model_name == "gpt-4o"
    assert adapter._llm.temperature == 0.1
    assert adapter._llm.request_timeout == 5


def test_invoke_delegates_messages_and_config_to_runnable():
    runnable = MagicMock()
    runnable.invoke.return_value = AIMessage(content="Hola")
    adapter = OpenAIChatAdapter(_runnable=runnable)
    messages = [HumanMessage(content="Translate this HTML content to es: Hello")]

    response = adapter.invoke(messages, config={"run_name": "x"})

    assert response.content == "Hola"
    runnable.invoke.assert_called_once_with(messages, config={"run_name": "x"})
