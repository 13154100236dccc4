"""Tests for LangfuseObservabilityHandler with an injected callback handler."""

from src.infrastructure.observability.langfuse_adapter import LangfuseObservabilityHandler


def test_invoke_config_attaches_handler_run_name_and_tags():
    handler = object()

    config = LangfuseObservabilityHandler(_handler=handler).invoke_config(
        "translate_chunk", ["de"]
    )

    assert config == {
        "callbacks": [handler],
        "run_name": "translate_chunk",
        "metadata": {"langfuse_tags": ["post-translation", "de"]},
    }
