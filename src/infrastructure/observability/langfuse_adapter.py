"""
Infrastructure adapter: Langfuse → IObservabilityHandler.

Langfuse is imported lazily so the module loads without LANGFUSE_* variables;
the composition root only builds this handler when LANGFUSE_PUBLIC_KEY is set.
Langfuse-specific metadata keys stay inside this adapter.
"""

from typing import Any

from src.domain.ports.observability_port import IObservabilityHandler


class LangfuseObservabilityHandler(IObservabilityHandler):
    """Attaches the Langfuse LangChain CallbackHandler to translation calls."""

    BASE_TAGS = ["post-translation"]

    def __init__(self, _handler: Any = None) -> None:
        if _handler is None:
            from langfuse.langchain import CallbackHandler
            _handler = CallbackHandler()
        self._handler = _handler

    def invoke_config(self, run_name: str, tags: list[str]) -> dict:
        return {
            "callbacks": [self._handler],
            "run_name": run_name,
            "metadata": {"langfuse_tags": self.BASE_TAGS + list(tags)},
        }

    def flush(self) -> None:
        """Flush pending traces before the process exits."""
        from langfuse import get_client
        get_client().flush()
