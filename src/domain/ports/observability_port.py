"""
Port (interface) for observability / tracing handlers.
Infrastructure adapters (e.g. LangfuseObservabilityHandler) must implement this interface.
"""

from abc import ABC, abstractmethod


class IObservabilityHandler(ABC):
    @abstractmethod
    def invoke_config(self, run_name: str, tags: list[str]) -> dict:
        """Return a LangChain invoke config that traces one model call."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Flush any buffered telemetry data to the remote backend."""
        ...
