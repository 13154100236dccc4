"""
Port (interface) for language model providers.
Infrastructure adapters (e.g. OpenAIChatAdapter) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ILanguageModel(ABC):
    @abstractmethod
    def invoke(self, messages: list[Any], config: Optional[dict] = None) -> Any:
        """Invoke the model synchronously and return a response message.

        Raises:
            Any exception from the underlying provider on transport, status
            or decoding failure.
        """
        ...
