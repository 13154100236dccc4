"""
Port (interface) for the persisted target-language selection.
Infrastructure adapters (e.g. JsonFileLanguageSettingsStore) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ILanguageSettingsStore(ABC):
    @abstractmethod
    def get_selected_language(self) -> Optional[str]:
        """Return the selected language code, or None when nothing is configured."""
        ...

    @abstractmethod
    def set_selected_language(self, code: str) -> None:
        """Persist *code* as the selected language.

        Raises:
            ValueError: if *code* is not one of SUPPORTED_LANGUAGES.
        """
        ...
