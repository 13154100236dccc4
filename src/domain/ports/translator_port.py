"""
Port (interface) for chunk translators.
The application ChunkTranslator implements it; tests substitute fakes.
"""

from abc import ABC, abstractmethod

from src.domain.entities.post_translation import TranslationResult


class ITranslator(ABC):
    @abstractmethod
    def translate(self, chunk: str, target_language: str) -> TranslationResult:
        """Translate one chunk. Never raises: failures come back as TranslationResult.failure()."""
        ...
