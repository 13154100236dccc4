"""
Port (interface) for remote publishers.
Infrastructure adapters (e.g. WordPressRestPublisher) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.post_translation import TranslatedDocument


class IPublisher(ABC):
    @abstractmethod
    def publish(self, document: TranslatedDocument) -> bool:
        """Create the document on the remote site. Returns True when it was created."""
        ...
