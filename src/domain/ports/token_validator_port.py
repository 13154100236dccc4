"""
Port (interface) for bearer token validators.
Infrastructure adapters (e.g. SharedSecretTokenValidator) must implement this interface.
"""

from abc import ABC, abstractmethod


class ITokenValidator(ABC):
    @abstractmethod
    def validate(self, token: str) -> dict:
        """Validate a JWT token and return its decoded claims.

        Raises:
            ValueError: on a bad signature, expiry, or audience mismatch.
        """
        ...
