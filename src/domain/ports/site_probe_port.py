"""
Port (interface) for checking that the target site offers what the sync needs.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ISiteProbe(ABC):
    @abstractmethod
    def check(self) -> Optional[str]:
        """Return None when the target site is usable, otherwise a notice for operators."""
        ...
