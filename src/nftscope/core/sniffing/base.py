"""
Base Sniffer Interface
Defines the abstract interface all subtype sniffing rules must implement
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..data_url import DataURL


class BaseSniffer(ABC):
    """Abstract base class for subtype sniffing rules"""

    @abstractmethod
    def sniff(self, text: str, data_url: Optional[DataURL]) -> Optional[str]:
        """
        Attempt to determine the media subtype of the input

        Args:
            text: Raw content string
            data_url: Result of parsing text as a data URL (None if it is not one)

        Returns:
            Lowercase subtype (e.g. "svg", "png") or None if this rule does not apply
        """
        pass

    @abstractmethod
    def get_name(self) -> str:
        """
        Get the name of this sniffing rule

        Returns:
            Human-readable name (e.g., "data_url", "markup", "extension")
        """
        pass
