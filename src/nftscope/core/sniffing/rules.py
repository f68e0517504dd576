"""
Subtype Sniffing Rules
MIME metadata, markup prefix and file-extension detection
"""

from typing import Optional

from .base import BaseSniffer
from ..data_url import DataURL


class DataURLSniffer(BaseSniffer):
    """Subtype from the declared media type: data:image/svg+xml → svg"""

    XML_SUFFIX = '+xml'

    def get_name(self) -> str:
        return "data_url"

    def sniff(self, text: str, data_url: Optional[DataURL]) -> Optional[str]:
        if data_url is None:
            return None

        subtype = data_url.subtype
        if subtype.endswith(self.XML_SUFFIX):
            subtype = subtype[:-len(self.XML_SUFFIX)]
        return subtype


class MarkupSniffer(BaseSniffer):
    """Inline markup recognized by its opening tag (case-insensitive)"""

    def __init__(self, prefix: str, subtype: str):
        self.prefix = prefix.lower()
        self.subtype = subtype

    def get_name(self) -> str:
        return f"markup_{self.subtype}"

    def sniff(self, text: str, data_url: Optional[DataURL]) -> Optional[str]:
        if data_url is not None:
            return None
        if text.lower().startswith(self.prefix):
            return self.subtype
        return None


class ExtensionSniffer(BaseSniffer):
    """Subtype from the text after the last '.' (lowercased)"""

    def get_name(self) -> str:
        return "extension"

    def sniff(self, text: str, data_url: Optional[DataURL]) -> Optional[str]:
        if data_url is not None:
            return None
        lowered = text.lower()
        return lowered[lowered.rfind('.') + 1:]
