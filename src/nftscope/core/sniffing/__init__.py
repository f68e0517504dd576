"""
Sniffing Package
Ordered subtype detection rules for contract output content

Rules are evaluated in fixed priority and the first non-None answer wins:
- DataURLSniffer: declared media type of a data URL
- MarkupSniffer: inline <svg / <html fragments
- ExtensionSniffer: file extension fallback
"""

from typing import List, Optional

from .base import BaseSniffer
from .rules import DataURLSniffer, MarkupSniffer, ExtensionSniffer
from ..data_url import DataURL
from ..models import ContentType


SUBTYPE_MAP = {
    'svg': ContentType.SVG,
    'png': ContentType.PNG,
    'jpg': ContentType.JPG,
    'jpeg': ContentType.JPG,
    'html': ContentType.HTML,
}


def get_all_sniffers() -> List[BaseSniffer]:
    """Return sniffing rules in priority order"""
    return [
        DataURLSniffer(),
        MarkupSniffer('<svg', 'svg'),
        MarkupSniffer('<html', 'html'),
        ExtensionSniffer(),
    ]


def sniff_subtype(text: str, data_url: Optional[DataURL], sniffers: Optional[List[BaseSniffer]] = None) -> Optional[str]:
    """Run sniffers in order and return the first subtype found"""
    for sniffer in sniffers if sniffers is not None else get_all_sniffers():
        subtype = sniffer.sniff(text, data_url)
        if subtype is not None:
            return subtype
    return None


__all__ = [
    'BaseSniffer',
    'DataURLSniffer',
    'MarkupSniffer',
    'ExtensionSniffer',
    'SUBTYPE_MAP',
    'get_all_sniffers',
    'sniff_subtype',
]
