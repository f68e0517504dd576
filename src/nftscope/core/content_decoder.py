"""
Content Decoder
Classifies one media string and re-encodes it into a browser-renderable form

Canonical forms:
- Data URLs pass through untouched, except base64 HTML (decoded to raw markup
  for iframe srcdoc rendering) and non-base64 SVG (re-encoded as base64)
- Links pass through untouched
- Inline <svg> markup becomes a data:image/svg+xml;base64 URL
"""

import base64
import logging
from typing import List, Optional, Tuple

from .data_url import DataURL, parse_data_url
from .errors import UnsupportedFormat
from .models import Content, ContentType
from .sniffing import BaseSniffer, SUBTYPE_MAP, get_all_sniffers, sniff_subtype


logger = logging.getLogger(__name__)

SVG_BASE64_PREFIX = 'data:image/svg+xml;base64,'


def encode_svg(markup: str) -> str:
    """Wrap SVG markup into a canonical base64 data URL"""
    return SVG_BASE64_PREFIX + base64.b64encode(markup.encode('utf-8')).decode('ascii')


class ContentDecoder:
    """
    Turns a single output string into a Content item

    Sniffing rules are pluggable; by default the rules from
    sniffing.get_all_sniffers() are used in their priority order.
    """

    def __init__(self, sniffers: Optional[List[BaseSniffer]] = None):
        self.sniffers = sniffers if sniffers is not None else get_all_sniffers()

    def classify(self, text: str) -> Tuple[ContentType, Optional[DataURL]]:
        """
        Determine the content type of a string

        Args:
            text: Raw content string

        Returns:
            (content type, parsed data URL or None). UNKNOWN if unrecognized.
        """
        data_url = parse_data_url(text)
        subtype = sniff_subtype(text, data_url, self.sniffers)

        content_type = SUBTYPE_MAP.get(subtype)
        if content_type is None:
            content_type = ContentType.LINK if text.startswith('http') else ContentType.UNKNOWN

        logger.debug("Classified content (subtype=%s) as %s", subtype, content_type.name)
        return content_type, data_url

    def decode(self, text: str, label: Optional[str] = None) -> Content:
        """
        Classify and canonicalize one content string

        Args:
            text: Raw content string (data URL, markup, link, file name)
            label: Originating metadata attribute, used in error messages

        Returns:
            Content in canonical form

        Raises:
            UnsupportedFormat: content type could not be determined
        """
        content_type, data_url = self.classify(text)

        if content_type is ContentType.UNKNOWN:
            raise UnsupportedFormat(text, label)

        return Content(
            content=self._canonicalize(text, content_type, data_url),
            content_type=content_type,
            label=label
        )

    def _canonicalize(self, text: str, content_type: ContentType, data_url: Optional[DataURL]) -> str:
        if data_url is not None:
            if content_type is ContentType.HTML and data_url.is_base64:
                # rendered via iframe srcdoc, so hand back the markup itself
                return data_url.data
            if content_type is ContentType.SVG and not data_url.is_base64:
                return encode_svg(data_url.data)
            return text

        lowered = text.lower()
        if lowered.startswith('http'):
            return text
        if lowered.startswith('<svg'):
            return encode_svg(text)
        return text
