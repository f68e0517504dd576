"""
Data URL Parser
Recognizes data:[<mediatype>][;base64],<data> strings and extracts their payload

Returns None for anything that is not a well-formed data URL so callers can
fall through to heuristic content sniffing. Never raises.
"""

import base64
import binascii
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import unquote, unquote_to_bytes


logger = logging.getLogger(__name__)

DEFAULT_MEDIA_TYPE = 'text/plain'
DEFAULT_CHARSET = 'US-ASCII'

DATA_URL_PATTERN = re.compile(r'^data:(?P<meta>[^,]*),(?P<data>.*)\Z', re.IGNORECASE | re.DOTALL)
MEDIA_TYPE_PATTERN = re.compile(r'^[\w.+-]+/[\w.+-]+$')


@dataclass(frozen=True)
class DataURL:
    """Parsed data URL: media type essence, decoded payload and parameters"""
    media_type: str
    data: str
    is_base64: bool = False
    parameters: Dict[str, str] = field(default_factory=dict)

    @property
    def subtype(self) -> str:
        """Part of the media type after the last '/' (e.g. 'svg+xml')"""
        return self.media_type[self.media_type.rfind('/') + 1:]


def parse_data_url(text: str) -> Optional[DataURL]:
    """
    Parse a data URL

    Args:
        text: Candidate string

    Returns:
        DataURL with decoded payload, or None if text is not a data URL
    """
    if not isinstance(text, str):
        return None

    match = DATA_URL_PATTERN.match(text)
    if not match:
        return None

    tokens = match.group('meta').split(';')
    is_base64 = len(tokens) > 1 and tokens[-1].strip().lower() == 'base64'
    if is_base64:
        tokens.pop()

    media_type = tokens[0].strip().lower()
    parameters = {}
    for token in tokens[1:]:
        key, _, value = token.partition('=')
        key = key.strip().lower()
        if key:
            parameters[key] = value.strip()

    if not MEDIA_TYPE_PATTERN.match(media_type):
        media_type = DEFAULT_MEDIA_TYPE
        parameters.setdefault('charset', DEFAULT_CHARSET)

    raw = match.group('data')
    if is_base64:
        data = _decode_base64(raw)
        if data is None:
            logger.debug("Malformed base64 payload in data URL with media type %s", media_type)
            return None
    else:
        data = unquote(raw)

    return DataURL(media_type=media_type, data=data, is_base64=is_base64, parameters=parameters)


def _decode_base64(raw: str) -> Optional[str]:
    """Percent-decode then base64-decode a payload; None if it is not valid base64"""
    cleaned = re.sub(rb'\s', b'', unquote_to_bytes(raw))
    cleaned += b'=' * (-len(cleaned) % 4)

    try:
        decoded_bytes = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError):
        return None

    # Try UTF-8 first, fallback to latin-1 to preserve binary data
    try:
        return decoded_bytes.decode('utf-8')
    except UnicodeDecodeError:
        return decoded_bytes.decode('latin-1')
