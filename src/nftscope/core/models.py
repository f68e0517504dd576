"""
Data Model
Content types, renderable content items, token metadata and parse results
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from .errors import InvalidJson


# ERC-721 metadata attributes that carry renderable media, in discovery order
MEDIA_ATTRIBUTES = ('image', 'image_data', 'animation_url')


class ContentType(Enum):
    """Rendering strategy for a decoded content item"""
    SVG = 'svg'
    JPG = 'jpg'
    PNG = 'png'
    HTML = 'html'
    LINK = 'link'
    UNKNOWN = 'unknown'  # classification sentinel, never returned to callers


@dataclass(frozen=True)
class Content:
    """
    One renderable unit

    `content` is a canonical data URL, raw HTML markup or an untouched link.
    `label` is the originating metadata attribute, or None when the whole
    function output was a single item.
    """
    content: str
    content_type: ContentType
    label: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            'label': self.label,
            'content': self.content,
            'content_type': self.content_type.name
        }


@dataclass
class TokenMetadata:
    """Media attributes decoded from a tokenURI JSON envelope"""
    image: Optional[str] = None
    image_data: Optional[str] = None
    animation_url: Optional[str] = None

    @classmethod
    def from_json(cls, obj: Any, payload: str = "") -> 'TokenMetadata':
        """
        Validate a parsed JSON envelope and pick out its media attributes

        Empty strings and nulls count as absent. A present value that is not
        a string is rejected.

        Raises:
            InvalidJson: envelope is not an object or an attribute is not a string
        """
        if not isinstance(obj, dict):
            raise InvalidJson(
                f"Expected a JSON object, got {type(obj).__name__}",
                payload
            )

        values = {}
        for name in MEDIA_ATTRIBUTES:
            value = obj.get(name)
            if not value:
                continue
            if not isinstance(value, str):
                raise InvalidJson(
                    f"Attribute {name} must be a string, got {type(value).__name__}",
                    payload
                )
            values[name] = value

        return cls(**values)

    def attributes(self) -> Iterator[Tuple[str, str]]:
        """Yield (name, value) for each present attribute in fixed order"""
        for name in MEDIA_ATTRIBUTES:
            value = getattr(self, name)
            if value:
                yield name, value

    def is_empty(self) -> bool:
        return not any(True for _ in self.attributes())


@dataclass
class ParsedOutput:
    """
    Result of decoding one contract function output

    `json` is only set when the output was a JSON data URL; its media
    attributes hold truncated display strings while the full payloads
    live in `content`.
    """
    gas: int = 0
    content: List[Content] = field(default_factory=list)
    json: Optional[Dict] = None

    def to_dict(self) -> Dict:
        """Convert result to dictionary for JSON export"""
        return {
            'gas': self.gas,
            'content': [c.to_dict() for c in self.content],
            'json': self.json
        }
