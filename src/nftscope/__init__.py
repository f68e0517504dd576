"""
NFTScope
Decodes smart-contract render / tokenURI output into renderable media items
"""

from .core.config import ParserConfig
from .core.content_decoder import ContentDecoder
from .core.data_url import DataURL, parse_data_url
from .core.errors import (
    OutputParseError, InvalidGasFormat, InvalidJson, NoRenderableAttribute, UnsupportedFormat
)
from .core.models import Content, ContentType, ParsedOutput, TokenMetadata
from .core.output_parser import OutputParser, parse_contract_function_output, parse_test_output

__version__ = '1.0.0'

__all__ = [
    'ParserConfig',
    'ContentDecoder',
    'DataURL',
    'parse_data_url',
    'OutputParseError',
    'InvalidGasFormat',
    'InvalidJson',
    'NoRenderableAttribute',
    'UnsupportedFormat',
    'Content',
    'ContentType',
    'ParsedOutput',
    'TokenMetadata',
    'OutputParser',
    'parse_contract_function_output',
    'parse_test_output',
]
