"""
Output Parser
Entry points for decoding contract function output and test harness logs

Workflow:
1. (harness only) Cut the gas value and raw output out of the sentinel markers
2. Detect a JSON data URL envelope (tokenURI style output)
3. Decode each media attribute of the envelope, or the whole output as one item
4. Replace media attributes in the JSON with truncated display strings
"""

import json
import logging
import re
from typing import Optional

from .config import ParserConfig
from .content_decoder import ContentDecoder
from .data_url import parse_data_url
from .errors import InvalidGasFormat, InvalidJson, NoRenderableAttribute
from .models import ParsedOutput, TokenMetadata


logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = 'application/json'
GAS_PATTERN = re.compile(r'[0-9]+', re.ASCII)


def get_text_between(text: str, begin_text: str, end_text: str) -> str:
    """
    Return the text between the first begin marker and the last end marker

    Returns an empty string if either marker is missing.
    """
    begin_index = text.find(begin_text)
    end_index = text.rfind(end_text)
    if begin_index < 0 or end_index < 0:
        return ''

    return text[begin_index + len(begin_text):end_index]


def trim(content: str, trim_size: int) -> str:
    """Shorten a long value for display, noting its original length"""
    if len(content) < trim_size:
        return content
    return content[:trim_size] + '... (' + str(len(content)) + ' bytes total)'


def parse_gas(gas_text: str, output: str) -> int:
    """
    Parse the gas value cut from the harness output

    Raises:
        InvalidGasFormat: value is missing or not a non-negative integer
    """
    stripped = gas_text.strip()
    if not GAS_PATTERN.fullmatch(stripped):
        raise InvalidGasFormat(gas_text, output)
    try:
        return int(stripped)
    except ValueError as e:
        raise InvalidGasFormat(gas_text, output) from e


def parse_json(payload: str):
    """Parse a JSON payload, wrapping parser errors with the raw payload"""
    try:
        return json.loads(payload)
    except json.JSONDecodeError as e:
        raise InvalidJson(str(e), payload) from e


class OutputParser:
    """
    Decodes contract output into renderable content items

    Args:
        config: ParserConfig (defaults used if omitted)
        decoder: ContentDecoder used for every media string
    """

    def __init__(self, config: Optional[ParserConfig] = None, decoder: Optional[ContentDecoder] = None):
        self.config = config or ParserConfig()
        self.decoder = decoder or ContentDecoder()

    def parse_test_output(self, output: str) -> ParsedOutput:
        """
        Parse the log of a test harness run

        The harness wraps the gas cost and the render output in sentinel
        markers, e.g. <NFT_GAS>123</NFT_GAS><NFT_OUTPUT>...</NFT_OUTPUT>.

        Raises:
            InvalidGasFormat: gas marker missing or not numeric
            OutputParseError: any failure of parse_contract_function_output
        """
        gas_text = get_text_between(output, *self.config.gas_markers)
        gas = parse_gas(gas_text, output)

        content = get_text_between(output, *self.config.output_markers).strip()
        logger.debug("Harness output: gas=%d, content length=%d", gas, len(content))
        return self.parse_contract_function_output(content, gas)

    def parse_contract_function_output(self, output: str, gas: int = 0,
                                       trim_size: Optional[int] = None) -> ParsedOutput:
        """
        Parse the output of a render function or an ERC-721 tokenURI call

        Args:
            output: Raw function output
            gas: Gas value to carry into the result
            trim_size: Display length for JSON media attributes (config default if None)

        Returns:
            ParsedOutput with at least one content item

        Raises:
            InvalidJson: JSON data URL payload does not parse
            NoRenderableAttribute: JSON has no image, image_data or animation_url
            UnsupportedFormat: a content string has no recognizable type
            ValueError: gas is negative or trim_size is not positive
        """
        if gas < 0:
            raise ValueError(f"gas must be non-negative, got: {gas}")

        if trim_size is None:
            trim_size = self.config.trim_size
        elif trim_size <= 0:
            raise ValueError(f"trim_size must be positive, got: {trim_size}")

        data_url = parse_data_url(output)
        if data_url is None or data_url.media_type != JSON_MEDIA_TYPE:
            logger.debug("Decoding output as a single content item")
            return ParsedOutput(gas=gas, content=[self.decoder.decode(output)])

        document = parse_json(data_url.data)
        metadata = TokenMetadata.from_json(document, data_url.data)
        if metadata.is_empty():
            raise NoRenderableAttribute(json.dumps(document, indent=4, ensure_ascii=False))

        result = ParsedOutput(gas=gas, json=document)
        for name, value in metadata.attributes():
            logger.debug("Decoding JSON attribute %s (%d chars)", name, len(value))
            result.content.append(self.decoder.decode(value, name))
            document[name] = trim(value, trim_size)

        return result


_default_parser = OutputParser()


def parse_test_output(output: str) -> ParsedOutput:
    """Parse test harness output with the default parser"""
    return _default_parser.parse_test_output(output)


def parse_contract_function_output(output: str, gas: int = 0, trim_size: int = 100) -> ParsedOutput:
    """Parse contract function output with the default parser"""
    return _default_parser.parse_contract_function_output(output, gas, trim_size)
