"""
Parse Errors
Failure taxonomy for the contract output decoding pipeline

Every error is fatal to the current call and embeds the offending raw data
in its message so it can be shown to the user as-is.
"""

from typing import Optional


class OutputParseError(ValueError):
    """Base class for all decoding failures"""

    def __init__(self, message: str, raw: str = ""):
        super().__init__(message)
        self.message = message
        self.raw = raw

    def to_dict(self) -> dict:
        return {'error': type(self).__name__, 'detail': self.message}


class InvalidGasFormat(OutputParseError):
    """Gas sentinel missing or not a non-negative base-10 integer"""

    def __init__(self, gas_text: str, output: str):
        super().__init__(
            'Invalid gas string. Expecting number, got: ' + gas_text + '\n' + output,
            raw=output
        )
        self.gas_text = gas_text


class InvalidJson(OutputParseError):
    """JSON payload of a data URL could not be parsed or has the wrong shape"""

    def __init__(self, reason: str, payload: str):
        super().__init__(reason + '\n' + payload, raw=payload)
        self.reason = reason


class NoRenderableAttribute(OutputParseError):
    """Parsed JSON carries none of image, image_data or animation_url"""

    def __init__(self, json_text: str):
        super().__init__(
            'Invalid JSON. Content must be in image, image_data or animation_url attribute'
            '\n' + json_text,
            raw=json_text
        )


class UnsupportedFormat(OutputParseError):
    """Content could not be mapped to a renderable type"""

    def __init__(self, output: str, label: Optional[str] = None):
        where = f' for attribute: {label}' if label else ''
        super().__init__(
            f'Unsupported image format{where}. Not a recognized image!\n' + output,
            raw=output
        )
        self.label = label
