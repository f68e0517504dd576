"""
Parser Configuration
Tunables for the output parser plus a small preset library
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass
class ParserConfig:
    """
    Configuration for OutputParser

    Can be initialized from:
    1. Defaults: ParserConfig()
    2. Custom parameters: ParserConfig(trim_size=40)
    3. Preset + overrides: ParserConfig.from_preset("verbose", trim_size=500)
    """
    trim_size: int = 100  # characters kept before a JSON media attribute is truncated
    gas_markers: Tuple[str, str] = ('<NFT_GAS>', '</NFT_GAS>')
    output_markers: Tuple[str, str] = ('<NFT_OUTPUT>', '</NFT_OUTPUT>')

    def __post_init__(self):
        if not isinstance(self.trim_size, int) or self.trim_size <= 0:
            raise ValueError(f"trim_size must be a positive integer, got: {self.trim_size!r}")
        for markers in (self.gas_markers, self.output_markers):
            if len(markers) != 2 or not all(markers):
                raise ValueError(f"Markers must be a non-empty (open, close) pair, got: {markers!r}")

    @staticmethod
    def from_preset(preset_name: str, **overrides) -> 'ParserConfig':
        """
        Create config from preset with optional overrides

        Example:
            config = ParserConfig.from_preset("compact", output_markers=("<OUT>", "</OUT>"))
        """
        if preset_name not in PRESETS:
            raise ValueError(f"Unknown preset: {preset_name}. Available: {list_presets()}")

        values = dict(PRESETS[preset_name])
        values.update(overrides)
        return ParserConfig(**values)


PRESETS: Dict[str, Dict] = {
    'default': {'trim_size': 100},
    'compact': {'trim_size': 40},
    'verbose': {'trim_size': 1000},
}


def list_presets() -> List[str]:
    return sorted(PRESETS)
