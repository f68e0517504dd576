"""
Tests for parser configuration and presets
"""

import pytest

from nftscope.core.config import ParserConfig, list_presets


def test_defaults():
    config = ParserConfig()

    assert config.trim_size == 100
    assert config.gas_markers == ('<NFT_GAS>', '</NFT_GAS>')
    assert config.output_markers == ('<NFT_OUTPUT>', '</NFT_OUTPUT>')


def test_preset_with_override():
    config = ParserConfig.from_preset('verbose', output_markers=('<OUT>', '</OUT>'))

    assert config.trim_size == 1000
    assert config.output_markers == ('<OUT>', '</OUT>')


def test_unknown_preset():
    with pytest.raises(ValueError, match='Unknown preset'):
        ParserConfig.from_preset('nope')


def test_list_presets():
    assert list_presets() == ['compact', 'default', 'verbose']


@pytest.mark.parametrize('trim_size', [0, -1])
def test_trim_size_must_be_positive(trim_size):
    with pytest.raises(ValueError):
        ParserConfig(trim_size=trim_size)


def test_markers_must_be_a_pair():
    with pytest.raises(ValueError):
        ParserConfig(gas_markers=('<NFT_GAS>', ''))
