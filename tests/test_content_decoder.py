"""
Tests for content classification and canonicalization
"""

import base64

import pytest

from nftscope.core.content_decoder import ContentDecoder, encode_svg
from nftscope.core.errors import UnsupportedFormat
from nftscope.core.models import ContentType
from nftscope.core.sniffing import ExtensionSniffer, sniff_subtype


@pytest.fixture
def decoder():
    return ContentDecoder()


def test_inline_svg_is_wrapped_in_base64_data_url(decoder):
    result = decoder.decode('<svg></svg>')

    assert result.content_type is ContentType.SVG
    assert result.content == 'data:image/svg+xml;base64,PHN2Zz48L3N2Zz4='
    assert result.label is None


def test_svg_prefix_match_is_case_insensitive(decoder):
    result = decoder.decode('<SVG xmlns="http://www.w3.org/2000/svg"/>')

    assert result.content_type is ContentType.SVG
    assert result.content.startswith('data:image/svg+xml;base64,')


def test_svg_encoding_round_trips():
    markup = '<svg viewBox="0 0 10 10"><text>héllo ✓</text></svg>'

    encoded = encode_svg(markup)

    prefix, payload = encoded.split(',', 1)
    assert prefix == 'data:image/svg+xml;base64'
    assert base64.b64decode(payload).decode('utf-8') == markup


def test_canonical_svg_is_unchanged_on_second_decode(decoder):
    first = decoder.decode('<svg><rect/></svg>')

    second = decoder.decode(first.content)

    assert second.content == first.content
    assert second.content_type is ContentType.SVG


def test_utf8_svg_data_url_is_reencoded_as_base64(decoder):
    result = decoder.decode('data:image/svg+xml;utf8,<svg></svg>')

    assert result.content_type is ContentType.SVG
    assert result.content == 'data:image/svg+xml;base64,PHN2Zz48L3N2Zz4='


def test_base64_html_data_url_is_decoded_to_markup(decoder):
    markup = '<html><body><canvas></canvas></body></html>'
    encoded = base64.b64encode(markup.encode('utf-8')).decode('ascii')

    result = decoder.decode('data:text/html;base64,' + encoded, 'animation_url')

    assert result.content_type is ContentType.HTML
    assert result.content == markup
    assert result.label == 'animation_url'


def test_plain_html_data_url_passes_through(decoder):
    text = 'data:text/html,<p>hi</p>'

    result = decoder.decode(text)

    assert result.content_type is ContentType.HTML
    assert result.content == text


def test_inline_html_passes_through(decoder):
    text = '<HTML><body>hi</body></HTML>'

    result = decoder.decode(text)

    assert result.content_type is ContentType.HTML
    assert result.content == text


@pytest.mark.parametrize('text, expected', [
    ('http://example.com/a.png', ContentType.PNG),
    ('ipfs://QmHash/image.JPEG', ContentType.JPG),
    ('ar://tx/photo.jpg', ContentType.JPG),
    ('https://example.com/token/1', ContentType.LINK),
    ('data:image/png;base64,AAAA', ContentType.PNG),
    ('data:image/jpeg;base64,AAAA', ContentType.JPG),
])
def test_untouched_content(decoder, text, expected):
    result = decoder.decode(text)

    assert result.content_type is expected
    assert result.content == text


def test_unknown_extension_fails(decoder):
    with pytest.raises(UnsupportedFormat) as exc_info:
        decoder.decode('foo.xyz')

    assert 'foo.xyz' in str(exc_info.value)
    assert exc_info.value.label is None


def test_unsupported_error_names_attribute(decoder):
    with pytest.raises(UnsupportedFormat, match='for attribute: image'):
        decoder.decode('data:image/gif;base64,AAAA', 'image')


def test_classify_reports_unknown_without_raising(decoder):
    content_type, data_url = decoder.classify('foo.xyz')

    assert content_type is ContentType.UNKNOWN
    assert data_url is None


def test_custom_sniffer_list_is_used():
    decoder = ContentDecoder(sniffers=[ExtensionSniffer()])

    with pytest.raises(UnsupportedFormat):
        decoder.decode('<svg></svg>')


def test_sniff_subtype_defaults_to_all_rules():
    assert sniff_subtype('<svg></svg>', None) == 'svg'
    assert sniff_subtype('<svg></svg>', None, [ExtensionSniffer()]) == '<svg></svg>'
