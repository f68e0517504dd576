"""
Tests for Markdown and HTML report generation
"""

from nftscope.core.models import Content, ContentType, ParsedOutput
from nftscope.utils.report_generator import ReportGenerator


def make_result():
    return ParsedOutput(
        gas=21000,
        content=[
            Content('data:image/svg+xml;base64,PHN2Zz48L3N2Zz4=', ContentType.SVG, 'image'),
            Content('<html><body>"hi"</body></html>', ContentType.HTML, 'animation_url'),
            Content('https://example.com/token/1', ContentType.LINK),
        ],
        json={'name': 'Token', 'image': 'data:image/svg+xml;base64,PHN2Zz48L3N2Zz4='}
    )


def test_html_branches_on_content_type():
    page = ReportGenerator().generate_html(make_result(), 'Token <1>')

    assert '<img src="data:image/svg+xml;base64,PHN2Zz48L3N2Zz4="' in page
    assert 'srcdoc="&lt;html&gt;&lt;body&gt;&quot;hi&quot;&lt;/body&gt;&lt;/html&gt;"' in page
    assert '<a href="https://example.com/token/1"' in page
    assert '<title>Token &lt;1&gt;</title>' in page
    assert 'Gas: 21000' in page


def test_markdown_lists_items_and_metadata():
    report = ReportGenerator(preview_size=10).generate_markdown(make_result(), 'Token')

    assert '# NFTScope Report: Token' in report
    assert '**Gas**: 21,000' in report
    assert '| 1 | image | SVG | `data:image...` |' in report
    assert '| 3 | - | LINK |' in report
    assert '"name": "Token"' in report


def test_markdown_without_json():
    result = ParsedOutput(content=[Content('http://e.com/a.png', ContentType.PNG)])

    report = ReportGenerator().generate_markdown(result)

    assert '## Metadata' not in report


def test_metadata_keeps_unicode():
    result = ParsedOutput(
        content=[Content('http://e.com/a.png', ContentType.PNG, 'image')],
        json={'name': 'Ünïcode ✓', 'image': 'http://e.com/a.png'}
    )
    report_gen = ReportGenerator()

    assert '"name": "Ünïcode ✓"' in report_gen.generate_markdown(result)
    assert 'Ünïcode ✓' in report_gen.generate_html(result)
