"""
Report Generation Module
Creates Markdown summaries and HTML previews from parse results
"""

import html
import json
from datetime import datetime

from ..core.models import ContentType, ParsedOutput


IMAGE_TYPES = (ContentType.SVG, ContentType.PNG, ContentType.JPG)


class ReportGenerator:
    """
    Generates human-readable output from ParsedOutput results

    Markdown reports list every content item with a shortened preview;
    HTML previews render each item the way a viewer would:
    - SVG / PNG / JPG as <img src>
    - HTML as <iframe srcdoc>
    - Links as <a href>
    """

    def __init__(self, preview_size: int = 80):
        """
        Initialize report generator

        Args:
            preview_size: Characters of each content item shown in Markdown reports
        """
        self.preview_size = preview_size

    def generate_markdown(self, result: ParsedOutput, title: str = "Output") -> str:
        """
        Generate Markdown report

        Args:
            result: ParsedOutput to summarize
            title: Report title (e.g. contract or token name)

        Returns:
            Markdown formatted report as string
        """
        sections = [self._generate_header(title, result), self._generate_content_section(result)]

        if result.json is not None:
            sections.append(self._generate_json_section(result))

        return '\n\n'.join(sections)

    def generate_html(self, result: ParsedOutput, title: str = "Output") -> str:
        """
        Generate a standalone HTML preview page

        Args:
            result: ParsedOutput to render
            title: Page title

        Returns:
            HTML document as string
        """
        items = '\n'.join(
            f'<section><h2>{html.escape(c.label or c.content_type.name)}</h2>\n{self.render_content(c)}\n</section>'
            for c in result.content
        )

        metadata = ''
        if result.json is not None:
            metadata = f'<h2>Metadata</h2>\n<pre>{html.escape(json.dumps(result.json, indent=4, ensure_ascii=False))}</pre>'

        return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{html.escape(title)}</title>
<style>
body {{ font-family: sans-serif; margin: 2em; }}
img, iframe {{ max-width: 100%; border: 1px solid #ccc; }}
iframe {{ width: 600px; height: 600px; }}
</style>
</head>
<body>
<h1>{html.escape(title)}</h1>
<p>Gas: {result.gas}</p>
{items}
{metadata}
</body>
</html>
"""

    @staticmethod
    def render_content(content) -> str:
        """Render one Content item as an HTML fragment"""
        value = html.escape(content.content, quote=True)
        if content.content_type in IMAGE_TYPES:
            return f'<img src="{value}" alt="{html.escape(content.label or "")}">'
        if content.content_type is ContentType.HTML:
            return f'<iframe sandbox="allow-scripts" srcdoc="{value}"></iframe>'
        return f'<a href="{value}" target="_blank" rel="noopener">{value}</a>'

    def _generate_header(self, title: str, result: ParsedOutput) -> str:
        """Generate report header"""
        return f"""# NFTScope Report: {title}

**Generated**: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}
**Gas**: {result.gas:,}
**Content Items**: {len(result.content)}
"""

    def _generate_content_section(self, result: ParsedOutput) -> str:
        lines = ["## Content", "", "| # | Label | Type | Preview |", "|---|-------|------|---------|"]
        for i, c in enumerate(result.content, 1):
            preview = c.content[:self.preview_size]
            if len(c.content) > self.preview_size:
                preview += '...'
            preview = preview.replace('|', '\\|').replace('\n', ' ')
            lines.append(f"| {i} | {c.label or '-'} | {c.content_type.name} | `{preview}` |")
        return '\n'.join(lines)

    def _generate_json_section(self, result: ParsedOutput) -> str:
        return "## Metadata\n\n```json\n" + json.dumps(result.json, indent=4, ensure_ascii=False) + "\n```"
