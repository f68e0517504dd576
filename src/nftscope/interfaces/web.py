"""
Flask Web GUI Interface
Local page for pasting contract output and previewing the decoded media
"""

import html
import os

from flask import Flask, jsonify, request

from nftscope.core.config import ParserConfig
from nftscope.core.errors import OutputParseError
from nftscope.core.output_parser import OutputParser
from nftscope.utils.report_generator import ReportGenerator


# Initialize Flask app
app = Flask(__name__)
app.config['MAX_CONTENT_LENGTH'] = 16 * 1024 * 1024  # 16MB max request

parser = OutputParser(ParserConfig())
report_gen = ReportGenerator()

INDEX_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>NFTScope</title></head>
<body style="font-family: sans-serif; margin: 2em;">
<h1>NFTScope</h1>
{error}
<form method="post" action="/preview">
<textarea name="output" rows="16" cols="100" placeholder="tokenURI / render output">{output}</textarea><br>
<label><input type="checkbox" name="harness" value="1"> Test harness log</label><br>
<button type="submit">Preview</button>
</form>
</body>
</html>
"""


def _parse_request(output: str, harness: bool):
    if harness:
        return parser.parse_test_output(output)
    return parser.parse_contract_function_output(output.strip())


@app.route('/')
def index():
    """
    Main page with paste form
    """
    return INDEX_PAGE.format(error='', output='')


@app.route('/preview', methods=['POST'])
def preview():
    """
    Decode pasted output and render the preview page
    """
    output = request.form.get('output', '')
    harness = request.form.get('harness') == '1'

    if not output.strip():
        return INDEX_PAGE.format(error='<p style="color: red;">No output provided</p>', output=''), 400

    try:
        result = _parse_request(output, harness)
    except OutputParseError as e:
        error = f'<pre style="color: red;">{html.escape(type(e).__name__)}: {html.escape(e.message)}</pre>'
        return INDEX_PAGE.format(error=error, output=html.escape(output)), 422

    return report_gen.generate_html(result, 'NFTScope Preview')


@app.route('/api/parse', methods=['POST'])
def api_parse():
    """
    JSON endpoint: {"output": "...", "harness": false}
    """
    data = request.get_json(silent=True) or {}
    output = data.get('output')

    if not isinstance(output, str) or not output:
        return jsonify({'error': 'No output provided'}), 400

    try:
        result = _parse_request(output, bool(data.get('harness')))
    except OutputParseError as e:
        return jsonify(e.to_dict()), 422

    return jsonify(result.to_dict())


@app.errorhandler(413)
def request_entity_too_large(error):
    """Handle request too large error"""
    return jsonify({'error': 'Request too large. Maximum size: 16MB'}), 413


# Run server
if __name__ == '__main__':
    print("[*] Starting NFTScope Web GUI...")
    print(f"[*] PID: {os.getpid()}")
    print("[*] Press Ctrl+C to stop")

    app.run(debug=True, host='127.0.0.1', port=5000, use_reloader=False)
