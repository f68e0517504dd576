"""
Command-Line Interface (CLI) for NFTScope
Decodes contract output captured from a terminal, file or pipe
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .core.config import ParserConfig, list_presets
from .core.errors import OutputParseError
from .core.output_parser import OutputParser
from .utils.report_generator import ReportGenerator


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser"""
    parser = argparse.ArgumentParser(
        prog='nftscope',
        description='NFTScope - decode tokenURI / render output into renderable media',
    )

    parser.add_argument(
        'input',
        type=str,
        help="File containing the contract output, or '-' to read stdin"
    )

    parser.add_argument(
        '--harness',
        action='store_true',
        help='Input is a test harness log with <NFT_GAS>/<NFT_OUTPUT> markers'
    )

    parser.add_argument(
        '--gas',
        type=int,
        default=0,
        metavar='N',
        help='Gas value to report for plain function output (default: 0)'
    )

    parser.add_argument(
        '--preset',
        type=str,
        default='default',
        choices=list_presets(),
        help='Parser configuration preset (default: default)'
    )

    parser.add_argument(
        '--trim-size',
        type=int,
        default=None,
        metavar='N',
        help='Characters of JSON media attributes kept for display (overrides preset)'
    )

    parser.add_argument(
        '--json-only',
        action='store_true',
        help='Output JSON only (machine-readable)'
    )

    parser.add_argument(
        '--html',
        type=str,
        default=None,
        metavar='PATH',
        help='Write an HTML preview page to PATH'
    )

    parser.add_argument(
        '--markdown',
        type=str,
        default=None,
        metavar='PATH',
        help='Write a Markdown report to PATH'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'NFTScope v{__version__}'
    )

    return parser


def read_input(source: str) -> str:
    """Read raw output from a file path or stdin"""
    if source == '-':
        return sys.stdin.read()

    input_path = Path(source)
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {source}")
    return input_path.read_text(encoding='utf-8')


def main(argv=None):
    """
    Main CLI entry point

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        overrides = {'trim_size': args.trim_size} if args.trim_size is not None else {}
        config = ParserConfig.from_preset(args.preset, **overrides)
        parser = OutputParser(config=config)

        raw = read_input(args.input)

        if args.harness:
            result = parser.parse_test_output(raw)
        else:
            result = parser.parse_contract_function_output(raw.strip(), gas=args.gas)

    except KeyboardInterrupt:
        print("\n[!] Interrupted by user", file=sys.stderr)
        return 130

    except (OutputParseError, OSError, ValueError) as e:
        print(f"[!] Error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1

    if args.json_only:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    report_gen = ReportGenerator()
    title = Path(args.input).name if args.input != '-' else 'stdin'

    print(f"[+] Gas: {result.gas}")
    print(f"[+] Content items: {len(result.content)}")
    for c in result.content:
        preview = c.content[:60] + ('...' if len(c.content) > 60 else '')
        print(f"    {c.label or '-'}: {c.content_type.name} {preview}")

    try:
        if args.html:
            Path(args.html).write_text(report_gen.generate_html(result, title), encoding='utf-8')
            print(f"[+] HTML preview: {args.html}")

        if args.markdown:
            Path(args.markdown).write_text(report_gen.generate_markdown(result, title), encoding='utf-8')
            print(f"[+] Markdown report: {args.markdown}")

    except OSError as e:
        print(f"[!] Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
