"""Command-line entry point."""

import argparse
import logging
import sys
from datetime import datetime

from header_audit.catalog import DEFAULT_CATALOG
from header_audit.fetch import DEFAULT_TIMEOUT, FetchError
from header_audit.report import (
    SEPARATOR,
    Colors,
    paint,
    render_audit,
    render_error_json,
    render_intro,
    render_json,
)
from header_audit.scan import audit_target

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog='header-audit',
        description="Check a URL for security headers and insecure cookies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --url https://example.com
  %(prog)s --url https://example.com --details
  %(prog)s --url-list urls.txt --no-color -o report.txt
  %(prog)s --url-list urls.txt --format json --keep-going
        """
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument('--url', help='URL to check')
    target.add_argument('--url-list', '--urlList', dest='url_list',
                        help='File containing URLs to check (one per line)')

    parser.add_argument('--details', action='store_true',
                        help='Show the explanation for every checked header')
    parser.add_argument('--format', choices=['text', 'json'], default='text',
                        help='Output format (default: text)')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable ANSI colors')
    parser.add_argument('--timeout', type=float, default=DEFAULT_TIMEOUT,
                        help=f'Request timeout in seconds (default: {DEFAULT_TIMEOUT})')
    parser.add_argument('--output', '-o',
                        help='Also save the report (without colors) to this file')
    parser.add_argument('--keep-going', action='store_true',
                        help='Continue with the next URL when a request fails')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log request details to stderr')
    return parser


def configure_logging(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )


def read_url_list(path):
    """Read targets from ``path``, skipping blank lines. OSError propagates."""
    with open(path, 'r', encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


def print_error(message, color=True):
    print(paint(f"Error: {message}", Colors.RED, color), file=sys.stderr)


def save_output(path, text):
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
    except OSError as e:
        print(f"Error saving file: {e}", file=sys.stderr)
        return False
    print(f"Output saved to: {path}")
    return True


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.url and not args.url_list:
        parser.print_help()
        return 0

    configure_logging(args.verbose)
    color = not args.no_color

    if args.url_list:
        try:
            urls = read_url_list(args.url_list)
        except OSError as e:
            print_error(e, color)
            return 1
        logger.debug("Loaded %d URL(s) from %s", len(urls), args.url_list)
    else:
        urls = [args.url]

    list_mode = bool(args.url_list)
    saved = []
    failed = False

    for url in urls:
        tested_on = datetime.now().astimezone()
        if args.format == 'text':
            print(render_intro(url, tested_on, color), flush=True)
            saved.append(render_intro(url, tested_on, color=False))

        try:
            report = audit_target(url, DEFAULT_CATALOG, timeout=args.timeout, tested_on=tested_on)
        except FetchError as e:
            print_error(e, color)
            if not args.keep_going:
                return 1
            failed = True
            if args.format == 'json':
                document = render_error_json(e.url, e.error)
                print(document)
                saved.append(document)
            else:
                saved.append(f"Error: {e}")
            continue

        if args.format == 'json':
            document = render_json(report, args.details)
            print(document)
            saved.append(document)
            continue

        print(render_audit(report, args.details, color))
        saved.append(render_audit(report, args.details, color=False))
        if list_mode:
            print('\n' + paint(SEPARATOR, Colors.YELLOW, color))
            saved.append('\n' + SEPARATOR)

    if args.output and not save_output(args.output, '\n'.join(saved) + '\n'):
        return 1

    return 1 if failed else 0
