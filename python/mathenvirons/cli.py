"""Command line entry point, called by mdbook."""

import argparse
import json
import logging
import os
import sys
from typing import Optional

from . import __version__
from .errors import MathEnvironsError
from .preprocessor import MathEnvirons, check_version, parse_input

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    'debug': logging.DEBUG,
    'info': logging.INFO,
    'warning': logging.WARNING,
    'error': logging.ERROR,
}


def setup_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr; stdout is reserved for the book."""
    if level is None:
        level = os.environ.get('MATHENVIRONS_LOG', 'warning')
    logging.basicConfig(
        level=LOG_LEVELS.get(level.lower(), logging.WARNING),
        format='%(message)s',
        stream=sys.stderr,
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='mathenvirons',
        description='A mdbook preprocessor to add latex-like math environments to mdbook.'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command')

    supports_parser = subparsers.add_parser(
        'supports',
        help='Check whether a renderer is supported by this preprocessor'
    )
    supports_parser.add_argument('renderer', help='Renderer name, e.g. html')

    return parser


def handle_supports(pre: MathEnvirons, renderer: str) -> int:
    return 0 if pre.supports_renderer(renderer) else 1


def handle_preprocessing(pre: MathEnvirons) -> int:
    """Read [context, book] from stdin and write the processed book to stdout."""
    try:
        context, book = parse_input(sys.stdin)
        check_version(context, pre.name)
        processed = pre.run(context, book)
    except MathEnvironsError as e:
        print(e, file=sys.stderr)
        return e.exit_code

    json.dump(processed, sys.stdout)
    return 0


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parsed_args = create_parser().parse_args(args)
    setup_logging()

    pre = MathEnvirons()
    if parsed_args.command == 'supports':
        return handle_supports(pre, parsed_args.renderer)
    return handle_preprocessing(pre)


if __name__ == '__main__':
    sys.exit(main())
