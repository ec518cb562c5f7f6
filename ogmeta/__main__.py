# -*- coding: utf-8 -*-
"""標準入力のHTML(または--urlのページ)からog:タグを読んで出力する

    $ curl -s https://example.com/ | python -m ogmeta
    $ python -m ogmeta --url https://example.com/ --json
"""
import argparse
import json
import logging
import sys

from .errors import FetchError
from .fetch import parse_url
from .generator import generate
from .parser import parse

logger = logging.getLogger(__name__)


def setup_logging(debug=False):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] %(name)s: %(message)s'))
    root = logging.getLogger('ogmeta')
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    if not root.handlers:
        root.addHandler(handler)

    # tornadoのログはdebugのときだけ
    logging.getLogger('tornado').setLevel(logging.DEBUG if debug else logging.WARNING)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='ogmeta', description='Read Open Graph meta tags from HTML.')
    parser.add_argument('--url', help='fetch this page instead of reading stdin')
    parser.add_argument('--json', action='store_true', help='dump parsed metadata as JSON')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    return parser.parse_args(argv)


def main(argv=None, stdin=None, stdout=None):
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    setup_logging(args.debug)

    if args.url:
        try:
            data = parse_url(args.url)
        except FetchError as e:
            logger.error('%s', e)
            return 1
    else:
        data = parse(stdin.read())

    if args.json:
        json.dump(data.to_dict(), stdout, ensure_ascii=False, indent=2)
    else:
        stdout.write(generate(data))
    stdout.write('\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
