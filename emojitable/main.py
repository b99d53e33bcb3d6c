# This file is part of emojitable.
#
# SPDX-License-Identifier: GPL-3.0-only

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

import emojitable
from emojitable.common import logging_helpers
from emojitable.common.builder import build_from_config
from emojitable.common.config import BuildConfig
from emojitable.common.config import DEFAULT_GEMOJI_VERSION
from emojitable.common.config import DEFAULT_TIMEOUT
from emojitable.common.config import DEFAULT_UNICODE_VERSION
from emojitable.common.config import get_cache_dir
from emojitable.common.config import OUTPUT_FORMATS
from emojitable.common.emitter import generate
from emojitable.common.emitter import write_output
from emojitable.common.exceptions import EmojiTableError
from emojitable.common.structs import Emoji

log = logging.getLogger('emojitable.main')


def create_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='emojitable',
        description='Generate a static emoji table from the Unicode emoji '
                    'registry and the gemoji alias catalog')
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {emojitable.__version__}')

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true',
                           help='Print debug output')
    verbosity.add_argument('-q', '--quiet', action='store_true',
                           help='Print only errors')
    parser.add_argument('--loglevels', metavar='DIRECTIVES',
                        help='Set log levels, e.g. c.aggregator=DEBUG,INFO')

    parser.add_argument('--cache-dir', type=Path, default=None,
                        help=f'Download cache (default: {get_cache_dir()})')
    parser.add_argument('--timeout', type=float, default=DEFAULT_TIMEOUT,
                        help='HTTP timeout in seconds')
    parser.add_argument('--unicode-version', default=DEFAULT_UNICODE_VERSION,
                        help='Unicode emoji release to download')
    parser.add_argument('--gemoji-version', default=DEFAULT_GEMOJI_VERSION,
                        help='gemoji release to download')
    parser.add_argument('--registry', type=Path, metavar='FILE',
                        help='Read emoji-test.txt from FILE instead')
    parser.add_argument('--catalog', type=Path, metavar='FILE',
                        help='Read the gemoji emoji.json from FILE instead')

    subparsers = parser.add_subparsers(required=True,
                                       metavar='commands',
                                       dest='command')

    subparser = subparsers.add_parser(
        'generate',
        help='Write the emoji table')
    subparser.add_argument('-o', '--output', type=Path, metavar='FILE',
                           help='Output file (default: stdout)')
    subparser.add_argument('--format', dest='output_format',
                           choices=OUTPUT_FORMATS, default='python',
                           help='Output format')

    subparser = subparsers.add_parser(
        'search',
        help='Search the emoji table')
    subparser.add_argument('query', type=str,
                           help='Matched against emoji, name, subgroup, '
                                'tags and aliases')
    subparser.add_argument('--limit', type=int, default=50,
                           help='Maximum number of results')

    return parser


def create_config(args: argparse.Namespace) -> BuildConfig:
    config = BuildConfig(unicode_version=args.unicode_version,
                         gemoji_version=args.gemoji_version,
                         timeout=args.timeout,
                         output_format=getattr(args, 'output_format',
                                               'python'),
                         registry_path=args.registry,
                         catalog_path=args.catalog)
    if args.cache_dir is not None:
        config.cache_dir = args.cache_dir
    return config


def run_generate(args: argparse.Namespace,
                 config: BuildConfig,
                 console: Console) -> None:

    emojis = build_from_config(config)
    text = generate(emojis, config)
    if args.output is None:
        sys.stdout.write(text)
        return

    write_output(text, args.output)
    console.print(f'Wrote {len(emojis)} emojis to {args.output}')


def run_search(args: argparse.Namespace,
               config: BuildConfig,
               console: Console) -> None:

    emojis = build_from_config(config)
    results = search(emojis, args.query, args.limit)
    if not results:
        console.print(f'No emoji matches {args.query!r}')
        return

    table = Table('Emoji')
    table.add_column('Name', no_wrap=True)
    table.add_column('Subgroup')
    table.add_column('Aliases')
    table.add_column('Tags')
    for emoji in results:
        entry = emoji.entry
        table.add_row(entry.emoji,
                      entry.name,
                      entry.subgroup,
                      ', '.join(entry.aliases),
                      ', '.join(entry.tags))
    console.print(table)


def search(emojis: list[Emoji], query: str, limit: int) -> list[Emoji]:
    results: list[Emoji] = []
    for emoji in emojis:
        if len(results) >= limit:
            break
        if emoji.matches_search(query):
            results.append(emoji)
    return results


def main(argv: list[str] | None = None) -> int:
    parser = create_arg_parser()
    args = parser.parse_args(argv)

    logging_helpers.init()
    if args.verbose:
        logging_helpers.set_verbose()
    elif args.quiet:
        logging_helpers.set_quiet()
    if args.loglevels:
        logging_helpers.set_loglevels(args.loglevels)

    try:
        config = create_config(args)
    except ValueError as error:
        parser.error(str(error))

    console = Console()

    try:
        if args.command == 'generate':
            run_generate(args, config, console)
        else:
            run_search(args, config, console)
    except EmojiTableError as error:
        log.error('%s', error)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
