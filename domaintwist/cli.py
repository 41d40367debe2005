#!/usr/bin/env python3
"""
Command line interface for domaintwist.

Prints the look-alike domains of a single target domain as a table, JSON,
CSV or a plain list.
"""

import argparse
import logging
import sys

from rich.console import Console

from domaintwist.config.dconfig import LOG_LEVEL, THREAD_COUNT_DEFAULT, load_settings
from domaintwist.services.domain_parser import DomainError
from domaintwist.services.format import Format
from domaintwist.services.permutation import MutationKind
from domaintwist.services.twist_service import generate_permutations, try_generate_permutations
from domaintwist.utils.domain_util import load_word_list


def create_parser():
    parser = argparse.ArgumentParser(
        prog='domaintwist',
        description='Generate look-alike domains (typosquatting, bitsquatting, homoglyphs, ...)',
        epilog='Example: domaintwist --format json -o results.json example.com',
    )
    parser.add_argument('domain', nargs='?', help='Target domain, e.g. example.com')
    parser.add_argument('-f', '--format', choices=['table', 'json', 'csv', 'list'], default='table',
                        help='Output format (default: table)')
    parser.add_argument('-o', '--output', help='Write results to FILE instead of stdout')
    parser.add_argument('-k', '--kind', action='append', dest='kinds', metavar='KIND',
                        help='Only run this mutation kind (repeatable)')
    parser.add_argument('--dictionary', metavar='FILE', help='Keyword list for Combosquatting')
    parser.add_argument('--tld', metavar='FILE', help='Suffix list for TldVariation')
    parser.add_argument('--sort', action='store_true', help='Sort results by domain')
    parser.add_argument('--strict', action='store_true', help='Fail on an invalid domain instead of printing nothing')
    parser.add_argument('-t', '--threads', type=int, default=THREAD_COUNT_DEFAULT,
                        help=f'Worker threads (default: {THREAD_COUNT_DEFAULT})')
    parser.add_argument('--unicode', action='store_true', help='Show internationalized domains decoded')
    parser.add_argument('--list-kinds', action='store_true', help='Print the supported mutation kinds and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def render(domains, fmt: str, unicode: bool = False):
    """Returns text for json, csv and list, or a rich Table for the table format."""
    formatter = Format(domains, unicode=unicode)
    if fmt == 'json':
        return formatter.json()
    if fmt == 'csv':
        return formatter.csv()
    if fmt == 'list':
        return formatter.list()
    return formatter.table()


def emit(output, file=None):
    # Serialized formats are written verbatim, only tables go through rich
    if isinstance(output, str):
        print(output, file=file if file is not None else sys.stdout)
        return
    console = Console(file=file, width=200) if file is not None else Console()
    console.print(output)


def main(argv=None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else LOG_LEVEL,
                        format='%(levelname)s %(message)s', stream=sys.stderr)

    if args.list_kinds:
        print('\n'.join(kind.value for kind in MutationKind))
        return 0
    if not args.domain:
        parser.error('no domain specified')
    if args.threads < 1:
        parser.error('number of threads must be greater than zero')

    try:
        kinds = [MutationKind.lookup(k) for k in args.kinds] if args.kinds else None
    except ValueError as e:
        parser.error(str(e))

    options = dict(
        kinds=kinds,
        dictionary=load_word_list(args.dictionary) if args.dictionary else None,
        tld=load_word_list(args.tld) if args.tld else None,
        sort=True if args.sort else None,
        threads=args.threads,
    )

    strict = args.strict or load_settings().strict_errors
    if strict:
        try:
            domains = generate_permutations(args.domain, **options)
        except DomainError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    else:
        domains = try_generate_permutations(args.domain, **options)

    logging.info(f"Generated {len(domains)} permutations for {args.domain}")
    output = render(domains, args.format, unicode=args.unicode)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            emit(output, f)
        print(f"Results written to {args.output}", file=sys.stderr)
    else:
        emit(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
