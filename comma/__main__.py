import argparse
import json
import logging
import sys

from . import __version__
from .cmdsys import command
from .command import ParseError
from .console import Console
from .parse import parse


class ParseConsole(Console):
    """Console for trying out the command line syntax"""

    @command
    def parse(self, *words):
        """Show the words a line is split into"""
        return '\n'.join('arg[{}]: {}'.format(i, word)
                         for i, word in enumerate(words))

    @command
    def echo(self, *words):
        """Print the arguments separated by single spaces"""
        return ' '.join(words)


def format_command(cmd, as_json=False):
    if as_json:
        return json.dumps({'name': cmd.name,
                           'arguments': list(cmd.arguments)})

    lines = ['name: {}'.format(cmd.name)]
    for i, argument in enumerate(cmd.arguments):
        lines.append('arg[{}]: {}'.format(i, argument))

    return '\n'.join(lines)

def build_parser():
    parser = argparse.ArgumentParser(
        prog='comma',
        description="Split a command line into a name and arguments.")
    parser.add_argument('line', nargs='?',
                        help="command line to parse, starts an "
                             "interactive console when omitted")
    parser.add_argument('--strict', action='store_true',
                        help="reject unterminated quotes, trailing escapes "
                             "and empty lines")
    parser.add_argument('--json', action='store_true',
                        help="print the result as JSON")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="enable debug logging")
    parser.add_argument('--version', action='version',
                        version='%(prog)s {}'.format(__version__))
    return parser

def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s:%(name)s: %(message)s')

    if args.line is None:
        console = ParseConsole({'strict': args.strict,
                                'intro': "type 'help' for a list of commands"})
        console.run()
        return 0

    try:
        cmd = parse(args.line, args.strict)
    except ParseError as e:
        print('error: {}'.format(e), file=sys.stderr)
        return 1

    print(format_command(cmd, args.json))
    return 0


if __name__ == '__main__':
    sys.exit(main())
