"""Parsing of command-line-style strings

A command line is split into words on whitespace.  Double quotes keep
whitespace inside a word and a backslash makes the next character a
literal.  The first word is the command name and the rest its arguments.

    >>> parse('sendmsg joe "I say \\\\"hi\\\\" to you!"')
    Command(name='sendmsg', arguments=('joe', 'I say "hi" to you!'))

"""

from .command import (Command, ParseError, EmptyCommandError,
                      UnterminatedQuoteError, TrailingEscapeError,
                      CommandError, UnknownCommandError, ArgumentError)
from .parse import parse, split

__all__ = [
    'Command', 'parse', 'split',
    'ParseError', 'EmptyCommandError', 'UnterminatedQuoteError',
    'TrailingEscapeError', 'CommandError', 'UnknownCommandError',
    'ArgumentError',
]

__version__ = '0.1.0'
