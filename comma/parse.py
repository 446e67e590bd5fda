# parse.py - Split a command line into a command name and arguments
#
# Scans the line once, left to right, keeping track of two things:
#
# 1. Whether the previous character was an unconsumed '\', in which case
#    the current character is taken as a literal.
# 2. Whether we are inside a '"' quoted section, in which case blanks are
#    taken as literals.
#
# Outside of quotes runs of blanks separate words and never produce empty
# words.  An unterminated quote or a trailing '\' is closed off as is
# unless strict parsing is requested.

import logging

from .command import (Command, EmptyCommandError, UnterminatedQuoteError,
                      TrailingEscapeError)

__all__ = ['parse', 'split']

logger = logging.getLogger(__name__)

ESCAPE = '\\'
QUOTE = '"'


class _Scanner:
    __slots__ = ('words', 'word', 'quoted', 'escaped')

    def __init__(self):
        self.words = []
        self.word = []
        self.quoted = False
        self.escaped = False

    def feed(self, char):
        if self.escaped:
            self.word.append(char)
            self.escaped = False

        elif char == ESCAPE:
            self.escaped = True

        elif char == QUOTE:
            self.quoted = not self.quoted

        elif self.quoted or not char.isspace():
            self.word.append(char)

        else:
            self.close()

    def close(self):
        if self.word:
            self.words.append(''.join(self.word))
            self.word.clear()

    def finish(self, strict):
        if self.escaped:
            if strict:
                raise TrailingEscapeError()
            logger.debug("dropping trailing escape character")

        elif self.quoted:
            if strict:
                raise UnterminatedQuoteError()
            logger.debug("closing unterminated quote")

        self.close()
        return self.words


def _scan(string, strict):
    scanner = _Scanner()
    for char in string:
        scanner.feed(char)

    words = scanner.finish(strict)
    logger.debug("split %r into %r", string, words)
    return words

def split(string, strict=False):
    """Split a command line into a list of words

    Escapes are done with a '\\' character and turn the next character
    into a literal with no special meaning.  Text between '"' characters
    keeps its whitespace, and any other whitespace separates words.
    Quoted text adjacent to other non-whitespace is part of the same word.

    Example: The string 'Augment\\ this  "string"_\\"battle\\" ' is split
             into the list ['Augment this', 'string_"battle"'].

    With strict set an unterminated quote or a trailing escape raises a
    ParseError instead of being closed off as is.

    """

    return _scan(string, strict)

def parse(string, strict=False):
    """Parse a command line into a Command

    The first word becomes the name and the rest the arguments, see split
    for the word syntax.  With strict set, malformed lines and lines with
    no words at all raise a ParseError.

    """

    words = _scan(string, strict)
    if strict and not words:
        raise EmptyCommandError()

    return Command.from_words(words)
