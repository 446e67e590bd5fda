class ParseError(ValueError):
    """Raised by strict parsing when a command line is malformed"""

class EmptyCommandError(ParseError):
    def __init__(self, message="command string has no command name or "
                               "arguments"):
        ParseError.__init__(self, message)

class UnterminatedQuoteError(ParseError):
    def __init__(self, message="unmatched quote"):
        ParseError.__init__(self, message)

class TrailingEscapeError(ParseError):
    def __init__(self, message="trailing escape character"):
        ParseError.__init__(self, message)


class CommandError(Exception):
    """Raised when a parsed command can not be dispatched"""

class UnknownCommandError(CommandError):
    def __init__(self, name):
        CommandError.__init__(self, "'{}' unknown command".format(name))
        self.name = name

class ArgumentError(CommandError):
    pass


class Command:
    """A parsed command line

    The first word of the line is the name, the remaining words are the
    arguments.  A line without any words gives an empty name and no
    arguments, which is false in a boolean context.

    """

    __slots__ = ('_name', '_arguments')

    def __init__(self, name='', arguments=()):
        self._name = name
        self._arguments = tuple(arguments)

    @classmethod
    def from_words(cls, words):
        if not words:
            return cls()
        return cls(words[0], words[1:])

    @property
    def name(self):
        return self._name

    @property
    def arguments(self):
        return self._arguments

    @property
    def words(self):
        if not self._name:
            return ()
        return (self._name,) + self._arguments

    def __bool__(self):
        return bool(self.words)

    def __eq__(self, other):
        if isinstance(other, Command):
            return (self._name, self._arguments) == \
                   (other._name, other._arguments)
        else:
            return NotImplemented

    def __hash__(self):
        return hash((self._name, self._arguments))

    def __repr__(self):
        return ('Command(name={!r}, arguments={!r})'
                ''.format(self._name, self._arguments))
