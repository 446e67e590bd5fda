import logging
from inspect import getattr_static, signature

from .command import (Command, EmptyCommandError, UnknownCommandError,
                      ArgumentError)
from .parse import parse

logger = logging.getLogger(__name__)


def command(func):
    """Decorator marking a function as command"""
    func.is_command = True
    return func

def is_command(func):
    """Returns true if the function is a command"""
    return getattr(func, "is_command", False)

def get_commands(obj):
    """Returns the names of all commands in an object"""
    return sorted(name for name in dir(obj) if not name.startswith('_')
                      and is_command(getattr_static(obj, name)))

def parameters(func):
    """Generator returing the positional parameters for a function"""
    for param in signature(func).parameters.values():
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            yield param
        elif param.kind == param.VAR_POSITIONAL:
            while True:
                yield param

def usage(name, func):
    """Returns a one line synopsis of a command"""
    words = [name]
    for param in parameters(func):
        if param.kind == param.VAR_POSITIONAL:
            words.append('[{}...]'.format(param.name))
            break
        elif param.default is param.empty:
            words.append('<{}>'.format(param.name))
        else:
            words.append('[{}]'.format(param.name))

    return ' '.join(words)

def bind(func, arguments):
    """Check that arguments can be passed positionally to func"""
    try:
        signature(func).bind(*arguments)
    except TypeError as e:
        name = getattr(func, '__name__', repr(func))
        raise ArgumentError("{}: {}".format(name, e)) from None

def lookup(obj, name):
    """Returns the bound command called name on obj"""
    if name.startswith('_'):
        raise UnknownCommandError(name)

    func = getattr(obj, name, None)
    if not is_command(func):
        raise UnknownCommandError(name)

    return func

def dispatch(obj, line, strict=False):
    """Run a command line against the commands of an object

    The line is either a string, which is parsed first, or an already
    parsed Command.  The name picks the command method on obj and the
    arguments are passed to it as positional strings.  Returns whatever
    the command returns.

    """

    cmd = line if isinstance(line, Command) else parse(line, strict)
    if not cmd:
        raise EmptyCommandError()

    func = lookup(obj, cmd.name)
    bind(func, cmd.arguments)

    logger.debug("dispatching %r to %s", cmd, type(obj).__name__)
    return func(*cmd.arguments)
