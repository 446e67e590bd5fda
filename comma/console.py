import logging
import sys

from .cmdsys import command, dispatch, get_commands, lookup, usage
from .command import ParseError, UnknownCommandError, ArgumentError
from .parse import parse

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'prompt': '> ',
    'strict': False,
    'intro': None,
}


class Console:
    """Line oriented command interpreter

    Reads command lines from stdin, parses them and runs the matching
    command method.  Subclasses provide commands by decorating methods
    with cmdsys.command.

    """

    def __init__(self, config=None, stdin=None, stdout=None):
        self.config = dict(DEFAULT_CONFIG)
        if config is not None:
            self.config.update(config)

        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.running = False

    def write(self, text):
        print(text, file=self.stdout)

    def readline(self):
        prompt = self.config['prompt']
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            return None

        return line.rstrip('\r\n')

    def onecmd(self, line):
        try:
            cmd = parse(line, self.config['strict'])
        except ParseError as e:
            self.write('error: {}'.format(e))
            return None

        if not cmd:
            return None

        try:
            result = dispatch(self, cmd)
        except (UnknownCommandError, ArgumentError) as e:
            self.write('error: {}'.format(e))
        except Exception as e:
            logger.debug("command %r failed", cmd.name, exc_info=True)
            self.write("{}: {}".format(e.__class__.__name__, e))
        else:
            if result is not None:
                self.write(result)
            return result

        return None

    def run(self):
        if self.config['intro']:
            self.write(self.config['intro'])

        self.running = True
        while self.running:
            line = self.readline()
            if line is None:
                break

            self.onecmd(line)

        self.running = False

    @command
    def help(self, name=None):
        """Show the available commands or the usage of one"""
        if name is None:
            return 'commands: {}'.format(', '.join(get_commands(self)))

        func = lookup(self, name)
        lines = ['usage: {}'.format(usage(name, func))]
        doc = (func.__doc__ or '').strip()
        if doc:
            lines.append(doc.splitlines()[0])

        return '\n'.join(lines)

    @command
    def quit(self):
        """Leave the console"""
        self.running = False

    @command
    def exit(self):
        """Leave the console"""
        self.running = False
