import argparse
import logging
import os
import sys
from typing import Optional

from blessings import Terminal
from packaging.version import Version

from .exceptions import UsageError
from . import __version__


logger = logging.getLogger(__name__)


# Returned by a command when it printed its own usage information
HELP_RETURN_CODE = 2


class PluginError(Exception):
    pass


class PluginValidationError(PluginError):
    pass


class CommandResult(str):
    _return_code: Optional[int] = None
    terminal: Optional[Terminal] = None
    cursor: int = 0

    def __new__(
        cls, string=None, return_code=None, cursor=0, no_format=False, **kwargs
    ):
        if string is None:
            string = ""
        if string and not string.endswith("\n"):
            string = string + "\n"

        terminal = Terminal()
        if not no_format:
            kwargs["t"] = terminal
            try:
                string = string.format(**kwargs)
            except KeyError:
                logger.warning(
                    "An error was encountered while attempting to format "
                    "string; returning the original string unformatted. "
                    "The caller may want to use the 'no_format' option if "
                    "the outgoing string includes curly braces.",
                )

        self = str.__new__(cls, string)
        self._return_code = return_code
        self.terminal = terminal
        self.cursor = cursor

        return self

    def _echo(self, message: str) -> None:
        print(message, end="")

    def echo(self):
        self._echo(self[self.cursor :])
        self.cursor = len(self)

        return self

    def add_line(self, the_line: str, no_format: bool = False, **kwargs):
        if not the_line.endswith("\n"):
            the_line = the_line + "\n"

        if not no_format:
            kwargs["t"] = self.terminal
            try:
                the_line = the_line.format(**kwargs)
            except KeyError:
                logger.warning(
                    "An error was encountered while attempting to format "
                    "string; returning the original string unformatted. "
                    "The caller may want to use the 'no_format' option if "
                    "the outgoing string includes curly braces.",
                )

        new_result = CommandResult(the_line, no_format=True)
        return self + new_result

    def __add__(self, other):
        joined_strings = super(CommandResult, self).__add__(other)

        return_code = None
        if self._return_code is not None:
            return_code = self._return_code
        if isinstance(other, CommandResult) and other._return_code is not None:
            return_code = other._return_code

        return CommandResult(
            joined_strings, return_code=return_code, cursor=self.cursor, no_format=True
        )

    @property
    def return_code(self) -> int:
        return self._return_code or 0

    @return_code.setter
    def return_code(self, value):
        self._return_code = int(value) if value is not None else None


class CommandArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports problems instead of exiting.

    ``-h``/``--help`` is registered by the command itself so that the
    usage text can be returned with its own exit code.
    """

    def __init__(self, *args, **kwargs):
        kwargs["add_help"] = False
        super(CommandArgumentParser, self).__init__(*args, **kwargs)
        self.add_argument(
            "-h",
            "--help",
            dest="help",
            action="store_true",
            default=False,
            help="Output usage information",
        )

    def error(self, message):
        raise UsageError(message)


class CommandPlugin(object):
    MIN_VERSION = None
    MAX_VERSION = None

    def __init__(self, **kwargs):
        for k, v in kwargs.items():
            setattr(self, k, v)

    def validate(self, **kwargs) -> bool:
        if not self.MIN_VERSION or not self.MAX_VERSION:
            raise PluginValidationError(
                "Minimum and maximum version numbers not specified."
            )

        min_version = Version(self.MIN_VERSION)
        max_version = Version(self.MAX_VERSION)
        curr_version = Version(__version__)
        if not min_version <= curr_version < max_version:
            raise PluginValidationError(
                "Command '%s' is not compatible with version %s of vercelctl; "
                "minimum version: %s; maximum version %s."
                % (
                    getattr(self, "entrypoint_name", self.__class__.__name__),
                    __version__,
                    self.MIN_VERSION,
                    self.MAX_VERSION,
                ),
            )

        return True

    def get_description(self):
        try:
            return self.__doc__.strip()
        except AttributeError:
            return None

    def get_epilog(self):
        return None

    def add_arguments(self, parser):
        pass

    def parse_arguments(self, parser, extra_args):
        return parser.parse_args(extra_args)

    @classmethod
    def get_command_result(cls, result, original=None):
        if not isinstance(result, CommandResult):
            result = CommandResult(result)

        if original is not None:
            result = original + result

        return result

    @classmethod
    def get_parser(cls, cmd, command_name):
        parser = CommandArgumentParser(
            prog=os.path.basename(sys.argv[0]) + " " + command_name,
            description=cmd.get_description(),
            epilog=cmd.get_epilog(),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        cmd.add_arguments(parser)
        return parser

    @classmethod
    def execute_command(cls, extra_args, client, path, command_name, **ckwargs):
        cmd = cls(entrypoint_name=command_name)

        parser = cls.get_parser(cmd, command_name)
        args = cmd.parse_arguments(parser, extra_args)

        if args.help:
            return CommandResult(
                parser.format_help(), return_code=HELP_RETURN_CODE, no_format=True
            )

        kwargs = {
            "args": args,
            "client": client() if cmd.requires_client() else None,
            "path": path,
            "parser": parser,
        }

        cmd.validate(**kwargs)
        return cls.get_command_result(cmd.handle(**kwargs))

    def handle(self, *args, **kwargs) -> None:
        return self.cmd(*args, **kwargs)

    def cmd(self, *args, **kwargs) -> None:
        # By default, no return value; just execute and move along
        self.main(*args, **kwargs)

    def main(self, *args, **kwargs) -> None:
        raise NotImplementedError()

    def requires_client(self) -> bool:
        return getattr(self, "REQUIRES_CLIENT", True)


class DirectOutputCommandPlugin(CommandPlugin):
    def cmd(self, *args, **kwargs):
        return self.main(*args, **kwargs)
