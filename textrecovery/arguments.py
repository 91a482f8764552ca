"""Command-line argument definitions and parsers."""

import dataclasses
from abc import ABC, abstractmethod


class ArgumentError(ValueError):
    """Raised when the command line does not fit the defined arguments."""


@dataclasses.dataclass
class Argument:
    """A command-line argument: a flag if ``is_bool``, otherwise it takes a value."""

    is_bool: bool
    name: str
    value: str = ""


class ArgParser(ABC):
    """Base class holding the command line and the valid arguments.

    ``argv`` is the command line without the program name.  The argument
    definitions are copied, so parsing never changes the caller's list.
    """

    def __init__(self, argv, args):
        self.argv = list(argv)
        self.args = [dataclasses.replace(arg) for arg in args]

    def _find(self, name):
        return next((arg for arg in self.args if arg.name == name), None)

    def argument_value(self, name):
        """Return the value of argument ``name``, or an empty string if it is unknown."""
        arg = self._find(name)
        return "" if arg is None else arg.value

    @abstractmethod
    def parse(self):
        """Parse ``argv`` into the argument values."""


class StrictArgParser(ArgParser):
    """Parser that needs at least two valued arguments unless help comes first.

    Flags are set to ``"true"``; valued arguments take the next word, which
    must not itself be an argument name.
    """

    HELP_NAMES = ("-h", "--help")

    def parse(self):
        """Parse ``argv``; raises ArgumentError if it does not fit."""
        if self.argv and self.argv[0] in self.HELP_NAMES:
            help_arg = self._find(self.argv[0])
            if help_arg is None:
                raise ArgumentError("invalid arguments")
            help_arg.value = "true"
            return

        if len(self.argv) < 4:
            raise ArgumentError("missing required arguments")

        words = iter(self.argv)
        for word in words:
            arg = self._find(word)
            if arg is None:
                raise ArgumentError("invalid arguments")
            if arg.is_bool:
                arg.value = "true"
                continue
            value = next(words, None)
            if value is None or self._find(value) is not None:
                raise ArgumentError("invalid arguments")
            arg.value = value