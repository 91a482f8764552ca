"""Command that builds the serialized trie and BK-tree from a word list."""

import sys

from textrecovery.arguments import Argument, ArgumentError, StrictArgParser
from textrecovery.tree_builder import TreeBuilder

_HELP_HINT = "Use 'prepare_data -h' or 'prepare_data --help' to display help"

USAGE = (
    "Usage: prepare_data [OPTIONS]\n\n"
    "Required parameters:\n"
    "  -w, --wordlist\t\tInput file with the list of words\n"
    "\t\t\t\t\t\t(always required)\n"
    "  -t, --build-trie\t\tOutput file with created Trie\n"
    "\t\t\t\t\t\t(required if --build-bktree is not used)\n"
    "  -b, --build-bktree\tOutput file with created BK-tree\n"
    "\t\t\t\t\t\t(required if --build-trie is not used)\n\n"
    "Optional parameters:\n"
    "  -h, --help\t\t\tDisplay this usage information\n\n"
    "Examples:\n"
    "  prepare_data -w wordlist.txt -t trie.dat\n"
    "  prepare_data -w wordlist.txt -b bktree.dat\n"
    "  prepare_data -w wordlist.txt -t trie.dat -b bktree.dat"
)


def _arguments():
    return [
        Argument(True, "-h", "false"),
        Argument(True, "--help", "false"),
        Argument(False, "-w", ""),
        Argument(False, "--wordlist", ""),
        Argument(False, "-t", ""),
        Argument(False, "--build-trie", ""),
        Argument(False, "-b", ""),
        Argument(False, "--build-bktree", ""),
    ]


class _UsageError(Exception):
    """An error in the command line, reported together with the help hint."""


def _fail(message, hint=False):
    print(f"Error: {message}", file=sys.stderr)
    if hint:
        print(_HELP_HINT, file=sys.stderr)
    return 1


def _option(parser, short, long):
    """Return the value given for ``short`` or ``long``; empty if neither was given."""
    short_val = parser.argument_value(short)
    long_val = parser.argument_value(long)
    if short_val and long_val:
        raise _UsageError(f"both '{short}' and '{long}' are specified")
    return short_val or long_val


def main(argv=None):
    """Run the command with ``argv`` (default: the process arguments); return the exit code."""
    if argv is None:
        argv = sys.argv[1:]

    parser = StrictArgParser(argv, _arguments())
    try:
        parser.parse()
    except ArgumentError as exc:
        return _fail(exc, hint=True)

    if parser.argument_value("-h") == "true" or parser.argument_value("--help") == "true":
        print(USAGE, file=sys.stderr)
        return 0

    builder = TreeBuilder()
    try:
        wordlist = _option(parser, "-w", "--wordlist")
        if not wordlist:
            raise _UsageError("missing a value for either '-w' or '--wordlist'")
    except _UsageError as exc:
        return _fail(exc, hint=True)

    try:
        builder.read_wordlist(wordlist)
    except OSError as exc:
        return _fail(exc)

    steps = (
        ("-t", "--build-trie", builder.build_trie),
        ("-b", "--build-bktree", builder.build_bk_tree),
    )
    for short, long, build in steps:
        try:
            output = _option(parser, short, long)
        except _UsageError as exc:
            return _fail(exc, hint=True)
        if not output:
            continue
        try:
            build(output)
        except (OSError, ValueError) as exc:
            return _fail(exc)

    return 0