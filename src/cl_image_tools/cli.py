"""Command-line entry point.

    cl-image-tools stats <filePath>
    cl-image-tools resize <small|medium|large> <filePath>
"""

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import NoReturn

from loguru import logger
from typing_extensions import override

from . import __version__
from .common.errors import ArgumentCountError, ImageToolsError
from .plugins.image_resize import resize
from .plugins.image_stats import display, gather_stats
from .utils.logging import configure_logging

PROG = "cl-image-tools"
EXIT_OK = 0
EXIT_FAILURE = 1


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that uses the tool's single failure exit code."""

    @override
    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        super().exit(EXIT_FAILURE if status else EXIT_OK, message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog=PROG,
        description="Report file statistics for an image, or resize it to a preset size.",
        epilog="commands: stats <filePath> | resize <small|medium|large> <filePath>",
    )
    _ = parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _ = parser.add_argument("command", nargs="?", help="stats or resize")
    _ = parser.add_argument("args", nargs=argparse.REMAINDER, help="command arguments")
    return parser


def eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


def _expect_args(command: str, args: Sequence[str], expected: int) -> None:
    if len(args) != expected:
        raise ArgumentCountError(command, expected, len(args))


def cmd_stats(args: Sequence[str]) -> int:
    _expect_args("stats", args, 1)
    display(gather_stats(args[0]))
    return EXIT_OK


def cmd_resize(args: Sequence[str]) -> int:
    _expect_args("resize", args, 2)
    size, file_path = args
    result = resize(file_path, size)
    print(f"Creating file at {result.output_path}")
    print(f"Resized in {result.elapsed_ms:.0f} ms")
    return EXIT_OK


COMMANDS: dict[str, Callable[[Sequence[str]], int]] = {
    "stats": cmd_stats,
    "resize": cmd_resize,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit status."""
    ns = build_parser().parse_args(argv)
    _ = configure_logging(verbose=bool(ns.verbose))

    command: str | None = ns.command
    args: list[str] = ns.args

    try:
        if command is None:
            raise ArgumentCountError(PROG, 1, 0)

        handler = COMMANDS.get(command.lower())
        if handler is None:
            print("unknown cmd")
            return EXIT_OK

        return handler(args)
    except ImageToolsError as e:
        logger.opt(exception=e).debug(f"{command} failed")
        eprint(f"error: {e}")
        return EXIT_FAILURE


def run() -> NoReturn:
    sys.exit(main())
