from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from typing import NoReturn

from .debugger import default_debugger
from .errors import ArgumentError

SEPARATOR = "--"
LOG_LEVELS = ("trace", "debug", "info", "warning", "error")


@dataclass(frozen=True)
class Invocation:
    """Everything one cargo-debug run needs, fixed once the command line is parsed."""

    subcommand: str
    debugger: str
    command_file: str | None = None
    build_args: tuple[str, ...] = ()
    binary_args: tuple[str, ...] = ()
    log_level: str = "info"


class _Parser(argparse.ArgumentParser):
    # argparse exits with status 2 on bad input; surface it as ArgumentError instead
    def error(self, message: str) -> NoReturn:
        raise ArgumentError(message)


def build_parser() -> argparse.ArgumentParser:
    p = _Parser(
        prog="cargo debug",
        allow_abbrev=False,
        description="Wrap a cargo invocation and launch its executable under a debugger",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "usage: cargo debug [OPTIONS] SUBCOMMAND [-- CARGO_ARGS...] [-- BINARY_ARGS...]\n"
            "Arguments after the first '--' go to cargo, after the second to the binary."
        ),
    )
    p.add_argument("subcommand", help="Cargo subcommand producing one executable (build, test)")
    p.add_argument(
        "--debugger",
        dest="debugger",
        default=None,
        help=f"Debugger to launch (default {default_debugger()})",
    )
    p.add_argument(
        "--command-file",
        dest="command_file",
        default=None,
        help="Command file to be passed to the debugger",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="info",
        choices=LOG_LEVELS,
        help="Logging verbosity (default info)",
    )
    return p


def split_args(argv: Sequence[str]) -> tuple[list[str], list[str], list[str]]:
    """Split ``argv`` on the first two ``--`` tokens.

    Returns (options, cargo arguments, binary arguments). Anything after the
    second separator, further ``--`` tokens included, belongs to the binary.
    """

    args = list(argv)
    try:
        first = args.index(SEPARATOR)
    except ValueError:
        return args, [], []
    head, rest = args[:first], args[first + 1 :]
    try:
        second = rest.index(SEPARATOR)
    except ValueError:
        return head, rest, []
    return head, rest[:second], rest[second + 1 :]


def parse_invocation(argv: Sequence[str]) -> Invocation:
    options, build_args, binary_args = split_args(argv)
    # cargo runs external subcommands as `cargo-debug debug <args>`
    if options and options[0] == "debug":
        options = options[1:]

    ns = build_parser().parse_args(options)
    return Invocation(
        subcommand=ns.subcommand,
        debugger=ns.debugger or default_debugger(),
        command_file=ns.command_file,
        build_args=tuple(build_args),
        binary_args=tuple(binary_args),
        log_level=ns.log_level,
    )
