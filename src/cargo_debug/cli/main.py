from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from rich.console import Console
from rich.text import Text

from ..args import build_parser, parse_invocation
from ..artifacts import find_executable
from ..build import run_build
from ..debugger import launch_debugger
from ..errors import CargoDebugError
from ..logs import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["build_parser", "main"]


def _report(err: CargoDebugError, console: Console) -> None:
    console.print(Text.assemble(("error: ", "bold red"), str(err)), soft_wrap=True)


def main(argv: Sequence[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    console = Console(stderr=True)
    try:
        invocation = parse_invocation(argv)
        configure_logging(invocation.log_level, console=console)
        logger.debug("args: %s", argv)
        logger.debug("invocation: %s", invocation)

        output = run_build(invocation)
        artifact = find_executable(output)
        logger.info("binary: %s", artifact)

        return launch_debugger(invocation, artifact)
    except CargoDebugError as exc:
        _report(exc, console)
        return exc.exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
