from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import TYPE_CHECKING, TextIO

from .errors import BuildFailed, LaunchFailed
from .messages import parse_messages, rendered_diagnostics

if TYPE_CHECKING:
    from .args import Invocation

logger = logging.getLogger(__name__)

MESSAGE_FORMAT_FLAG = "--message-format=json"

# Subcommands that would run what they compile unless asked not to
_NO_RUN_SUBCOMMANDS = frozenset({"test", "bench"})


def cargo_binary() -> str:
    """Cargo exports its own path as CARGO to the subcommands it runs."""

    return os.environ.get("CARGO") or "cargo"


def build_command(invocation: Invocation, cargo: str | None = None) -> list[str]:
    cmd = [cargo or cargo_binary(), invocation.subcommand, MESSAGE_FORMAT_FLAG]
    if invocation.subcommand in _NO_RUN_SUBCOMMANDS:
        cmd.append("--no-run")
    cmd.extend(invocation.build_args)
    return cmd


def _echo_diagnostics(output: str, stream: TextIO) -> None:
    for rendered in rendered_diagnostics(parse_messages(output)):
        stream.write(rendered)
        if not rendered.endswith("\n"):
            stream.write("\n")
    stream.flush()


def run_build(
    invocation: Invocation, cargo: str | None = None, diagnostics: TextIO | None = None
) -> str:
    """Run the cargo subcommand and return its captured JSON-lines stdout.

    Stderr stays attached to the terminal. Compiler diagnostics, which cargo
    puts on stdout in JSON mode, are echoed to ``diagnostics`` (stderr by
    default) so that warnings and errors remain visible.
    """

    cmd = build_command(invocation, cargo)
    logger.debug("synthesized cargo command: %s", cmd)
    try:
        # cargo emits UTF-8 JSON regardless of locale; stray bytes must not abort the scan
        proc = subprocess.run(
            cmd, stdout=subprocess.PIPE, encoding="utf-8", errors="replace", check=False
        )
    except OSError as exc:
        raise LaunchFailed(cmd, reason=exc.strerror or str(exc)) from exc

    output = proc.stdout or ""
    _echo_diagnostics(output, diagnostics if diagnostics is not None else sys.stderr)
    if proc.returncode != 0:
        raise BuildFailed(cmd, returncode=proc.returncode, output=output)
    logger.debug("cargo command finished")
    return output
