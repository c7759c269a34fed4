from __future__ import annotations

import logging
import platform
import re
import subprocess
from pathlib import PurePath
from typing import TYPE_CHECKING

from .errors import LaunchFailed, UnsupportedDebugger

if TYPE_CHECKING:
    from .args import Invocation

logger = logging.getLogger(__name__)

GDB = "gdb"
LLDB = "lldb"

# gdb, rust-gdb, gdb-multiarch, lldb-17 ... but not gdbserver or lldb-server
_FAMILY_NAME = re.compile(r"^(?:rust-)?(gdb|lldb)(?:-(?!server$)[\w.]+)?(?:\.exe)?$")

# Flag each debugger family uses to run a script of startup commands
_COMMAND_FILE_FLAGS = {
    GDB: "--command",
    LLDB: "--source",
}


def default_debugger(system: str | None = None) -> str:
    """Return the conventional debugger for the host platform."""

    system = platform.system() if system is None else system
    return LLDB if system == "Darwin" else GDB


def debugger_family(debugger: str) -> str | None:
    """Classify a debugger executable as ``gdb``, ``lldb`` or unknown (None).

    Wrappers and versioned builds such as ``rust-gdb`` or ``lldb-17`` belong to
    the family named in their basename.
    """

    m = _FAMILY_NAME.match(PurePath(debugger).name.lower())
    return m.group(1) if m else None


def debugger_command(invocation: Invocation, artifact: str) -> list[str]:
    family = debugger_family(invocation.debugger)
    cmd = [invocation.debugger]

    if invocation.command_file is not None:
        flag = _COMMAND_FILE_FLAGS.get(family) if family else None
        if flag is None:
            raise UnsupportedDebugger(invocation.debugger)
        cmd += [flag, invocation.command_file]

    if not invocation.binary_args:
        cmd.append(artifact)
    elif family == GDB:
        # gdb treats trailing positionals as a core file unless told otherwise
        cmd += ["--args", artifact, *invocation.binary_args]
    else:
        cmd += [artifact, "--", *invocation.binary_args]
    return cmd


def launch_debugger(invocation: Invocation, artifact: str) -> int:
    """Run the debugger attached to the terminal and return its exit status."""

    cmd = debugger_command(invocation, artifact)
    logger.debug("synthesized debug command: %s", cmd)
    try:
        proc = subprocess.run(cmd, check=False)
    except OSError as exc:
        raise LaunchFailed(cmd, reason=exc.strerror or str(exc)) from exc
    status = proc.returncode
    if status < 0:
        # killed by a signal; report it the way a shell would
        status = 128 - status
    logger.debug("debugger exited with status %d", status)
    return status
