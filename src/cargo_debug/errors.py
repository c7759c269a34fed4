from __future__ import annotations

from collections.abc import Sequence


class CargoDebugError(Exception):
    """Base class for errors that end a cargo-debug invocation."""

    exit_code = 1


class ArgumentError(CargoDebugError):
    exit_code = 2


class UnsupportedDebugger(ArgumentError):
    def __init__(self, debugger: str, *, option: str = "--command-file") -> None:
        self.debugger = debugger
        self.option = option
        super().__init__(f"unsupported debugger for {option} option: {debugger}")


class LaunchFailed(CargoDebugError):
    exit_code = 3

    def __init__(self, command: Sequence[str], *, reason: str) -> None:
        self.command = list(command)
        self.reason = reason
        super().__init__(f"failed to launch {self.command[0]!r}: {reason}")


class BuildFailed(CargoDebugError):
    exit_code = 4

    def __init__(self, command: Sequence[str], *, returncode: int, output: str) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        super().__init__(
            f"build command {' '.join(self.command)!r} exited with status {returncode}"
        )


class NoArtifactFound(CargoDebugError):
    exit_code = 5

    def __init__(self, message: str = "no executable artifact found in build output") -> None:
        super().__init__(message)


class MultipleArtifactsUnsupported(CargoDebugError):
    exit_code = 6

    def __init__(self, paths: Sequence[str]) -> None:
        self.paths = list(paths)
        listing = ", ".join(self.paths)
        super().__init__(
            f"found {len(self.paths)} executable artifacts, narrow the build to one: {listing}"
        )
