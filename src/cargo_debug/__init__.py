"""cargo-debug: build a Rust target with cargo and open its binary in a debugger.

Exposes the pipeline stages so they can be driven programmatically.
"""

from .args import Invocation, parse_invocation, split_args
from .artifacts import executables, find_executable
from .build import build_command, run_build
from .debugger import debugger_command, default_debugger, launch_debugger
from .errors import (
    ArgumentError,
    BuildFailed,
    CargoDebugError,
    LaunchFailed,
    MultipleArtifactsUnsupported,
    NoArtifactFound,
    UnsupportedDebugger,
)
from .messages import parse_messages

__all__ = [
    "ArgumentError",
    "BuildFailed",
    "CargoDebugError",
    "Invocation",
    "LaunchFailed",
    "MultipleArtifactsUnsupported",
    "NoArtifactFound",
    "UnsupportedDebugger",
    "build_command",
    "debugger_command",
    "default_debugger",
    "executables",
    "find_executable",
    "launch_debugger",
    "parse_invocation",
    "parse_messages",
    "run_build",
    "split_args",
]
