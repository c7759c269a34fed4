from __future__ import annotations

import logging

from .errors import MultipleArtifactsUnsupported, NoArtifactFound
from .messages import COMPILER_ARTIFACT, parse_messages

logger = logging.getLogger(__name__)


def executables(output: str) -> list[str]:
    """Return the distinct executable paths reported by ``compiler-artifact`` records.

    Order follows the last report of each path.
    """

    found: dict[str, None] = {}
    for msg in parse_messages(output):
        if msg.get("reason") != COMPILER_ARTIFACT:
            continue
        exe = msg.get("executable")
        if not isinstance(exe, str) or not exe:
            continue
        # A re-reported artifact supersedes its earlier record
        found.pop(exe, None)
        found[exe] = None
    return list(found)


def find_executable(output: str) -> str:
    """Extract the single executable produced by a build.

    Raises ``NoArtifactFound`` when the build produced nothing runnable and
    ``MultipleArtifactsUnsupported`` when it produced more than one binary,
    rather than guessing which one the caller meant.
    """

    paths = executables(output)
    logger.debug("found %d executable artifact(s): %s", len(paths), paths)
    if not paths:
        raise NoArtifactFound()
    if len(paths) > 1:
        raise MultipleArtifactsUnsupported(paths)
    return paths[0]
