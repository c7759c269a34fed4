from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

import orjson

COMPILER_ARTIFACT = "compiler-artifact"
COMPILER_MESSAGE = "compiler-message"


def parse_messages(output: str) -> Iterator[dict[str, Any]]:
    """Yield the JSON objects found in ``--message-format=json`` output.

    Cargo writes one object per line, but stdout may also carry banners or
    plain-text warnings from build scripts. Lines that do not decode to a JSON
    object are skipped.
    """

    for line in output.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            msg = orjson.loads(line)
        except orjson.JSONDecodeError:
            continue
        if isinstance(msg, dict):
            yield msg


def rendered_diagnostics(messages: Iterable[dict[str, Any]]) -> Iterator[str]:
    """Yield the human-readable text of ``compiler-message`` records."""

    for msg in messages:
        if msg.get("reason") != COMPILER_MESSAGE:
            continue
        inner = msg.get("message")
        if not isinstance(inner, dict):
            continue
        rendered = inner.get("rendered")
        if isinstance(rendered, str) and rendered:
            yield rendered
