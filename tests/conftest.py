from __future__ import annotations

import subprocess
from collections.abc import Callable, Sequence

import pytest


class FakeRunner:
    """Stand-in for subprocess.run that answers per executable name."""

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.kwargs: list[dict[str, object]] = []
        self._responses: dict[str, tuple[int, str]] = {}

    def respond(self, program: str, *, returncode: int = 0, stdout: str = "") -> None:
        self._responses[program] = (returncode, stdout)

    def __call__(self, cmd: Sequence[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        cmd = list(cmd)
        self.calls.append(cmd)
        self.kwargs.append(kwargs)
        returncode, stdout = self._responses.get(cmd[0], (0, ""))
        captured = stdout if kwargs.get("stdout") == subprocess.PIPE else None
        return subprocess.CompletedProcess(cmd, returncode, stdout=captured)

    def programs(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr(subprocess, "run", runner)
    monkeypatch.setenv("CARGO", "cargo")
    return runner


@pytest.fixture
def artifact_line() -> Callable[..., str]:
    def _line(executable: str | None, *, name: str = "demo") -> str:
        exe = "null" if executable is None else f'"{executable}"'
        return (
            '{"reason":"compiler-artifact","package_id":"demo 0.1.0",'
            f'"target":{{"name":"{name}","kind":["bin"]}},"executable":{exe},"fresh":false}}'
        )

    return _line
