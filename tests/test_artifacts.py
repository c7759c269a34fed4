from __future__ import annotations

import pytest

from cargo_debug.artifacts import executables, find_executable
from cargo_debug.errors import MultipleArtifactsUnsupported, NoArtifactFound
from cargo_debug.messages import parse_messages, rendered_diagnostics


def test_non_json_lines_are_skipped() -> None:
    output = '{"reason":"compiler-artifact","executable":"/tmp/out/bin1"}\nwarning: unused variable\n'
    assert find_executable(output) == "/tmp/out/bin1"


def test_parse_messages_ignores_non_objects() -> None:
    output = '\n42\n["reason"]\n{"reason":"build-finished","success":true}\n{broken\n'
    assert list(parse_messages(output)) == [{"reason": "build-finished", "success": True}]


def test_library_only_build_has_no_artifact(artifact_line) -> None:
    output = "\n".join(
        [
            artifact_line(None, name="demo"),
            '{"reason":"build-finished","success":true}',
        ]
    )
    with pytest.raises(NoArtifactFound):
        find_executable(output)


def test_empty_output_has_no_artifact() -> None:
    with pytest.raises(NoArtifactFound):
        find_executable("")


def test_executable_on_other_reason_is_ignored() -> None:
    output = '{"reason":"compiler-message","executable":"/tmp/not-a-binary"}'
    with pytest.raises(NoArtifactFound):
        find_executable(output)


def test_dependencies_without_executables_are_ignored(artifact_line) -> None:
    output = "\n".join(
        [
            artifact_line(None, name="serde"),
            artifact_line(None, name="log"),
            artifact_line("/work/target/debug/demo"),
        ]
    )
    assert find_executable(output) == "/work/target/debug/demo"


def test_repeated_artifact_counts_once(artifact_line) -> None:
    output = "\n".join([artifact_line("/t/demo"), artifact_line("/t/demo")])
    assert executables(output) == ["/t/demo"]
    assert find_executable(output) == "/t/demo"


def test_multiple_artifacts_are_rejected(artifact_line) -> None:
    output = "\n".join(
        [
            artifact_line("/t/deps/demo-1111"),
            artifact_line("/t/deps/integration-2222", name="integration"),
        ]
    )
    with pytest.raises(MultipleArtifactsUnsupported) as info:
        find_executable(output)
    assert info.value.paths == ["/t/deps/demo-1111", "/t/deps/integration-2222"]


def test_rendered_diagnostics_only_from_compiler_messages() -> None:
    output = "\n".join(
        [
            '{"reason":"compiler-message","message":{"rendered":"warning: unused\\n"}}',
            '{"reason":"compiler-message","message":{"rendered":null}}',
            '{"reason":"compiler-artifact","message":{"rendered":"nope"}}',
        ]
    )
    assert list(rendered_diagnostics(parse_messages(output))) == ["warning: unused\n"]
