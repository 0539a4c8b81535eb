from __future__ import annotations

from typing import Sequence

import pytest

from core.domain.errors import ExecutionError
from core.interfaces.detector import CommandOutput


class FakeRunner:
    """`CommandRunner` stub: maps a command name to an output or an exception."""

    def __init__(self, responses: dict[str, CommandOutput | Exception]) -> None:
        self.responses = responses
        self.calls: list[tuple[str, list[str]]] = []

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        self.calls.append((command, list(args)))
        response = self.responses.get(command)
        if response is None:
            raise ExecutionError(command, "No such file or directory")
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def fake_runner():
    def _build(responses: dict[str, CommandOutput | Exception]) -> FakeRunner:
        return FakeRunner(responses)

    return _build


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep developer env vars and .env files out of the tests."""

    for name in (
        "LIBC_PROBE_GLIBC_COMMAND",
        "LIBC_PROBE_MUSL_COMMAND",
        "LIBC_PROBE_VERSION_FLAG",
        "LIBC_PROBE_DETECTOR",
        "LIBC_PROBE_COMMAND_TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
