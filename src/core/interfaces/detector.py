"""Contracts for command execution and libc detection.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets tests swap the real subprocess runner for a fake and lets the platform
  choose between a real and a no-op detector at startup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import LibcVersions


@dataclass(frozen=True)
class CommandOutput:
    """Raw captured output of a diagnostic command."""

    stdout: bytes = b""
    stderr: bytes = b""

    def combined_text(self) -> str:
        """Decode permissively and join as `stdout + "\\n" + stderr`, trimmed."""

        out = self.stdout.decode("utf-8", errors="replace")
        err = self.stderr.decode("utf-8", errors="replace")
        return f"{out}\n{err}".strip()


@runtime_checkable
class CommandRunner(Protocol):
    """Minimal contract for running an external command.

    Design rules:
    - Blocks until the child exits and its output is fully captured.
    - Raises `ExecutionError` only when the command cannot be launched;
      a non-zero exit status is still a valid `CommandOutput`.
    """

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        ...


@runtime_checkable
class PlatformDetector(Protocol):
    """Capability that reports the host libc versions."""

    def detect(self) -> LibcVersions:
        """Return the detected versions; raise `ExecutionError` if no evidence can be gathered."""

        ...
