"""Error types of the core.

Only `ExecutionError` is meant to reach callers of `detect_libc_versions()`;
the rest stay inside the parsing layer and get downgraded to "not detected".
"""

from __future__ import annotations


class LibcProbeError(Exception):
    """Base class for all libc-probe errors."""


class ExecutionError(LibcProbeError):
    """A diagnostic command could not be launched (missing binary, permissions, spawn failure)."""

    def __init__(self, command: str, reason: str) -> None:
        super().__init__(f"failed to execute {command}: {reason}")
        self.command = command
        self.reason = reason


class VersionNotFoundError(LibcProbeError, ValueError):
    """No anchor phrase or qualifying version token in otherwise valid output."""
