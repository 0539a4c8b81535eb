"""`subprocess` wrapper implementing `CommandRunner`.

Why a wrapper:
- Standardizes capture, timeouts and logging for every diagnostic command.
- Maps launch failures to `ExecutionError` so the core never sees `OSError`.
- Easy to replace with a stub in tests.
"""

from __future__ import annotations

import logging
import subprocess  # nosec
from typing import Sequence

from core.config import AppSettings
from core.domain.errors import ExecutionError
from core.interfaces.detector import CommandOutput

_LOG = logging.getLogger("libc_probe.subprocess")


class SubprocessRunner:
    """Runs a command with an argument list (never through a shell) and captures its output."""

    def __init__(self, settings: AppSettings | None = None, *, timeout: float | None = None) -> None:
        settings = settings or AppSettings()
        self._timeout = timeout if timeout is not None else settings.command_timeout_seconds

    def run(self, command: str, args: Sequence[str]) -> CommandOutput:
        cmd = [command, *args]
        _LOG.debug("executing cmd=%s timeout=%s", cmd, self._timeout)
        try:
            proc = subprocess.run(  # nosec
                cmd,
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise ExecutionError(command, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            # FileNotFoundError, PermissionError and other spawn failures.
            raise ExecutionError(command, str(exc)) from exc

        _LOG.debug("cmd=%s exited with status %s", cmd, proc.returncode)
        return CommandOutput(stdout=proc.stdout or b"", stderr=proc.stderr or b"")
