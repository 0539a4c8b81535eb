"""Platform detectors: the real one (diagnostic commands) and the no-op one.

Why two classes instead of a platform check inside one:
- The choice is made once at startup (`build_detector`), and the null variant
  provably never touches a `CommandRunner`.
"""

from __future__ import annotations

import logging

from adapters.process_runner import SubprocessRunner
from core.config import AppSettings
from core.domain.errors import ExecutionError
from core.domain.models import LibcVersions
from core.interfaces.detector import CommandRunner, PlatformDetector
from core.services.libc_parser import parse_glibc_version, parse_musl_version

logger = logging.getLogger("libc_probe.detection")


class RealDetector(PlatformDetector):
    """Detects glibc/musl by querying `ldd` and `musl-ldd` (names configurable)."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        runner: CommandRunner | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._runner = runner or SubprocessRunner(self._settings)

    def _output_of(self, command: str) -> str:
        return self._runner.run(command, [self._settings.version_flag]).combined_text()

    def detect(self) -> LibcVersions:
        # The primary command is mandatory: ExecutionError propagates.
        primary = self._output_of(self._settings.glibc_command)
        glibc = parse_glibc_version(primary)

        try:
            musl_output = self._output_of(self._settings.musl_command)
        except ExecutionError as exc:
            # musl systems often print their banner through the primary tool.
            logger.debug(
                "%s unavailable (%s); reusing %s output",
                self._settings.musl_command,
                exc,
                self._settings.glibc_command,
            )
            musl_output = primary
        musl = parse_musl_version(musl_output)

        versions = LibcVersions(glibc=glibc, musl=musl)
        logger.debug("detected %s", versions)
        return versions


class NullDetector(PlatformDetector):
    """Detector for platforms without the diagnostic commands: nothing is detected."""

    def detect(self) -> LibcVersions:
        return LibcVersions(glibc=None, musl=None)
