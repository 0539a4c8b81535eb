"""Libc detection entry points.

This module is the public face of the package: it picks the detector variant
for the running platform and exposes `detect_libc_versions()`. Keeping the
selection here (and not in the CLI) makes it reusable from installers,
compatibility checkers and tests alike.
"""

from __future__ import annotations

import logging
import sys

from adapters.libc_detectors import NullDetector, RealDetector
from core.config import AppSettings, DetectorMode
from core.domain.errors import ExecutionError
from core.domain.models import LibcVersions
from core.interfaces.detector import CommandRunner, PlatformDetector

logger = logging.getLogger("libc_probe.detection")


def platform_has_ldd(platform: str | None = None) -> bool:
    """Whether the diagnostic commands are expected to exist on `platform`."""

    return (platform or sys.platform).startswith("linux")


def build_detector(
    settings: AppSettings | None = None,
    *,
    runner: CommandRunner | None = None,
    platform: str | None = None,
) -> PlatformDetector:
    """Select the detector variant once, at startup."""

    settings = settings or AppSettings()
    mode = settings.detector
    if mode is DetectorMode.AUTO:
        mode = DetectorMode.REAL if platform_has_ldd(platform) else DetectorMode.NULL
    logger.debug("using %s detector", mode.value)

    if mode is DetectorMode.NULL:
        return NullDetector()
    return RealDetector(settings, runner=runner)


def detect_libc_versions(
    settings: AppSettings | None = None,
    *,
    detector: PlatformDetector | None = None,
) -> LibcVersions:
    """Detect glibc and musl on this host.

    Raises:
        ExecutionError: the primary diagnostic command could not be executed.
    """

    detector = detector or build_detector(settings)
    return detector.detect()


def get_os_libc_versions(
    settings: AppSettings | None = None,
    *,
    detector: PlatformDetector | None = None,
) -> tuple[LibcVersions | None, str | None]:
    """Same as `detect_libc_versions`, but returns `(versions, error_message)` instead of raising."""

    try:
        return detect_libc_versions(settings, detector=detector), None
    except ExecutionError as exc:
        return None, str(exc)
