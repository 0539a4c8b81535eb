"""Parsing of diagnostic command output into libc versions.

Two independent strategies share the token scanner:

- glibc: `ldd (<vendor text>) <version>`; only text after the closing
  parenthesis is scanned because the vendor text often embeds a misleading
  number (`ldd (Ubuntu GLIBC 2.41-6ubuntu1.1) 2.41`).
- musl: the `musl libc` banner of the dynamic loader, then a `Version <x.y.z>`
  line as fallback.

Misses are never errors for callers of `parse_*`: they yield `None`.
"""

from __future__ import annotations

import logging

from core.domain.errors import VersionNotFoundError
from core.domain.models import Version
from core.services.version_scanner import find_version_token

logger = logging.getLogger("libc_probe.parser")

GLIBC_ANCHOR = "ldd ("
MUSL_ANCHOR = "musl libc"
MUSL_VERSION_PREFIX = "Version "


def glibc_version_token(output: str) -> str:
    """Return the glibc version token from `ldd --version` output.

    Raises:
        VersionNotFoundError: no anchor line carries a version after its `)`.
    """

    for line in output.splitlines():
        anchor = line.find(GLIBC_ANCHOR)
        if anchor < 0:
            continue
        close = line.find(")", anchor + len(GLIBC_ANCHOR))
        if close < 0:
            continue
        token = find_version_token(line[close + 1 :])
        if token is not None:
            return token
    raise VersionNotFoundError("no glibc version in ldd output")


def parse_version(token: str) -> Version | None:
    """Build a `Version` from the first two dot-separated components of `token`."""

    parts = token.split(".")
    if len(parts) < 2:
        return None
    try:
        return Version(major=int(parts[0]), minor=int(parts[1]))
    except ValueError:
        # pydantic.ValidationError is a ValueError too.
        logger.debug("unparseable version token %r", token)
        return None


def parse_glibc_version(output: str) -> Version | None:
    try:
        token = glibc_version_token(output)
    except VersionNotFoundError:
        logger.debug("glibc not detected")
        return None
    return parse_version(token)


def parse_musl_version(output: str) -> Version | None:
    """Extract the musl version, trying the banner first and `Version ` lines second."""

    pos = output.find(MUSL_ANCHOR)
    if pos >= 0:
        token = find_version_token(output[pos:])
        if token is not None:
            logger.debug("musl version found after %r banner", MUSL_ANCHOR)
            return parse_version(token)

    for line in output.splitlines():
        if not line.startswith(MUSL_VERSION_PREFIX):
            continue
        token = find_version_token(line[len(MUSL_VERSION_PREFIX) :])
        if token is not None:
            logger.debug("musl version found on %r line", MUSL_VERSION_PREFIX.strip())
            return parse_version(token)

    logger.debug("musl not detected")
    return None
