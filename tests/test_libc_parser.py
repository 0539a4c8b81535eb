import pytest

from core.domain.errors import VersionNotFoundError
from core.domain.models import Version
from core.services.libc_parser import (
    glibc_version_token,
    parse_glibc_version,
    parse_musl_version,
    parse_version,
)

GNU_LDD = """ldd (GNU libc) 2.12
Copyright (C) 2010 Free Software Foundation, Inc."""

UBUNTU_LDD = """ldd (Ubuntu GLIBC 2.41-6ubuntu1.1) 2.41
Copyright (C) 2024 Free Software Foundation, Inc.
This is free software; see the source for copying conditions.  There is NO
warranty; not even for MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
Written by Roland McGrath and Ulrich Drepper.
"""

DEBIAN_LDD = """ldd (Debian GLIBC 2.36-9+rpt2+deb12u4) 2.36
Copyright (C) 2022 Free Software Foundation, Inc."""

ALPINE_LOADER = """musl libc (x86_64)
Version 1.2.4_git20230717
Dynamic Program Loader
Usage: /lib/ld-musl-x86_64.so.1 [options] [--] pathname"""


def test_glibc_plain_gnu_output():
    assert glibc_version_token(GNU_LDD) == "2.12"
    assert parse_glibc_version(GNU_LDD) == Version(major=2, minor=12)


def test_glibc_skips_number_inside_parenthesis():
    assert glibc_version_token(UBUNTU_LDD) == "2.41"
    assert parse_glibc_version(UBUNTU_LDD) == Version(major=2, minor=41)


def test_glibc_debian_output():
    assert parse_glibc_version(DEBIAN_LDD) == Version(major=2, minor=36)


def test_glibc_missing_anchor_raises():
    with pytest.raises(VersionNotFoundError):
        glibc_version_token("some random output not containing versions")


def test_glibc_not_found_in_musl_output():
    assert parse_glibc_version(ALPINE_LOADER) is None


def test_glibc_anchor_without_version_after_paren():
    with pytest.raises(VersionNotFoundError):
        glibc_version_token("ldd (GNU libc 2.12)\nCopyright 2010")


def test_glibc_later_anchor_line_is_tried():
    output = "ldd (unterminated 9.9\nldd (GNU libc) 2.31\n"
    assert glibc_version_token(output) == "2.31"


def test_musl_version_line():
    assert parse_musl_version("musl libc (x86_64)\nVersion 1.2.3\n") == Version(major=1, minor=2)


def test_musl_banner_only():
    assert parse_musl_version("musl libc (x86_64) 1.3.0\n") == Version(major=1, minor=3)


def test_musl_loader_with_git_suffix():
    assert parse_musl_version(ALPINE_LOADER) == Version(major=1, minor=2)


def test_musl_version_prefix_without_banner():
    assert parse_musl_version("Dynamic Program Loader\nVersion 1.1.24\n") == Version(major=1, minor=1)


def test_musl_version_prefix_must_start_line():
    assert parse_musl_version("Loader Version 1.1.24\n") is None


def test_musl_not_found_in_glibc_output():
    assert parse_musl_version(UBUNTU_LDD) is None


def test_nothing_detected_in_random_output():
    out = "some random output not containing versions"
    assert parse_glibc_version(out) is None
    assert parse_musl_version(out) is None


@pytest.mark.parametrize(
    "token, expected",
    [
        ("2.41", Version(major=2, minor=41)),
        ("1.2.3", Version(major=1, minor=2)),
        ("2.41.", Version(major=2, minor=41)),
        ("10.0", Version(major=10, minor=0)),
    ],
)
def test_parse_version(token, expected):
    assert parse_version(token) == expected


@pytest.mark.parametrize("token", ["2", "", "a.b", "2.x"])
def test_parse_version_rejects_incomplete(token):
    assert parse_version(token) is None


@pytest.mark.parametrize("major, minor", [(0, 1), (2, 17), (1, 2), (40, 300)])
def test_formatted_version_is_extracted_back(major, minor):
    version = Version(major=major, minor=minor)
    assert parse_glibc_version(f"ldd (GNU libc) {version}\n") == version
    assert parse_musl_version(f"musl libc (aarch64)\nVersion {version}\n") == version
