"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables can be reused by several commands (show, doctor).
"""

from __future__ import annotations

from rich.table import Table

from core.domain.models import NOT_DETECTED, LibcVersions, Version


def _version_cell(version: Version | None) -> str:
    return str(version) if version is not None else NOT_DETECTED


def build_versions_table(versions: LibcVersions) -> Table:
    """Two-row table with the detected glibc and musl versions."""

    table = Table(title="C library")
    table.add_column("Library", style="cyan", no_wrap=True)
    table.add_column("Version", style="white")
    table.add_row("glibc", _version_cell(versions.glibc))
    table.add_row("musl", _version_cell(versions.musl))
    return table


def build_checks_table(title: str) -> Table:
    """Empty Check/Status/Details table used by `doctor`."""

    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
