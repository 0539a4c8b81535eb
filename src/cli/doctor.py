"""Doctor command for environment diagnostics."""

from __future__ import annotations

import shutil
import sys

import typer
from rich.console import Console
from rich.markup import escape

from adapters.libc_detectors import NullDetector
from cli.ui_components import build_checks_table
from core.config import AppSettings
from core.domain.errors import ExecutionError
from core.domain.models import NOT_DETECTED
from core.services.libc_detection import build_detector, detect_libc_versions

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_command(command: str) -> tuple[bool, str]:
    path = shutil.which(command)
    if path is None:
        return False, f"{command} not found on PATH"
    return True, path


@app.command()
def run() -> None:
    """Show which diagnostic commands are available and what they report."""

    settings = AppSettings()
    detector = build_detector(settings)

    table = build_checks_table("libc-probe Doctor")
    table.add_row("Platform", "OK", sys.platform)
    table.add_row("Detector", "OK", f"{type(detector).__name__} (mode={settings.detector.value})")

    if isinstance(detector, NullDetector):
        table.add_row("Commands", "SKIPPED", "No diagnostic commands on this platform")
    else:
        ok, detail = _check_command(settings.glibc_command)
        table.add_row(f"Primary: {settings.glibc_command}", "OK" if ok else "FAIL", escape(detail))
        ok, detail = _check_command(settings.musl_command)
        # Optional evidence: fallback reuses the primary output.
        table.add_row(f"Musl: {settings.musl_command}", "OK" if ok else "OPTIONAL", escape(detail))

    try:
        versions = detect_libc_versions(settings, detector=detector)
    except ExecutionError as exc:
        table.add_row("Detection", "FAIL", escape(str(exc)))
    else:
        for name, version in (("glibc", versions.glibc), ("musl", versions.musl)):
            if version is None:
                table.add_row(name, "MISSING", NOT_DETECTED)
            else:
                table.add_row(name, "OK", str(version))

    _console.print(table)
