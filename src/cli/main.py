"""Typer application (`libc-probe`)."""

from __future__ import annotations

import json
import logging

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from cli import doctor
from cli.ui_components import build_versions_table
from core.config import AppSettings
from core.domain.errors import ExecutionError
from core.services.libc_detection import detect_libc_versions

app = typer.Typer(help="Detect the host C library (glibc / musl) and its version.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_err_console = Console(stderr=True)


def configure_logging(verbose: bool) -> None:
    """Route `libc_probe.*` records through Rich on stderr."""

    logger = logging.getLogger("libc_probe")
    logger.handlers.clear()
    logger.addHandler(RichHandler(console=_err_console, show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        show(as_json=False, table=False)


@app.command()
def show(
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
    table: bool = typer.Option(False, "--table", help="Print the result as a table."),
) -> None:
    """Print the detected glibc/musl versions."""

    try:
        versions = detect_libc_versions(AppSettings())
    except ExecutionError as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if as_json:
        typer.echo(json.dumps(versions.as_dict()))
    elif table:
        _console.print(build_versions_table(versions))
    else:
        typer.echo(f"glibc/musl: {versions}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
