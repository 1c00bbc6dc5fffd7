"""CLI principal (Typer).

Comandos:
- `download`: lee `fonts.json`, descarga las fuentes y escribe `font-urls.json`.
- `doctor`: diagnóstico de configuración y conectividad.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from cli.doctor import app as doctor_app
from cli.ui_components import (
    FAIL_MARK,
    build_console_hooks,
    build_summary_table,
    print_banner,
    print_totals,
)
from core.config import AppSettings
from core.errors import FontsFileError
from core.services.download_pipeline import run as run_pipeline

app = typer.Typer(
    no_args_is_help=True,
    help="Download web fonts listed in a JSON file through a forward proxy.",
)
app.add_typer(doctor_app, name="doctor")

_console = Console()


@app.command()
def download(
    fonts_file: Path = typer.Option(
        None,
        "--fonts-file",
        "-f",
        help="JSON file with {\"fonts\": [...]} (default: FONTGRAB_FONTS_FILE or fonts.json).",
    ),
    out_dir: Path = typer.Option(
        None,
        "--out-dir",
        "-o",
        help="Download directory (default: ./downloaded-fonts).",
    ),
    urls_output: Path = typer.Option(
        None,
        "--urls-output",
        help="Where to write the family -> URLs JSON (default: ./font-urls.json).",
    ),
    max_concurrency: int = typer.Option(
        None,
        "--max-concurrency",
        min=1,
        help="Bound on simultaneous requests (default: unbounded).",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print warnings, failures and totals."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the welcome banner."),
) -> None:
    """Fetch stylesheets, extract font URLs and download every file."""

    settings = AppSettings()
    if max_concurrency is not None:
        settings = settings.model_copy(update={"max_concurrency": max_concurrency})

    if not no_banner and not quiet:
        print_banner(_console)
    if not quiet:
        _console.print(f"[dim]Proxy:[/dim] {settings.proxy_url}", highlight=False)

    try:
        summary = asyncio.run(
            run_pipeline(
                settings=settings,
                fonts_file=fonts_file,
                output_dir=out_dir,
                urls_output_path=urls_output,
                hooks=build_console_hooks(_console, quiet=quiet),
            )
        )
    except FontsFileError as exc:
        _console.print(f"[red]{FAIL_MARK}[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc

    if not quiet:
        _console.print(build_summary_table(summary))
    print_totals(_console, summary)


def run() -> None:
    """Entry point del script `fontgrab`."""

    try:
        app()
    except Exception as exc:
        _console.print(f"[red]{FAIL_MARK}[/red] {escape(str(exc))}", highlight=False)
        raise SystemExit(1) from exc
