"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import RunSummary
from core.services.download_pipeline import PipelineHooks

OK_MARK = "✓"
WARN_MARK = "⚠"
FAIL_MARK = "⨯"


def print_banner(console: Console) -> None:
    title = Text("fontgrab", style="bold cyan")
    subtitle = Text("Web fonts • CSS • Descarga local", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_console_hooks(console: Console, *, quiet: bool = False) -> PipelineHooks:
    """Traduce los eventos del pipeline a líneas con marcadores ✓/⚠/⨯.

    En modo `quiet` solo se muestran avisos y fallos.
    """

    def info(message: str) -> None:
        console.print(escape(message), highlight=False)

    def success(message: str) -> None:
        console.print(f"[green]{OK_MARK}[/green] {escape(message)}", highlight=False)

    def warning(message: str) -> None:
        console.print(f"[yellow]{WARN_MARK}[/yellow] {escape(message)}", highlight=False)

    def error(message: str) -> None:
        console.print(f"[red]{FAIL_MARK}[/red] {escape(message)}", highlight=False)

    return PipelineHooks(
        info=None if quiet else info,
        success=None if quiet else success,
        warning=warning,
        error=error,
    )


def build_summary_table(summary: RunSummary) -> Table:
    """Tabla por familia: estado, URLs encontradas, ficheros OK/KO."""

    table = Table(title="Fonts")
    table.add_column("Family", style="cyan", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("URLs", justify="right")
    table.add_column("Downloaded", style="green", justify="right")
    table.add_column("Failed", style="red", justify="right")
    table.add_column("Error", style="red")

    for outcome in sorted(summary.families, key=lambda f: f.family):
        if not outcome.ok:
            status = f"[red]{FAIL_MARK} failed[/red]"
        elif outcome.skipped:
            status = f"[yellow]{WARN_MARK} no files[/yellow]"
        else:
            status = f"[green]{OK_MARK} ok[/green]"
        table.add_row(
            escape(outcome.family),
            status,
            str(len(outcome.urls)),
            str(outcome.files_ok),
            str(outcome.files_failed),
            escape(outcome.reason or ""),
        )
    return table


def print_totals(console: Console, summary: RunSummary) -> None:
    console.print(
        f"\n[green]{OK_MARK}[/green] Download complete: "
        f"{summary.families_ok} successful, {summary.families_failed} failed",
        highlight=False,
    )
    console.print(
        f"[green]{OK_MARK}[/green] Files: "
        f"{summary.files_ok} successful, {summary.files_failed} failed",
        highlight=False,
    )
