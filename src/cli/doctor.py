"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.fonts_loader import build_stylesheet_url
from adapters.http_client import build_async_client
from core.config import DEFAULT_PROXY_URL, AppSettings, TransportConfig

app = typer.Typer(help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(config: TransportConfig, url: str) -> tuple[bool, str]:
    try:
        async with build_async_client(config) as client:
            response = await client.get(url)
        return response.status_code == 200, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or exc.__class__.__name__


@app.callback(invoke_without_command=True)
def run() -> None:
    """Show the effective configuration and check the stylesheet endpoint."""

    settings = AppSettings()
    config = TransportConfig.from_settings(settings)

    table = Table(title="fontgrab Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    if settings.proxy_url == DEFAULT_PROXY_URL:
        table.add_row("Proxy", "DEFAULT", f"{settings.proxy_url} (set HTTPS_PROXY / HTTP_PROXY)")
    else:
        table.add_row("Proxy", "OK", settings.proxy_url)
    table.add_row("CSS endpoint", "OK", settings.css_base_url)

    fonts_status = "OK" if settings.fonts_file.is_file() else "MISSING"
    table.add_row("Fonts file", fonts_status, str(settings.fonts_file))
    table.add_row("Output dir", "OK", str(settings.output_dir))
    table.add_row("URLs output", "OK", str(settings.urls_output_path))

    # Connectivity (best-effort)
    probe = build_stylesheet_url("Roboto", settings)
    ok_http, detail_http = asyncio.run(_check_http(config, probe))
    table.add_row("Stylesheet via proxy", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Every request goes through the proxy; check HTTPS_PROXY / HTTP_PROXY."
        )
