"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y la política de proxy en un único sitio.
- Facilita testeo: se puede sustituir el transporte por `httpx.MockTransport`.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from core.config import TransportConfig
from core.errors import DownloadError, StylesheetFetchError


def build_transport(config: TransportConfig) -> httpx.AsyncBaseTransport:
    """Transporte que enruta todo a través del proxy de salida."""

    return httpx.AsyncHTTPTransport(proxy=httpx.Proxy(config.proxy_url))


def build_async_client(
    config: TransportConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con la configuración de transporte fija.

    `trust_env=False`: el proxy ya viene resuelto en `config`, no se vuelve a
    leer del entorno en cada cliente.
    """

    return httpx.AsyncClient(
        transport=transport or build_transport(config),
        timeout=httpx.Timeout(config.timeout_seconds),
        headers={"User-Agent": config.user_agent},
        trust_env=False,
    )


def _describe(exc: httpx.HTTPError) -> str:
    return str(exc) or exc.__class__.__name__


async def fetch_stylesheet(client: httpx.AsyncClient, url: str) -> str:
    """GET único, sin reintentos. Devuelve el cuerpo completo como texto."""

    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise StylesheetFetchError(_describe(exc)) from exc

    if response.status_code != 200:
        raise StylesheetFetchError(
            f"Failed to fetch CSS: {response.status_code}",
            status_code=response.status_code,
        )
    return response.text


async def stream_to_file(client: httpx.AsyncClient, url: str, dest: Path) -> Path:
    """Descarga `url` a `dest` en streaming (sin cargar el fichero en memoria).

    El fichero se cierra cuando el stream termina; si la transferencia se
    corta a medias, el fichero parcial se elimina.
    """

    try:
        async with client.stream("GET", url) as response:
            if response.status_code != 200:
                raise DownloadError(
                    f"Failed: {url} - {response.status_code}",
                    status_code=response.status_code,
                )
            try:
                with dest.open("wb") as fh:
                    async for chunk in response.aiter_bytes():
                        fh.write(chunk)
            except (httpx.HTTPError, OSError):
                dest.unlink(missing_ok=True)
                raise
    except httpx.HTTPError as exc:
        raise DownloadError(_describe(exc)) from exc
    return dest
