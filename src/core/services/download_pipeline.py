"""Font download orchestration.

The pipeline is: for every family, fetch its stylesheet, extract the binary
URLs, then download every URL. Families run concurrently and so do the files
of a family. Every task catches its own errors and returns an outcome, so a
failing family or file never cancels its siblings.

Side-effects towards the user (printing) go through `PipelineHooks`; the CLI
decides how to render them.
"""

from __future__ import annotations

import asyncio
import contextlib
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Sequence

import httpx

from adapters.css_extractor import extract_font_urls, family_slug, font_file_name, pick_extension
from adapters.fonts_loader import load_font_requests
from adapters.http_client import build_async_client, fetch_stylesheet, stream_to_file
from adapters.json_exporter import export_font_urls
from core.config import AppSettings, TransportConfig
from core.domain.models import DownloadOutcome, FamilyOutcome, FontRequest, RunSummary
from core.errors import FontgrabError


@dataclass
class PipelineHooks:
    """Optional callbacks for UI layers (progress, warnings, failures)."""

    info: Callable[[str], None] | None = None
    success: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None
    error: Callable[[str], None] | None = None
    family_done: Callable[[FamilyOutcome], None] | None = None


def _emit(callback: Callable[[str], None] | None, message: str) -> None:
    if callback:
        callback(message)


class _Limiter:
    """`asyncio.Semaphore` when a bound is configured, no-op otherwise."""

    def __init__(self, max_concurrency: int | None) -> None:
        self._semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    def slot(self) -> contextlib.AbstractAsyncContextManager[object]:
        if self._semaphore is None:
            return contextlib.nullcontext()
        return self._semaphore


async def _download_one(
    *,
    client: httpx.AsyncClient,
    limiter: _Limiter,
    hooks: PipelineHooks,
    family: str,
    font_dir: Path,
    url: str,
    index: int,
) -> DownloadOutcome:
    filename = font_file_name(family, index, pick_extension(url))
    dest = font_dir / filename
    try:
        async with limiter.slot():
            await stream_to_file(client, url, dest)
    except (FontgrabError, OSError) as exc:
        _emit(hooks.error, f"Failed to download {family} file {index}: {exc}")
        return DownloadOutcome(url=url, index=index, ok=False, reason=str(exc))

    _emit(hooks.success, f"Downloaded {family} → {filename}")
    return DownloadOutcome(url=url, index=index, path=dest, ok=True)


async def _process_family(
    *,
    client: httpx.AsyncClient,
    limiter: _Limiter,
    hooks: PipelineHooks,
    request: FontRequest,
    font_dir: Path,
) -> FamilyOutcome:
    family = request.family
    _emit(hooks.info, f"Processing {family}...")

    try:
        async with limiter.slot():
            css = await fetch_stylesheet(client, request.stylesheet_url)
    except FontgrabError as exc:
        _emit(hooks.error, f"Failed to fetch CSS from {request.stylesheet_url}: {exc}")
        _emit(hooks.error, f"Failed to process {family}: {exc}")
        return FamilyOutcome(family=family, ok=False, reason=str(exc))

    _emit(hooks.success, f"Fetching CSS from {request.stylesheet_url}")
    _emit(hooks.success, f"CSS fetched successfully ({len(css)} bytes)")

    urls = extract_font_urls(css)
    if not urls:
        _emit(hooks.warning, f"No font files found for {family}")
        return FamilyOutcome(family=family, ok=True)

    downloads = await asyncio.gather(
        *(
            _download_one(
                client=client,
                limiter=limiter,
                hooks=hooks,
                family=family,
                font_dir=font_dir,
                url=url,
                index=index,
            )
            for index, url in enumerate(urls)
        )
    )
    outcome = FamilyOutcome(family=family, ok=True, urls=urls, downloads=list(downloads))
    _emit(
        hooks.success,
        f"Download complete: {outcome.files_ok} successful, {outcome.files_failed} failed",
    )
    _emit(hooks.success, f"Completed processing {family}")
    return outcome


async def download_fonts(
    fonts: Mapping[str, Sequence[FontRequest]],
    *,
    settings: AppSettings,
    output_dir: Path | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    hooks: PipelineHooks | None = None,
) -> RunSummary:
    """Download every family in `fonts` and return the aggregated outcome.

    `transport` overrides the proxy transport built from `settings` (tests).
    """

    hooks = hooks or PipelineHooks()
    out_dir = output_dir or settings.output_dir
    out_dir.mkdir(parents=True, exist_ok=True)

    limiter = _Limiter(settings.max_concurrency)
    config = TransportConfig.from_settings(settings)

    async def guarded(
        client: httpx.AsyncClient, request: FontRequest, font_dir: Path
    ) -> FamilyOutcome:
        try:
            outcome = await _process_family(
                client=client,
                limiter=limiter,
                hooks=hooks,
                request=request,
                font_dir=font_dir,
            )
        except Exception as exc:  # pragma: no cover - unexpected bug in one family
            _emit(hooks.error, f"Failed to process {request.family}: {exc}")
            outcome = FamilyOutcome(family=request.family, ok=False, reason=str(exc))
        if hooks.family_done:
            hooks.family_done(outcome)
        return outcome

    async with build_async_client(config, transport=transport) as client:
        tasks = []
        for family, requests in fonts.items():
            font_dir = out_dir / family_slug(family)
            font_dir.mkdir(parents=True, exist_ok=True)
            tasks.extend(guarded(client, request, font_dir) for request in requests)
        outcomes = await asyncio.gather(*tasks)

    return RunSummary(families=list(outcomes))


async def run(
    *,
    settings: AppSettings,
    fonts_file: Path | None = None,
    output_dir: Path | None = None,
    urls_output_path: Path | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    hooks: PipelineHooks | None = None,
) -> RunSummary:
    """Load the fonts file, download everything, write the URL map.

    `FontsFileError` propagates before any network activity. Errors while
    writing the URL map propagate too.
    """

    hooks = hooks or PipelineHooks()
    fonts = load_font_requests(fonts_file or settings.fonts_file, settings)

    summary = await download_fonts(
        fonts,
        settings=settings,
        output_dir=output_dir,
        transport=transport,
        hooks=hooks,
    )

    path = export_font_urls(
        font_urls=summary.font_urls(),
        output_path=urls_output_path or settings.urls_output_path,
    )
    _emit(hooks.success, f"Font URLs written to {path}")
    return summary
