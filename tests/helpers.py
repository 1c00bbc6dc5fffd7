import json
from pathlib import Path

import httpx

CSS_HOST = "fonts.googleapis.com"


def font_face(*urls: str) -> str:
    """Minimal stylesheet with one @font-face block per URL."""

    blocks = [
        "@font-face {\n"
        "  font-family: 'Test';\n"
        f"  src: url({url}) format('truetype');\n"
        "}"
        for url in urls
    ]
    return "\n".join(blocks)


def write_fonts_file(path: Path, fonts: list[str]) -> Path:
    path.write_text(json.dumps({"fonts": fonts}), encoding="utf-8")
    return path


def make_transport(
    stylesheets: dict[str, str | int],
    files: dict[str, bytes | int] | None = None,
    calls: list[str] | None = None,
) -> httpx.MockTransport:
    """Fake font service.

    `stylesheets` maps the family name (e.g. "Open Sans") to CSS
    text or to an HTTP status code. `files` maps full font URLs to bytes or
    to a status code. Unknown URLs answer 404.
    """

    files = files or {}

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if calls is not None:
            calls.append(url)

        if request.url.host == CSS_HOST:
            family = request.url.params.get("family", "").split(":", 1)[0]
            body = stylesheets.get(family, 404)
            if isinstance(body, int):
                return httpx.Response(body)
            return httpx.Response(200, text=body)

        body = files.get(url, 404)
        if isinstance(body, int):
            return httpx.Response(body)
        return httpx.Response(200, content=body)

    return httpx.MockTransport(handler)
