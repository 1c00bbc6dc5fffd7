"""Extracción de URLs de fuentes desde CSS.

Es un match textual (regex), no un parser CSS: `url("...")` con comillas o
URLs con parámetros tras la extensión no se capturan.
"""

from __future__ import annotations

import re

FONT_URL_PATTERN = re.compile(r"url\((https://[^)]+\.(?:woff2?|ttf|otf))\)")

# Orden fijo: una URL con `.ttf` y `.woff2` resuelve a `.ttf`.
_EXTENSION_PRIORITY: tuple[str, ...] = (".ttf", ".woff2", ".woff", ".otf")
DEFAULT_EXTENSION = ".woff2"

_WHITESPACE = re.compile(r"\s+")


def extract_font_urls(css: str) -> list[str]:
    return [match.group(1) for match in FONT_URL_PATTERN.finditer(css)]


def pick_extension(url: str) -> str:
    for ext in _EXTENSION_PRIORITY:
        if ext in url:
            return ext
    return DEFAULT_EXTENSION


def family_slug(family: str) -> str:
    return _WHITESPACE.sub("-", family)


def font_file_name(family: str, index: int, extension: str) -> str:
    return f"{family_slug(family)}-{index}{extension}"
