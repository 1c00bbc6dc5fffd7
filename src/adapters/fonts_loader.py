"""Carga del fichero de familias (`fonts.json`).

Formato: `{"fonts": ["Open Sans", "Roboto Mono"]}`.

Cualquier error aquí es fatal: se lanza antes de tocar la red.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

from pydantic import ValidationError

from core.config import AppSettings
from core.domain.models import FontRequest, FontsFile
from core.errors import FontsFileError

_WHITESPACE = re.compile(r"\s+")


def build_stylesheet_url(family: str, settings: AppSettings) -> str:
    """`Open Sans` -> `<base>?family=Open+Sans:wght@400;700&display=swap`."""

    name = _WHITESPACE.sub("+", family)
    weights = ";".join(str(w) for w in settings.font_weights)
    return f"{settings.css_base_url}?family={name}:wght@{weights}&display={settings.font_display}"


def load_font_requests(path: Path, settings: AppSettings) -> dict[str, list[FontRequest]]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise FontsFileError(f"Cannot read fonts file {path}: {exc}") from exc

    try:
        data = json.loads(raw)
        parsed = FontsFile.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise FontsFileError(f"Invalid fonts file {path}: {exc}") from exc

    fonts: dict[str, list[FontRequest]] = {}
    for family in parsed.fonts:
        fonts[family] = [
            FontRequest(family=family, stylesheet_url=build_stylesheet_url(family, settings))
        ]
    return fonts
