"""Exportación JSON del mapa familia -> URLs.

Por qué JSON:
- Interoperabilidad con otras herramientas (p.ej. generar `@font-face` locales).
- Salida determinista: claves ordenadas e indentación de 2 espacios.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import FontUrlMap


def export_font_urls(*, font_urls: FontUrlMap, output_path: Path) -> Path:
    """Escribe el mapa a JSON UTF-8. Los errores de disco se propagan."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(font_urls, ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )
    return output_path
