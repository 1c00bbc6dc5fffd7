"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.

Nota:
- Estos modelos describen *qué* se descarga y *cómo terminó*, no *cómo* se obtiene.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

# family -> URLs binarias extraídas (orden y duplicados preservados)
FontUrlMap = dict[str, list[str]]


class FontRequest(BaseModel):
    """Una familia y la URL de su hoja de estilos. Inmutable."""

    model_config = ConfigDict(frozen=True)

    family: str = Field(
        ...,
        min_length=1,
        description="Nombre legible de la familia (p.ej. 'Open Sans').",
    )
    stylesheet_url: str = Field(
        ...,
        min_length=8,
        description="URL del endpoint CSS para esta familia.",
    )


class FontsFile(BaseModel):
    """Forma del fichero de entrada: `{"fonts": ["Open Sans", ...]}`."""

    model_config = ConfigDict(extra="ignore")

    fonts: list[Annotated[str, Field(min_length=1)]] = Field(
        ...,
        description="Familias a descargar.",
    )


class DownloadOutcome(BaseModel):
    """Resultado de la descarga de un fichero. Nunca se persiste, solo se cuenta."""

    url: str
    index: int = Field(..., ge=0)
    path: Path | None = None
    ok: bool = False
    reason: str | None = None


class FamilyOutcome(BaseModel):
    """Resultado de procesar una familia (CSS + descargas)."""

    family: str
    ok: bool = False
    reason: str | None = Field(
        default=None,
        description="Motivo del fallo si `ok` es False.",
    )
    urls: list[str] = Field(
        default_factory=list,
        description="URLs extraídas de la hoja de estilos.",
    )
    downloads: list[DownloadOutcome] = Field(default_factory=list)

    @property
    def skipped(self) -> bool:
        return self.ok and not self.urls

    @property
    def files_ok(self) -> int:
        return sum(1 for d in self.downloads if d.ok)

    @property
    def files_failed(self) -> int:
        return sum(1 for d in self.downloads if not d.ok)


class RunSummary(BaseModel):
    """Agregado de una ejecución completa."""

    families: list[FamilyOutcome] = Field(default_factory=list)

    @property
    def families_ok(self) -> int:
        return sum(1 for f in self.families if f.ok)

    @property
    def families_failed(self) -> int:
        return sum(1 for f in self.families if not f.ok)

    @property
    def files_ok(self) -> int:
        return sum(f.files_ok for f in self.families)

    @property
    def files_failed(self) -> int:
        return sum(f.files_failed for f in self.families)

    def font_urls(self) -> FontUrlMap:
        """Mapa familia -> URLs, solo familias con al menos una URL, claves ordenadas.

        Se registra aunque todas las descargas de la familia hayan fallado.
        """

        collected: FontUrlMap = {}
        for outcome in self.families:
            if outcome.urls:
                collected[outcome.family] = list(outcome.urls)
        return {key: collected[key] for key in sorted(collected)}
