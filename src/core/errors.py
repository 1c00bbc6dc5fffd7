"""Jerarquía de errores.

- `FontsFileError`: fatal, aborta antes de cualquier petición de red.
- `StylesheetFetchError`: aislado por familia.
- `DownloadError`: aislado por fichero.
"""

from __future__ import annotations


class FontgrabError(Exception):
    """Base de todos los errores del proyecto."""


class FontsFileError(FontgrabError):
    """El fichero de entrada no existe o no tiene la forma `{"fonts": [...]}`."""


class _HTTPStatusError(FontgrabError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StylesheetFetchError(_HTTPStatusError):
    """Fallo al obtener la hoja de estilos de una familia."""


class DownloadError(_HTTPStatusError):
    """Fallo al descargar un fichero de fuente."""
