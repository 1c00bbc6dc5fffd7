"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (HTTP/CSS/descargas) lean config de forma consistente.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PROXY_URL = "http://127.0.0.1:8080"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.

    El proxy se lee de `HTTPS_PROXY` / `HTTP_PROXY` (sin prefijo), igual que
    el resto de herramientas de red. No existe modo "sin proxy".
    """

    model_config = SettingsConfigDict(
        env_prefix="FONTGRAB_",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
        env_ignore_empty=True,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    proxy_url: str = Field(
        default=DEFAULT_PROXY_URL,
        min_length=1,
        validation_alias=AliasChoices("https_proxy", "http_proxy"),
        description="Proxy de salida para todas las peticiones.",
    )
    css_base_url: str = Field(
        default="https://fonts.googleapis.com/css2",
        min_length=8,
        description="Endpoint de hojas de estilo del servicio de fuentes.",
    )
    font_weights: list[int] = Field(
        default_factory=lambda: [400, 700],
        min_length=1,
        description="Pesos solicitados (regular y bold).",
    )
    font_display: str = Field(
        default="swap",
        min_length=1,
        description="Estrategia `font-display` solicitada.",
    )

    fonts_file: Path = Field(
        default=Path("fonts.json"),
        description="JSON de entrada con la lista de familias.",
    )
    output_dir: Path = Field(
        default=Path("downloaded-fonts"),
        description="Directorio raíz de descargas.",
    )
    urls_output_path: Path = Field(
        default=Path("font-urls.json"),
        description="Ruta del JSON con las URLs descubiertas.",
    )

    http_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout por request (segundos). None = sin timeout.",
    )
    user_agent: str = Field(
        default="fontgrab/0.1",
        min_length=1,
        description="User-Agent para peticiones HTTP.",
    )
    max_concurrency: int | None = Field(
        default=None,
        ge=1,
        le=500,
        description="Límite opcional de peticiones simultáneas. None = sin límite.",
    )


@dataclass(frozen=True)
class TransportConfig:
    """Configuración de transporte fijada una vez al arrancar.

    Se construye desde `AppSettings` y se pasa explícitamente a las funciones
    de red, en vez de vivir como singleton de módulo.
    """

    proxy_url: str
    timeout_seconds: float | None = None
    user_agent: str = "fontgrab/0.1"

    @classmethod
    def from_settings(cls, settings: AppSettings) -> TransportConfig:
        return cls(
            proxy_url=settings.proxy_url,
            timeout_seconds=settings.http_timeout_seconds,
            user_agent=settings.user_agent,
        )
