"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Timeout, redirects y User-Agent del transporte se fijan aquí, no se
  heredan de httpx.

Nota: solo variables de entorno (`MINI_HTTP_*`); la CLI no lee ficheros de config.
"""

from __future__ import annotations

import sys

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "mini-http-client"
APP_VERSION = "0.1.0"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación."""

    model_config = SettingsConfigDict(
        env_prefix="MINI_HTTP_",
        extra="ignore",
        case_sensitive=False,
    )

    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout por request (segundos): connect, read, write y pool.",
    )
    follow_redirects: bool = Field(
        default=True,
        description="Seguir redirecciones 3xx.",
    )
    max_redirects: int = Field(
        default=10,
        ge=0,
        le=50,
        description="Máximo de redirecciones antes de fallar.",
    )
    user_agent: str = Field(
        default=f"{APP_NAME}/{APP_VERSION}",
        min_length=1,
        description="User-Agent enviado en cada request.",
    )

    highlight_theme: str = Field(
        default="monokai",
        min_length=1,
        description="Tema Pygments para resaltar cuerpos JSON/HTML.",
    )
    color: bool | None = Field(
        default=None,
        description="Forzar color (True/False). None = detectar si stdout es una TTY.",
    )

    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (stderr).",
    )

    def resolve_color(self) -> bool:
        """Decide si la salida lleva estilos ANSI."""

        if self.color is not None:
            return self.color
        return sys.stdout.isatty()
