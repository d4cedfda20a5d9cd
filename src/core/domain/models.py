"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación y documentación autocontenida (Field) sin acoplar el Core a
  httpx ni a la CLI.
- `frozen=True`: ningún descriptor cambia después de construirse.

Nota:
- Estos modelos describen *qué* se envía y *qué* se recibió, no *cómo*.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.errors import UndecodableBody


class HttpMethod(str, Enum):
    """Métodos soportados (conjunto cerrado)."""

    GET = "GET"
    POST = "POST"


class KeyValuePair(BaseModel):
    """Par `key=value` del cuerpo de un POST."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(
        ...,
        min_length=1,
        description="Texto anterior al primer '='.",
    )
    value: str = Field(
        default="",
        description="Todo lo posterior al primer '=' (puede contener más '=').",
    )


class RequestDescriptor(BaseModel):
    """Qué enviar: método, URL absoluta validada y pares del cuerpo en orden."""

    model_config = ConfigDict(frozen=True)

    method: HttpMethod = Field(
        ...,
        description="Variante del request.",
    )
    url: str = Field(
        ...,
        min_length=1,
        description="URL absoluta tal como la escribió el usuario.",
    )
    body: tuple[KeyValuePair, ...] = Field(
        default=(),
        description="Pares del cuerpo en el orden de la línea de comandos.",
    )

    @model_validator(mode="after")
    def _get_has_no_body(self) -> "RequestDescriptor":
        if self.method is HttpMethod.GET and self.body:
            raise ValueError("GET requests carry no body")
        return self


class ResponseDescriptor(BaseModel):
    """Resultado de un intercambio HTTP completado (cualquier status)."""

    model_config = ConfigDict(frozen=True)

    http_version: str = Field(
        ...,
        description="Versión de protocolo, p.ej. 'HTTP/1.1'.",
    )
    status_code: int = Field(
        ...,
        ge=100,
        le=999,
        description="Código de estado HTTP.",
    )
    status_text: str = Field(
        default="",
        description="Reason phrase del status.",
    )
    headers: tuple[tuple[str, str], ...] = Field(
        default=(),
        description="Headers en orden de llegada (duplicados incluidos, nombre original).",
    )
    body: bytes = Field(
        default=b"",
        description="Cuerpo completo sin decodificar.",
    )
    encoding: str | None = Field(
        default=None,
        description="Charset declarado en Content-Type (None = utf-8).",
    )

    def header(self, name: str) -> str | None:
        """Primer valor del header `name` (case-insensitive)."""

        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None

    def body_text(self) -> str:
        """Decodifica el cuerpo de forma estricta."""

        encoding = self.encoding or "utf-8"
        try:
            return self.body.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise UndecodableBody(encoding) from exc
