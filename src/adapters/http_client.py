"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, redirects y User-Agent desde `AppSettings`.
- Traduce `httpx.Response` a `ResponseDescriptor` y las excepciones de httpx a
  `TransportError`, así el Core no conoce httpx.
- Facilita testeo: se puede sustituir el transporte por `httpx.MockTransport`.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from core.config import AppSettings
from core.domain.errors import TransportError
from core.domain.models import ResponseDescriptor

logger = logging.getLogger(__name__)


def build_async_client(settings: AppSettings | None = None) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults explícitos de la app."""

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        max_redirects=settings.max_redirects,
        headers={"User-Agent": settings.user_agent},
    )


def to_response_descriptor(response: httpx.Response) -> ResponseDescriptor:
    """Copia status, headers crudos (orden/duplicados/casing) y cuerpo."""

    encoding = response.headers.encoding
    headers = tuple(
        (name.decode(encoding), value.decode(encoding)) for name, value in response.headers.raw
    )
    return ResponseDescriptor(
        http_version=response.http_version,
        status_code=response.status_code,
        status_text=response.reason_phrase,
        headers=headers,
        body=response.content,
        encoding=response.charset_encoding,
    )


class HttpxTransport:
    """Implementa `core.interfaces.transport.HttpTransport` sobre un `AsyncClient`.

    El ciclo de vida del cliente es del llamador (`async with build_async_client()`).
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> ResponseDescriptor:
        try:
            response = await self._client.request(
                method,
                url,
                headers=dict(headers) if headers else None,
                content=content,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("transport failure for %s %s: %r", method, url, exc)
            raise TransportError(exc) from exc
        return to_response_descriptor(response)
