"""Contrato del transporte HTTP.

Por qué Protocol:
- El dispatcher depende de una abstracción; el adaptador httpx (o un stub en
  tests) la implementa sin herencia.
"""

from __future__ import annotations

from typing import Mapping, Protocol, runtime_checkable

from core.domain.models import ResponseDescriptor


@runtime_checkable
class HttpTransport(Protocol):
    """Ejecuta un único intercambio HTTP.

    Reglas de diseño:
    - `send` es asíncrono porque hace I/O de red.
    - Cualquier status (incluido 4xx/5xx) vuelve como `ResponseDescriptor`.
    - Fallos de red/TLS/protocolo se señalan con `TransportError`.
    """

    async def send(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: bytes | None = None,
    ) -> ResponseDescriptor:
        ...
