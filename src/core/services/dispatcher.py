"""Ejecución de un `RequestDescriptor` contra el transporte.

Un dispatch = exactamente una llamada de red. Sin reintentos; el status HTTP
no se interpreta (un 404 es una respuesta válida que se renderiza igual).
"""

from __future__ import annotations

import json
import logging

from core.domain.models import HttpMethod, KeyValuePair, RequestDescriptor, ResponseDescriptor
from core.interfaces.transport import HttpTransport

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def encode_json_body(pairs: tuple[KeyValuePair, ...]) -> bytes:
    """Serializa los pares como objeto JSON (claves duplicadas: gana la última)."""

    payload: dict[str, str] = {}
    for pair in pairs:
        payload[pair.key] = pair.value
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


async def dispatch(descriptor: RequestDescriptor, transport: HttpTransport) -> ResponseDescriptor:
    """Envía el request y devuelve la respuesta, sea cual sea su status.

    Raises:
        TransportError: el transporte no pudo completar el intercambio.
    """

    if descriptor.method is HttpMethod.GET:
        logger.debug("GET %s", descriptor.url)
        response = await transport.send("GET", descriptor.url)
    elif descriptor.method is HttpMethod.POST:
        content = encode_json_body(descriptor.body)
        logger.debug("POST %s (%d bytes)", descriptor.url, len(content))
        response = await transport.send(
            "POST",
            descriptor.url,
            headers={"Content-Type": JSON_CONTENT_TYPE},
            content=content,
        )
    else:  # pragma: no cover
        raise ValueError(f"unsupported method: {descriptor.method}")

    logger.debug("%s %s %s", response.http_version, response.status_code, response.status_text)
    return response
