"""Construcción y validación del `RequestDescriptor`.

Todo error de entrada se detecta aquí, antes de tocar la red.
"""

from __future__ import annotations

from typing import Iterable

import httpx

from core.domain.errors import InvalidKeyValuePair, InvalidUrl
from core.domain.models import HttpMethod, KeyValuePair, RequestDescriptor


def parse_url(raw: str) -> str:
    """Valida que `raw` sea una URL absoluta (esquema + host) y la devuelve intacta."""

    try:
        url = httpx.URL(raw)
    except httpx.InvalidURL as exc:
        raise InvalidUrl(raw) from exc
    if not url.scheme or not url.host:
        raise InvalidUrl(raw)
    return raw


def parse_kv_pair(raw: str) -> KeyValuePair:
    """Parte `key=value` por el primer '=' únicamente."""

    key, sep, value = raw.partition("=")
    if not sep or not key:
        raise InvalidKeyValuePair(raw)
    return KeyValuePair(key=key, value=value)


def build_get(url: str) -> RequestDescriptor:
    return RequestDescriptor(method=HttpMethod.GET, url=parse_url(url))


def build_post(url: str, pairs: Iterable[str] = ()) -> RequestDescriptor:
    """POST con los pares en el orden recibido (cero pares = objeto vacío)."""

    valid_url = parse_url(url)
    body = tuple(parse_kv_pair(raw) for raw in pairs)
    return RequestDescriptor(method=HttpMethod.POST, url=valid_url, body=body)
