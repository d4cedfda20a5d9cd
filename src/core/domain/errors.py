"""Errores del dominio.

Todos son terminales para la invocación actual: no hay reintentos ni salida
degradada. Un 4xx/5xx no es un error, es una respuesta válida.
"""

from __future__ import annotations


class MiniHttpError(Exception):
    """Base de los errores que la CLI reporta al usuario."""


class InvalidUrl(MiniHttpError):
    """La URL no es absoluta (falta esquema o host) o no se puede parsear."""

    def __init__(self, input: str) -> None:
        self.input = input
        super().__init__(f"invalid URL {input!r}: expected an absolute URL with scheme and host")


class InvalidKeyValuePair(MiniHttpError):
    """Token del body sin `=` o con clave vacía."""

    def __init__(self, input: str) -> None:
        self.input = input
        super().__init__(f"invalid body item {input!r}: expected key=value with a non-empty key")


class TransportError(MiniHttpError):
    """Fallo de red/TLS/protocolo: el intercambio HTTP no se completó."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        detail = str(cause) or type(cause).__name__
        super().__init__(f"request failed: {detail}")


class UndecodableBody(MiniHttpError):
    """El cuerpo de la respuesta no se puede interpretar como texto."""

    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"response body is not valid {encoding} text")
