"""Contrato del resaltador de sintaxis."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SyntaxHighlighter(Protocol):
    """Convierte `(texto, lenguaje)` en texto formateado para terminal.

    Debe conservar los saltos de línea del texto de entrada.
    """

    def highlight(self, text: str, language: str) -> str:
        ...
