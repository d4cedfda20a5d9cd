"""Render de un `ResponseDescriptor` a texto legible.

Orden fijo: línea de status, headers, cuerpo. El cuerpo se presenta según el
`Content-Type` (JSON/HTML resaltados, el resto tal cual). Función pura: la
misma respuesta produce siempre la misma salida.
"""

from __future__ import annotations

import json

from core.domain.content_kind import ContentKind
from core.domain.models import ResponseDescriptor
from core.interfaces.highlighter import SyntaxHighlighter


def format_status_line(response: ResponseDescriptor) -> str:
    return f"{response.http_version} {response.status_code} {response.status_text}"


def format_headers(response: ResponseDescriptor) -> list[str]:
    return [f"{name}: {value}" for name, value in response.headers]


_CLOSERS = {"{": "}", "[": "]"}
_JSON_WHITESPACE = " \t\r\n"


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _JSON_WHITESPACE:
        pos += 1
    return pos


def pretty_json(text: str, indent: int = 2) -> str:
    """Re-indenta JSON válido a nivel de tokens; si no parsea, lo deja igual.

    Solo cambia el espacio en blanco entre tokens: claves duplicadas, números
    (`1.10`, `1e400`) y escapes de strings salen tal como llegaron.
    """

    try:
        json.loads(text)
    except ValueError:
        return text

    out: list[str] = []
    depth = 0
    in_string = False
    escaped = False
    pos = 0
    while pos < len(text):
        ch = text[pos]
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
            out.append(ch)
        elif ch in _JSON_WHITESPACE:
            pass
        elif ch in _CLOSERS:
            nxt = _skip_whitespace(text, pos + 1)
            if nxt < len(text) and text[nxt] == _CLOSERS[ch]:
                out.append(ch + text[nxt])
                pos = nxt
            else:
                depth += 1
                out.append(ch + "\n" + " " * (indent * depth))
        elif ch in "}]":
            depth -= 1
            out.append("\n" + " " * (indent * depth) + ch)
        elif ch == ",":
            out.append(",\n" + " " * (indent * depth))
        elif ch == ":":
            out.append(": ")
        else:
            out.append(ch)
        pos += 1
    return "".join(out)


def render_body(text: str, kind: ContentKind, highlighter: SyntaxHighlighter) -> str:
    language = kind.lexer()
    if language is None:
        return text
    if kind is ContentKind.JSON:
        text = pretty_json(text)
    return highlighter.highlight(text, language)


def render(response: ResponseDescriptor, highlighter: SyntaxHighlighter) -> str:
    """Produce la salida completa (termina siempre en un único salto de línea propio).

    Raises:
        UndecodableBody: el cuerpo no es texto en el charset declarado.
    """

    text = response.body_text()
    kind = ContentKind.from_content_type(response.header("content-type"))

    lines = [format_status_line(response), ""]
    lines.extend(format_headers(response))
    lines.append("")

    body = render_body(text, kind, highlighter)
    out = "\n".join(lines) + "\n" + body
    if not out.endswith("\n"):
        out += "\n"
    return out
