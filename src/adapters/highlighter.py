"""Resaltado de sintaxis con Rich (Pygments por debajo).

Nota:
- El tema se carga una sola vez por proceso (`get_highlighter`), en el primer uso.
- La salida es el texto original con estilos ANSI: sin wrap, sin padding y sin
  expandir tabs (`tab_size=0` para Pygments; los segmentos no pasan por
  `Console.print`).
"""

from __future__ import annotations

import io

from rich.color import ColorSystem
from rich.console import Console
from rich.syntax import Syntax, SyntaxTheme

from core.config import AppSettings


class RichSyntaxHighlighter:
    """Implementa `core.interfaces.highlighter.SyntaxHighlighter` con `rich.syntax`."""

    def __init__(self, *, theme: str = "monokai", color: bool = True) -> None:
        self.theme_name = theme
        self.color = color
        self._theme: SyntaxTheme | None = None

    @property
    def theme(self) -> SyntaxTheme:
        if self._theme is None:
            self._theme = Syntax.get_theme(self.theme_name)
        return self._theme

    def highlight(self, text: str, language: str) -> str:
        if not self.color or not text:
            return text

        syntax = Syntax(
            text,
            language,
            theme=self.theme,
            background_color="default",
            tab_size=0,
        )
        highlighted = syntax.highlight(text)
        # Pygments' ensurenl
        if not text.endswith("\n") and highlighted.plain.endswith("\n"):
            highlighted.right_crop(1)

        console = Console(file=io.StringIO(), force_terminal=True, color_system="truecolor")
        return "".join(
            segment.style.render(segment.text, color_system=ColorSystem.TRUECOLOR)
            if segment.style
            else segment.text
            for segment in highlighted.render(console, end="")
        )


_highlighter: RichSyntaxHighlighter | None = None


def get_highlighter(settings: AppSettings | None = None) -> RichSyntaxHighlighter:
    """Devuelve el resaltador del proceso, creándolo en la primera llamada."""

    global _highlighter
    if _highlighter is None:
        settings = settings or AppSettings()
        _highlighter = RichSyntaxHighlighter(
            theme=settings.highlight_theme,
            color=settings.resolve_color(),
        )
    return _highlighter


def reset_highlighter() -> None:
    """Olvida la instancia cacheada (tests)."""

    global _highlighter
    _highlighter = None
