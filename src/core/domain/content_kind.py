"""Content kinds for response rendering.

The renderer picks a presentation strategy from the response's declared
`Content-Type`. Keeping the classification in the domain layer lets the
renderer and the tests share a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class ContentKind(str, Enum):
    """Presentation strategy derived from a `Content-Type` header."""

    JSON = "json"
    HTML = "html"
    OTHER = "other"

    @classmethod
    def from_content_type(cls, value: str | None) -> "ContentKind":
        """Classify a raw header value; parameters such as `charset` are ignored."""

        if not value:
            return cls.OTHER
        mime = value.split(";", 1)[0].strip().lower()
        if mime == "application/json":
            return cls.JSON
        if mime == "text/html":
            return cls.HTML
        return cls.OTHER

    def lexer(self) -> str | None:
        """Language hint for the syntax highlighter (None = render verbatim)."""

        if self is ContentKind.OTHER:
            return None
        return self.value
