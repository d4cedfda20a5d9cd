"""Shared fixtures."""

from __future__ import annotations

import os

import pytest

from adapters.highlighter import reset_highlighter


class RecordingHighlighter:
    """Duck-typed SyntaxHighlighter that tags its output with the language hint."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def highlight(self, text: str, language: str) -> str:
        self.calls.append((text, language))
        return f"<{language}>{text}</{language}>"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for key in list(os.environ):
        if key.upper().startswith("MINI_HTTP_"):
            monkeypatch.delenv(key, raising=False)
    reset_highlighter()
    yield
    reset_highlighter()


@pytest.fixture
def highlighter() -> RecordingHighlighter:
    return RecordingHighlighter()
