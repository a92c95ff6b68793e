"""Inline text codec: HTML escaping plus bold/italic markers."""

from __future__ import annotations

import re

_ESCAPE_TABLE = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#39;",
    }
)

# Applied in order, on already escaped text.
_INLINE_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\*\*(.+?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"__(.+?)__"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.+?)\*"), r"<em>\1</em>"),
    (re.compile(r"_(.+?)_"), r"<em>\1</em>"),
)

_LINE_BREAK_RE = re.compile(r"\r?\n")


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters."""
    return text.translate(_ESCAPE_TABLE)


def escape_and_format(text: str) -> str:
    """Escape raw text, then turn ``**``/``__`` into strong and ``*``/``_`` into em.

    Escaping runs first so author input can never inject markup; only the
    emphasis tags added here are real HTML.
    """
    formatted = escape_html(text)
    for pattern, replacement in _INLINE_PATTERNS:
        formatted = pattern.sub(replacement, formatted)
    return formatted


def line_break_format(text: str) -> str:
    """Like :func:`escape_and_format`, with line breaks turned into ``<br />``."""
    return _LINE_BREAK_RE.sub("<br />", escape_and_format(text))
