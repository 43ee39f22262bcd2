"""Terminal syntax highlighting for structured CLI output.

Uses Pygments' JSON lexer with a terminal formatter. Unknown style names fall
back to ``monokai``.
"""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    formatter = TerminalFormatter(style=style)
    _FORMATTERS[style] = formatter
    return formatter


def colorize_json(source: str, style: str = DEFAULT_STYLE) -> str:
    """Return ``source`` with ANSI colors for terminal display."""
    formatter = _formatter_for_style(_normalize_style(style))
    return highlight(source, JsonLexer(), formatter)
