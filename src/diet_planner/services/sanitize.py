"""Text cleanup for the built-in PDF fonts.

Helvetica only covers Latin-1, so emoji and typographic symbols are mapped to
ASCII equivalents (or dropped) before any text reaches the layout.
"""

import re

_SYMBOL_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("\u2705", "[OK]"),
    ("\U0001f35e", "[Bread]"),
    ("\u2248", "~"),
    ("\u2022", "- "),
    ("\u2013", "-"),
    ("\u2014", "-"),
    ("\u2018", "'"),
    ("\u2019", "'"),
    ("\u201c", '"'),
    ("\u201d", '"'),
)

# no-break, en/em/thin, zero-width and ideographic spaces
_SPECIAL_SPACES = re.compile("[\u00a0\u2000-\u200b\u202f\u205f\u3000]")
_EMOJI_AND_SYMBOLS = re.compile(
    "[\U0001f300-\U0001faff\U0001f600-\U0001f64f\U0001f680-\U0001f6ff"
    "\u2600-\u26ff\u2700-\u27bf]"
)
_REPEATED_SPACES = re.compile(" {2,}")
_PIPE_SEPARATOR = re.compile(r"\s*\|\s*")


def sanitize_text(text: str | None) -> str:
    """Return text that the standard PDF fonts can draw."""
    if not text:
        return ""
    cleaned = text
    for symbol, replacement in _SYMBOL_REPLACEMENTS:
        cleaned = cleaned.replace(symbol, replacement)
    cleaned = _SPECIAL_SPACES.sub(" ", cleaned)
    cleaned = _EMOJI_AND_SYMBOLS.sub("", cleaned)
    cleaned = cleaned.replace("\t", " ")
    return _REPEATED_SPACES.sub(" ", cleaned)


def format_cell_text(text: str | None) -> str:
    """Sanitize and put each pipe-separated metric on its own line."""
    return _PIPE_SEPARATOR.sub(" |\n", sanitize_text(text))
