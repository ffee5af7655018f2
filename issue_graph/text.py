"""Escaping and fixed-width formatting for diagram label text."""

import html

KEY_WIDTH = 20
SUMMARY_WIDTH = KEY_WIDTH + 2
OMISSION = "..."


def escape(text: str) -> str:
    """Escape markup-significant characters for a Graphviz HTML-like label.

    Square brackets are literal text inside our labels but are not covered by
    HTML escaping, so they are replaced with numeric entities as well.
    """
    escaped = html.escape(str(text), quote=True).replace("&#x27;", "&#39;")
    return escaped.replace("[", "&#91;").replace("]", "&#93;")


def fixed_width(text: str, width: int) -> str:
    """Truncate text to width (marking the cut with an ellipsis) and right-pad it to exactly width."""
    text = str(text)
    if len(text) > width:
        keep = max(width - len(OMISSION), 0)
        text = (text[:keep] + OMISSION)[:width]
    return text.ljust(width)


def format_cell(text: str, width: int) -> str:
    """Fit text to a column, then escape it."""
    return escape(fixed_width(text, width))
