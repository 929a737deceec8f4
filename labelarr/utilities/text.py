"""Text helpers for label consumers."""

import html


def escape_html(text: str) -> str:
    """Escape &, < and > so a label can be dropped into HTML as text."""
    return html.escape(text, quote=False)
