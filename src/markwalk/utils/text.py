"""Text escaping for markwalk.

Provides the escape primitive used by the HTML renderer.

Example:
    >>> from markwalk.utils.text import escape_xml
    >>> escape_xml('<a href="x">')
    '&lt;a href="x"&gt;'
    >>> escape_xml('say "hi"', True)
    'say &quot;hi&quot;'
"""

from __future__ import annotations

import html as html_module
from typing import Protocol


class Escaper(Protocol):
    """Callable signature of an escape primitive."""

    def __call__(self, text: str, is_attribute: bool = False) -> str: ...


def escape_xml(text: str, is_attribute: bool = False) -> str:
    """Escape text for HTML output.

    Text mode escapes ``&``, ``<`` and ``>``. Attribute mode additionally
    escapes ``"``. Single quotes are never escaped: attribute values are
    always emitted inside double quotes.

    Args:
        text: Text to escape
        is_attribute: Escape for use inside a double-quoted attribute value

    Returns:
        Escaped text
    """
    if not text:
        return ""

    escaped = html_module.escape(text, quote=False)
    if is_attribute:
        return escaped.replace('"', "&quot;")
    return escaped
