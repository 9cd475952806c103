"""Safety checks applied while rendering.

Provides the URL classification used in safe mode and the tag stripping
applied to image alt text.

Example:
    >>> from markwalk.sanitize import is_potentially_unsafe
    >>> is_potentially_unsafe("javascript:alert(1)")
    True
    >>> is_potentially_unsafe("data:image/png;base64,AAAA")
    False
"""

import re

# Start or end tag, as emitted by the renderer inside image alt text
_HTML_TAG_PATTERN = re.compile(r"<[^>]*>")

_UNSAFE_PROTOCOL_PATTERN = re.compile(r"(?:javascript|vbscript|file|data):", re.IGNORECASE)

_SAFE_DATA_PROTOCOL_PATTERN = re.compile(r"data:image/(?:png|gif|jpeg|webp)", re.IGNORECASE)

RAW_HTML_OMITTED = "<!-- raw HTML omitted -->"


def is_potentially_unsafe(url: str) -> bool:
    """Check if a link or image destination uses a dangerous scheme.

    ``javascript:``, ``vbscript:``, ``file:`` and ``data:`` are unsafe,
    except for ``data:`` URLs carrying PNG, GIF, JPEG or WebP images.
    Matching is case-insensitive and anchored at the start of the URL.
    """
    return (
        _UNSAFE_PROTOCOL_PATTERN.match(url) is not None
        and _SAFE_DATA_PROTOCOL_PATTERN.match(url) is None
    )


def strip_tags(text: str) -> str:
    """Remove every HTML start or end tag from text."""
    return _HTML_TAG_PATTERN.sub("", text)


__all__ = [
    "RAW_HTML_OMITTED",
    "is_potentially_unsafe",
    "strip_tags",
]
