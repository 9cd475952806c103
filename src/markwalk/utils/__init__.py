"""Utility modules for markwalk.

Provides:
- text: escape_xml, the renderer's escape primitive
- logger: get_logger for logging
"""

from markwalk.utils.logger import get_logger
from markwalk.utils.text import Escaper, escape_xml

__all__ = [
    "Escaper",
    "escape_xml",
    "get_logger",
]
