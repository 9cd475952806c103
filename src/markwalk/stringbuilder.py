"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

The builder also remembers the last appended chunk. The HTML renderer
reads it back to decide whether a line break is needed, so consecutive
block boundaries never produce blank lines.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> _ = sb.append("<p>").append("Hello").append("</p>")
        >>> _ = sb.cr()
        >>> sb.build()
        '<p>Hello</p>\\n'

    ``last`` starts as a newline, so a line break requested before any
    output is a no-op.

    """

    __slots__ = ("_parts", "_last")

    def __init__(self) -> None:
        """Initialize empty StringBuilder."""
        self._parts: list[str] = []
        self._last = "\n"

    @property
    def last(self) -> str:
        """The most recently appended chunk."""
        return self._last

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Empty strings are not stored but still become ``last``.

        Args:
            s: String to append

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        self._last = s
        return self

    def cr(self) -> StringBuilder:
        """Append a newline unless the last chunk already is one.

        Returns:
            self for method chaining
        """
        if self._last != "\n":
            self._parts.append("\n")
            self._last = "\n"
        return self

    def build(self) -> str:
        """Join all parts into final string.

        Returns:
            Concatenated string of all appended parts
        """
        return "".join(self._parts)
