"""Source location tracking for diagnostic attributes.

Provides the SourceLocation dataclass that external parsers attach to nodes.
The renderer only reads it, to emit ``data-sourcepos`` attributes.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source range of a node in the original document.

    All positions are 1-indexed (lineno and col_offset start at 1).
    A location without an end describes a single point; the end then
    defaults to the start.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column (1-indexed)
        end_lineno: Ending line number (optional)
        end_col_offset: Ending column (optional)
        source_file: Source file path (optional, for multi-file builds)

    Examples:
        >>> loc = SourceLocation(1, 1, 3, 12)
        >>> loc.sourcepos()
        '1:1-3:12'

        >>> loc = SourceLocation(2, 5, source_file="docs/guide.md")
        >>> str(loc)
        'docs/guide.md:2:5'

    """

    lineno: int
    col_offset: int
    end_lineno: int | None = None
    end_col_offset: int | None = None
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.md:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    def sourcepos(self) -> str:
        """Format as a ``data-sourcepos`` value: ``L:C-L:C``."""
        end_line = self.end_lineno if self.end_lineno is not None else self.lineno
        end_col = self.end_col_offset if self.end_col_offset is not None else self.col_offset
        return f"{self.lineno}:{self.col_offset}-{end_line}:{end_col}"
