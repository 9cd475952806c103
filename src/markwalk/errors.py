"""Exception classes for markwalk.

Provides standardized exceptions for error handling throughout markwalk.
"""

from __future__ import annotations


class MarkwalkError(Exception):
    """Base exception for all markwalk errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(MarkwalkError):
    """Error during HTML rendering.

    Raised when the renderer receives an event stream it cannot honor,
    such as an image exit without a matching enter.
    """

    pass


class UnknownVariantError(RenderError):
    """A node's variant has no registered handler.

    The tree contains a node outside the closed variant set. This is a
    defect in the input tree; retrying the render cannot succeed.
    """

    def __init__(self, variant: str) -> None:
        """Initialize unknown variant error.

        Args:
            variant: Variant (or class) name of the offending node
        """
        self.variant = variant
        super().__init__(f"Unknown node type {variant}")
