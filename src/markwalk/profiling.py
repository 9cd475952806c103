"""RenderAccumulator: opt-in profiling for HTML rendering.

This module provides accumulated metrics during rendering:
- Number of render() calls
- Number of walk events dispatched
- Total output length
- Time spent inside render()

Zero overhead when disabled (get_render_accumulator() returns None).

Example:
    from markwalk import render
    from markwalk.profiling import profiled_render

    with profiled_render() as metrics:
        html = render(doc)

    print(metrics.summary())
    # {"total_ms": 1.2, "render_ms": 0.4, "renders": 1, "events": 12, "output_length": 48}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class RenderAccumulator:
    """Accumulated metrics during HTML rendering.

    Attributes:
        start_time: Profiling start timestamp.
        renders: Number of render() calls recorded.
        events: Walk events dispatched across all renders.
        output_length: Characters produced across all renders.
        render_seconds: Time spent inside render() calls.

    """

    start_time: float = field(default_factory=perf_counter)
    renders: int = 0
    events: int = 0
    output_length: int = 0
    render_seconds: float = 0.0

    def record_render(self, events: int, output_length: int, seconds: float) -> None:
        """Record a render call.

        Args:
            events: Number of walk events dispatched.
            output_length: Length of the rendered string.
            seconds: Wall time spent rendering.

        """
        self.renders += 1
        self.events += events
        self.output_length += output_length
        self.render_seconds += seconds

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of render metrics.

        Returns:
            Dict with total_ms, render_ms, renders, events, output_length.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "render_ms": round(self.render_seconds * 1000, 2),
            "renders": self.renders,
            "events": self.events,
            "output_length": self.output_length,
        }


_accumulator: ContextVar[RenderAccumulator | None] = ContextVar(
    "render_accumulator",
    default=None,
)


def get_render_accumulator() -> RenderAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_render() -> Iterator[RenderAccumulator]:
    """Context manager for profiled rendering.

    Creates a RenderAccumulator and makes it available via
    get_render_accumulator() for the duration of the with block.

    Yields:
        RenderAccumulator that will be populated during render calls.

    """
    acc = RenderAccumulator()
    token: Token[RenderAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
