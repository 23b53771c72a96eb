"""
Tracer protocol and implementations for composition-based tracing.

A tracer is injected into the event center as a dependency. The center
never imports OpenTelemetry directly; it only talks to a ``Tracer``.

Example:
    >>> from eventcenter.observability import create_tracer, NullTracer
    >>>
    >>> tracer = create_tracer(__name__, enable_tracing=True)
    >>>
    >>> # Or explicitly use NullTracer for testing
    >>> tracer = NullTracer()
    >>>
    >>> with tracer.span("eventcenter.emit", {"eventcenter.event.name": "ping"}):
    ...     dispatch()
"""

from __future__ import annotations

import contextlib
from collections.abc import Generator
from contextlib import AbstractContextManager
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from opentelemetry.trace import Span

from eventcenter.observability.tracing import get_tracer, should_trace


@runtime_checkable
class Tracer(Protocol):
    """
    Protocol for tracers that can create tracing spans.

    Implementations:
    - NullTracer: No-op tracer for when tracing is disabled
    - OpenTelemetryTracer: Wrapper around OpenTelemetry tracer
    - MockTracer: Records spans for assertions in tests
    """

    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> AbstractContextManager[Span | None]:
        """
        Create a tracing span context manager.

        Args:
            name: Span name (e.g., "eventcenter.emit")
            attributes: Span attributes (optional)

        Returns:
            Context manager that yields Span or None

        Example:
            >>> with tracer.span("operation", {"key": "value"}) as span:
            ...     if span:
            ...         span.set_attribute("result", "success")
        """
        ...

    @property
    def enabled(self) -> bool:
        """
        Check if tracing is enabled.

        Returns:
            True if tracing is active and will create real spans
        """
        ...


class NullTracer:
    """
    No-op tracer implementation for when tracing is disabled.

    Example:
        >>> tracer = NullTracer()
        >>> with tracer.span("operation"):  # Does nothing
        ...     do_work()
        >>> tracer.enabled  # False
    """

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> Generator[None, None, None]:
        """Create a no-op span context (yields None)."""
        yield None

    @property
    def enabled(self) -> bool:
        """Always returns False for NullTracer."""
        return False


class OpenTelemetryTracer:
    """
    OpenTelemetry tracer implementation.

    Wraps the OpenTelemetry tracer API to conform to our Tracer protocol.

    Args:
        tracer_name: Name for the tracer (typically __name__)

    Raises:
        ImportError: If OpenTelemetry is not installed
    """

    def __init__(self, tracer_name: str) -> None:
        tracer = get_tracer(tracer_name)
        if tracer is None:
            raise ImportError("opentelemetry-api is required for OpenTelemetryTracer")
        self._tracer = tracer

    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> AbstractContextManager[Span | None]:
        """
        Create an OpenTelemetry span context.

        Exceptions raised inside the span are recorded on it and re-raised.

        Args:
            name: Span name
            attributes: Span attributes (optional)

        Returns:
            Context manager yielding the OpenTelemetry Span
        """
        return self._tracer.start_as_current_span(
            name,
            attributes=attributes or {},
        )

    @property
    def enabled(self) -> bool:
        """Always returns True for OpenTelemetryTracer."""
        return True


class MockTracer:
    """
    Mock tracer for testing that records span information.

    Example:
        >>> tracer = MockTracer()
        >>> with tracer.span("operation", {"key": "value"}):
        ...     pass
        >>> assert tracer.spans == [("operation", {"key": "value"})]
        >>> assert tracer.span_names == ["operation"]
    """

    def __init__(self) -> None:
        self.spans: list[tuple[str, dict[str, Any] | None]] = []

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: dict[str, Any] | None = None,
    ) -> Generator[None, None, None]:
        """Record span and yield None."""
        self.spans.append((name, attributes))
        yield None

    @property
    def enabled(self) -> bool:
        """Returns True to enable attribute computation in tests."""
        return True

    @property
    def span_names(self) -> list[str]:
        """Get just the span names for easy assertions."""
        return [name for name, _ in self.spans]

    def clear(self) -> None:
        """Clear recorded spans."""
        self.spans.clear()


def create_tracer(
    name: str,
    enable_tracing: bool = True,
) -> Tracer:
    """
    Factory function to create the appropriate tracer.

    Creates an OpenTelemetryTracer if tracing is enabled and OTEL is available,
    otherwise returns a NullTracer.

    Args:
        name: Tracer name (typically __name__)
        enable_tracing: Whether tracing should be enabled (default True)

    Returns:
        OpenTelemetryTracer if enabled and available, NullTracer otherwise

    Example:
        >>> def __init__(self, tracer: Tracer | None = None, enable_tracing: bool = True):
        ...     self._tracer = tracer or create_tracer(__name__, enable_tracing)
    """
    if should_trace(enable_tracing):
        return OpenTelemetryTracer(name)
    return NullTracer()


__all__ = [
    "MockTracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "Tracer",
    "create_tracer",
]
