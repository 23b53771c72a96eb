"""
Observability utilities for eventcenter.

This module provides composition-based tracing and standard attribute
definitions for the event center.

Example:
    >>> from eventcenter import EventCenter
    >>> from eventcenter.observability import MockTracer
    >>>
    >>> tracer = MockTracer()
    >>> center = EventCenter(tracer=tracer)
    >>> center.emit("ping")

Note:
    OpenTelemetry is an optional dependency. All utilities in this module
    gracefully handle the case where OpenTelemetry is not installed.
"""

from eventcenter.observability.attributes import (
    ATTR_CENTER_NAME,
    ATTR_DISPATCH_STOPPED,
    ATTR_ERROR_TYPE,
    ATTR_EVENT_NAME,
    ATTR_HANDLER_COUNT,
    ATTR_HANDLER_ID,
    ATTR_HANDLER_NAME,
    ATTR_HANDLER_SUCCESS,
)
from eventcenter.observability.tracer import (
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    Tracer,
    create_tracer,
)
from eventcenter.observability.tracing import (
    OTEL_AVAILABLE,
    get_tracer,
    should_trace,
)

__all__ = [
    # Tracing utilities
    "OTEL_AVAILABLE",
    "get_tracer",
    "should_trace",
    # Tracer (composition-based API)
    "Tracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "MockTracer",
    "create_tracer",
    # Attributes
    "ATTR_CENTER_NAME",
    "ATTR_DISPATCH_STOPPED",
    "ATTR_ERROR_TYPE",
    "ATTR_EVENT_NAME",
    "ATTR_HANDLER_COUNT",
    "ATTR_HANDLER_ID",
    "ATTR_HANDLER_NAME",
    "ATTR_HANDLER_SUCCESS",
]
