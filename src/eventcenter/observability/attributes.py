"""
Standard span attributes for eventcenter.

Attribute constants used by the event center when tracing is enabled, so
span names and keys stay consistent across instances.

Example:
    >>> from eventcenter.observability.attributes import ATTR_EVENT_NAME
    >>>
    >>> with tracer.span("eventcenter.emit", {ATTR_EVENT_NAME: "order.created"}):
    ...     pass
"""

# =============================================================================
# Center Attributes
# =============================================================================

ATTR_CENTER_NAME = "eventcenter.center.name"
"""Configured name of the event center instance."""

# =============================================================================
# Event Attributes
# =============================================================================

ATTR_EVENT_NAME = "eventcenter.event.name"
"""Name of the emitted event (e.g., 'order.created')."""

# =============================================================================
# Handler Attributes
# =============================================================================

ATTR_HANDLER_ID = "eventcenter.handler.id"
"""Id assigned to the subscription at registration (integer)."""

ATTR_HANDLER_NAME = "eventcenter.handler.name"
"""Qualified name of the handler function or class."""

ATTR_HANDLER_COUNT = "eventcenter.handler.count"
"""Number of subscriptions in the dispatch snapshot (integer)."""

ATTR_HANDLER_SUCCESS = "eventcenter.handler.success"
"""Whether the handler returned without raising (boolean)."""

ATTR_DISPATCH_STOPPED = "eventcenter.dispatch.stopped"
"""Whether a handler returned False and ended the dispatch round (boolean)."""

# =============================================================================
# Error Attributes
# =============================================================================

ATTR_ERROR_TYPE = "error.type"
"""Exception class name raised by a handler."""


__all__ = [
    "ATTR_CENTER_NAME",
    "ATTR_DISPATCH_STOPPED",
    "ATTR_ERROR_TYPE",
    "ATTR_EVENT_NAME",
    "ATTR_HANDLER_COUNT",
    "ATTR_HANDLER_ID",
    "ATTR_HANDLER_NAME",
    "ATTR_HANDLER_SUCCESS",
]
