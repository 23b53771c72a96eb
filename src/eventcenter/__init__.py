"""
eventcenter - Minimal in-process publish/subscribe for Python.

This library provides:
- EventCenter: synchronous dispatcher keyed by event name
- A process-wide default center with module-level subscribe/unsubscribe/emit
- Structural cloning of payloads so handlers never share mutable state
- Optional OpenTelemetry tracing
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("eventcenter-py")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from eventcenter.center import (
    EventCenter,
    EventCenterConfig,
    emit,
    get_default_center,
    global_center,
    subscribe,
    unsubscribe,
)
from eventcenter.exceptions import EventCenterError, PayloadCloneError
from eventcenter.predicates import is_array_sequence, is_callable, is_number
from eventcenter.protocols import EventHandler, EventHandlerFunc, EventMessage
from eventcenter.serialization import clone_payload
from eventcenter.subscription import (
    ALL,
    ById,
    ByHandler,
    Subscription,
    UnsubscribeTarget,
    get_handler_name,
)

__all__ = [
    "__version__",
    # Center
    "EventCenter",
    "EventCenterConfig",
    # Default center
    "global_center",
    "get_default_center",
    "subscribe",
    "unsubscribe",
    "emit",
    # Subscriptions
    "Subscription",
    "UnsubscribeTarget",
    "ById",
    "ByHandler",
    "ALL",
    "get_handler_name",
    # Protocols
    "EventHandler",
    "EventHandlerFunc",
    "EventMessage",
    # Serialization
    "clone_payload",
    # Predicates
    "is_array_sequence",
    "is_callable",
    "is_number",
    # Exceptions
    "EventCenterError",
    "PayloadCloneError",
]
