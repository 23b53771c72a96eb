"""
In-process event center.

This module provides the ``EventCenter`` dispatcher: callers subscribe
handlers to event names, emit named events with a payload, and every
matching handler runs synchronously in registration order.

A process-wide default center is created at import time and exposed both
as ``global_center`` and through the module-level ``subscribe``,
``unsubscribe`` and ``emit`` functions. Independent instances share no
state with it.

Example:
    >>> from eventcenter import EventCenter
    >>>
    >>> center = EventCenter()
    >>> def on_ping(message):
    ...     print(message["data"])
    >>> handler_id = center.subscribe("ping", on_ping)
    >>> center.emit("ping", {"n": 1})
    {'n': 1}
    >>> center.unsubscribe("ping", handler_id)
    True
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any

from eventcenter.observability import Tracer, create_tracer
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
from eventcenter.predicates import is_callable
from eventcenter.protocols import EventHandlerFunc, EventMessage
from eventcenter.serialization import clone_payload
from eventcenter.subscription import (
    ALL,
    ById,
    ByHandler,
    Subscription,
    UnsubscribeTarget,
    get_handler_name,
    resolve_target,
)

logger = logging.getLogger(__name__)

# Handler ids are pre-incremented, so the first id handed out is 2 and 0
# is free to signal a rejected subscription.
_INITIAL_HANDLER_ID = 1


@dataclass
class EventCenterConfig:
    """Configuration for an event center.

    Attributes:
        name: Name used in log records and span attributes (default: "default")
        enable_tracing: Enable OpenTelemetry tracing if available (default: True)
        clone_payloads: Deliver a structural copy of the payload to each
            handler (default: True). When False, handlers share the emitted
            object; only use this for payloads nobody mutates.
    """

    name: str = "default"
    enable_tracing: bool = True
    clone_payloads: bool = True


class EventCenter:
    """
    Synchronous publish/subscribe dispatcher keyed by event name.

    Features:
    - Handlers fire in registration order
    - A handler returning ``False`` stops the rest of the dispatch round
    - Each handler receives ``{"data": <copy of payload>}``
    - Subscriptions can be removed by handler, by id, or all at once
    - Optional OpenTelemetry tracing

    Handler exceptions are not caught: they propagate to the caller of
    ``emit`` and end that dispatch round. The center stays usable.

    Example:
        >>> center = EventCenter()
        >>> center.subscribe("order.created", on_created)
        2
        >>> center.emit("order.created", {"order_id": 42})

    Thread Safety:
        The subscription table, id counter and statistics are guarded by
        one lock, which is never held while a handler runs.
        Dispatch iterates over a snapshot taken when ``emit`` starts, so
        handlers may subscribe, unsubscribe or emit re-entrantly; changes
        apply from the next dispatch round.
    """

    def __init__(
        self,
        config: EventCenterConfig | None = None,
        *,
        tracer: Tracer | None = None,
        enable_tracing: bool | None = None,
    ) -> None:
        """
        Initialize the center with an empty subscription table.

        Args:
            config: Center configuration. Defaults to ``EventCenterConfig()``.
            tracer: Optional custom Tracer instance. If not provided, one is
                   created based on the tracing setting.
            enable_tracing: Overrides ``config.enable_tracing`` when given.
                          Ignored if tracer is explicitly provided.
        """
        self._config = config or EventCenterConfig()
        if enable_tracing is None:
            enable_tracing = self._config.enable_tracing

        # Map of event name -> subscriptions in registration order
        self._events: dict[str, list[Subscription]] = {}
        self._last_handler_id = _INITIAL_HANDLER_ID
        self._lock = threading.RLock()
        self._stats = {
            "events_emitted": 0,
            "handlers_invoked": 0,
            "dispatches_stopped": 0,
            "handler_errors": 0,
        }

        self._tracer = tracer or create_tracer(__name__, enable_tracing)
        self._enable_tracing = self._tracer.enabled

    @property
    def config(self) -> EventCenterConfig:
        """Get the center configuration."""
        return self._config

    @property
    def name(self) -> str:
        """Get the configured center name."""
        return self._config.name

    # -------------------------------------------------------------------------
    # Subscription management
    # -------------------------------------------------------------------------

    def subscribe(self, name: str, handler: EventHandlerFunc) -> int:
        """
        Subscribe a handler to an event name.

        The handler is appended after any handlers already registered under
        ``name``. Registering the same handler twice creates two
        subscriptions with distinct ids.

        Args:
            name: Non-empty event name
            handler: Callable receiving one ``EventMessage``

        Returns:
            The new handler id, or 0 if ``name`` is empty or not a string,
            or ``handler`` is not callable

        Example:
            >>> handler_id = center.subscribe("test", lambda message: print(message["data"]))
            >>> center.unsubscribe_id("test", handler_id)
            True
        """
        if not isinstance(name, str) or not name or not is_callable(handler):
            logger.debug(
                f"Rejected subscription of {get_handler_name(handler)} to {name!r}",
                extra={"center": self.name, "event_name": name},
            )
            return 0

        with self._lock:
            self._last_handler_id += 1
            subscription = Subscription(
                handler_id=self._last_handler_id,
                name=name,
                handler=handler,
            )
            self._events.setdefault(name, []).append(subscription)

        logger.info(
            f"Registered handler {subscription.handler_name} for {name} "
            f"(id={subscription.handler_id})",
            extra={
                "center": self.name,
                "event_name": name,
                "handler": subscription.handler_name,
                "handler_id": subscription.handler_id,
            },
        )
        return subscription.handler_id

    def unsubscribe(self, name: str, target: Any = None) -> bool:
        """
        Remove subscriptions from an event name.

        The removal mode follows the shape of ``target``:
        - omitted or falsy, or ``ALL``: every subscription of ``name`` is
          removed; the name stays known with no handlers
        - a callable, or ``ByHandler(fn)``: the first subscription holding
          that handler is removed. Handlers compare by identity; a bound
          method matches another bound method of the same function on the
          same instance, so ``unsubscribe(name, obj.on_event)`` works
        - a number, or ``ById(n)``: the subscription with that id is removed

        Unknown names, handlers and ids are ignored.

        Args:
            name: Event name
            target: Handler, handler id, explicit target, or None

        Returns:
            True if a subscription was removed or the name was cleared,
            False otherwise

        Example:
            >>> center.unsubscribe("test", 123)
            >>> center.unsubscribe("test", on_test)
            >>> center.unsubscribe("test")
        """
        resolved = resolve_target(target)
        if resolved is None:
            logger.warning(
                f"Ignoring unsupported unsubscribe target {target!r} for {name!r}",
                extra={"center": self.name, "event_name": name},
            )
            return False
        return self._remove(name, resolved)

    def unsubscribe_handler(self, name: str, handler: Any) -> bool:
        """
        Remove the first subscription of ``handler`` under ``name``.

        Later registrations of the same handler stay subscribed.

        Args:
            name: Event name
            handler: The handler to remove (compared by identity, bound
                methods by instance and function)

        Returns:
            True if a subscription was removed, False otherwise
        """
        return self._remove(name, ByHandler(handler))

    def unsubscribe_id(self, name: str, handler_id: int) -> bool:
        """
        Remove the subscription with ``handler_id`` under ``name``.

        Args:
            name: Event name
            handler_id: Id returned by ``subscribe``

        Returns:
            True if a subscription was removed, False otherwise
        """
        return self._remove(name, ById(handler_id))

    def clear(self, name: str) -> bool:
        """
        Remove every subscription of ``name``.

        Args:
            name: Event name

        Returns:
            True if the name was known, False otherwise
        """
        return self._remove(name, ALL)

    def clear_subscribers(self) -> None:
        """
        Forget every event name and subscription.

        The handler id counter is not reset, so ids handed out afterwards
        never collide with ids handed out before. Useful for testing.
        """
        with self._lock:
            self._events.clear()

        logger.info("All event subscriptions cleared", extra={"center": self.name})

    def _remove(self, name: str, target: UnsubscribeTarget) -> bool:
        """
        Remove subscriptions selected by an explicit target.

        Args:
            name: Event name
            target: Resolved unsubscribe target

        Returns:
            True if anything was removed or cleared
        """
        with self._lock:
            subscriptions = self._events.get(name)
            if subscriptions is None:
                logger.debug(
                    f"No subscriptions registered for {name!r}",
                    extra={"center": self.name, "event_name": name},
                )
                return False

            if target is ALL:
                self._events[name] = []
                logger.info(
                    f"Unsubscribed all {len(subscriptions)} handler(s) from {name}",
                    extra={
                        "center": self.name,
                        "event_name": name,
                        "handler_count": len(subscriptions),
                    },
                )
                return True

            for index, subscription in enumerate(subscriptions):
                if self._matches(subscription, target):
                    subscriptions.pop(index)
                    logger.info(
                        f"Unsubscribed handler {subscription.handler_name} from {name} "
                        f"(id={subscription.handler_id})",
                        extra={
                            "center": self.name,
                            "event_name": name,
                            "handler": subscription.handler_name,
                            "handler_id": subscription.handler_id,
                        },
                    )
                    return True

        logger.debug(
            f"No subscription matching {target!r} for {name}",
            extra={"center": self.name, "event_name": name},
        )
        return False

    @staticmethod
    def _matches(subscription: Subscription, target: UnsubscribeTarget) -> bool:
        if isinstance(target, ByHandler):
            return subscription.matches_handler(target.handler)
        if isinstance(target, ById):
            return subscription.handler_id == target.handler_id
        return False

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def emit(self, name: str, payload: Any = None) -> None:
        """
        Emit an event to every handler subscribed to ``name``.

        Handlers run in registration order on the caller's thread. Each one
        receives ``{"data": <copy of payload>}``; an absent payload is
        delivered as None. A handler returning exactly ``False`` stops the
        round. Emitting a name nobody subscribed to does nothing.

        Args:
            name: Event name
            payload: Any JSON-like value (optional)

        Raises:
            PayloadCloneError: If the payload contains a reference cycle
            Exception: Whatever a handler raises, unchanged

        Example:
            >>> center.emit("test", "Nice")
        """
        with self._lock:
            subscriptions = self._events.get(name)
            snapshot = list(subscriptions) if subscriptions is not None else None

        if snapshot is None:
            logger.debug(
                f"No handlers registered for event: {name}",
                extra={"center": self.name, "event_name": name},
            )
            return

        self._count("events_emitted")
        logger.debug(
            f"Dispatching {name} to {len(snapshot)} handler(s)",
            extra={
                "center": self.name,
                "event_name": name,
                "handler_count": len(snapshot),
            },
        )

        with self._tracer.span(
            "eventcenter.emit",
            {
                ATTR_CENTER_NAME: self.name,
                ATTR_EVENT_NAME: name,
                ATTR_HANDLER_COUNT: len(snapshot),
            },
        ) as span:
            stopped = self._fire(name, snapshot, payload)
            if span:
                span.set_attribute(ATTR_DISPATCH_STOPPED, stopped)

    def _fire(self, name: str, subscriptions: list[Subscription], payload: Any) -> bool:
        """
        Invoke handlers in order until exhausted or stopped.

        Args:
            name: Event name
            subscriptions: Snapshot of the bucket
            payload: Emitted payload

        Returns:
            True if a handler stopped the round by returning False
        """
        for subscription in subscriptions:
            if self._config.clone_payloads:
                data = clone_payload(payload, event_name=name)
            else:
                data = payload
            message: EventMessage = {"data": data}

            if self._invoke(subscription, message) is False:
                self._count("dispatches_stopped")
                logger.debug(
                    f"Handler {subscription.handler_name} stopped dispatch of {name}",
                    extra={
                        "center": self.name,
                        "event_name": name,
                        "handler": subscription.handler_name,
                        "handler_id": subscription.handler_id,
                    },
                )
                return True
        return False

    def _invoke(self, subscription: Subscription, message: EventMessage) -> Any:
        """
        Call one handler inside a trace span.

        Exceptions are counted and re-raised unchanged.

        Args:
            subscription: Subscription to invoke
            message: Message for the handler

        Returns:
            Whatever the handler returned
        """
        with self._tracer.span(
            "eventcenter.handle",
            {
                ATTR_CENTER_NAME: self.name,
                ATTR_EVENT_NAME: subscription.name,
                ATTR_HANDLER_ID: subscription.handler_id,
                ATTR_HANDLER_NAME: subscription.handler_name,
            },
        ) as span:
            try:
                result = subscription.handler(message)
            except Exception as e:
                self._count("handler_errors")
                if span:
                    span.set_attribute(ATTR_HANDLER_SUCCESS, False)
                    span.set_attribute(ATTR_ERROR_TYPE, type(e).__name__)
                raise

            if span:
                span.set_attribute(ATTR_HANDLER_SUCCESS, True)
            self._count("handlers_invoked")
            return result

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def has_subscribers(self, name: str) -> bool:
        """Return True if at least one handler is subscribed to ``name``."""
        with self._lock:
            return bool(self._events.get(name))

    def get_subscriber_count(self, name: str | None = None) -> int:
        """
        Get the number of registered subscriptions.

        Args:
            name: If provided, count subscriptions for this event name only

        Returns:
            Number of registered subscriptions
        """
        with self._lock:
            if name is None:
                return sum(len(subscriptions) for subscriptions in self._events.values())
            return len(self._events.get(name, []))

    def event_names(self) -> list[str]:
        """
        Get every known event name, in first-subscription order.

        Names emptied by ``clear`` or a bare ``unsubscribe`` are included.
        """
        with self._lock:
            return list(self._events)

    def subscriptions(self, name: str) -> list[Subscription]:
        """
        Get the subscriptions of ``name`` in dispatch order.

        Returns a copy; mutating it does not affect the center.
        """
        with self._lock:
            return list(self._events.get(name, []))

    def get_stats(self) -> dict[str, int]:
        """
        Get statistics about event center operation.

        Returns:
            Dictionary with counts:
            - events_emitted: Emits that reached a known event name
            - handlers_invoked: Handler calls that returned normally
            - dispatches_stopped: Rounds ended early by a handler returning False
            - handler_errors: Handler calls that raised
        """
        with self._lock:
            return dict(self._stats)

    def _count(self, key: str) -> None:
        with self._lock:
            self._stats[key] += 1

    def __repr__(self) -> str:
        return f"EventCenter(name={self.name!r}, subscriptions={self.get_subscriber_count()})"


# =============================================================================
# Process-wide default center
# =============================================================================

global_center = EventCenter(EventCenterConfig(name="global"))


def get_default_center() -> EventCenter:
    """Get the process-wide default event center."""
    return global_center


def subscribe(name: str, handler: EventHandlerFunc) -> int:
    """
    Subscribe a handler on the default center.

    See ``EventCenter.subscribe``.
    """
    return global_center.subscribe(name, handler)


def unsubscribe(name: str, target: Any = None) -> bool:
    """
    Remove subscriptions from the default center.

    See ``EventCenter.unsubscribe``.
    """
    return global_center.unsubscribe(name, target)


def emit(name: str, payload: Any = None) -> None:
    """
    Emit an event on the default center.

    See ``EventCenter.emit``.
    """
    global_center.emit(name, payload)


__all__ = [
    "EventCenter",
    "EventCenterConfig",
    "emit",
    "get_default_center",
    "global_center",
    "subscribe",
    "unsubscribe",
]
