"""
Canonical protocol definitions for the eventcenter library.

Handlers are plain callables that receive one message dict and may return
``False`` to stop the remaining handlers of the same dispatch round.

Protocols:
- EventMessage: The ``{"data": ...}`` mapping delivered to each handler
- EventHandler: Callable handler protocol
- EventHandlerFunc: Type alias for function-based handlers

Example:
    >>> from eventcenter.protocols import EventMessage
    >>>
    >>> def on_ping(message: EventMessage) -> bool | None:
    ...     if message["data"] is None:
    ...         return False
    ...     print(message["data"])
"""

from collections.abc import Callable
from typing import Any, Protocol, TypedDict, runtime_checkable


class EventMessage(TypedDict):
    """
    Message delivered to a handler.

    Attributes:
        data: Structural copy of the emitted payload (None when absent)
    """

    data: Any


@runtime_checkable
class EventHandler(Protocol):
    """
    Protocol for event handlers.

    Any callable accepting one ``EventMessage`` satisfies it: functions,
    lambdas, bound methods, and objects defining ``__call__``.

    Example:
        >>> class Counter:
        ...     def __init__(self) -> None:
        ...         self.calls = 0
        ...
        ...     def __call__(self, message: EventMessage) -> None:
        ...         self.calls += 1
    """

    def __call__(self, message: EventMessage) -> bool | None:
        """
        Handle an emitted event.

        Args:
            message: Mapping with the cloned payload under ``"data"``

        Returns:
            False to stop dispatch to later handlers, anything else to continue
        """
        ...


# Type alias for simple function-based handlers
EventHandlerFunc = Callable[[EventMessage], bool | None]


__all__ = [
    "EventHandler",
    "EventHandlerFunc",
    "EventMessage",
]
