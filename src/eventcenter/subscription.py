"""
Subscription records and unsubscribe targets.

A ``Subscription`` pairs a handler with the id assigned to it at
registration. The record, not the handler, is the unit of storage, so the
same function can be registered several times and each registration keeps
its own id.

Unsubscribe targets make the removal mode explicit:

    >>> center.unsubscribe("order.created", ById(7))
    >>> center.unsubscribe("order.created", ByHandler(on_created))
    >>> center.unsubscribe("order.created", ALL)
"""

import types
from dataclasses import dataclass, field
from typing import Any, Final

from eventcenter.predicates import is_callable, is_number
from eventcenter.protocols import EventHandlerFunc


def get_handler_name(handler: Any) -> str:
    """
    Get a descriptive name for a handler for logging and debugging.

    Args:
        handler: Any handler object (function, lambda, bound method, callable instance)

    Returns:
        String name for the handler
    """
    if isinstance(handler, (types.FunctionType, types.MethodType, types.BuiltinFunctionType)):
        return str(getattr(handler, "__qualname__", handler.__name__))
    elif hasattr(handler, "__class__") and hasattr(handler, "__call__"):
        return str(handler.__class__.__name__)
    else:
        return repr(handler)


@dataclass(frozen=True)
class Subscription:
    """
    One registration of a handler under an event name.

    Attributes:
        handler_id: Id assigned at registration, unique within its center
        name: Event name the handler is registered under
        handler: The registered callable
    """

    handler_id: int
    name: str
    handler: EventHandlerFunc = field(compare=False)

    @property
    def handler_name(self) -> str:
        """Get the handler's descriptive name."""
        return get_handler_name(self.handler)

    def matches_handler(self, handler: Any) -> bool:
        """
        Check whether this record holds ``handler``.

        Handlers are compared by identity. Bound methods are recreated on
        every attribute access, so two bound methods match when they wrap
        the same function on the same instance.
        """
        if self.handler is handler:
            return True
        own = self.handler
        if isinstance(own, types.MethodType) and isinstance(handler, types.MethodType):
            return own.__self__ is handler.__self__ and own.__func__ is handler.__func__
        return False

    def __repr__(self) -> str:
        return f"Subscription({self.name!r}, id={self.handler_id}, handler={self.handler_name})"


@dataclass(frozen=True)
class ById:
    """Unsubscribe target selecting the subscription with a given id."""

    handler_id: int


@dataclass(frozen=True)
class ByHandler:
    """Unsubscribe target selecting the first subscription of a handler."""

    handler: Any


class _AllSubscriptions:
    """Sentinel target selecting every subscription of an event name."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "ALL"


ALL: Final = _AllSubscriptions()

UnsubscribeTarget = ById | ByHandler | _AllSubscriptions


def resolve_target(value: Any) -> UnsubscribeTarget | None:
    """
    Convert a raw unsubscribe argument into an explicit target.

    Callables select by handler identity, other falsy values select every
    subscription and numbers select by id. Explicit targets pass through.
    Callables are checked first so a handler that happens to be falsy
    (e.g. defines ``__len__`` returning 0) never clears the whole name.

    Args:
        value: Handler, handler id, explicit target, or None

    Returns:
        The resolved target, or None if the value is not a supported target
    """
    if isinstance(value, (ById, ByHandler, _AllSubscriptions)):
        return value
    if is_callable(value):
        return ByHandler(value)
    if not value:
        return ALL
    if is_number(value):
        return ById(value)
    return None


__all__ = [
    "ALL",
    "ById",
    "ByHandler",
    "Subscription",
    "UnsubscribeTarget",
    "get_handler_name",
    "resolve_target",
]
