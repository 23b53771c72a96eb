"""Library exceptions for the eventcenter package."""


class EventCenterError(Exception):
    """Base exception for eventcenter library."""

    pass


class PayloadCloneError(EventCenterError):
    """Raised when an emitted payload cannot be structurally cloned."""

    def __init__(self, event_name: str | None, message: str) -> None:
        self.event_name = event_name
        target = f" for event '{event_name}'" if event_name else ""
        super().__init__(f"Cannot clone payload{target}: {message}")


__all__ = [
    "EventCenterError",
    "PayloadCloneError",
]
