"""
Serialization utilities for eventcenter.

This module provides the structural clone applied to every emitted payload
and the JSON helpers it is built on.

Example:
    >>> from eventcenter.serialization import clone_payload
    >>> payload = {"n": 1}
    >>> copy = clone_payload(payload)
    >>> copy == payload and copy is not payload
    True
"""

from eventcenter.serialization.json import (
    EventCenterJSONEncoder,
    clone_payload,
    json_dumps,
    json_loads,
)

__all__ = [
    "EventCenterJSONEncoder",
    "clone_payload",
    "json_dumps",
    "json_loads",
]
