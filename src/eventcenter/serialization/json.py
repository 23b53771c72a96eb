"""
JSON serialization and structural cloning for emitted payloads.

Every handler receives its own copy of the emitted payload, produced with
the same semantics as a JSON serialize/deserialize round trip: values
that JSON cannot represent are dropped from mappings, replaced by None in
sequences, and the result shares no mutable structure with the input.

Example:
    >>> from eventcenter.serialization import clone_payload
    >>> original = {"n": 1, "tags": ("a", "b"), "callback": print}
    >>> clone_payload(original)
    {'n': 1, 'tags': ['a', 'b']}
"""

import dataclasses
import json
import math
from datetime import date, datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from eventcenter.exceptions import PayloadCloneError
from eventcenter.predicates import is_array_sequence


class _Unserializable:
    """Marker for values a JSON round trip would drop."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<UNSERIALIZABLE>"


_UNSERIALIZABLE = _Unserializable()

_JSON_SCALARS = (str, int, float, bool, type(None))


class EventCenterJSONEncoder(json.JSONEncoder):
    """
    Custom JSON encoder that handles UUID, datetime and model objects.

    This encoder extends the standard JSONEncoder to support serialization of:
    - UUID objects: Converted to string representation
    - datetime and date objects: Converted to ISO 8601 format string
    - Enum members: Converted to their value
    - Pydantic models: Converted with ``model_dump(mode="json")``

    Example:
        >>> import json
        >>> from uuid import uuid4
        >>> data = {"id": uuid4()}
        >>> json_str = json.dumps(data, cls=EventCenterJSONEncoder)
    """

    def default(self, obj: Any) -> Any:
        """
        Convert non-serializable objects to JSON-serializable formats.

        Args:
            obj: Object to serialize

        Returns:
            JSON-serializable representation

        Raises:
            TypeError: If object type is not supported
        """
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")
        return super().default(obj)


def json_dumps(obj: Any) -> str:
    """
    Serialize object to JSON string with UUID, datetime and model support.

    Args:
        obj: Object to serialize

    Returns:
        JSON string representation
    """
    return json.dumps(obj, cls=EventCenterJSONEncoder)


def json_loads(s: str) -> Any:
    """
    Deserialize JSON string to Python object.

    UUID and datetime strings are NOT converted back to their original types.

    Args:
        s: JSON string to deserialize

    Returns:
        Python object representation
    """
    return json.loads(s)


def _json_key(key: Any) -> str | _Unserializable:
    """Convert a mapping key the way ``json.dumps`` would, or mark it dropped."""
    if isinstance(key, str):
        return key
    if isinstance(key, (bool, int, float)) or key is None:
        # True -> "true", None -> "null", 1.5 -> "1.5"
        return json_dumps(key)
    if isinstance(key, UUID):
        return str(key)
    return _UNSERIALIZABLE


def _prune(value: Any, active: set[int]) -> Any:
    """
    Reduce a value to what survives a JSON round trip.

    Args:
        value: Value to reduce
        active: Ids of containers on the current path (cycle detection)

    Returns:
        A JSON-compatible value, or the unserializable marker

    Raises:
        ValueError: If the value contains a reference cycle
    """
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, Enum):
        return _prune(value.value, active)
    if isinstance(value, _JSON_SCALARS):
        return value
    if isinstance(value, (UUID, datetime, date)):
        return value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}

    if isinstance(value, dict):
        container_id = id(value)
        if container_id in active:
            raise ValueError("Circular reference detected")
        active.add(container_id)
        try:
            pruned: dict[str, Any] = {}
            for key, item in value.items():
                json_key = _json_key(key)
                if json_key is _UNSERIALIZABLE:
                    continue
                pruned_item = _prune(item, active)
                if pruned_item is not _UNSERIALIZABLE:
                    pruned[json_key] = pruned_item
            return pruned
        finally:
            active.discard(container_id)

    if is_array_sequence(value):
        container_id = id(value)
        if container_id in active:
            raise ValueError("Circular reference detected")
        active.add(container_id)
        try:
            items = [_prune(item, active) for item in value]
            return [None if item is _UNSERIALIZABLE else item for item in items]
        finally:
            active.discard(container_id)

    return _UNSERIALIZABLE


def clone_payload(value: Any, *, event_name: str | None = None) -> Any:
    """
    Produce an independent structural copy of a payload.

    The copy follows JSON round-trip semantics:
    - None stays None
    - callables, sets and arbitrary objects are dropped from mappings and
      become None inside lists; an unserializable root becomes None
    - tuples become lists and non-finite floats become None
    - UUIDs, dates and datetimes become strings
    - Pydantic models and dataclasses become plain dicts

    Args:
        value: Payload to copy
        event_name: Event being emitted, used in error messages

    Returns:
        JSON-compatible copy of the payload

    Raises:
        PayloadCloneError: If the payload contains a reference cycle
    """
    if value is None:
        return None
    try:
        pruned = _prune(value, set())
    except (ValueError, RecursionError) as e:
        raise PayloadCloneError(event_name, str(e)) from e
    if pruned is _UNSERIALIZABLE:
        return None
    return json_loads(json_dumps(pruned))


__all__ = [
    "EventCenterJSONEncoder",
    "clone_payload",
    "json_dumps",
    "json_loads",
]
