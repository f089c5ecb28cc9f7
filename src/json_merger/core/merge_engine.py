"""Deep-merge engine for JSON documents.

``deep_merge`` layers one parsed JSON value onto another:

- objects merge key by key, recursing into nested objects,
- arrays under the same key are concatenated (base first, no dedup),
- an array replaces any non-array value under the same key,
- scalars and nulls from the incoming side always win.

The engine never mutates its arguments. Containers it touches are copied;
untouched subtrees are shared with the inputs.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeAlias, TypeGuard, Union

JsonValue: TypeAlias = Union[
    None, bool, int, float, str, list["JsonValue"], dict[str, "JsonValue"]
]

_EMPTY: Any = object()


def is_json_object(value: Any) -> TypeGuard[dict[str, Any]]:
    """Return True if value is a JSON object (a dict, never an array)."""
    return isinstance(value, dict)


def _shallow_copy(value: JsonValue) -> JsonValue:
    if isinstance(value, dict):
        return dict(value)
    if isinstance(value, list):
        return list(value)
    return value


def deep_merge(base: JsonValue, incoming: JsonValue) -> JsonValue:
    """Merge ``incoming`` onto ``base`` and return a new value.

    When either side is not an object the result is a shallow copy of
    ``base`` and ``incoming`` is discarded. This also applies when recursing:
    ``{"a": 5}`` merged with ``{"a": {"b": 1}}`` keeps ``5``, and a ``null``
    base stays ``null``. Scalar and array bases are kept as they are rather
    than being spread into an object.

    Args:
        base: Value being layered onto.
        incoming: Value layered on top; wins on scalar collisions.

    Returns:
        The merged value.
    """
    if not (is_json_object(base) and is_json_object(incoming)):
        return _shallow_copy(base)

    result = dict(base)
    for key, value in incoming.items():
        if key not in result:
            result[key] = value
        elif is_json_object(value):
            result[key] = deep_merge(result[key], value)
        elif isinstance(value, list):
            current = result[key]
            if isinstance(current, list):
                result[key] = [*current, *value]
            else:
                result[key] = value
        else:
            result[key] = value

    return result


def fold(values: Iterable[JsonValue], initial: Any = _EMPTY) -> JsonValue:
    """Left-fold ``deep_merge`` over values, starting from ``{}`` by default.

    Any JSON value, ``None`` included, may be passed as ``initial``.
    """
    accumulator: JsonValue = {} if initial is _EMPTY else initial
    for value in values:
        accumulator = deep_merge(accumulator, value)
    return accumulator
