r"""Composite cache keys built from intrinsic attribute tuples.

A key is a structured tuple ``(record_type, attributes)`` rather than a
joined string, so attribute values that contain a separator cannot alias a
different split of the same characters::

    make_key(Part, ("A_B", "C")) != make_key(Part, ("A", "B_C"))

`describe_key` produces the underscore-joined label used in log lines. It is
a display helper only and never indexes the cache.
"""

from __future__ import annotations

from typing import Any, Hashable, Iterable, Tuple

from .utils import InvalidAttributes, get_type_name

__all__ = ["FlyweightKey", "make_key", "describe_key", "LABEL_SEPARATOR"]

FlyweightKey = Tuple[type, Tuple[Hashable, ...]]

LABEL_SEPARATOR = "_"


def _as_tuple(attributes: Iterable[Any]) -> Tuple[Any, ...]:
    if isinstance(attributes, (str, bytes)):
        # a lone string is one attribute, not a sequence of characters
        return (attributes,)
    return tuple(attributes)


def make_key(record_type: type, attributes: Iterable[Any]) -> FlyweightKey:
    """Return the cache key for `attributes` under `record_type`.

    Raises:
        InvalidAttributes: if any attribute value is unhashable.
    """
    values = _as_tuple(attributes)
    for position, value in enumerate(values):
        try:
            hash(value)
        except TypeError as e:
            raise InvalidAttributes(
                f"Attribute at position {position} is not hashable: {value!r}",
                ["Pass immutable values such as str, int or Enum members"],
                {
                    "record_type": get_type_name(record_type),
                    "position": position,
                    "value_type": type(value).__name__,
                },
            ) from e
    return record_type, values


def describe_key(key: FlyweightKey) -> str:
    """Return a human-readable label for `key`, e.g. ``Model S_Tesla_Electric``."""
    _, values = key
    return LABEL_SEPARATOR.join(str(getattr(v, "value", v)) for v in values)
