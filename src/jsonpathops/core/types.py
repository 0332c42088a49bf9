"""
Core type definitions for JSON-like value trees.

A value tree is the plain Python structure produced by ``json.loads``. This
module names its variants and classifies values into them so every algorithm
dispatches over one exhaustive set of kinds.
"""

from collections.abc import Mapping, MutableMapping, MutableSequence
from enum import Enum
from typing import Any, TypeAlias

JsonValue: TypeAlias = None | bool | int | float | str | list | tuple | dict

ArrayIndex: TypeAlias = int

ObjectKey: TypeAlias = str


class ValueKind(Enum):
    """Variant of a value tree node."""

    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        """Check if this kind holds child values."""
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


def value_kind(value: Any) -> ValueKind:
    """
    Classify a value tree node.

    ``bool`` is checked before numbers since it is a subclass of ``int``.

    Params:
        value: Any node of a value tree

    Returns:
        The ValueKind of the node

    Raises:
        TypeError: If the value is not part of the JSON data model
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def is_mutable_container(value: Any) -> bool:
    """Check if a container can be modified in place."""
    return isinstance(value, (MutableSequence, MutableMapping))
