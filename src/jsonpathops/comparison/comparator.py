"""
Cross-type ordering of value tree nodes.

Rules, first match wins:

1. Structurally equal values are EQUAL (this includes ``None`` vs ``None``).
2. Anything else compared with ``None`` is incomparable.
3. Values of the same scalar kind use their natural order.
4. Bool against Number compares the bool as ``0.0``/``1.0``.
5. Number against String parses the string as a float; when it does not
   parse, the Number is the smaller one.
6. Otherwise kinds are ranked Bool < Number < String < Array/Object.
7. Arrays and Objects are ordered by their canonical serialized form: first
   its length, then its text.
"""

import functools
import json
from collections.abc import Mapping
from enum import Enum
from typing import Any

from jsonpathops.core.types import ValueKind, value_kind
from jsonpathops.exceptions import IncomparableValuesError


class Ordering(Enum):
    """Result of a successful comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1

    def reverse(self) -> "Ordering":
        return Ordering(-self.value)


_KIND_RANK = {
    ValueKind.BOOL: 0,
    ValueKind.NUMBER: 1,
    ValueKind.STRING: 2,
    ValueKind.ARRAY: 3,
    ValueKind.OBJECT: 3,
}


def values_equal(a: Any, b: Any) -> bool:
    """
    Structural equality that keeps kinds apart.

    Unlike ``==``, ``True`` does not equal ``1`` and ``[0]`` does not equal
    ``[False]``. Object key order is not significant.
    """
    kind = value_kind(a)
    if kind is not value_kind(b):
        return False

    if kind is ValueKind.ARRAY:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if kind is ValueKind.OBJECT:
        return a.keys() == b.keys() and all(values_equal(a[key], b[key]) for key in a)
    return a == b


def _ordering(a: Any, b: Any) -> Ordering | None:
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    if a == b:
        return Ordering.EQUAL
    # NaN
    return None


def _parse_float(text: str) -> float | None:
    """Parse a string as a float, rejecting padding and digit separators."""
    if text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _to_builtin(value: Any) -> Any:
    if isinstance(value, Mapping):
        return dict(value)
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def canonical_text(value: Any) -> str:
    """Compact JSON text with sorted keys."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), default=_to_builtin)


def _compare_containers(a: Any, b: Any) -> Ordering:
    text_a = canonical_text(a)
    text_b = canonical_text(b)
    return _ordering((len(text_a), text_a), (len(text_b), text_b))


def _compare_number_string(number: Any, text: str) -> Ordering | None:
    parsed = _parse_float(text)
    if parsed is None:
        return Ordering.LESS
    return _ordering(number, parsed)


def partial_cmp(a: Any, b: Any) -> Ordering | None:
    """
    Compare two values of any kind.

    Params:
        a: Left value
        b: Right value

    Returns:
        The Ordering of a relative to b, or None when the pair has no order
        (a ``None`` against a different value, or a NaN)
    """
    if values_equal(a, b):
        return Ordering.EQUAL

    kind_a = value_kind(a)
    kind_b = value_kind(b)

    if kind_a is ValueKind.NULL or kind_b is ValueKind.NULL:
        return None

    if kind_a.is_container and kind_b.is_container:
        return _compare_containers(a, b)

    if kind_a is kind_b:
        # int/float comparisons are exact, so numbers need no conversion
        return _ordering(a, b)

    if kind_a is ValueKind.BOOL and kind_b is ValueKind.NUMBER:
        return _ordering(float(a), b)
    if kind_a is ValueKind.NUMBER and kind_b is ValueKind.BOOL:
        return _ordering(a, float(b))

    if kind_a is ValueKind.NUMBER and kind_b is ValueKind.STRING:
        return _compare_number_string(a, b)
    if kind_a is ValueKind.STRING and kind_b is ValueKind.NUMBER:
        ordering = _compare_number_string(b, a)
        return ordering.reverse() if ordering is not None else None

    return _ordering(_KIND_RANK[kind_a], _KIND_RANK[kind_b])


def compare_values(a: Any, b: Any) -> int:
    """
    Three-way comparison for ``functools.cmp_to_key``.

    Returns:
        -1, 0 or 1

    Raises:
        IncomparableValuesError: If partial_cmp finds no order
    """
    ordering = partial_cmp(a, b)
    if ordering is None:
        raise IncomparableValuesError(value_kind(a).value, value_kind(b).value)
    return ordering.value


sort_key = functools.cmp_to_key(compare_values)


class OrderedValue:
    """
    Wrapper giving a value tree node rich comparisons.

    Ordering operators follow partial_cmp; an incomparable pair answers False
    to all of them, as NaN does. Equality is structural (values_equal), so
    ``0`` and ``False`` are neither smaller nor greater than each other but
    are not equal either.

    Usable as a key for ``sorted``, ``bisect`` and ``heapq``.
    """

    __slots__ = ("value",)

    def __init__(self, value: Any):
        self.value = value

    def __repr__(self) -> str:
        return f"OrderedValue({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedValue):
            return NotImplemented
        return values_equal(self.value, other.value)

    __hash__ = None

    def __lt__(self, other: "OrderedValue") -> bool:
        return partial_cmp(self.value, other.value) is Ordering.LESS

    def __le__(self, other: "OrderedValue") -> bool:
        return partial_cmp(self.value, other.value) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: "OrderedValue") -> bool:
        return partial_cmp(self.value, other.value) is Ordering.GREATER

    def __ge__(self, other: "OrderedValue") -> bool:
        return partial_cmp(self.value, other.value) in (Ordering.GREATER, Ordering.EQUAL)
