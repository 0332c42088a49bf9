"""
Read and write navigation over value trees.

Elements are resolved left to right against the current value. A missing key,
an out-of-range position or a type mismatch ends the walk with "not found";
navigation never raises for the shape of the tree.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from jsonpathops.core.path import Field, FromStart, JsonPath, PathElement
from jsonpathops.core.types import (
    ArrayIndex,
    ObjectKey,
    ValueKind,
    is_mutable_container,
    value_kind,
)
from jsonpathops.exceptions import NotApplicableError

_MISSING = object()


@dataclass
class ValueSlot:
    """
    Mutable view of a resolved location.

    Holds the container and the concrete key or position of the located
    value. The root slot has no container and cannot be overwritten in place.
    Only one slot into a subtree should be used for writing at a time; a
    slot is invalidated by any structural change of its container.
    """

    parent: Any
    key: ArrayIndex | ObjectKey | None
    root: Any

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def get(self) -> Any:
        """Return the value at this location."""
        if self.parent is None:
            return self.root
        return self.parent[self.key]

    def set(self, value: Any) -> None:
        """
        Overwrite the value at this location.

        Raises:
            NotApplicableError: For the root slot or an immutable container
        """
        if self.parent is None or not is_mutable_container(self.parent):
            raise NotApplicableError()
        self.parent[self.key] = value


def locate(current: Any, element: PathElement) -> ArrayIndex | ObjectKey | None:
    """
    Resolve one element against a value.

    Params:
        current: The value the element is applied to
        element: A Field or Index element

    Returns:
        The object key or concrete array position of an existing child, or
        None when the element does not resolve
    """
    kind = value_kind(current)

    if isinstance(element, Field):
        if kind is ValueKind.OBJECT and element.name in current:
            return element.name
        return None

    if kind is not ValueKind.ARRAY:
        return None

    length = len(current)
    index = element.index
    if isinstance(index, FromStart):
        return index.n if index.n < length else None
    # FromEnd(0) sits one past the last element and never resolves here
    if index.n == 0 or index.n > length:
        return None
    return length - index.n


def walk(elements: Sequence[PathElement], root: Any, stop: int) -> Any:
    """
    Resolve ``elements[:stop]`` against root without copying the elements.

    Returns:
        The resolved value, or the module's missing sentinel
    """
    current = root
    for position in range(stop):
        key = locate(current, elements[position])
        if key is None:
            return _MISSING
        current = current[key]
    return current


def find(path: JsonPath, root: Any) -> Any:
    """
    Resolve a path to the value it addresses.

    Params:
        path: Parsed path
        root: Root of the value tree

    Returns:
        The located value (the root itself for the empty path)

    Raises:
        NotApplicableError: If the path does not resolve
    """
    value = walk(path.elements, root, len(path.elements))
    if value is _MISSING:
        raise NotApplicableError()
    return value


def find_or(path: JsonPath, root: Any, default: Any = None) -> Any:
    """Resolve a path, returning default when it does not resolve."""
    value = walk(path.elements, root, len(path.elements))
    return default if value is _MISSING else value


def exists(path: JsonPath, root: Any) -> bool:
    """Check if a path resolves to an existing value."""
    return walk(path.elements, root, len(path.elements)) is not _MISSING


def find_parent(path: JsonPath, root: Any) -> Any:
    """
    Resolve every element but the last.

    Returns:
        The container the last element applies to (root for a one-element
        path)

    Raises:
        NotApplicableError: If the path is empty or its parent does not
            resolve
    """
    if not path.elements:
        raise NotApplicableError()
    parent = walk(path.elements, root, len(path.elements) - 1)
    if parent is _MISSING:
        raise NotApplicableError()
    return parent


def find_mut(path: JsonPath, root: Any) -> ValueSlot:
    """
    Resolve a path to a writable slot.

    Params:
        path: Parsed path
        root: Root of the value tree

    Returns:
        ValueSlot for the located value

    Raises:
        NotApplicableError: If the path does not resolve
    """
    last = path.last()
    if last is None:
        return ValueSlot(parent=None, key=None, root=root)

    parent = find_parent(path, root)
    key = locate(parent, last)
    if key is None:
        raise NotApplicableError()
    return ValueSlot(parent=parent, key=key, root=root)
