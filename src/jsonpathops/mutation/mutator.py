"""
Insert, replace, set and remove over value trees.

Each operation splits the path into its parent part and its last element,
resolves the parent container, then checks the operation's precondition
before touching the tree. A failed precondition leaves the tree unmodified
and raises NotApplicableError. Successful operations mutate the tree in place
and return its root.

| Operation | Array + FromStart(i) | Array + FromEnd(i) | Object + Field(key) |
|-----------|----------------------|--------------------|---------------------|
| insert    | i <= len             | i <= len           | key absent          |
| set       | i < len              | 1 <= i <= len      | always              |
| remove    | i < len              | 1 <= i <= len      | key present         |

replace resolves the full path and overwrites only an existing location.
"""

import logging
from typing import Any

from jsonpathops.core.path import Field, FromStart, Index, JsonPath
from jsonpathops.core.types import ValueKind, is_mutable_container, value_kind
from jsonpathops.exceptions import NotApplicableError
from jsonpathops.navigation.navigator import find_mut, find_parent, locate

logger = logging.getLogger(__name__)


def _not_applicable(operation: str, path: JsonPath, reason: str) -> NotApplicableError:
    logger.debug("%s at %s not applicable: %s", operation, path, reason)
    return NotApplicableError()


def _writable_parent(operation: str, path: JsonPath, root: Any) -> tuple[Any, ValueKind]:
    """Resolve the parent container and check it can be modified."""
    try:
        parent = find_parent(path, root)
    except NotApplicableError:
        raise _not_applicable(operation, path, "parent does not resolve") from None

    kind = value_kind(parent)
    if not kind.is_container:
        raise _not_applicable(operation, path, f"parent is {kind.value}")
    if not is_mutable_container(parent):
        raise _not_applicable(operation, path, "parent is immutable")
    return parent, kind


def insert(path: JsonPath, root: Any, value: Any) -> Any:
    """
    Insert a value without overwriting anything.

    Array positions shift right; ``FromEnd(0)`` appends. Object keys must not
    exist yet.

    Params:
        path: Location of the new value
        root: Root of the value tree, modified in place
        value: The value to insert

    Returns:
        The root of the modified tree

    Raises:
        NotApplicableError: If the parent does not resolve, the last element
            does not match the parent's kind, the position is out of range or
            the key already exists
    """
    parent, kind = _writable_parent("insert", path, root)
    last = path.last()

    if isinstance(last, Index) and kind is ValueKind.ARRAY:
        length = len(parent)
        index = last.index
        if index.n > length:
            raise _not_applicable("insert", path, f"index {index} beyond length {length}")
        position = index.n if isinstance(index, FromStart) else length - index.n
        parent.insert(position, value)
        return root

    if isinstance(last, Field) and kind is ValueKind.OBJECT:
        if last.name in parent:
            raise _not_applicable("insert", path, f"key '{last.name}' exists")
        parent[last.name] = value
        return root

    raise _not_applicable("insert", path, f"{type(last).__name__} against {kind.value}")


def replace(path: JsonPath, root: Any, value: Any) -> Any:
    """
    Overwrite the value an existing path resolves to.

    Never creates a key or position. Replacing the root path returns the new
    value as the root, since the old root cannot be overwritten in place.

    Params:
        path: Location of the value to overwrite
        root: Root of the value tree, modified in place
        value: The replacement value

    Returns:
        The root of the modified tree

    Raises:
        NotApplicableError: If the path does not resolve or its container is
            immutable
    """
    try:
        slot = find_mut(path, root)
    except NotApplicableError:
        raise _not_applicable("replace", path, "path does not resolve") from None

    if slot.is_root:
        return value
    if not is_mutable_container(slot.parent):
        raise _not_applicable("replace", path, "parent is immutable")
    slot.set(value)
    return root


def set_value(path: JsonPath, root: Any, value: Any) -> Any:
    """
    Overwrite an existing array element, or insert or overwrite an object key.

    ``FromEnd(0)`` never addresses an element, so it is not applicable here.

    Params:
        path: Location of the value
        root: Root of the value tree, modified in place
        value: The value to store

    Returns:
        The root of the modified tree

    Raises:
        NotApplicableError: If the parent does not resolve, the element kind
            does not match the parent or the array position does not exist
    """
    parent, kind = _writable_parent("set", path, root)
    last = path.last()

    if isinstance(last, Index) and kind is ValueKind.ARRAY:
        position = locate(parent, last)
        if position is None:
            raise _not_applicable("set", path, f"no element at {last.index}")
        parent[position] = value
        return root

    if isinstance(last, Field) and kind is ValueKind.OBJECT:
        parent[last.name] = value
        return root

    raise _not_applicable("set", path, f"{type(last).__name__} against {kind.value}")


def remove(path: JsonPath, root: Any) -> Any:
    """
    Remove an existing array element or object key.

    Params:
        path: Location of the value to remove
        root: Root of the value tree, modified in place

    Returns:
        The root of the modified tree

    Raises:
        NotApplicableError: If nothing exists at the path or the parent is
            immutable
    """
    parent, kind = _writable_parent("remove", path, root)
    last = path.last()

    key = locate(parent, last)
    if key is None:
        raise _not_applicable("remove", path, f"nothing at {last} in {kind.value}")
    del parent[key]
    return root
