"""
Core jsonpathops components.

This package provides the value tree classification and the path data types
shared by the parser, navigator, mutator and comparator.
"""

from jsonpathops.core.path import (
    Field,
    FromEnd,
    FromStart,
    Index,
    JsonPath,
    PathElement,
    PathIndex,
)
from jsonpathops.core.types import (
    JsonValue,
    ValueKind,
    is_mutable_container,
    value_kind,
)

__all__ = [
    "Field",
    "FromEnd",
    "FromStart",
    "Index",
    "JsonPath",
    "PathElement",
    "PathIndex",
    "JsonValue",
    "ValueKind",
    "is_mutable_container",
    "value_kind",
]
