"""
jsonpathops - Path navigation, mutation and ordering for JSON value trees

jsonpathops parses a compact JSONPath subset (``$.a.b[0]``, ``$[#-1]``),
resolves and mutates the addressed locations of ``json.loads``-style trees,
and orders values of mixed kinds.
"""

from importlib.metadata import version

from jsonpathops.comparison import (
    Ordering,
    OrderedValue,
    compare_values,
    partial_cmp,
    sort_key,
    values_equal,
)
from jsonpathops.core import (
    Field,
    FromEnd,
    FromStart,
    Index,
    JsonPath,
    ValueKind,
    value_kind,
)
from jsonpathops.exceptions import (
    IncomparableValuesError,
    JsonPathError,
    NotApplicableError,
    PathSyntaxError,
)
from jsonpathops.mutation import insert, remove, replace, set_value
from jsonpathops.navigation import ValueSlot, exists, find, find_mut, find_or
from jsonpathops.parsing import PathParser, parse_path
from jsonpathops.settings import PathSettings

__version__ = version("jsonpathops")

__all__ = [
    "__version__",
    "JsonPath",
    "Field",
    "Index",
    "FromStart",
    "FromEnd",
    "ValueKind",
    "value_kind",
    "PathParser",
    "PathSettings",
    "parse_path",
    "ValueSlot",
    "find",
    "find_mut",
    "find_or",
    "exists",
    "insert",
    "replace",
    "set_value",
    "remove",
    "Ordering",
    "OrderedValue",
    "partial_cmp",
    "compare_values",
    "sort_key",
    "values_equal",
    "JsonPathError",
    "PathSyntaxError",
    "NotApplicableError",
    "IncomparableValuesError",
]
