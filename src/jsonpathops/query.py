"""
One-call string queries against value trees.

These helpers parse the query and resolve it in a single step. Code issuing
many calls with the same path should parse it once with ``JsonPath.parse``.
"""

from typing import Any

from jsonpathops.navigation.navigator import ValueSlot, find, find_mut
from jsonpathops.parsing.parser import parse_path
from jsonpathops.settings import PathSettings


def path(value: Any, query: str, settings: PathSettings | None = None) -> Any:
    """
    Resolve a path query against a value.

    Params:
        value: Root of the value tree
        query: Path text such as ``$.a[#-1]``
        settings: Optional parser settings

    Returns:
        The located value

    Raises:
        PathSyntaxError: If the query is malformed
        NotApplicableError: If the query does not resolve
    """
    return find(parse_path(query, settings), value)


def path_mut(value: Any, query: str, settings: PathSettings | None = None) -> ValueSlot:
    """Resolve a path query to a writable slot."""
    return find_mut(parse_path(query, settings), value)
