"""
Path element and path types.

A JsonPath is an immutable root-to-leaf sequence of elements. Each element
either names an object key or addresses an array position counted from the
start or from the end of the array.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, TypeAlias

from attrs import field, frozen, validators

if TYPE_CHECKING:
    from jsonpathops.navigation.navigator import ValueSlot
    from jsonpathops.settings import PathSettings

ROOT = "$"
DOT = "."
BEGIN_INDEX = "["
CLOSE_INDEX = "]"
BEGIN_REVERSE_INDEX = "#"
REVERSE_SIGN = "-"

_non_negative = [validators.instance_of(int), validators.ge(0)]


@frozen
class FromStart:
    """Zero-based array offset counted from the front."""

    n: int = field(validator=_non_negative)

    def __str__(self) -> str:
        return str(self.n)


@frozen
class FromEnd:
    """
    Array offset counted back from the virtual end marker.

    ``FromEnd(0)`` is the position one past the last element, ``FromEnd(1)``
    the last element.
    """

    n: int = field(validator=_non_negative)

    def __str__(self) -> str:
        if self.n == 0:
            return BEGIN_REVERSE_INDEX
        return f"{BEGIN_REVERSE_INDEX}{REVERSE_SIGN}{self.n}"

    @property
    def is_append_marker(self) -> bool:
        return self.n == 0


PathIndex: TypeAlias = FromStart | FromEnd


@frozen
class Field:
    """Object key element."""

    name: str = field(validator=validators.instance_of(str))

    def __str__(self) -> str:
        return f"{DOT}{self.name}"


@frozen
class Index:
    """Array position element."""

    index: PathIndex = field(validator=validators.instance_of((FromStart, FromEnd)))

    def __str__(self) -> str:
        return f"{BEGIN_INDEX}{self.index}{CLOSE_INDEX}"


PathElement: TypeAlias = Field | Index


@frozen
class JsonPath:
    """
    Parsed path expression.

    Constructed once, usually through ``JsonPath.parse``, and reused across
    any number of navigation and mutation calls. An empty path addresses the
    root value.
    """

    elements: tuple[PathElement, ...] = field(default=(), converter=tuple)

    @classmethod
    def parse(cls, text: str, settings: "PathSettings | None" = None) -> "JsonPath":
        """
        Parse a path expression.

        Params:
            text: Path text such as ``$.a.b[#-1]``
            settings: Optional parser settings

        Returns:
            The parsed JsonPath

        Raises:
            PathSyntaxError: If the text is not a valid path expression
        """
        from jsonpathops.parsing.parser import parse_path

        return parse_path(text, settings)

    def last(self) -> PathElement | None:
        """Return the final element, or None for the root path."""
        if not self.elements:
            return None
        return self.elements[-1]

    @property
    def is_root(self) -> bool:
        return not self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[PathElement]:
        return iter(self.elements)

    def __str__(self) -> str:
        return ROOT + "".join(str(element) for element in self.elements)

    # Delegating helpers so callers can stay on the path object

    def find(self, root: Any) -> Any:
        from jsonpathops.navigation.navigator import find

        return find(self, root)

    def find_mut(self, root: Any) -> "ValueSlot":
        from jsonpathops.navigation.navigator import find_mut

        return find_mut(self, root)

    def insert(self, root: Any, value: Any) -> Any:
        from jsonpathops.mutation.mutator import insert

        return insert(self, root, value)

    def replace(self, root: Any, value: Any) -> Any:
        from jsonpathops.mutation.mutator import replace

        return replace(self, root, value)

    def set(self, root: Any, value: Any) -> Any:
        from jsonpathops.mutation.mutator import set_value

        return set_value(self, root, value)

    def remove(self, root: Any) -> Any:
        from jsonpathops.mutation.mutator import remove

        return remove(self, root)
