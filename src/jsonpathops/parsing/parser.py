"""
Parser for path expressions.

Grammar::

    path    := '$' element* | digit+
    element := '.' field | '[' index ']'
    field   := alpha+
    index   := ('#' '-'?)? digit*

A bare digit run is shorthand for a single root-level array index. Digit runs
that are empty or cannot be converted become ``0`` unless strict settings are
in effect.
"""

import logging
from dataclasses import dataclass

from jsonpathops.core.path import (
    BEGIN_INDEX,
    BEGIN_REVERSE_INDEX,
    CLOSE_INDEX,
    DOT,
    REVERSE_SIGN,
    ROOT,
    Field,
    FromEnd,
    FromStart,
    Index,
    JsonPath,
    PathElement,
)
from jsonpathops.exceptions import PathSyntaxError
from jsonpathops.settings import DEFAULT_SETTINGS, PathSettings

logger = logging.getLogger(__name__)

EXPECTED_START = "expected $ or numeric"
EXPECTED_CLOSE = "expected ]"
EXPECTED_ELEMENT = "expected . or ["
EMPTY_FIELD = "empty field name"
BAD_DIGITS = "expected digits"
TRAILING_TEXT = "unexpected text after index"


@dataclass
class _Cursor:
    """Read position over the path text for a single parse call."""

    text: str
    position: int = 0

    def peek(self) -> str | None:
        if self.position < len(self.text):
            return self.text[self.position]
        return None

    def next(self) -> str | None:
        char = self.peek()
        if char is not None:
            self.position += 1
        return char

    def next_if_eq(self, expected: str) -> bool:
        if self.peek() == expected:
            self.position += 1
            return True
        return False

    def take_while(self, predicate) -> str:
        start = self.position
        while self.position < len(self.text) and predicate(self.text[self.position]):
            self.position += 1
        return self.text[start : self.position]


class PathParser:
    """Parser turning path text into a JsonPath."""

    def __init__(self, settings: PathSettings | None = None):
        """
        Initialize the parser.

        Params:
            settings: Parser settings, the lenient defaults when omitted
        """
        self.settings = settings or DEFAULT_SETTINGS

    def parse(self, text: str) -> JsonPath:
        """
        Parse a path expression.

        Params:
            text: The path text

        Returns:
            JsonPath with the parsed elements in root-to-leaf order

        Raises:
            PathSyntaxError: If the text does not follow the grammar
        """
        cursor = _Cursor(text)
        first = cursor.peek()

        if first == ROOT:
            cursor.next()
        elif first is not None and first.isnumeric():
            return self._parse_shorthand(cursor)
        else:
            self._fail(cursor, EXPECTED_START)

        elements: list[PathElement] = []
        while True:
            char = cursor.next()
            if char is None:
                return JsonPath(elements)
            if char == DOT:
                elements.append(self._parse_field(cursor))
            elif char == BEGIN_INDEX:
                elements.append(self._parse_index(cursor))
            else:
                cursor.position -= 1
                self._fail(cursor, EXPECTED_ELEMENT)

    def _parse_shorthand(self, cursor: _Cursor) -> JsonPath:
        """Parse the bare digit form, e.g. ``3`` for ``$[3]``."""
        digits_at = cursor.position
        digits = cursor.take_while(str.isnumeric)
        n = self._to_number(cursor, digits, digits_at)
        if self.settings.strict_indices and cursor.peek() is not None:
            self._fail(cursor, TRAILING_TEXT)
        return JsonPath([Index(FromStart(n))])

    def _parse_field(self, cursor: _Cursor) -> Field:
        name_at = cursor.position
        name = cursor.take_while(str.isalpha)
        if not name and self.settings.strict_fields:
            cursor.position = name_at
            self._fail(cursor, EMPTY_FIELD)
        return Field(name)

    def _parse_index(self, cursor: _Cursor) -> Index:
        from_end = cursor.next_if_eq(BEGIN_REVERSE_INDEX)
        signed = from_end and cursor.next_if_eq(REVERSE_SIGN)

        digits_at = cursor.position
        digits = cursor.take_while(str.isnumeric)
        if not cursor.next_if_eq(CLOSE_INDEX):
            self._fail(cursor, EXPECTED_CLOSE)

        if from_end and not signed and not digits:
            # "[#]" is the append marker
            return Index(FromEnd(0))

        n = self._to_number(cursor, digits, digits_at)
        if from_end:
            return Index(FromEnd(n))
        return Index(FromStart(n))

    def _to_number(self, cursor: _Cursor, digits: str, digits_at: int) -> int:
        """Convert a digit run, defaulting to 0 unless indices are strict."""
        try:
            return int(digits)
        except ValueError:
            if self.settings.strict_indices:
                cursor.position = digits_at
                self._fail(cursor, BAD_DIGITS)
            return 0

    def _fail(self, cursor: _Cursor, reason: str):
        logger.debug("Rejected path %r at %d: %s", cursor.text, cursor.position, reason)
        raise PathSyntaxError(cursor.text, cursor.position, reason)


def parse_path(text: str, settings: PathSettings | None = None) -> JsonPath:
    """
    Convenience function to parse a path string.

    Params:
        text: The path text to parse
        settings: Optional parser settings

    Returns:
        The parsed JsonPath

    Raises:
        PathSyntaxError: If the path is malformed
    """
    return PathParser(settings).parse(text)
