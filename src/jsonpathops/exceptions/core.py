"""
Exception classes for path parsing, navigation and comparison.

Parsing failures carry the offending text and position. Navigation and
mutation failures share a single category with a constant message.
"""

NOT_APPLICABLE_MESSAGE = "unable to find path to value"


class JsonPathError(Exception):
    """Base exception for all jsonpathops errors."""

    pass


class PathSyntaxError(JsonPathError):
    """Raised when a path expression cannot be parsed."""

    def __init__(self, path: str, position: int, reason: str):
        """
        Initialize the exception.

        Params:
            path: The path text being parsed
            position: Zero-based index of the character where parsing stopped
            reason: Short description of what the parser expected
        """
        self.path = path
        self.position = position
        self.reason = reason
        super().__init__(f"Invalid path '{path}' at position {position}: {reason}")


class NotApplicableError(JsonPathError):
    """Raised when a path does not resolve or a mutation precondition fails."""

    def __init__(self):
        super().__init__(NOT_APPLICABLE_MESSAGE)


class IncomparableValuesError(JsonPathError):
    """Raised when two values have no ordering relative to each other."""

    def __init__(self, left_kind: str, right_kind: str):
        """
        Initialize the exception.

        Params:
            left_kind: Kind name of the left operand
            right_kind: Kind name of the right operand
        """
        self.left_kind = left_kind
        self.right_kind = right_kind
        super().__init__(f"Cannot order {left_kind} against {right_kind}")
