"""
Tests for the exception hierarchy and messages.
"""

from jsonpathops.exceptions import (
    NOT_APPLICABLE_MESSAGE,
    IncomparableValuesError,
    JsonPathError,
    NotApplicableError,
    PathSyntaxError,
)


class TestPathSyntaxError:
    """Tests for PathSyntaxError."""

    def test_attributes(self):
        """Test path, position and reason are kept."""
        error = PathSyntaxError("$0]", 1, "expected . or [")
        assert error.path == "$0]"
        assert error.position == 1
        assert error.reason == "expected . or ["

    def test_message(self):
        """Test the formatted message."""
        error = PathSyntaxError("$[1", 3, "expected ]")
        assert str(error) == "Invalid path '$[1' at position 3: expected ]"


class TestNotApplicableError:
    """Tests for NotApplicableError."""

    def test_constant_message(self):
        """Test the message never varies."""
        assert str(NotApplicableError()) == NOT_APPLICABLE_MESSAGE
        assert str(NotApplicableError()) == "unable to find path to value"


class TestHierarchy:
    """Tests for the common base class."""

    def test_all_derive_from_base(self):
        """Test every error can be caught as JsonPathError."""
        for error in (
            PathSyntaxError("x", 0, "expected $ or numeric"),
            NotApplicableError(),
            IncomparableValuesError("null", "number"),
        ):
            assert isinstance(error, JsonPathError)

    def test_incomparable_message(self):
        """Test the incomparable message names both kinds."""
        error = IncomparableValuesError("null", "number")
        assert "null" in str(error)
        assert "number" in str(error)
