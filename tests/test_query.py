"""
Tests for one-call string queries.
"""

import pytest

from jsonpathops.exceptions import NotApplicableError, PathSyntaxError
from jsonpathops.query import path, path_mut
from jsonpathops.settings import PathSettings


class TestPath:
    """Test read queries."""

    def test_resolves(self, mixed_document):
        """Test a nested query."""
        assert path(mixed_document, "$.a[#-1].b[0].test") == "example"

    def test_shorthand(self):
        """Test the bare digit query."""
        assert path([1, 2, 4], "1") == 2

    def test_not_found(self):
        """Test a query past the end of an array."""
        with pytest.raises(NotApplicableError):
            path([1], "$[2]")

    def test_syntax_error(self):
        """Test malformed queries raise before navigation."""
        with pytest.raises(PathSyntaxError):
            path({}, "a")

    def test_settings_forwarded(self):
        """Test strict settings reach the parser."""
        assert path([7], "$[]") == 7
        with pytest.raises(PathSyntaxError):
            path([7], "$[]", PathSettings.strict())


class TestPathMut:
    """Test write queries."""

    def test_write_through_slot(self):
        """Test a slot obtained from a query writes into the tree."""
        document = {"a": [0, 1, 2, 3]}
        path_mut(document, "$.a[#-1]").set("last")
        assert document == {"a": [0, 1, 2, "last"]}

    def test_not_found(self):
        """Test unresolvable write queries raise."""
        with pytest.raises(NotApplicableError):
            path_mut([1], "$[2]")
