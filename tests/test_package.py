"""
Tests for the top-level package interface.
"""

import jsonpathops
from jsonpathops import JsonPath, Ordering, insert, partial_cmp


class TestPackage:
    """Test names exported from the package root."""

    def test_version(self):
        """Test the installed version is exposed."""
        assert isinstance(jsonpathops.__version__, str)

    def test_exports(self):
        """Test every name in __all__ exists."""
        for name in jsonpathops.__all__:
            assert hasattr(jsonpathops, name)

    def test_parse_once_use_many(self):
        """Test a parsed path applied to several trees."""
        path = JsonPath.parse("$.a.b[#]")
        first = {"a": {"b": []}}
        second = {"a": {"b": [1]}}
        insert(path, first, "x")
        insert(path, second, "x")
        assert first == {"a": {"b": ["x"]}}
        assert second == {"a": {"b": [1, "x"]}}

    def test_comparator_scenarios(self):
        """Test the documented comparator examples."""
        assert partial_cmp(0, False) is Ordering.EQUAL
        assert partial_cmp(1, False) is Ordering.GREATER
        assert partial_cmp(-1, False) is Ordering.LESS
        assert partial_cmp(0, None) is None
