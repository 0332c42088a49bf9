"""
Tests for value kind classification.
"""

from collections import OrderedDict

import pytest

from jsonpathops.core.types import ValueKind, is_mutable_container, value_kind


class TestValueKind:
    """Test value_kind dispatch."""

    @pytest.mark.parametrize(
        "value,kind",
        [
            (None, ValueKind.NULL),
            (True, ValueKind.BOOL),
            (False, ValueKind.BOOL),
            (0, ValueKind.NUMBER),
            (12.12, ValueKind.NUMBER),
            ("", ValueKind.STRING),
            ([], ValueKind.ARRAY),
            ((1, 2), ValueKind.ARRAY),
            ({}, ValueKind.OBJECT),
            (OrderedDict(a=1), ValueKind.OBJECT),
        ],
    )
    def test_classification(self, value, kind):
        """Test each Python type maps to its kind."""
        assert value_kind(value) is kind

    def test_bool_is_not_number(self):
        """Test that bool is classified before int."""
        assert value_kind(True) is not ValueKind.NUMBER

    def test_unsupported_type(self):
        """Test that non-JSON values are rejected."""
        with pytest.raises(TypeError):
            value_kind(object())

    def test_container_kinds(self):
        """Test is_container flag."""
        assert ValueKind.ARRAY.is_container
        assert ValueKind.OBJECT.is_container
        assert not ValueKind.STRING.is_container

    def test_mutable_containers(self):
        """Test mutability detection."""
        assert is_mutable_container([])
        assert is_mutable_container({})
        assert not is_mutable_container((1,))
        assert not is_mutable_container("abc")
