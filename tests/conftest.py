"""
Shared test fixtures for the jsonpathops test suite.
"""

import copy

import pytest


@pytest.fixture
def nested_document():
    """Object holding an array under two levels of keys."""
    return {"a": {"b": [1, 2, 4]}}


@pytest.fixture
def mixed_document():
    """Document mixing arrays and objects at several depths."""
    return {
        "a": [
            {"b": "invalid"},
            {"b": [{"test": "example"}, {"test": "invalid"}]},
        ],
        "b": "invalid",
    }


@pytest.fixture
def snapshot():
    """Deep copy helper for asserting a tree was left unmodified."""
    return copy.deepcopy
