"""
Value comparison.

This package orders value tree nodes across kinds for sorting and searching.
"""

from jsonpathops.comparison.comparator import (
    Ordering,
    OrderedValue,
    canonical_text,
    compare_values,
    partial_cmp,
    sort_key,
    values_equal,
)

__all__ = [
    "Ordering",
    "OrderedValue",
    "canonical_text",
    "compare_values",
    "partial_cmp",
    "sort_key",
    "values_equal",
]
