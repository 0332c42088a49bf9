"""
Value tree mutation.

This package implements the insert, replace, set and remove operations.
"""

from jsonpathops.mutation.mutator import insert, remove, replace, set_value

__all__ = [
    "insert",
    "remove",
    "replace",
    "set_value",
]
