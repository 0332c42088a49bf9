"""
Value tree navigation.

This package resolves parsed paths against value trees, read-only or through
writable slots.
"""

from jsonpathops.navigation.navigator import (
    ValueSlot,
    exists,
    find,
    find_mut,
    find_or,
    find_parent,
    locate,
)

__all__ = [
    "ValueSlot",
    "exists",
    "find",
    "find_mut",
    "find_or",
    "find_parent",
    "locate",
]
