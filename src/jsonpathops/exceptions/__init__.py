"""
jsonpathops exception classes.

This package provides all exception types raised while parsing path
expressions, navigating value trees and comparing values.
"""

from jsonpathops.exceptions.core import (
    NOT_APPLICABLE_MESSAGE,
    IncomparableValuesError,
    JsonPathError,
    NotApplicableError,
    PathSyntaxError,
)

__all__ = [
    "NOT_APPLICABLE_MESSAGE",
    "JsonPathError",
    "PathSyntaxError",
    "NotApplicableError",
    "IncomparableValuesError",
]
