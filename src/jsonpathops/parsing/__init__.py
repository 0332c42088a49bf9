"""
Path expression parsing.

This package converts path text into JsonPath values.
"""

from jsonpathops.parsing.parser import PathParser, parse_path

__all__ = [
    "PathParser",
    "parse_path",
]
