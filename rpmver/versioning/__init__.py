"""
RPM version parsing and ordering for rpmver.

This package reproduces RPM's version ordering: the epoch:version-release
split and the segment-wise ``rpmvercmp`` comparison, including its
quirks (tilde pre-releases, digits outranking letters, leading zeros
ignored, separators interchangeable).

Modules
-------
tokens : module
    Split a version field into letter, digit and tilde runs.
vercmp : module
    Compare two bare version strings segment by segment.
evr : module
    Parse, order and format full epoch:version-release strings.

Public API
----------
Version : dataclass
    Immutable parsed version with rich comparison operators.
parse_version : function
    Parse a raw string into a Version (never fails).
compare_versions : function
    Compare two Versions, returning -1, 0, or 1.
rpmvercmp : function
    Compare two bare version strings, returning -1, 0, or 1.
format_version : function
    Render a Version as "epoch:version-release".

Examples
--------
    >>> from rpmver.versioning import parse_version, compare_versions, rpmvercmp
    >>> compare_versions(parse_version("1:1.0"), parse_version("2.0"))
    1
    >>> rpmvercmp("1.0~rc1", "1.0")
    -1

Notes
-----
- Nothing in this package raises for string input or performs I/O
- Malformed epochs silently become 0
"""

from .evr import (
    Version,
    compare_versions,
    format_version,
    is_equal,
    is_greater_than,
    is_less_than,
    parse_version,
)
from .tokens import Token, TokenKind, iter_tokens, tokenize
from .vercmp import EQUAL, GREATER, LESS, rpmvercmp

__all__ = [
    "EQUAL",
    "GREATER",
    "LESS",
    "Token",
    "TokenKind",
    "Version",
    "compare_versions",
    "format_version",
    "is_equal",
    "is_greater_than",
    "is_less_than",
    "iter_tokens",
    "parse_version",
    "rpmvercmp",
    "tokenize",
]
