"""
rpmver - RPM package version ordering

A Python library that parses and orders package versions exactly the way
RPM does: epoch, version and release, with each field compared by the
segment-wise ``rpmvercmp`` rule.

rpmver provides:
  - Lenient epoch:version-release parsing that never fails
  - rpmvercmp-compatible ordering (tilde pre-releases, leading zeros,
    digits outranking letters, interchangeable separators)
  - Sorting and newest-version helpers for raw strings
  - Dependency-style range matching (">= 1:2.0-3")
  - Upgrade decisions with configurable policy
  - Opt-in validation for callers that want stricter input

Quick Start
-----------
    >>> from rpmver import parse_version, rpmvercmp
    >>> parse_version("2:7.4.052-1.el6") > parse_version("7.4.053-1.el6")
    True
    >>> rpmvercmp("1.0~rc1", "1.0")
    -1

Package Structure
-----------------
versioning : package
    Tokenizer, rpmvercmp comparator and EVR parsing.
core : module
    Compare, sort and pick the newest of raw version strings.
policy : package
    Range constraints and upgrade decisions.
config : package
    YAML configuration loading and merging.
validation : module
    Opt-in strict checks for version strings.

Project Information
-------------------
Author: Roger Cibrian
License: Apache-2.0
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "RPM-compatible package version parsing and ordering"

# Re-export commonly used functions for convenience
from rpmver.core import compare, latest_version, sort_versions, version_key
from rpmver.policy import parse_constraint, satisfies, should_upgrade
from rpmver.validation import validate_version
from rpmver.versioning import (
    EQUAL,
    GREATER,
    LESS,
    Version,
    compare_versions,
    format_version,
    parse_version,
    rpmvercmp,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "EQUAL",
    "GREATER",
    "LESS",
    "Version",
    "compare",
    "compare_versions",
    "format_version",
    "latest_version",
    "parse_constraint",
    "parse_version",
    "rpmvercmp",
    "satisfies",
    "should_upgrade",
    "sort_versions",
    "validate_version",
    "version_key",
]
