# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Exception hierarchy for rpmver.

The version parser and comparator never raise: every string is a valid
(if odd) version. Exceptions only come from the helpers layered on top:

- ConfigError: Configuration files that cannot be read or are malformed
- ConstraintError: Dependency constraint strings that cannot be parsed

All exceptions inherit from RpmVerError, allowing users to catch all
rpmver errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from rpmver.exceptions import ConstraintError
        from rpmver.policy import parse_constraint

        try:
            constraint = parse_constraint("~> 1.0")
        except ConstraintError as e:
            print(f"Bad constraint: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "RpmVerError",
    "ConfigError",
    "ConstraintError",
]


class RpmVerError(Exception):
    """Base exception for all rpmver errors."""

    pass


class ConfigError(RpmVerError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parsing (syntax errors, invalid structure)
    - Empty configuration files
    - Configuration documents that are not a mapping

    Example:
        Catching configuration errors:
            ```python
            from rpmver.config import load_effective_config
            from rpmver.exceptions import ConfigError

            try:
                config = load_effective_config(Path("broken.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class ConstraintError(RpmVerError):
    """Raised when a dependency constraint string cannot be parsed.

    A constraint is an operator followed by an EVR string, e.g.
    ">= 1:2.0-3". Unknown operators and empty constraints raise this.
    """

    pass
