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

"""High-level ordering helpers for rpmver.

These functions accept raw version strings (or already-parsed Version
objects) so callers such as dependency resolvers and upgrade checkers do
not have to parse first.

Example:
    Programmatic usage:
        ```python
        from rpmver.core import compare, latest_version, sort_versions

        compare("1:1.0", "2.0")                      # 1
        sort_versions(["1.0", "1.0~rc1", "0.9"])     # ['0.9', '1.0~rc1', '1.0']
        latest_version(["2.0-1", "2.0-10", "2.0-9"])  # '2.0-10'
        ```

"""

from __future__ import annotations

from collections.abc import Iterable

from rpmver.logging import Logger, get_global_logger
from rpmver.versioning import GREATER, LESS, Version, compare_versions, parse_version

_DESCRIBE = {LESS: "older than", GREATER: "newer than"}


def _as_version(v: str | Version, logger: Logger) -> Version:
    return v if isinstance(v, Version) else parse_version(v, logger=logger)


def compare(
    a: str | Version,
    b: str | Version,
    *,
    logger: Logger | None = None,
) -> int:
    """Compare two versions given as strings or Version objects.

    Returns -1 if a < b, 0 if equal, 1 if a > b.
    """
    if logger is None:
        logger = get_global_logger()

    result = compare_versions(_as_version(a, logger), _as_version(b, logger))
    logger.verbose(
        "VERCMP", f"{str(a)!r} is {_DESCRIBE.get(result, 'the same as')} {str(b)!r}"
    )
    return result


def version_key(raw: str | Version, *, logger: Logger | None = None) -> Version:
    """Sort key for version strings.

    Version objects order themselves, so parsing is all that is needed:

        sorted(items, key=version_key)
    """
    if logger is None:
        logger = get_global_logger()
    return _as_version(raw, logger)


def sort_versions(
    items: Iterable[str],
    *,
    reverse: bool = False,
    logger: Logger | None = None,
) -> list[str]:
    """Return the version strings in RPM order (stable for equal versions)."""
    return sorted(items, key=lambda v: version_key(v, logger=logger), reverse=reverse)


def latest_version(
    items: Iterable[str],
    *,
    logger: Logger | None = None,
) -> str | None:
    """Return the newest version string, or None if there are none.

    The first of several equal versions wins.
    """
    best: str | None = None
    for item in items:
        if best is None or compare(item, best, logger=logger) == GREATER:
            best = item
    return best
