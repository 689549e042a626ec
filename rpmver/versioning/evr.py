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

"""Epoch:version-release parsing, ordering and formatting.

A raw string such as "2:7.4.052-1.el6" is split into an integer epoch
(2), a version ("7.4.052") and a release ("1.el6"). Parsing is lenient
and never fails:

- No ':' means epoch 0. Otherwise the text before the first ':' is
  left-trimmed and read as a signed integer; anything unreadable is 0.
- The remainder is split on the FIRST '-' only, so "0-0-0" has version
  "0" and release "0-0".

Versions order by epoch, then version, then release, the last two using
rpmvercmp.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from rpmver.logging import Logger, get_global_logger

from .tokens import normalized_tokens
from .vercmp import EQUAL, GREATER, LESS, rpmvercmp

_EPOCH_RE = re.compile(r"[+-]?[0-9]+")

# Epochs outside a signed 64-bit integer are treated like garbage text.
_EPOCH_MIN = -(2**63)
_EPOCH_MAX = 2**63 - 1

# Unicode White_Space. str.isspace() also counts U+001C..U+001F, which
# must not be trimmed.
_EPOCH_SPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def read_epoch(text: str) -> tuple[int, str | None]:
    """Read the text before the first ':' as an epoch.

    Leading white space is trimmed; the rest must be an optional sign and
    ASCII digits within the signed 64-bit range.

    Returns:
        (epoch, problem) where problem is None, "not an integer" or
        "out of range". The epoch is 0 whenever a problem is reported.

    """
    epoch = text.lstrip(_EPOCH_SPACE)
    if not _EPOCH_RE.fullmatch(epoch):
        return 0, "not an integer"
    value = int(epoch)
    if not _EPOCH_MIN <= value <= _EPOCH_MAX:
        return 0, "out of range"
    return value, None


def _parse_epoch(text: str, logger: Logger) -> int:
    """Read an epoch field, falling back to 0 for anything unusable."""
    value, problem = read_epoch(text)
    if problem is not None:
        logger.debug("EVR", f"Epoch {text!r} is {problem}; using 0")
    return value


@dataclass(frozen=True, eq=False)
class Version:
    """An immutable, parsed package version.

    Attributes:
        epoch: Version-generation marker; 0 when absent or unparseable.
        version: Upstream version (before the first '-').
        release: Packaging release (after the first '-'), may be empty.

    Instances compare with the usual operators using RPM ordering, so
    ``Version.from_string("10.0001") == Version.from_string("10.1")``.

    """

    epoch: int = 0
    version: str = ""
    release: str = ""

    @classmethod
    def from_string(cls, raw: str, *, logger: Logger | None = None) -> Version:
        return parse_version(raw, logger=logger)

    def __str__(self) -> str:
        return format_version(self)

    def __repr__(self) -> str:
        return f"<Version: {self}>"

    def __hash__(self) -> int:
        return hash(
            (self.epoch, normalized_tokens(self.version), normalized_tokens(self.release))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) == EQUAL

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) != EQUAL

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) == LESS

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) != GREATER

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) == GREATER

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare_versions(self, other) != LESS


def parse_version(raw: str, *, logger: Logger | None = None) -> Version:
    """Parse an "[epoch:]version[-release]" string.

    Args:
        raw: The version string. Any text is accepted.
        logger: Optional logger; debug output notes epoch fallbacks.

    Returns:
        The parsed Version. Characters are passed through unchanged into
        version and release.

    Example:
        >>> parse_version("2:7.4.052-1.el6")
        <Version: 2:7.4.052-1.el6>
        >>> parse_version("a:1.0").epoch
        0

    """
    if logger is None:
        logger = get_global_logger()

    epoch = 0
    rest = raw
    if ":" in raw:
        epoch_text, rest = raw.split(":", 1)
        epoch = _parse_epoch(epoch_text, logger)

    version, _, release = rest.partition("-")
    return Version(epoch=epoch, version=version, release=release)


def compare_versions(a: Version, b: Version) -> int:
    """Order two versions by epoch, then version, then release.

    Returns:
        LESS (-1), EQUAL (0) or GREATER (1).

    """
    if a.epoch != b.epoch:
        return GREATER if a.epoch > b.epoch else LESS
    result = rpmvercmp(a.version, b.version)
    if result != EQUAL:
        return result
    return rpmvercmp(a.release, b.release)


def is_equal(a: Version, b: Version) -> bool:
    return compare_versions(a, b) == EQUAL


def is_greater_than(a: Version, b: Version) -> bool:
    return compare_versions(a, b) == GREATER


def is_less_than(a: Version, b: Version) -> bool:
    return compare_versions(a, b) == LESS


def format_version(v: Version) -> str:
    """Render as "epoch:version-release".

    The "epoch:" prefix is omitted when the epoch is 0 and the "-release"
    suffix is omitted when the release is empty.
    """
    s = v.version
    if v.release:
        s += "-" + v.release
    if v.epoch != 0:
        s = f"{v.epoch}:{s}"
    return s
