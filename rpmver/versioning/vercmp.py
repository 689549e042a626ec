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

"""Segment-wise comparison of bare version strings (rpmvercmp).

Both strings are tokenized in lock-step and compared token by token:

- A tilde sorts before anything else, including the end of the string
  ("1.0~rc1" < "1.0").
- Otherwise the string that still has tokens left is newer
  ("2.0.1" > "2.0").
- A digit run is newer than a letter run ("1.0" > "1.a").
- Digit runs compare numerically, ignoring leading zeros
  ("10.0001" == "10.1").
- Letter runs compare by character code, case-sensitively ("B" < "a").

The comparison is total: any pair of strings yields LESS, EQUAL or GREATER.
"""

from __future__ import annotations

from .tokens import Token, iter_tokens

LESS = -1
EQUAL = 0
GREATER = 1


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def _compare_digits(a: str, b: str) -> int:
    """Compare two digit runs numerically without converting to int."""
    a = a.lstrip("0")
    b = b.lstrip("0")
    if len(a) != len(b):
        return GREATER if len(a) > len(b) else LESS
    return _cmp(a, b)


def _compare_tokens(left: Token, right: Token) -> int:
    if left.kind != right.kind:
        # digits always outrank letters
        return GREATER if left.kind == "digits" else LESS
    if left.kind == "digits":
        return _compare_digits(left.text, right.text)
    return _cmp(left.text, right.text)


def rpmvercmp(a: str, b: str) -> int:
    """Compare two version (or release) strings the way RPM does.

    Args:
        a: Left-hand version string.
        b: Right-hand version string.

    Returns:
        LESS (-1) if a is older, EQUAL (0) if equivalent, GREATER (1) if newer.

    Example:
        >>> rpmvercmp("1.0~rc1", "1.0")
        -1
        >>> rpmvercmp("2.0", "2_0")
        0

    """
    if a == b:
        return EQUAL

    left = iter_tokens(a)
    right = iter_tokens(b)
    while True:
        lt = next(left, None)
        rt = next(right, None)

        if lt is None and rt is None:
            return EQUAL

        left_tilde = lt is not None and lt.is_tilde
        right_tilde = rt is not None and rt.is_tilde
        if left_tilde or right_tilde:
            if left_tilde and right_tilde:
                continue
            return LESS if left_tilde else GREATER

        if lt is None:
            return LESS
        if rt is None:
            return GREATER

        result = _compare_tokens(lt, rt)
        if result != EQUAL:
            return result
