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

"""Split version fields into classified runs.

A version or release string is read left to right as a sequence of
tokens: maximal runs of ASCII letters, maximal runs of ASCII digits, or
a lone tilde. Everything else ('.', '-', '+', '_', ':', spaces, non-ASCII)
only separates tokens and is dropped.

Example:
    >>> [t.text for t in iter_tokens("1.0~rc1")]
    ['1', '0', '~', 'rc', '1']
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
import re
from typing import Literal

TokenKind = Literal["letters", "digits", "tilde"]

_TOKEN_RE = re.compile(r"(?P<letters>[a-zA-Z]+)|(?P<digits>[0-9]+)|(?P<tilde>~)")


@dataclass(frozen=True)
class Token:
    """One classified run of a version field.

    Attributes:
        kind: "letters", "digits" or "tilde".
        text: The matched substring. Digit runs keep their leading zeros.

    """

    kind: TokenKind
    text: str

    @property
    def is_tilde(self) -> bool:
        return self.kind == "tilde"


def iter_tokens(text: str) -> Iterator[Token]:
    """Lazily yield the tokens of 'text' in order.

    Each call starts a fresh scan, so the sequence can be restarted by
    calling again. Never raises; empty or separator-only input yields
    nothing.
    """
    for m in _TOKEN_RE.finditer(text):
        yield Token(m.lastgroup, m.group())  # type: ignore[arg-type]


def tokenize(text: str) -> tuple[Token, ...]:
    """Eagerly tokenize 'text' into a tuple."""
    return tuple(iter_tokens(text))


def normalized_tokens(text: str) -> tuple[tuple[str, str], ...]:
    """Return tokens with leading zeros stripped from digit runs.

    Two fields compare EQUAL under rpmvercmp exactly when their normalized
    tokens are identical, which makes this suitable for hashing.
    """
    return tuple(
        (t.kind, t.text.lstrip("0") if t.kind == "digits" else t.text)
        for t in iter_tokens(text)
    )
