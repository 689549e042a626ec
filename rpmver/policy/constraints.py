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

"""Version range matching for dependency resolution.

A constraint pairs a comparison operator with an EVR, as written in RPM
dependency clauses ("Requires: foo >= 1:2.0-3"). Matching follows RPM:
when either side has no release, only epoch and version are compared, so
"2.0-5" satisfies "= 2.0".

Example:
    Check a candidate against a range:

        from rpmver.policy.constraints import parse_constraint, satisfies_all

        ok = satisfies_all(
            "2.4.1-3.el9",
            [parse_constraint(">= 2.4"), parse_constraint("< 3.0")],
        )

"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
import re
from typing import Literal

from rpmver.exceptions import ConstraintError
from rpmver.logging import Logger, get_global_logger
from rpmver.versioning import (
    EQUAL,
    GREATER,
    LESS,
    Version,
    compare_versions,
    parse_version,
)

Operator = Literal["<", "<=", "=", ">=", ">"]

# RPM sense-flag spellings are accepted as aliases.
_OPERATOR_ALIASES: dict[str, Operator] = {
    "<": "<",
    "<=": "<=",
    "=": "=",
    "==": "=",
    ">=": ">=",
    ">": ">",
    "LT": "<",
    "LE": "<=",
    "EQ": "=",
    "GE": ">=",
    "GT": ">",
}

_ACCEPTS: dict[Operator, frozenset[int]] = {
    "<": frozenset({LESS}),
    "<=": frozenset({LESS, EQUAL}),
    "=": frozenset({EQUAL}),
    ">=": frozenset({GREATER, EQUAL}),
    ">": frozenset({GREATER}),
}

# The operator token is matched whole, then looked up.
_CONSTRAINT_RE = re.compile(r"^\s*([<>=!]+|[A-Za-z]+)\s*(.*?)\s*$")


@dataclass(frozen=True)
class Constraint:
    """A single "operator EVR" requirement.

    Attributes:
        operator: One of "<", "<=", "=", ">=", ">".
        version: The parsed EVR to compare against.

    """

    operator: Operator
    version: Version

    def __str__(self) -> str:
        return f"{self.operator} {self.version}"


def parse_constraint(text: str, *, logger: Logger | None = None) -> Constraint:
    """Parse a constraint such as ">= 1:2.0-3" or "LT 4".

    Raises:
        ConstraintError: If the operator is missing or unknown, or no
            version follows it.

    """
    m = _CONSTRAINT_RE.match(text)
    if not m:
        raise ConstraintError(f"missing comparison operator in {text!r}")
    op_text, evr = m.group(1), m.group(2)
    operator = _OPERATOR_ALIASES.get(op_text)
    if operator is None:
        raise ConstraintError(f"unknown comparison operator {op_text!r} in {text!r}")
    if not evr:
        raise ConstraintError(f"no version after operator in {text!r}")
    return Constraint(operator=operator, version=parse_version(evr, logger=logger))


def satisfies(
    candidate: str | Version,
    constraint: Constraint,
    *,
    logger: Logger | None = None,
) -> bool:
    """Return True if 'candidate' falls inside 'constraint'."""
    if logger is None:
        logger = get_global_logger()
    if isinstance(candidate, str):
        candidate = parse_version(candidate, logger=logger)
    have, wanted = candidate, constraint.version
    if not have.release or not wanted.release:
        have = replace(have, release="")
        wanted = replace(wanted, release="")
    matched = compare_versions(have, wanted) in _ACCEPTS[constraint.operator]
    logger.debug(
        "POLICY", f"{candidate} {'matches' if matched else 'misses'} {constraint}"
    )
    return matched


def satisfies_all(
    candidate: str | Version,
    constraints: Iterable[Constraint],
    *,
    logger: Logger | None = None,
) -> bool:
    """Return True if 'candidate' satisfies every constraint (vacuously for none)."""
    if isinstance(candidate, str):
        candidate = parse_version(candidate, logger=logger)
    return all(satisfies(candidate, c, logger=logger) for c in constraints)
