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

"""Upgrade decision policy for rpmver.

Determines whether a candidate package version should replace the
installed one.

Example:
    Check if a candidate is an upgrade:

        from rpmver.policy.updates import should_upgrade, UpdatePolicy

        decision = should_upgrade(
            candidate="1:2.4.1-3.el9",
            installed="2.4.1-2.el9",
            policy=UpdatePolicy(ignore_epoch=True),
        )

"""

from __future__ import annotations

from dataclasses import dataclass, replace

from rpmver.logging import Logger, get_global_logger
from rpmver.versioning import EQUAL, GREATER, Version, compare_versions, parse_version


@dataclass(frozen=True)
class UpdatePolicy:
    allow_downgrade: bool = False
    ignore_epoch: bool = False
    ignore_release: bool = False


def _apply_policy(v: Version, policy: UpdatePolicy) -> Version:
    if policy.ignore_epoch:
        v = replace(v, epoch=0)
    if policy.ignore_release:
        v = replace(v, release="")
    return v


def should_upgrade(
    *,
    candidate: str | Version,
    installed: str | Version | None,
    policy: UpdatePolicy | None = None,
    logger: Logger | None = None,
) -> bool:
    """Decide whether 'candidate' should replace 'installed'.

    Args:
        candidate: Version offered by the repository.
        installed: Version currently installed (None if nothing is).
        policy: UpdatePolicy controlling the decision. Defaults to
            UpdatePolicy().
        logger: Optional logger for the decision trace.

    Returns:
        True if nothing is installed or the candidate is newer. With
        allow_downgrade, any candidate that does not compare equal.

    """
    if logger is None:
        logger = get_global_logger()
    if policy is None:
        policy = UpdatePolicy()

    if installed is None:
        logger.verbose("POLICY", f"Nothing installed; taking {candidate}")
        return True

    if isinstance(candidate, str):
        candidate = parse_version(candidate, logger=logger)
    if isinstance(installed, str):
        installed = parse_version(installed, logger=logger)

    result = compare_versions(
        _apply_policy(candidate, policy), _apply_policy(installed, policy)
    )
    if policy.allow_downgrade:
        decision = result != EQUAL
    else:
        decision = result == GREATER

    logger.verbose(
        "POLICY",
        f"Candidate {candidate} vs installed {installed}: "
        f"{'upgrade' if decision else 'keep'}",
    )
    return decision
