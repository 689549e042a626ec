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

"""Range matching and upgrade policy built on RPM ordering.

Modules:

constraints : module
    Parse "operator EVR" constraints and match versions against them.
updates : module
    Decide whether a candidate version should replace the installed one.

Example:
    from rpmver.policy import parse_constraint, satisfies, should_upgrade

    satisfies("2.0-5", parse_constraint("= 2.0"))  # True
    should_upgrade(candidate="2.0-5", installed="2.0-4")  # True

"""

from .constraints import (
    Constraint,
    Operator,
    parse_constraint,
    satisfies,
    satisfies_all,
)
from .updates import UpdatePolicy, should_upgrade

__all__ = [
    "Constraint",
    "Operator",
    "UpdatePolicy",
    "parse_constraint",
    "satisfies",
    "satisfies_all",
    "should_upgrade",
]
