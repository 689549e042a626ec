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

"""Configuration loading for rpmver.

Settings for the helpers around the comparator (upgrade policy,
validation strictness, log verbosity) are layered:

  - Built-in defaults
  - Project file (.rpmver.yaml, nearest ancestor of the start directory)
  - Explicit file passed by the caller

Public API:

- load_effective_config: Load and merge configuration
- policy_from_config: Build an UpdatePolicy from a config dict
- logger_from_config: Build a logger from a config dict

Example:
    Basic usage:

        from pathlib import Path
        from rpmver.config import load_effective_config

        config = load_effective_config(Path("rpmver.yaml"))
        print(config["policy"]["allow_downgrade"])

"""

from .loader import (
    DEFAULT_CONFIG,
    load_effective_config,
    logger_from_config,
    policy_from_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "load_effective_config",
    "logger_from_config",
    "policy_from_config",
]
