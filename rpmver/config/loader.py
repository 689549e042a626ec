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

"""
Configuration loading and merging for rpmver.

The comparator itself takes no configuration. The helpers around it
(upgrade policy, validation strictness, log verbosity) read settings from
up to three layers:

Configuration Layers
--------------------
1. **Built-in defaults** (DEFAULT_CONFIG)
   - Always present
2. **Project file** (.rpmver.yaml)
   - Found by walking upward from the start directory
   - Optional
3. **Explicit file** (the ``path`` argument)
   - Optional; must exist when given

Merge Behavior
--------------
  - **Dicts**: Recursively merged (keys from overlay override base)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Error Handling
--------------
- FileNotFoundError: Explicit config file doesn't exist
- ConfigError: YAML parse errors, empty files, non-mapping documents
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from pathlib import Path
    >>> from rpmver.config import load_effective_config, policy_from_config
    >>> cfg = load_effective_config(Path("rpmver.yaml"))
    >>> policy = policy_from_config(cfg)
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml

from rpmver.exceptions import ConfigError
from rpmver.logging import Logger, get_global_logger, get_logger
from rpmver.policy import UpdatePolicy

PROJECT_CONFIG_NAME = ".rpmver.yaml"

DEFAULT_CONFIG: dict[str, Any] = {
    "policy": {
        "allow_downgrade": False,
        "ignore_epoch": False,
        "ignore_release": False,
    },
    "validation": {
        "allowed_symbols": ".-+~:_",
        "require_leading_digit": False,
    },
    "logging": {
        "verbose": False,
        "debug": False,
    },
}

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> dict[str, Any]:
    """
    Load a YAML config file and return the parsed mapping.

    Raises:
      FileNotFoundError      - when file does not exist
      ConfigError            - for invalid YAML, empty files, or non-mappings
    """
    if not p.exists():
        raise FileNotFoundError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    if not isinstance(data, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# -------------------------------
# Project file discovery
# -------------------------------


def _find_project_config(start_dir: Path) -> Path | None:
    """
    Walk upward from 'start_dir' looking for '.rpmver.yaml'.
    Returns the file path or None if not found.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / PROJECT_CONFIG_NAME
        if candidate.is_file():
            return candidate
    return None


# -------------------------------
# Public API
# -------------------------------


def load_effective_config(
    path: Path | None = None,
    *,
    start_dir: Path | None = None,
    logger: Logger | None = None,
) -> dict[str, Any]:
    """
    Load and merge the effective configuration.

    Steps
      1) Start from a copy of DEFAULT_CONFIG.
      2) Merge the nearest '.rpmver.yaml' at or above 'start_dir'
         (default: current working directory).
      3) Merge the explicit 'path' if given.

    Returns
      A merged configuration dict.

    Raises
      ConfigError on YAML parse errors, empty or non-mapping files,
      FileNotFoundError if the explicit file is missing.
    """
    if logger is None:
        logger = get_global_logger()

    merged = copy.deepcopy(DEFAULT_CONFIG)
    layers_merged = 1

    start = (start_dir or Path.cwd()).resolve()
    project_path = _find_project_config(start)
    if project_path is not None:
        logger.verbose("CONFIG", f"Loading: {project_path}")
        merged = _deep_merge_dicts(merged, _load_yaml_file(project_path))
        layers_merged += 1

    if path is not None:
        path = path.resolve()
        logger.verbose("CONFIG", f"Loading: {path}")
        merged = _deep_merge_dicts(merged, _load_yaml_file(path))
        layers_merged += 1

    logger.verbose("CONFIG", f"Deep merged {layers_merged} layer(s)")
    logger.debug("CONFIG", yaml.safe_dump(merged, default_flow_style=False).rstrip())
    return merged


def policy_from_config(cfg: dict[str, Any]) -> UpdatePolicy:
    """Build an UpdatePolicy from the 'policy' section of a config dict."""
    section = cfg.get("policy") or {}
    return UpdatePolicy(
        allow_downgrade=bool(section.get("allow_downgrade", False)),
        ignore_epoch=bool(section.get("ignore_epoch", False)),
        ignore_release=bool(section.get("ignore_release", False)),
    )


def logger_from_config(cfg: dict[str, Any]) -> Logger:
    """Build a logger honouring the 'logging' section of a config dict."""
    section = cfg.get("logging") or {}
    return get_logger(
        verbose=bool(section.get("verbose", False)),
        debug=bool(section.get("debug", False)),
    )
