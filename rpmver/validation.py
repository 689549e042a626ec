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

"""Version string validation module.

parse_version accepts anything and quietly makes the best of it. Callers
that want to reject odd input (e.g. when accepting versions from users)
can run validate_version first to see what the lenient parser would
silently paper over.

Validation Checks:

- Version field is not empty
- Only ASCII letters, digits and allowed symbols are used
- Epoch, if present, is a non-negative integer
- Version starts with a digit (warning, or error when required)
- No surrounding whitespace (warning)
- No dangling '-' with an empty release (warning)

Example:
    Validate a version and handle results:
        ```python
        from rpmver.validation import validate_version

        result = validate_version("a:1.0")
        if result["status"] == "invalid":
            for error in result["errors"]:
                print(f"Error: {error}")
        ```

"""

from __future__ import annotations

import string
from typing import Any

from rpmver.logging import Logger, get_global_logger
from rpmver.versioning import parse_version
from rpmver.versioning.evr import read_epoch

__all__ = ["DEFAULT_ALLOWED_SYMBOLS", "validate_version", "validate_with_config"]

DEFAULT_ALLOWED_SYMBOLS = ".-+~:_"

_ALNUM = frozenset(string.ascii_letters + string.digits)


def validate_version(
    raw: str,
    *,
    allowed_symbols: str = DEFAULT_ALLOWED_SYMBOLS,
    require_leading_digit: bool = False,
    logger: Logger | None = None,
) -> dict[str, Any]:
    """Check a version string without changing how it parses.

    Args:
        raw: The version string to check.
        allowed_symbols: Non-alphanumeric characters permitted in the
            string. Default is the set RPM accepts in EVR strings.
        require_leading_digit: If True, a version that does not start with
            a digit is an error instead of a warning.
        logger: Optional logger for the check trace.

    Returns:
        A dict (status, errors, warnings, epoch, version, release, raw),
            where status is "valid" or "invalid" and epoch/version/release
            are what parse_version produces for 'raw'.

    """
    if logger is None:
        logger = get_global_logger()

    errors: list[str] = []
    warnings: list[str] = []

    parsed = parse_version(raw, logger=logger)
    body = raw.strip()

    if body != raw:
        warnings.append("Version has leading or trailing whitespace")

    if ":" in raw:
        epoch_text = raw.split(":", 1)[0]
        rest = body.split(":", 1)[1]
        _, problem = read_epoch(epoch_text)
        if problem is not None:
            errors.append(f"Epoch {epoch_text!r} is {problem} (would be read as 0)")
        elif parsed.epoch < 0:
            errors.append(f"Epoch {parsed.epoch} is negative")
    else:
        rest = body

    if not parsed.version:
        errors.append("Version field is empty")
    elif not parsed.version[0].isdigit() or not parsed.version[0].isascii():
        message = f"Version {parsed.version!r} does not start with a digit"
        if require_leading_digit:
            errors.append(message)
        else:
            warnings.append(message)

    allowed = _ALNUM | frozenset(allowed_symbols)
    bad = sorted({ch for ch in rest if ch not in allowed})
    if bad:
        errors.append(
            "Version contains disallowed characters: " + ", ".join(repr(ch) for ch in bad)
        )

    if rest.endswith("-") and rest.count("-") == 1:
        warnings.append("Version ends with '-' but has no release")

    status = "invalid" if errors else "valid"
    logger.verbose(
        "VALIDATE",
        f"{raw!r}: {status} ({len(errors)} error(s), {len(warnings)} warning(s))",
    )
    return {
        "status": status,
        "errors": errors,
        "warnings": warnings,
        "epoch": parsed.epoch,
        "version": parsed.version,
        "release": parsed.release,
        "raw": raw,
    }


def validate_with_config(
    raw: str,
    cfg: dict[str, Any],
    *,
    logger: Logger | None = None,
) -> dict[str, Any]:
    """Run validate_version with options from a config's 'validation' section."""
    section = cfg.get("validation") or {}
    return validate_version(
        raw,
        allowed_symbols=section.get("allowed_symbols", DEFAULT_ALLOWED_SYMBOLS),
        require_leading_digit=bool(section.get("require_leading_digit", False)),
        logger=logger,
    )
