"""Protocol version parsing and compatibility checks."""

from __future__ import annotations

import re

MAJOR = 0
MINOR = 1
PATCH = 0

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def compatibility_verified(major: int, minor: int, patch: int) -> bool:
    """A camera protocol is compatible when its major version matches ours."""
    return major == MAJOR


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid version component: {text!r}")
    return int(match.group(1))


def parse_version(version_string: str) -> list[int]:
    """Split a dotted version string such as "0.1.0" into its numbers."""
    if not version_string:
        return []
    return [_leading_int(part) for part in version_string.split(".")]