"""Compiler version utilities for deploy-config library."""

import re

from .exceptions import InvalidCompilerVersionError

_RELEASE_RE = re.compile(r"^(\d+)\.(\d+)\.(\d+)(\+commit\.[0-9a-f]{8})?$")


def normalize_compiler_version(version: str) -> str:
    """
    Normalize a solc version string to its release form.

    Accepted versions:
    - Plain releases ("0.8.17")
    - An optional leading 'v' ("v0.8.17")
    - Release builds with a commit suffix ("0.8.17+commit.8df45f5f")

    Pre-releases and nightlies are rejected.

    Args:
        version: Compiler version string

    Returns:
        Version in "X.Y.Z" form

    Raises:
        InvalidCompilerVersionError: If version is not a release version
    """
    if not isinstance(version, str):
        raise InvalidCompilerVersionError(f"Compiler version must be a string, got {version!r}")

    candidate = version.strip()
    if candidate.startswith("v"):
        candidate = candidate[1:]

    match = _RELEASE_RE.match(candidate)
    if match is None:
        raise InvalidCompilerVersionError(f"Not a release compiler version: '{version}'")

    major, minor, patch = (int(part) for part in match.group(1, 2, 3))
    return f"{major}.{minor}.{patch}"
