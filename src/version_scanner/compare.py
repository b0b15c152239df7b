# SPDX-License-Identifier: MIT
"""Version precedence following SemVer 2.0.0.

Major, minor and patch compare numerically. A pre-release ranks below the
release with the same numbers, and pre-release identifiers compare pairwise:
numeric identifiers by value, numeric below alphanumeric, everything else in
ASCII order, and a shorter list below a longer one it is a prefix of.
Build metadata is ignored in comparisons.

The functions accept any object exposing the ``SemanticVersion`` fields, so
different concrete version types can be compared with each other.
"""

from __future__ import annotations

import re
from typing import Sequence, Union

from .semver import SemanticVersion, parse_version

_NUMERIC_IDENTIFIER = re.compile(r"[0-9]+")


def _is_numeric(identifier: str) -> bool:
    return _NUMERIC_IDENTIFIER.fullmatch(identifier) is not None


def _numeric_value(identifier: str) -> tuple[int, str]:
    """Order digit strings by value without converting them to int."""
    digits = identifier.lstrip("0")
    return (len(digits), digits)


def _compare_identifier(left: str, right: str) -> int:
    """Compare two single pre-release identifiers.

    Digit-only identifiers with different values compare numerically. When the
    values match but the text differs ("01" and "1") the text decides.
    """
    left_numeric = _is_numeric(left)
    right_numeric = _is_numeric(right)

    if left_numeric and right_numeric:
        left_value, right_value = _numeric_value(left), _numeric_value(right)
        if left_value != right_value:
            return -1 if left_value < right_value else 1
    elif left_numeric:
        # Numeric identifiers have lower precedence than alphanumeric ones
        return -1
    elif right_numeric:
        return 1

    if left != right:
        return -1 if left < right else 1
    return 0


def compare_prerelease(left: Sequence[str], right: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if left < right
        0 if both are equal
        1 if left > right

    An empty sequence means "no pre-release" and ranks above any pre-release
    (1.0.0 > 1.0.0-alpha).
    """
    if not left and not right:
        return 0
    if not left:
        return 1
    if not right:
        return -1

    for left_identifier, right_identifier in zip(left, right):
        result = _compare_identifier(left_identifier, right_identifier)
        if result:
            return result

    # A larger set of identifiers has higher precedence when the prefix is equal
    if len(left) != len(right):
        return -1 if len(left) < len(right) else 1
    return 0


def numerically_equivalent(left: SemanticVersion, right: SemanticVersion) -> bool:
    """Return True if MAJOR.MINOR.PATCH match, ignoring all identifiers."""
    return (left.major, left.minor, left.patch) == (right.major, right.minor, right.patch)


def versions_equal(left: SemanticVersion, right: SemanticVersion) -> bool:
    """Return True if both versions have the same precedence.

    Pre-release identifiers must match element by element; build metadata is
    not considered.
    """
    return numerically_equivalent(left, right) and tuple(left.prerelease) == tuple(
        right.prerelease
    )


def version_less_than(left: SemanticVersion, right: SemanticVersion) -> bool:
    """Return True if ``left`` has lower precedence than ``right``."""
    for attr in ("major", "minor", "patch"):
        left_value = getattr(left, attr)
        right_value = getattr(right, attr)
        if left_value != right_value:
            return left_value < right_value

    return compare_prerelease(left.prerelease, right.prerelease) < 0


def compare_versions(
    version1: Union[str, SemanticVersion], version2: Union[str, SemanticVersion]
) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or version object)
        version2: Second version (string or version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
        >>> compare_versions("1.0.0-2", "1.0.0-alpha")
        -1
        >>> compare_versions("1.0.0-rc.1", "1.0.0")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    if version_less_than(v1, v2):
        return -1
    if versions_equal(v1, v2):
        return 0
    return 1


def _identifier_key(identifier: str) -> tuple:
    if _is_numeric(identifier):
        return (0, _numeric_value(identifier), identifier)
    return (1, identifier)


def version_key(version: Union[str, SemanticVersion]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Keys order exactly like ``version_less_than`` and compare equal exactly
    when ``versions_equal`` holds.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # No pre-release sorts after every pre-release of the same numbers
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, tuple(_identifier_key(part) for part in v.prerelease))

    return (v.major, v.minor, v.patch, prerelease_key)
