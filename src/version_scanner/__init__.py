# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

This package parses Semantic Versioning 2.0.0 strings with detailed failure
reporting and orders versions by SemVer precedence.

Example:
    >>> from version_scanner import Version, parse, compare_versions
    >>>
    >>> version = Version.from_string("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    ('alpha', '1')
    >>>
    >>> Version.from_string("1.1")
    Version(major=1, minor=1, patch=0, prerelease=(), build=())
    >>>
    >>> parse("1.2.3.4").location
    5
    >>>
    >>> compare_versions("1.0.0-2", "1.0.0-alpha")
    -1
"""

__version__ = "0.1.0"

from .parser import (
    ComponentKind,
    ParseComponent,
    ParseError,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    next_component_kind,
    parse,
    same_kind,
    same_value,
)
from .semver import (
    SPECIFICATION,
    InvalidVersionError,
    SemanticVersion,
    Version,
    is_valid_semver,
    parse_version,
)
from .compare import (
    compare_prerelease,
    compare_versions,
    numerically_equivalent,
    version_key,
    version_less_than,
    versions_equal,
)

__all__ = [
    # Parsing
    "ComponentKind",
    "ParseComponent",
    "ParseError",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "next_component_kind",
    "parse",
    "same_kind",
    "same_value",
    # Version values
    "SPECIFICATION",
    "InvalidVersionError",
    "SemanticVersion",
    "Version",
    "is_valid_semver",
    "parse_version",
    # Version comparison
    "compare_prerelease",
    "compare_versions",
    "numerically_equivalent",
    "version_key",
    "version_less_than",
    "versions_equal",
]
