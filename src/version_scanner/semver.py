# SPDX-License-Identifier: MIT
"""Semantic version values.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1
- Build metadata: +build, +build.123, +20240101

Versions are built from strings either strictly (any malformed input is
rejected) or leniently (whatever prefix parsed is kept and missing numbers
default to zero, so "2" becomes 2.0.0 and "1.1" becomes 1.1.0).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Iterable, Optional, Protocol, Sequence, runtime_checkable

from .parser import MAX_NUMERIC_VALUE, ComponentKind, ParseComponent, ParseFailure, parse


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = "", failure: Optional[ParseFailure] = None):
        self.version = version
        self.failure = failure
        if not message and failure is not None:
            message = f"Invalid semantic version {version!r}: {failure.describe()}"
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


@runtime_checkable
class SemanticVersion(Protocol):
    """Fields a version must expose to take part in comparisons."""

    @property
    def major(self) -> int: ...

    @property
    def minor(self) -> int: ...

    @property
    def patch(self) -> int: ...

    @property
    def prerelease(self) -> Sequence[str]: ...

    @property
    def build(self) -> Sequence[str]: ...

    @property
    def is_prerelease(self) -> bool: ...


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a semantic version.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1")), empty for a release
        build: Build metadata identifiers (e.g., ("build", "123")), never compared

    Equality and ordering follow SemVer precedence and work against any
    object satisfying ``SemanticVersion``. Use ``dataclasses.replace`` to
    derive a modified copy.
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: tuple[str, ...] = field(default=())
    build: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        for attr in ("major", "minor", "patch"):
            value = getattr(self, attr)
            if value < 0:
                raise ValueError(f"{attr} must be non-negative, got {value}")
            if value > MAX_NUMERIC_VALUE:
                raise ValueError(f"{attr} must be at most {MAX_NUMERIC_VALUE}, got {value}")
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += "-" + ".".join(self.prerelease)
        if self.build:
            version += "+" + ".".join(self.build)
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        from .compare import versions_equal

        return versions_equal(self, other)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        from .compare import version_less_than

        return version_less_than(self, other)

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def from_version(cls, version: SemanticVersion) -> Version:
        """Copy any object exposing the ``SemanticVersion`` fields."""
        return cls(
            major=version.major,
            minor=version.minor,
            patch=version.patch,
            prerelease=tuple(version.prerelease),
            build=tuple(version.build),
        )

    @classmethod
    def from_components(cls, components: Iterable[ParseComponent]) -> Version:
        """Fold parsed components into a version.

        Components without a value, and slots that never appear, keep their
        defaults: 0 for numbers and no identifiers.
        """
        fields: dict[str, object] = {}
        for component in components:
            if component.value is None:
                continue
            fields[_FIELD_FOR_KIND[component.kind]] = component.value
        return cls(
            major=fields.get("major", 0),
            minor=fields.get("minor", 0),
            patch=fields.get("patch", 0),
            prerelease=fields.get("prerelease", ()),
            build=fields.get("build", ()),
        )

    @classmethod
    def from_string(cls, version_string: str, strict: bool = False) -> Optional[Version]:
        """Build a version from a string.

        Args:
            version_string: The string to parse
            strict: If True, return None unless the whole string is a valid
                semantic version. If False, keep whatever parsed and default
                the rest; this never fails.

        Examples:
            >>> Version.from_string("1.1")
            Version(major=1, minor=1, patch=0, prerelease=(), build=())
            >>> Version.from_string("1.1", strict=True) is None
            True
        """
        result = parse(version_string)
        if isinstance(result, ParseFailure):
            if strict:
                return None
            return cls.from_components(result.parsed_components)
        return cls.from_components(result.components)


_FIELD_FOR_KIND = {
    ComponentKind.MAJOR: "major",
    ComponentKind.MINOR: "minor",
    ComponentKind.PATCH: "patch",
    ComponentKind.PRERELEASE: "prerelease",
    ComponentKind.BUILD_METADATA: "build",
}

# The SemVer release implemented by this package
SPECIFICATION = Version(2, 0, 0)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Surrounding whitespace is ignored; anything else must match the grammar.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning.
            ``error.failure`` holds the parse failure details.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("2.0.0-rc.1+build.456")
        Version(major=2, minor=0, patch=0, prerelease=('rc', '1'), build=('build', '456'))
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(version_string, "Version string cannot be empty")

    result = parse(version_string)
    if isinstance(result, ParseFailure):
        raise InvalidVersionError(version_string, failure=result)
    return Version.from_components(result.components)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("1.0.0-alpha")
        True
    """
    if not isinstance(version_string, str):
        return False
    return parse(version_string.strip()).succeeded
