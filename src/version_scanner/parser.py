# SPDX-License-Identifier: MIT
"""Scanning parser for semantic version strings.

The parser walks the input left to right through the fixed grammar

    MAJOR "." MINOR "." PATCH ["-" PRERELEASE] ["+" BUILDMETADATA]

and reports how far it got instead of a plain accept/reject. A failed parse
carries the offset where scanning stopped, the kind of component that could
not be completed and every component accepted before that point, so callers
can still build a best-effort version from the prefix.

Example:
    >>> parse("1.2.3-rc.1")
    ParseSuccess(components=(Major(1), Minor(2), Patch(3), PrereleaseIdentifier(('rc', '1'))))
    >>> result = parse("1.2")
    >>> result.location, str(result.failed_component), result.reason
    (3, 'Minor(None)', <ParseError.MISSING_DELIMITER: 'missing delimiter'>)
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

logger = logging.getLogger(__name__)

# Largest value accepted for MAJOR, MINOR and PATCH; longer digit runs are absent
MAX_NUMERIC_VALUE = sys.maxsize
_MAX_NUMERIC_DIGITS = len(str(MAX_NUMERIC_VALUE))

DEFAULT_DELIMITER = "."
PRERELEASE_DELIMITER = "-"
BUILD_METADATA_DELIMITER = "+"

DIGITS = frozenset("0123456789")
IDENTIFIER_CHARACTERS = frozenset(
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "-"
)


class ComponentKind(Enum):
    """The five slots of a semantic version, in canonical order."""

    MAJOR = "Major"
    MINOR = "Minor"
    PATCH = "Patch"
    PRERELEASE = "PrereleaseIdentifier"
    BUILD_METADATA = "BuildMetadataIdentifier"


class ParseError(Enum):
    """Why a parse stopped early."""

    MISSING_DELIMITER = "missing delimiter"
    MISSING_PATCH = "missing patch"
    MALFORMED_IDENTIFIER_LIST = "malformed identifier list"
    TRAILING_INPUT = "trailing input"


ComponentValue = Union[int, tuple[str, ...], None]

_NUMERIC_KINDS = frozenset((ComponentKind.MAJOR, ComponentKind.MINOR, ComponentKind.PATCH))


@dataclass(frozen=True, slots=True, repr=False)
class ParseComponent:
    """A version component tagged with its kind.

    ``value`` is ``None`` when the slot was reached but could not be filled;
    failed components are always reported that way.
    """

    kind: ComponentKind
    value: ComponentValue = None

    def __post_init__(self) -> None:
        if self.value is None:
            return
        if self.kind in _NUMERIC_KINDS:
            if isinstance(self.value, bool) or not isinstance(self.value, int):
                raise TypeError(
                    f"{self.kind.value} value must be an int, got {type(self.value).__name__}"
                )
            return
        if isinstance(self.value, str):
            raise TypeError(f"{self.kind.value} value must be a sequence of str, not a str")
        identifiers = tuple(self.value)
        if not all(isinstance(identifier, str) for identifier in identifiers):
            raise TypeError(f"{self.kind.value} identifiers must be strings")
        object.__setattr__(self, "value", identifiers)

    @classmethod
    def major(cls, value: Optional[int] = None) -> ParseComponent:
        return cls(ComponentKind.MAJOR, value)

    @classmethod
    def minor(cls, value: Optional[int] = None) -> ParseComponent:
        return cls(ComponentKind.MINOR, value)

    @classmethod
    def patch(cls, value: Optional[int] = None) -> ParseComponent:
        return cls(ComponentKind.PATCH, value)

    @classmethod
    def prerelease(cls, identifiers: Optional[Sequence[str]] = None) -> ParseComponent:
        return cls(ComponentKind.PRERELEASE, identifiers)

    @classmethod
    def build_metadata(cls, identifiers: Optional[Sequence[str]] = None) -> ParseComponent:
        return cls(ComponentKind.BUILD_METADATA, identifiers)

    def __str__(self) -> str:
        return f"{self.kind.value}({self.value!r})"

    __repr__ = __str__


def same_kind(left: ParseComponent, right: ParseComponent) -> bool:
    """Return True if both components fill the same slot, ignoring values."""
    return left.kind is right.kind


def same_value(left: ParseComponent, right: ParseComponent) -> bool:
    """Return True if both components fill the same slot with the same value."""
    return same_kind(left, right) and left.value == right.value


@dataclass(frozen=True, slots=True)
class ParseSuccess:
    """The whole input was consumed.

    Attributes:
        components: Every component that received a value, in input order.
            Slots that were reached without a value (e.g. an overflowing
            MAJOR) are omitted.
    """

    components: tuple[ParseComponent, ...]

    @property
    def succeeded(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Scanning stopped before the end of the input.

    Attributes:
        location: Number of characters consumed before the failure point
        failed_component: Component of the kind that failed, with value None
        parsed_components: Components accepted before the failure
        reason: The class of error that stopped the parse
    """

    location: int
    failed_component: ParseComponent
    parsed_components: tuple[ParseComponent, ...]
    reason: ParseError

    @property
    def succeeded(self) -> bool:
        return False

    def describe(self) -> str:
        """Return a human readable description of the failure."""
        kind = self.failed_component.kind
        if self.reason is ParseError.MISSING_DELIMITER:
            what = f"missing delimiter after {kind.name.lower()}"
        elif self.reason is ParseError.MISSING_PATCH:
            what = "missing patch number"
        elif self.reason is ParseError.MALFORMED_IDENTIFIER_LIST:
            what = f"empty identifier in {kind.value}"
        else:
            what = "unexpected trailing input"
        return f"{what} at offset {self.location}"


ParseResult = Union[ParseSuccess, ParseFailure]


# Kind reported for trailing input, keyed by the last accepted component.
# Patch maps to Patch again rather than PrereleaseIdentifier; callers rely on it.
_NEXT_KIND = {
    ComponentKind.MAJOR: ComponentKind.MINOR,
    ComponentKind.MINOR: ComponentKind.PATCH,
    ComponentKind.PATCH: ComponentKind.PATCH,
    ComponentKind.PRERELEASE: ComponentKind.BUILD_METADATA,
    ComponentKind.BUILD_METADATA: ComponentKind.BUILD_METADATA,
}


def next_component_kind(last: Optional[ParseComponent]) -> ComponentKind:
    """Return the kind blamed for trailing input after ``last``."""
    if last is None:
        return ComponentKind.MAJOR
    return _NEXT_KIND[last.kind]


class _Scanner:
    """Cursor over the input string."""

    def __init__(self, text: str):
        self.text = text
        self.location = 0

    @property
    def at_end(self) -> bool:
        return self.location >= len(self.text)

    def scan_characters(self, allowed: frozenset[str]) -> str:
        start = self.location
        while not self.at_end and self.text[self.location] in allowed:
            self.location += 1
        return self.text[start : self.location]

    def scan_literal(self, literal: str) -> bool:
        if self.text.startswith(literal, self.location):
            self.location += len(literal)
            return True
        return False

    def scan_number(self) -> Optional[int]:
        digits = self.scan_characters(DIGITS)
        significant = digits.lstrip("0")
        if not digits or len(significant) > _MAX_NUMERIC_DIGITS:
            return None
        value = int(significant or "0")
        if value > MAX_NUMERIC_VALUE:
            return None
        return value

    def scan_identifiers(self) -> list[str]:
        """Scan a dot separated identifier list.

        An empty string is recorded for every identifier slot that has no
        characters; scanning stops at the first one.
        """
        identifiers: list[str] = []
        while True:
            identifier = self.scan_characters(IDENTIFIER_CHARACTERS)
            if not identifier:
                identifiers.append("")
                break
            identifiers.append(identifier)
            if not self.scan_literal(DEFAULT_DELIMITER):
                break
            if self.at_end:
                identifiers.append("")
                break
        return identifiers


def parse(text: str) -> ParseResult:
    """Parse a semantic version string.

    Args:
        text: The string to parse. Nothing is stripped or skipped.

    Returns:
        ParseSuccess when the whole string matched the grammar, otherwise a
        ParseFailure describing where and why scanning stopped.

    Raises:
        TypeError: If ``text`` is not a string
    """
    if not isinstance(text, str):
        raise TypeError(f"Version must be a string, got {type(text).__name__}")

    scanner = _Scanner(text)
    parsed: list[ParseComponent] = []

    def failure(component: ParseComponent, reason: ParseError) -> ParseFailure:
        return ParseFailure(scanner.location, component, tuple(parsed), reason)

    for make in (ParseComponent.major, ParseComponent.minor):
        value = scanner.scan_number()
        if value is not None:
            parsed.append(make(value))
        if not scanner.scan_literal(DEFAULT_DELIMITER):
            return failure(make(), ParseError.MISSING_DELIMITER)

    patch = scanner.scan_number()
    if patch is None:
        return failure(ParseComponent.patch(), ParseError.MISSING_PATCH)
    parsed.append(ParseComponent.patch(patch))

    for delimiter, make in (
        (PRERELEASE_DELIMITER, ParseComponent.prerelease),
        (BUILD_METADATA_DELIMITER, ParseComponent.build_metadata),
    ):
        if not scanner.scan_literal(delimiter):
            continue
        identifiers = scanner.scan_identifiers()
        accepted = [identifier for identifier in identifiers if identifier]
        if accepted:
            parsed.append(make(accepted))
        if len(accepted) != len(identifiers):
            return failure(make(), ParseError.MALFORMED_IDENTIFIER_LIST)

    if scanner.at_end:
        return ParseSuccess(tuple(parsed))

    kind = next_component_kind(parsed[-1] if parsed else None)
    logger.debug(
        "Trailing input in %r at offset %d, reporting %s",
        text,
        scanner.location,
        kind.value,
    )
    return failure(ParseComponent(kind), ParseError.TRAILING_INPUT)
