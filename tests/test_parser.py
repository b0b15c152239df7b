# SPDX-License-Identifier: MIT
"""Unit tests for the scanning version parser."""

import logging
import sys

import pytest

from version_scanner import (
    ComponentKind,
    ParseComponent,
    ParseError,
    ParseFailure,
    ParseSuccess,
    next_component_kind,
    parse,
    same_kind,
    same_value,
)

MAJOR = ParseComponent.major
MINOR = ParseComponent.minor
PATCH = ParseComponent.patch
PRERELEASE = ParseComponent.prerelease
BUILD = ParseComponent.build_metadata


class TestParseSuccess:
    """Tests for inputs that parse completely."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        assert parse("1.2.3") == ParseSuccess((MAJOR(1), MINOR(2), PATCH(3)))

    def test_prerelease(self):
        result = parse("1.0.0-alpha.1")
        assert result == ParseSuccess((MAJOR(1), MINOR(0), PATCH(0), PRERELEASE(["alpha", "1"])))

    def test_build_metadata(self):
        result = parse("1.0.0+build.123")
        assert result == ParseSuccess((MAJOR(1), MINOR(0), PATCH(0), BUILD(["build", "123"])))

    def test_prerelease_and_build(self):
        result = parse("2.0.0-rc.1+exp.sha.5114f85")
        assert result.succeeded is True
        assert result.components[-2:] == (
            PRERELEASE(["rc", "1"]),
            BUILD(["exp", "sha", "5114f85"]),
        )

    def test_hyphens_inside_identifiers(self):
        """Test that hyphens are identifier characters after the first delimiter."""
        result = parse("1.0.0-x-y-z.--+b-1")
        assert result.components[-2:] == (PRERELEASE(["x-y-z", "--"]), BUILD(["b-1"]))

    def test_leading_zeros_accepted(self):
        """Test that leading zeros are scanned as plain digit runs."""
        result = parse("01.002.0003-01")
        assert result == ParseSuccess((MAJOR(1), MINOR(2), PATCH(3), PRERELEASE(["01"])))

    def test_missing_minor_digits_are_omitted(self):
        """Test that a reached but empty minor slot is simply left out."""
        assert parse("1..3") == ParseSuccess((MAJOR(1), PATCH(3)))

    def test_missing_major_digits_are_omitted(self):
        assert parse(".2.3") == ParseSuccess((MINOR(2), PATCH(3)))

    def test_largest_numeric_value(self):
        result = parse(f"{sys.maxsize}.0.0")
        assert result.components[0] == MAJOR(sys.maxsize)

    def test_overflowing_major_is_absent(self):
        """Test that a digit run beyond the platform integer range yields no value."""
        assert parse(f"{sys.maxsize + 1}.1.2") == ParseSuccess((MINOR(1), PATCH(2)))

    def test_many_leading_zeros(self):
        assert parse("0" * 5000 + "7.0.0").components[0] == MAJOR(7)


class TestParseFailure:
    """Tests for failure location, kind and accepted prefix."""

    def test_empty_string(self):
        assert parse("") == ParseFailure(0, MAJOR(), (), ParseError.MISSING_DELIMITER)

    def test_major_only(self):
        assert parse("2") == ParseFailure(1, MAJOR(), (MAJOR(2),), ParseError.MISSING_DELIMITER)

    def test_leading_v_prefix(self):
        assert parse("v1.2.3") == ParseFailure(0, MAJOR(), (), ParseError.MISSING_DELIMITER)

    def test_missing_minor_delimiter(self):
        """Test that "1.2" stops at the absent delimiter after minor."""
        result = parse("1.2")
        assert result == ParseFailure(
            3, MINOR(), (MAJOR(1), MINOR(2)), ParseError.MISSING_DELIMITER
        )

    def test_missing_patch(self):
        result = parse("1.2.")
        assert result == ParseFailure(4, PATCH(), (MAJOR(1), MINOR(2)), ParseError.MISSING_PATCH)

    def test_non_numeric_patch(self):
        result = parse("1.2.x")
        assert result.failed_component == PATCH()
        assert result.location == 4
        assert result.reason is ParseError.MISSING_PATCH

    def test_overflowing_patch(self):
        digits = str(sys.maxsize + 1)
        result = parse(f"1.2.{digits}")
        assert result == ParseFailure(
            4 + len(digits), PATCH(), (MAJOR(1), MINOR(2)), ParseError.MISSING_PATCH
        )

    def test_empty_prerelease(self):
        result = parse("1.2.3-")
        assert result == ParseFailure(
            6, PRERELEASE(), (MAJOR(1), MINOR(2), PATCH(3)), ParseError.MALFORMED_IDENTIFIER_LIST
        )

    def test_consecutive_dots_in_prerelease(self):
        """Test that identifiers before the empty one are kept in the prefix."""
        result = parse("1.2.3-alpha..beta")
        assert result == ParseFailure(
            12,
            PRERELEASE(),
            (MAJOR(1), MINOR(2), PATCH(3), PRERELEASE(["alpha"])),
            ParseError.MALFORMED_IDENTIFIER_LIST,
        )

    def test_trailing_dot_in_prerelease(self):
        result = parse("1.2.3-alpha.")
        assert result.location == 12
        assert result.failed_component == PRERELEASE()
        assert result.parsed_components[-1] == PRERELEASE(["alpha"])

    def test_dot_before_build_delimiter(self):
        result = parse("1.2.3-alpha.+build")
        assert result.location == 12
        assert result.reason is ParseError.MALFORMED_IDENTIFIER_LIST

    def test_empty_build_metadata(self):
        result = parse("1.2.3-rc+")
        assert result == ParseFailure(
            9,
            BUILD(),
            (MAJOR(1), MINOR(2), PATCH(3), PRERELEASE(["rc"])),
            ParseError.MALFORMED_IDENTIFIER_LIST,
        )

    def test_empty_identifier_in_build_metadata(self):
        result = parse("1.2.3+a..b")
        assert result.failed_component == BUILD()
        assert result.parsed_components[-1] == BUILD(["a"])

    def test_four_components(self):
        """Test trailing input after the patch number."""
        result = parse("1.2.3.4")
        assert result == ParseFailure(
            5, PATCH(), (MAJOR(1), MINOR(2), PATCH(3)), ParseError.TRAILING_INPUT
        )

    def test_trailing_input_after_patch_reports_patch(self):
        """Test that trailing input after PATCH blames Patch, not PrereleaseIdentifier."""
        result = parse("1.2.3_rc")
        assert result.failed_component.kind is ComponentKind.PATCH
        assert result.reason is ParseError.TRAILING_INPUT

    def test_trailing_input_after_prerelease(self):
        result = parse("1.2.3-rc.1 ")
        assert result.location == 10
        assert result.failed_component == BUILD()
        assert result.reason is ParseError.TRAILING_INPUT

    def test_trailing_input_after_build(self):
        result = parse("1.2.3+b1_x")
        assert result.location == 8
        assert result.failed_component == BUILD()

    def test_surrounding_whitespace_is_not_skipped(self):
        assert parse(" 1.2.3").succeeded is False

    def test_non_ascii_identifier(self):
        result = parse("1.2.3-ümlaut")
        assert result.failed_component == PRERELEASE()
        assert result.location == 6

    def test_non_string_input(self):
        with pytest.raises(TypeError):
            parse(123)  # type: ignore

    def test_describe(self):
        assert parse("1.2").describe() == "missing delimiter after minor at offset 3"
        assert parse("1.2.3.4").describe() == "unexpected trailing input at offset 5"

    def test_trailing_input_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="version_scanner.parser"):
            parse("1.2.3.4")
        assert "offset 5" in caplog.text


class TestComponents:
    """Tests for component predicates and rendering."""

    def test_same_kind_ignores_value(self):
        assert same_kind(MAJOR(1), MAJOR(2)) is True
        assert same_kind(MAJOR(1), MAJOR()) is True
        assert same_kind(MAJOR(1), MINOR(1)) is False

    def test_same_value(self):
        assert same_value(PATCH(3), PATCH(3)) is True
        assert same_value(PATCH(3), PATCH()) is False
        assert same_value(PRERELEASE(), PRERELEASE()) is True
        assert same_value(PRERELEASE(["a"]), BUILD(["a"])) is False

    def test_identifier_payload_is_frozen(self):
        identifiers = ["alpha"]
        component = PRERELEASE(identifiers)
        identifiers.append("beta")
        assert component.value == ("alpha",)

    def test_constructor_freezes_identifier_payload(self):
        component = ParseComponent(ComponentKind.PRERELEASE, ["a"])
        assert component.value == ("a",)
        assert hash(component) == hash(PRERELEASE(["a"]))
        assert same_value(component, PRERELEASE(["a"])) is True

    @pytest.mark.parametrize(
        "kind, value",
        [
            (ComponentKind.MAJOR, ("x",)),
            (ComponentKind.MINOR, "1"),
            (ComponentKind.PATCH, True),
            (ComponentKind.PRERELEASE, "alpha"),
            (ComponentKind.BUILD_METADATA, [1, 2]),
            (ComponentKind.BUILD_METADATA, 5),
        ],
    )
    def test_payload_must_match_kind(self, kind, value):
        with pytest.raises(TypeError):
            ParseComponent(kind, value)

    def test_str(self):
        assert str(MAJOR(1)) == "Major(1)"
        assert str(PATCH()) == "Patch(None)"
        assert str(PRERELEASE(["rc", "1"])) == "PrereleaseIdentifier(('rc', '1'))"

    @pytest.mark.parametrize(
        "last, expected",
        [
            (None, ComponentKind.MAJOR),
            (MAJOR(1), ComponentKind.MINOR),
            (MINOR(1), ComponentKind.PATCH),
            (PATCH(1), ComponentKind.PATCH),
            (PRERELEASE(["a"]), ComponentKind.BUILD_METADATA),
            (BUILD(["b"]), ComponentKind.BUILD_METADATA),
        ],
    )
    def test_next_component_kind(self, last, expected):
        assert next_component_kind(last) is expected
