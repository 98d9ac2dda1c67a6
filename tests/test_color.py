"""Tests for hex parsing and backdrop shade bucketing."""

from __future__ import annotations

import pytest

from lightsmith.color.convert import hex_to_rgb, normalize_hex, shade_of
from lightsmith.core.types import RGB, Shade
from lightsmith.errors import InvalidColorFormat, InvalidParameter


class TestHexToRgb:
    """Tests for hex_to_rgb."""

    def test_default_backdrop(self):
        """The default green parses to (0, 179, 0)."""
        assert hex_to_rgb("#00b300") == RGB(r=0, g=179, b=0)

    def test_hash_optional(self):
        assert hex_to_rgb("ff8000") == RGB(255, 128, 0)

    def test_case_insensitive(self):
        assert hex_to_rgb("#ABCDEF") == hex_to_rgb("#abcdef") == RGB(171, 205, 239)

    def test_channel_extremes(self):
        assert hex_to_rgb("#000000") == RGB(0, 0, 0)
        assert hex_to_rgb("#ffffff") == RGB(255, 255, 255)

    def test_fields_are_named(self):
        rgb = hex_to_rgb("#102030")
        assert (rgb.r, rgb.g, rgb.b) == (16, 32, 48)

    @pytest.mark.parametrize("bad", [
        "#0f0",        # shorthand
        "#00b30",      # missing digit
        "#00b3000",    # extra digit
        "#00g300",     # non-hex
        "##00b300",
        "",
        " #00b300",
        "#00b300\n",
    ])
    def test_malformed_strings_rejected(self, bad):
        """Anything but exactly six hex digits raises InvalidColorFormat."""
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(bad)

    def test_non_string_rejected(self):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(0x00B300)

    def test_error_is_an_invalid_parameter(self):
        """Callers catching InvalidParameter also see color errors."""
        with pytest.raises(InvalidParameter):
            hex_to_rgb("nope")


class TestNormalizeHex:
    """Tests for normalize_hex."""

    def test_lowercases_and_adds_hash(self):
        assert normalize_hex("00B300") == "#00b300"

    def test_invalid_propagates(self):
        with pytest.raises(InvalidColorFormat):
            normalize_hex("#fff")


class TestShadeOf:
    """Tests for shade thresholds."""

    @pytest.mark.parametrize("g, expected", [
        (255, Shade.BRIGHT),
        (201, Shade.BRIGHT),
        (200, Shade.MEDIUM),
        (179, Shade.MEDIUM),
        (151, Shade.MEDIUM),
        (150, Shade.DARK),
        (0, Shade.DARK),
    ])
    def test_boundaries(self, g, expected):
        assert shade_of(g) is expected

    def test_default_backdrop_is_medium(self):
        assert shade_of(hex_to_rgb("#00b300").g) is Shade.MEDIUM
