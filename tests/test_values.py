"""Tests for token value types."""

import dataclasses

import pytest

from retail_tokens.design_system.values import Color, Shadow, TokenKind
from retail_tokens.exceptions import InvalidColorError


class TestColor:
    def test_channels_are_stored_as_floats(self):
        color = Color(1, 0, 0)

        assert color.red == 1.0
        assert isinstance(color.red, float)
        assert color.alpha == 1.0

    def test_equality_is_channel_wise(self):
        assert Color(0.0, 0.0, 0.0, 0.05) == Color(0, 0, 0, 0.05)
        assert Color(0.0, 0.0, 0.0, 0.05) != Color(0, 0, 0, 0.3)

    def test_channel_out_of_range_raises(self):
        with pytest.raises(InvalidColorError) as exc_info:
            Color(1.2, 0, 0)

        assert exc_info.value.error_code == "INVALID_COLOR"

    def test_negative_alpha_raises(self):
        with pytest.raises(InvalidColorError):
            Color(0, 0, 0, -0.1)

    def test_non_numeric_channel_raises(self):
        with pytest.raises(InvalidColorError):
            Color("red", 0, 0)  # type: ignore[arg-type]

    def test_is_immutable(self):
        color = Color(0, 0, 0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            color.red = 1.0  # type: ignore[misc]

    def test_is_hashable(self):
        assert len({Color(0, 0, 0), Color(0, 0, 0), Color(1, 1, 1)}) == 2


class TestColorHex:
    def test_from_hex_six_digits(self):
        color = Color.from_hex("#F96302")

        assert color.to_rgb255() == (249, 99, 2)
        assert color.alpha == 1.0

    def test_from_hex_without_hash(self):
        assert Color.from_hex("ffffff") == Color(1, 1, 1)

    def test_from_hex_eight_digits_reads_alpha(self):
        color = Color.from_hex("#00000080")

        assert color.alpha == pytest.approx(128 / 255)

    def test_explicit_alpha_overrides_hex_alpha(self):
        color = Color.from_hex("#000000FF", alpha=0.25)

        assert color.alpha == 0.25

    @pytest.mark.parametrize("value", ["#FFF", "#GGGGGG", "", "#1234567"])
    def test_malformed_hex_raises(self, value):
        with pytest.raises(InvalidColorError):
            Color.from_hex(value)

    def test_to_hex_opaque(self):
        assert Color.from_hex("#CA5002").to_hex() == "#CA5002"

    def test_to_hex_translucent_appends_alpha(self):
        assert Color(0, 0, 0, 0.5).to_hex() == "#00000080"


class TestColorHelpers:
    def test_from_rgb255(self):
        assert Color.from_rgb255(255, 0, 0) == Color(1, 0, 0)

    def test_from_rgb255_out_of_range_raises(self):
        with pytest.raises(InvalidColorError):
            Color.from_rgb255(256, 0, 0)

    def test_with_alpha_returns_new_color(self):
        base = Color(1, 1, 1)
        faded = base.with_alpha(0.1)

        assert faded == Color(1, 1, 1, 0.1)
        assert base.alpha == 1.0

    def test_to_css(self):
        assert Color(1, 0, 0, 0.5).to_css() == "rgba(255, 0, 0, 0.5)"
        assert Color(0, 0, 0).to_css() == "rgba(0, 0, 0, 1)"


class TestShadow:
    def test_fields_read_back_as_given(self):
        color = Color(0.1, 0.2, 0.3, 0.4)
        shadow = Shadow(1, 2, 3, 0, color)

        assert shadow.offset_x == 1.0
        assert shadow.offset_y == 2.0
        assert shadow.blur_radius == 3.0
        assert shadow.spread_radius == 0.0
        assert shadow.color == color

    def test_structural_equality(self):
        color = Color(0, 0, 0, 0.05)

        assert Shadow(0, 1, 2, 0, color) == Shadow(0.0, 1.0, 2.0, 0.0, color)
        assert Shadow(0, 1, 2, 0, color) != Shadow(0, -1, 2, 0, color)

    def test_color_must_be_color(self):
        with pytest.raises(TypeError):
            Shadow(0, 1, 2, 0, "#000000")  # type: ignore[arg-type]

    def test_offsets_must_be_numbers(self):
        with pytest.raises(TypeError):
            Shadow("0", 1, 2, 0, Color(0, 0, 0))  # type: ignore[arg-type]

    def test_to_css(self):
        shadow = Shadow(0, -3, 8, 0, Color(0, 0, 0, 0.1))

        assert shadow.to_css() == "0px -3px 8px 0px rgba(0, 0, 0, 0.1)"


class TestTokenKind:
    def test_of_classifies_values(self):
        assert TokenKind.of(Color(0, 0, 0)) is TokenKind.COLOR
        assert TokenKind.of(Shadow(0, 1, 2, 0, Color(0, 0, 0))) is TokenKind.SHADOW
        assert TokenKind.of(4.0) is TokenKind.DIMENSION
        assert TokenKind.of(4) is TokenKind.DIMENSION

    def test_of_rejects_other_values(self):
        with pytest.raises(TypeError):
            TokenKind.of("16px")
        with pytest.raises(TypeError):
            TokenKind.of(True)

    def test_from_annotation(self):
        assert TokenKind.from_annotation(float) is TokenKind.DIMENSION
        assert TokenKind.from_annotation(Color) is TokenKind.COLOR
        assert TokenKind.from_annotation(str) is None
