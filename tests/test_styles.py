"""Tests for resolved button and feedback colors."""

import pytest

from retail_tokens.design_system.components import COMPONENTS_DARK, COMPONENTS_LIGHT
from retail_tokens.design_system.palette import (
    BLACK,
    BRAND,
    CINNABAR,
    GREIGE,
    TRANSPARENT,
    WHITE,
    translucent,
)
from retail_tokens.design_system.semantic import SEMANTIC_DARK, SEMANTIC_LIGHT
from retail_tokens.design_system.styles import (
    ButtonColors,
    ButtonStyle,
    FeedbackVariant,
    get_button_css,
    resolve_button_colors,
    resolve_feedback_colors,
)
from retail_tokens.design_system.themes import Theme
from retail_tokens.exceptions import InvalidThemeError


class TestButtonColors:
    def test_orange_filled_light(self):
        colors = resolve_button_colors(ButtonStyle.ORANGE_FILLED, Theme.LIGHT)

        assert colors == ButtonColors(
            background=BRAND["500"],
            foreground=WHITE,
            border=TRANSPARENT,
            pressed_background=TRANSPARENT,
            icon=WHITE,
        )

    def test_orange_filled_disabled(self):
        colors = resolve_button_colors("orange_filled", "light", disabled=True)

        assert colors.background == SEMANTIC_LIGHT.background_button_color_brand_filled_inactive
        assert colors.foreground == GREIGE["400"]

    def test_gradient_uses_brand_gradient_background(self):
        colors = resolve_button_colors(ButtonStyle.GRADIENT_FILLED, Theme.DARK)
        disabled = resolve_button_colors(ButtonStyle.GRADIENT_FILLED, Theme.LIGHT, True)

        assert (
            colors.background
            == SEMANTIC_DARK.background_button_color_brand_gradient_filled_default
        )
        assert (
            disabled.background
            == SEMANTIC_LIGHT.background_button_color_brand_gradient_filled_inactive
        )

    @pytest.mark.parametrize("theme", list(Theme))
    def test_outlined_has_transparent_background(self, theme):
        colors = resolve_button_colors(ButtonStyle.OUTLINED, theme)

        assert colors.background == TRANSPARENT

    def test_outlined_border_comes_from_orange_outline_tokens(self):
        light = resolve_button_colors(ButtonStyle.OUTLINED, Theme.LIGHT)
        dark_disabled = resolve_button_colors(ButtonStyle.OUTLINED, Theme.DARK, True)

        assert light.border == SEMANTIC_LIGHT.border_button_color_orange_outline_default
        assert (
            dark_disabled.border
            == SEMANTIC_DARK.border_button_color_orange_outline_inactive
        )

    @pytest.mark.parametrize(
        ("style", "token"),
        [
            (ButtonStyle.GHOST, "background_button_color_ghost_filled_pressed"),
            (ButtonStyle.BLACK5, "background_button_color_transparent05_pressed"),
            (ButtonStyle.BLACK10, "background_button_color_transparent10_pressed"),
        ],
    )
    def test_pressed_background(self, style, token):
        colors = resolve_button_colors(style, Theme.LIGHT)

        assert colors.pressed_background == SEMANTIC_LIGHT.get(token)

    @pytest.mark.parametrize(
        "style",
        [ButtonStyle.ORANGE_FILLED, ButtonStyle.GRADIENT_FILLED, ButtonStyle.WHITE_FILLED],
    )
    def test_no_pressed_background_for_filled_styles(self, style):
        assert resolve_button_colors(style, Theme.DARK).pressed_background == TRANSPARENT

    def test_disabled_has_no_pressed_background(self):
        colors = resolve_button_colors(ButtonStyle.GHOST, Theme.LIGHT, disabled=True)

        assert colors.pressed_background == TRANSPARENT

    def test_ghost_pressed_overlay_flips_with_theme(self):
        light = resolve_button_colors(ButtonStyle.GHOST, Theme.LIGHT)
        dark = resolve_button_colors(ButtonStyle.GHOST, Theme.DARK)

        assert light.pressed_background == translucent(BLACK, "050")
        assert dark.pressed_background == translucent(WHITE, "050")

    def test_icons_come_from_component_layer(self):
        light = resolve_button_colors(ButtonStyle.BLACK10, Theme.LIGHT)
        dark = resolve_button_colors(ButtonStyle.WHITE_FILLED, Theme.DARK, True)

        assert light.icon == COMPONENTS_LIGHT.icon_action_color_transparent10_filled_default
        assert dark.icon == COMPONENTS_DARK.icon_action_color_white_filled_inactive

    def test_unknown_style_raises(self):
        with pytest.raises(ValueError):
            resolve_button_colors("neon", Theme.LIGHT)

    def test_system_theme_is_rejected(self):
        with pytest.raises(InvalidThemeError):
            resolve_button_colors(ButtonStyle.GHOST, "system")


class TestFeedbackColors:
    def test_error_light(self):
        colors = resolve_feedback_colors(FeedbackVariant.ERROR, Theme.LIGHT)

        assert colors.background == CINNABAR["050"]
        assert colors.text == CINNABAR["500"]
        assert colors.icon == COMPONENTS_LIGHT.icon_on_container_color_error

    @pytest.mark.parametrize("variant", list(FeedbackVariant))
    def test_every_variant_differs_between_themes(self, variant):
        light = resolve_feedback_colors(variant, Theme.LIGHT)
        dark = resolve_feedback_colors(variant, Theme.DARK)

        assert light.background != dark.background

    def test_accepts_string_variant(self):
        colors = resolve_feedback_colors("informational", "dark")

        assert colors.text == SEMANTIC_DARK.text_on_container_color_informational


class TestButtonCss:
    def test_default_button(self):
        css = get_button_css()

        assert "background-color: rgba(249, 99, 2, 1);" in css
        assert "border-radius: 999px;" in css
        assert "cursor: pointer;" in css

    def test_outlined_button_has_border(self):
        css = get_button_css(ButtonStyle.OUTLINED, Theme.LIGHT)

        assert "border: 2px solid rgba(249, 99, 2, 1);" in css
        assert "background-color: rgba(0, 0, 0, 0);" in css

    def test_filled_button_has_no_border_width(self):
        css = get_button_css(ButtonStyle.WHITE_FILLED, Theme.DARK)

        assert "border: 0px solid" in css

    def test_disabled_button(self):
        css = get_button_css(ButtonStyle.GHOST, Theme.DARK, disabled=True)

        assert "cursor: not-allowed;" in css
