"""Tests for the built-in light and dark token tables."""

from itertools import combinations

import pytest

from retail_tokens.design_system.components import COMPONENTS_DARK, COMPONENTS_LIGHT
from retail_tokens.design_system.core import CORE_DARK, CORE_LIGHT
from retail_tokens.design_system.palette import (
    BLACK,
    BRAND,
    GREIGE,
    TRANSPARENT,
    WHITE,
    translucent,
)
from retail_tokens.design_system.providers import (
    ComponentTokens,
    CoreTokens,
    SemanticTokens,
)
from retail_tokens.design_system.semantic import SEMANTIC_DARK, SEMANTIC_LIGHT
from retail_tokens.design_system.values import Color, Shadow, TokenKind

TABLE_PAIRS = [
    (CoreTokens, CORE_LIGHT, CORE_DARK),
    (SemanticTokens, SEMANTIC_LIGHT, SEMANTIC_DARK),
    (ComponentTokens, COMPONENTS_LIGHT, COMPONENTS_DARK),
]


class TestSymmetry:
    @pytest.mark.parametrize(("provider", "light", "dark"), TABLE_PAIRS)
    def test_light_and_dark_define_every_declared_name(self, provider, light, dark):
        declared = set(provider.names())

        assert {name for name, _ in light.items()} == declared
        assert {name for name, _ in dark.items()} == declared

    @pytest.mark.parametrize(("provider", "light", "dark"), TABLE_PAIRS)
    def test_values_match_declared_kinds(self, provider, light, dark):
        for table in (light, dark):
            for name, value in table.items():
                assert TokenKind.of(value) is provider.kind_of(name), name


class TestThemeIndependence:
    @pytest.mark.parametrize(("provider", "light", "dark"), TABLE_PAIRS)
    def test_light_and_dark_differ(self, provider, light, dark):
        assert light != dark

    def test_surface_text_flips(self):
        assert SEMANTIC_LIGHT.text_on_surface_color_primary == GREIGE["900"]
        assert SEMANTIC_DARK.text_on_surface_color_primary == GREIGE["050"]

    def test_container_background_flips(self):
        assert SEMANTIC_LIGHT.background_container_color_white == WHITE
        assert SEMANTIC_DARK.background_container_color_white != WHITE

    def test_scales_are_shared(self):
        assert CORE_LIGHT.spacing_4 == CORE_DARK.spacing_4 == 16.0
        assert SEMANTIC_LIGHT.border_radius_md == SEMANTIC_DARK.border_radius_md
        assert SEMANTIC_LIGHT.brand_500 == SEMANTIC_DARK.brand_500 == BRAND["500"]


class TestLayerIsolation:
    @pytest.mark.parametrize(
        ("first", "second"),
        list(combinations([CoreTokens, SemanticTokens, ComponentTokens], 2)),
    )
    def test_names_are_disjoint(self, first, second):
        first_names = set(first.names()) | set(first.export_names())
        second_names = set(second.names()) | set(second.export_names())

        assert not first_names & second_names

    def test_providers_reject_foreign_names(self):
        assert not CoreTokens.declares("TextOn")
        assert not SemanticTokens.declares("UiTintColorPrimary")
        assert not ComponentTokens.declares("ElevationBelow1")


class TestCoreTables:
    def test_elevation_below_1_light(self):
        assert CORE_LIGHT.elevation_below_1 == Shadow(0, 1, 2, 0, Color(0, 0, 0, 0.05))

    def test_elevation_below_1_dark(self):
        assert CORE_DARK.elevation_below_1 == Shadow(0, 1, 2, 0, Color(0, 0, 0, 0.3))
        assert CORE_DARK.elevation_below_1 != CORE_LIGHT.elevation_below_1

    def test_above_shadows_mirror_below(self):
        for level in range(1, 6):
            above = CORE_LIGHT.get(f"elevation_above_{level}")
            below = CORE_LIGHT.get(f"elevation_below_{level}")
            assert above.offset_y == -below.offset_y
            assert above.blur_radius == below.blur_radius

    def test_elevation_parts_match_shadows(self):
        assert CORE_LIGHT.elevation_position_y_3 == CORE_LIGHT.elevation_below_3.offset_y
        assert (
            CORE_LIGHT.elevation_blur_radius_blur_5
            == CORE_LIGHT.elevation_below_5.blur_radius
        )
        assert CORE_LIGHT.elevation_lowest == CORE_LIGHT.elevation_below_1.color

    def test_shadow_alpha_grows_with_level(self):
        alphas = [
            CORE_DARK.get(f"elevation_below_{level}").color.alpha for level in range(1, 6)
        ]

        assert alphas == sorted(alphas)

    def test_spacing_scale(self):
        assert CORE_LIGHT.spacing_0 == 0.0
        assert CORE_LIGHT.spacing_36 == 144.0
        assert CORE_LIGHT.spacing_1px == 1.0

    def test_radius_scale(self):
        assert CORE_LIGHT.radius_20 == 40.0
        assert CORE_LIGHT.radius_999 == 999.0

    def test_composite_text_styles_are_declared(self):
        assert CoreTokens.declares("BodyLgBoldBaseFontSize")
        assert CoreTokens.declares("BodySmDefaultRegularTightLineHeight")
        assert CoreTokens.declares("HeadingH6ExtraboldNoneLetterSpacing")
        assert CoreTokens.kind_of("HeadingH1SemiboldBaseLineHeight") is TokenKind.DIMENSION

    def test_composite_text_style_count(self):
        suffixes = ("_font_size", "_letter_spacing", "_line_height")
        composite = [
            name
            for name in CoreTokens.names()
            if name.startswith(("body_", "heading_")) and name.endswith(suffixes)
        ]

        # 5 body sizes x 3 weights + 6 headings x 2 weights, 3 spacings, 3 values
        assert len(composite) == (5 * 3 + 6 * 2) * 3 * 3

    def test_composite_text_style_values(self):
        assert CORE_LIGHT.body_lg_bold_base_font_size == CORE_LIGHT.font_size_body_lg
        assert CORE_LIGHT.body_lg_bold_base_line_height == 25.0
        assert CORE_LIGHT.body_md_regular_none_line_height == 16.0
        assert CORE_LIGHT.body_sm_default_semibold_tight_line_height == 17.0
        assert CORE_LIGHT.heading_h1_extrabold_tight_font_size == 40.0
        assert CORE_LIGHT.heading_h1_extrabold_tight_line_height == 48.0
        assert CORE_DARK.heading_h4_semibold_base_letter_spacing == 0.0


class TestSemanticTables:
    def test_transparent_ramps(self):
        assert SEMANTIC_LIGHT.transparent_black_transparent_black_500 == Color(0, 0, 0, 0.5)
        assert SEMANTIC_LIGHT.transparent_white_transparent_white_100 == translucent(
            WHITE, "100"
        )

    def test_neutrals(self):
        assert SEMANTIC_DARK.neutrals_black == BLACK
        assert SEMANTIC_DARK.neutrals_transparent == TRANSPARENT

    def test_ghost_pressed_uses_overlay_for_theme(self):
        assert SEMANTIC_LIGHT.background_button_color_ghost_filled_pressed.red == 0.0
        assert SEMANTIC_DARK.background_button_color_ghost_filled_pressed.red == 1.0


class TestComponentTables:
    def test_action_icons_follow_button_labels(self):
        for semantic, components in (
            (SEMANTIC_LIGHT, COMPONENTS_LIGHT),
            (SEMANTIC_DARK, COMPONENTS_DARK),
        ):
            assert (
                components.icon_action_color_ghost_filled_default
                == semantic.text_button_color_ghost_filled_default
            )
            assert (
                components.icon_action_color_orange_outline_default
                == semantic.text_button_color_orange_outline_default
            )

    def test_light_icon_values(self):
        assert COMPONENTS_LIGHT.icon_action_color_ghost_filled_default == GREIGE["900"]
        assert COMPONENTS_LIGHT.icon_action_color_orange_outline_default == BRAND["500"]
        assert COMPONENTS_LIGHT.icon_action_color_orange_filled_default == WHITE

    def test_both_surface_spellings_agree(self):
        assert (
            COMPONENTS_DARK.ui_background_surface_color_primary
            == COMPONENTS_DARK.ui_background_surfacecolor_primary
        )

    def test_motion_is_theme_independent(self):
        assert COMPONENTS_LIGHT.ui_animation_duration_normal == 250.0
        assert (
            COMPONENTS_DARK.ui_animation_duration_normal
            == COMPONENTS_LIGHT.ui_animation_duration_normal
        )
