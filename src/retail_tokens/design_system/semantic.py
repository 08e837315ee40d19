"""Semantic token tables: light and dark.

Semantic tokens give palette primitives a contextual meaning ("text on a
surface", "inactive button background"). The hue ramps, translucent ramps,
pressed overlays and border metrics are the same in both themes and are
listed once in ``_SHARED``; everything else is written per theme.
"""

from typing import Final

from retail_tokens.design_system.palette import (
    BLACK,
    BRAND,
    BROWN,
    CINNABAR,
    GREEN,
    GREIGE,
    LEMON,
    MOONLIGHT,
    TRANSPARENT,
    TRANSPARENT_STEPS,
    WHITE,
    translucent,
)
from retail_tokens.design_system.providers import SemanticTokens
from retail_tokens.design_system.values import TokenValue

_RAMPS: Final = {
    "brand": BRAND,
    "cinnabar": CINNABAR,
    "greige": GREIGE,
    "lemon": LEMON,
    "moonlight": MOONLIGHT,
}

_SHARED: Final[dict[str, TokenValue]] = {
    # Hue ramps
    **{
        f"{ramp}_{step}": color
        for ramp, steps in _RAMPS.items()
        for step, color in steps.items()
    },
    # Translucent ramps
    **{
        f"transparent_black_transparent_black_{step}": translucent(BLACK, step)
        for step in TRANSPARENT_STEPS
    },
    **{
        f"transparent_white_transparent_white_{step}": translucent(WHITE, step)
        for step in TRANSPARENT_STEPS
    },
    "neutrals_black": BLACK,
    "neutrals_transparent": TRANSPARENT,
    "neutrals_white": WHITE,
    # Pressed overlays
    "overlay_pressed_darken": translucent(BLACK, "100"),
    "overlay_pressed_darken_more": translucent(BLACK, "200"),
    "overlay_pressed_lighten": translucent(WHITE, "100"),
    "overlay_pressed_lighten_more": translucent(WHITE, "200"),
    # Border scale
    "border_0": 0,
    "border_1": 1,
    "border_2": 2,
    "border_3": 3,
    "border_4": 4,
    "border_5": 6,
    "border_6": 8,
    "border_7": 10,
    "border_8": 12,
    "border_9": 16,
    "border_10": 20,
    "border_11": 24,
    "border_12": 32,
    # Border radius
    "border_radius_none": 0,
    "border_radius_xs": 2,
    "border_radius_sm": 4,
    "border_radius_md": 8,
    "border_radius_lg": 12,
    "border_radius_xl": 16,
    "border_radius_2xl": 20,
    "border_radius_3xl": 24,
    "border_radius_full": 9999,
    # Border width
    "border_width_none": 0,
    "border_width_xs": 1,
    "border_width_sm": 1.5,
    "border_width_md": 2,
    "border_width_lg": 3,
    "border_width_xl": 4,
    "border_width_2xl": 6,
}

# =============================================================================
# Light Theme
# =============================================================================

SEMANTIC_LIGHT: Final[SemanticTokens] = SemanticTokens(
    **_SHARED,
    # Accent and action backgrounds
    background_accent_color_blue=MOONLIGHT["100"],
    background_accent_color_brand=BRAND["100"],
    background_accent_color_brown=BROWN["100"],
    background_accent_color_dark_greige=GREIGE["200"],
    background_accent_color_green=GREEN["100"],
    background_accent_color_greige=GREIGE["100"],
    background_accent_color_red=CINNABAR["100"],
    background_accent_color_yellow=LEMON["100"],
    background_action_color_primary=BRAND["500"],
    background_action_color_secondary=GREIGE["900"],
    # Buttons
    background_button_color_brand_filled_default=BRAND["500"],
    background_button_color_brand_filled_inactive=GREIGE["200"],
    background_button_color_brand_gradient_filled_default=BRAND["500"],
    background_button_color_brand_gradient_filled_inactive=GREIGE["200"],
    background_button_color_ghost_filled_default=TRANSPARENT,
    background_button_color_ghost_filled_inactive=TRANSPARENT,
    background_button_color_ghost_filled_pressed=translucent(BLACK, "050"),
    background_button_color_transparent05_active=translucent(BLACK, "100"),
    background_button_color_transparent05_default=translucent(BLACK, "050"),
    background_button_color_transparent05_inactive=translucent(BLACK, "025"),
    background_button_color_transparent05_pressed=translucent(BLACK, "100"),
    background_button_color_transparent10_active=translucent(BLACK, "200"),
    background_button_color_transparent10_default=translucent(BLACK, "100"),
    background_button_color_transparent10_inactive=translucent(BLACK, "050"),
    background_button_color_transparent10_pressed=translucent(BLACK, "200"),
    background_button_color_white_filled_default=WHITE,
    background_button_color_white_filled_inactive=GREIGE["100"],
    # Containers
    background_container_color_brand=BRAND["500"],
    background_container_color_brand_accent=BRAND["050"],
    background_container_color_greige=GREIGE["100"],
    background_container_color_inverse=GREIGE["900"],
    background_container_color_transparent05=translucent(BLACK, "050"),
    background_container_color_transparent10=translucent(BLACK, "100"),
    background_container_color_transparent20=translucent(BLACK, "200"),
    background_container_color_white=WHITE,
    background_container_primary=WHITE,
    background_container_secondary=GREIGE["050"],
    # Feedback
    background_feedback_color_error_accent1=CINNABAR["050"],
    background_feedback_color_error_accent2=CINNABAR["500"],
    background_feedback_color_informational_accent1=MOONLIGHT["050"],
    background_feedback_color_informational_accent2=MOONLIGHT["500"],
    background_feedback_color_success_accent1=GREEN["050"],
    background_feedback_color_success_accent2=GREEN["500"],
    background_feedback_color_warning_accent1=LEMON["050"],
    background_feedback_color_warning_accent2=LEMON["300"],
    # Inputs, overlay, selectors, surfaces
    background_input_color_brand_filled_default=BRAND["500"],
    background_input_color_transparent10_default=translucent(BLACK, "100"),
    background_input_color_white_outlined_default=WHITE,
    background_input_color_white_outlined_inactive=GREIGE["100"],
    background_input_color_white_outlined_pressed=GREIGE["050"],
    background_overlay_color_page_scrim=translucent(BLACK, "500"),
    background_selector_color_filled_default=WHITE,
    background_selector_color_filled_inactive=GREIGE["100"],
    background_selector_color_filled_pressed=GREIGE["200"],
    background_selector_color_filled_selected=GREIGE["900"],
    background_selector_color_filled_switch_handle_default=WHITE,
    background_selector_color_filled_switch_handle_selected=WHITE,
    background_selector_color_filled_transparent=TRANSPARENT,
    background_selector_color_outline_default=WHITE,
    background_selector_color_outline_inactive=GREIGE["100"],
    background_selector_color_outline_pressed=GREIGE["050"],
    background_selector_color_outline_selected=GREIGE["900"],
    background_selector_color_outline_selected_accent=BRAND["050"],
    background_surface_color_greige=GREIGE["050"],
    background_surface_color_inverse=GREIGE["900"],
    background_surface_color_secondary=GREIGE["100"],
    background_surface_color_tertiary=GREIGE["200"],
    # Border colors
    border_button_color_accent=BRAND["500"],
    border_button_color_accent2=BRAND["600"],
    border_button_color_default=GREIGE["300"],
    border_button_color_focus=MOONLIGHT["500"],
    border_button_color_inactive=GREIGE["200"],
    border_button_color_orange_outline_default=BRAND["500"],
    border_button_color_orange_outline_inactive=GREIGE["300"],
    border_button_color_pressed=GREIGE["500"],
    border_color_focus=MOONLIGHT["500"],
    border_color_primary=GREIGE["300"],
    border_input_color_accent=BRAND["500"],
    border_input_color_accent2=BRAND["600"],
    border_input_color_active=GREIGE["900"],
    border_input_color_default=GREIGE["400"],
    border_input_color_error=CINNABAR["500"],
    border_input_color_focus=MOONLIGHT["500"],
    border_input_color_inactive=GREIGE["200"],
    border_input_color_pressed=GREIGE["600"],
    border_input_color_success=GREEN["500"],
    border_input_color_warning=LEMON["600"],
    border_on_container_active=GREIGE["900"],
    border_on_container_default=GREIGE["300"],
    border_on_container_inactive=GREIGE["200"],
    border_on_container_inverse=WHITE,
    border_on_container_pressed=GREIGE["500"],
    border_selector_color_filled_default=GREIGE["300"],
    border_selector_color_filled_inactive=GREIGE["200"],
    border_selector_color_filled_pressed=GREIGE["500"],
    border_selector_color_filled_selected=GREIGE["900"],
    border_selector_color_outline_default=GREIGE["300"],
    border_selector_color_outline_inactive=GREIGE["200"],
    border_selector_color_outline_pressed=GREIGE["500"],
    border_selector_color_outline_selected=GREIGE["900"],
    border_selector_color_outline_selected_accent=BRAND["500"],
    # Button and input text
    text_button_color_ghost_filled_default=GREIGE["900"],
    text_button_color_ghost_filled_inactive=GREIGE["400"],
    text_button_color_gradient_filled_default=WHITE,
    text_button_color_gradient_filled_inactive=WHITE.with_alpha(0.698),
    text_button_color_orange_filled_default=WHITE,
    text_button_color_orange_filled_inactive=GREIGE["400"],
    text_button_color_orange_outline_default=BRAND["500"],
    text_button_color_orange_outline_inactive=GREIGE["400"],
    text_button_color_transparent05_filled_default=GREIGE["900"],
    text_button_color_transparent05_filled_inactive=GREIGE["400"],
    text_button_color_transparent10_filled_default=GREIGE["900"],
    text_button_color_transparent10_filled_inactive=GREIGE["400"],
    text_button_color_white_filled_default=GREIGE["900"],
    text_button_color_white_filled_inactive=GREIGE["400"],
    text_input_color_brand_filled_default=WHITE,
    text_input_color_transparent10_active=GREIGE["900"],
    text_input_color_transparent10_default=GREIGE["600"],
    text_input_color_transparent10_inactive=GREIGE["400"],
    text_input_color_white_outlined_default=GREIGE["900"],
    # Text on containers, fills, surfaces
    text_on=GREIGE["900"],
    text_on_brand_color_primary=WHITE,
    text_on_container_color_accent=BRAND["500"],
    text_on_container_color_accent2=BRAND["600"],
    text_on_container_color_error=CINNABAR["500"],
    text_on_container_color_inactive=GREIGE["400"],
    text_on_container_color_informational=MOONLIGHT["500"],
    text_on_container_color_inverse=WHITE,
    text_on_container_color_primary=GREIGE["900"],
    text_on_container_color_quatrenary=GREIGE["300"],
    text_on_container_color_secondary=GREIGE["700"],
    text_on_container_color_success=GREEN["500"],
    text_on_container_color_tertiary=GREIGE["500"],
    text_on_container_color_warning=LEMON["600"],
    text_on_error_color_primary=WHITE,
    text_on_primary_color_primary=WHITE,
    text_on_primary_color_secondary=translucent(WHITE, "800"),
    text_on_success_color_primary=WHITE,
    text_on_surface_color_accent=BRAND["500"],
    text_on_surface_color_accent2=BRAND["600"],
    text_on_surface_color_destructive=CINNABAR["600"],
    text_on_surface_color_disabled=GREIGE["300"],
    text_on_surface_color_error=CINNABAR["500"],
    text_on_surface_color_inactive=GREIGE["400"],
    text_on_surface_color_informational=MOONLIGHT["500"],
    text_on_surface_color_inverse=WHITE,
    text_on_surface_color_link=MOONLIGHT["600"],
    text_on_surface_color_placeholder=GREIGE["500"],
    text_on_surface_color_primary=GREIGE["900"],
    text_on_surface_color_quatrenary=GREIGE["300"],
    text_on_surface_color_secondary=GREIGE["700"],
    text_on_surface_color_success=GREEN["500"],
    text_on_surface_color_tertiary=GREIGE["500"],
    text_on_surface_color_warning=LEMON["600"],
    # Selector text
    text_selector_color_active=GREIGE["900"],
    text_selector_color_default=GREIGE["700"],
    text_selector_color_filled_active=GREIGE["900"],
    text_selector_color_filled_default=GREIGE["700"],
    text_selector_color_filled_inactive=GREIGE["400"],
    text_selector_color_filled_selected=GREIGE["050"],
    text_selector_color_inactive=GREIGE["400"],
    text_selector_color_outline_active=GREIGE["900"],
    text_selector_color_outline_default=GREIGE["700"],
    text_selector_color_outline_inactive=GREIGE["400"],
    text_selector_color_outline_selected=GREIGE["050"],
    text_selector_color_selected=GREIGE["050"],
    texture_notebook_alt=GREIGE["100"],
)

# =============================================================================
# Dark Theme
# =============================================================================

SEMANTIC_DARK: Final[SemanticTokens] = SemanticTokens(
    **_SHARED,
    # Accent and action backgrounds
    background_accent_color_blue=MOONLIGHT["900"],
    background_accent_color_brand=BRAND["900"],
    background_accent_color_brown=BROWN["800"],
    background_accent_color_dark_greige=GREIGE["700"],
    background_accent_color_green=GREEN["900"],
    background_accent_color_greige=GREIGE["800"],
    background_accent_color_red=CINNABAR["900"],
    background_accent_color_yellow=LEMON["900"],
    background_action_color_primary=BRAND["400"],
    background_action_color_secondary=GREIGE["050"],
    # Buttons
    background_button_color_brand_filled_default=BRAND["400"],
    background_button_color_brand_filled_inactive=GREIGE["700"],
    background_button_color_brand_gradient_filled_default=BRAND["400"],
    background_button_color_brand_gradient_filled_inactive=GREIGE["700"],
    background_button_color_ghost_filled_default=TRANSPARENT,
    background_button_color_ghost_filled_inactive=TRANSPARENT,
    background_button_color_ghost_filled_pressed=translucent(WHITE, "050"),
    background_button_color_transparent05_active=translucent(WHITE, "100"),
    background_button_color_transparent05_default=translucent(WHITE, "050"),
    background_button_color_transparent05_inactive=translucent(WHITE, "025"),
    background_button_color_transparent05_pressed=translucent(WHITE, "100"),
    background_button_color_transparent10_active=translucent(WHITE, "200"),
    background_button_color_transparent10_default=translucent(WHITE, "100"),
    background_button_color_transparent10_inactive=translucent(WHITE, "050"),
    background_button_color_transparent10_pressed=translucent(WHITE, "200"),
    background_button_color_white_filled_default=GREIGE["800"],
    background_button_color_white_filled_inactive=GREIGE["900"],
    # Containers
    background_container_color_brand=BRAND["400"],
    background_container_color_brand_accent=BRAND["950"],
    background_container_color_greige=GREIGE["800"],
    background_container_color_inverse=GREIGE["050"],
    background_container_color_transparent05=translucent(WHITE, "050"),
    background_container_color_transparent10=translucent(WHITE, "100"),
    background_container_color_transparent20=translucent(WHITE, "200"),
    background_container_color_white=GREIGE["900"],
    background_container_primary=GREIGE["900"],
    background_container_secondary=GREIGE["800"],
    # Feedback
    background_feedback_color_error_accent1=CINNABAR["950"],
    background_feedback_color_error_accent2=CINNABAR["400"],
    background_feedback_color_informational_accent1=MOONLIGHT["950"],
    background_feedback_color_informational_accent2=MOONLIGHT["400"],
    background_feedback_color_success_accent1=GREEN["900"],
    background_feedback_color_success_accent2=GREEN["400"],
    background_feedback_color_warning_accent1=LEMON["950"],
    background_feedback_color_warning_accent2=LEMON["400"],
    # Inputs, overlay, selectors, surfaces
    background_input_color_brand_filled_default=BRAND["400"],
    background_input_color_transparent10_default=translucent(WHITE, "100"),
    background_input_color_white_outlined_default=GREIGE["900"],
    background_input_color_white_outlined_inactive=GREIGE["800"],
    background_input_color_white_outlined_pressed=GREIGE["800"],
    background_overlay_color_page_scrim=translucent(BLACK, "700"),
    background_selector_color_filled_default=GREIGE["900"],
    background_selector_color_filled_inactive=GREIGE["800"],
    background_selector_color_filled_pressed=GREIGE["700"],
    background_selector_color_filled_selected=GREIGE["050"],
    background_selector_color_filled_switch_handle_default=GREIGE["050"],
    background_selector_color_filled_switch_handle_selected=GREIGE["900"],
    background_selector_color_filled_transparent=TRANSPARENT,
    background_selector_color_outline_default=GREIGE["900"],
    background_selector_color_outline_inactive=GREIGE["800"],
    background_selector_color_outline_pressed=GREIGE["800"],
    background_selector_color_outline_selected=GREIGE["050"],
    background_selector_color_outline_selected_accent=BRAND["950"],
    background_surface_color_greige=GREIGE["950"],
    background_surface_color_inverse=GREIGE["050"],
    background_surface_color_secondary=GREIGE["900"],
    background_surface_color_tertiary=GREIGE["800"],
    # Border colors
    border_button_color_accent=BRAND["400"],
    border_button_color_accent2=BRAND["300"],
    border_button_color_default=GREIGE["600"],
    border_button_color_focus=MOONLIGHT["300"],
    border_button_color_inactive=GREIGE["700"],
    border_button_color_orange_outline_default=BRAND["400"],
    border_button_color_orange_outline_inactive=GREIGE["600"],
    border_button_color_pressed=GREIGE["400"],
    border_color_focus=MOONLIGHT["300"],
    border_color_primary=GREIGE["600"],
    border_input_color_accent=BRAND["400"],
    border_input_color_accent2=BRAND["300"],
    border_input_color_active=GREIGE["050"],
    border_input_color_default=GREIGE["500"],
    border_input_color_error=CINNABAR["400"],
    border_input_color_focus=MOONLIGHT["300"],
    border_input_color_inactive=GREIGE["700"],
    border_input_color_pressed=GREIGE["400"],
    border_input_color_success=GREEN["400"],
    border_input_color_warning=LEMON["400"],
    border_on_container_active=GREIGE["050"],
    border_on_container_default=GREIGE["600"],
    border_on_container_inactive=GREIGE["700"],
    border_on_container_inverse=GREIGE["900"],
    border_on_container_pressed=GREIGE["400"],
    border_selector_color_filled_default=GREIGE["600"],
    border_selector_color_filled_inactive=GREIGE["700"],
    border_selector_color_filled_pressed=GREIGE["400"],
    border_selector_color_filled_selected=GREIGE["050"],
    border_selector_color_outline_default=GREIGE["600"],
    border_selector_color_outline_inactive=GREIGE["700"],
    border_selector_color_outline_pressed=GREIGE["400"],
    border_selector_color_outline_selected=GREIGE["050"],
    border_selector_color_outline_selected_accent=BRAND["400"],
    # Button and input text
    text_button_color_ghost_filled_default=GREIGE["050"],
    text_button_color_ghost_filled_inactive=GREIGE["500"],
    text_button_color_gradient_filled_default=WHITE,
    text_button_color_gradient_filled_inactive=WHITE.with_alpha(0.5),
    text_button_color_orange_filled_default=WHITE,
    text_button_color_orange_filled_inactive=GREIGE["500"],
    text_button_color_orange_outline_default=BRAND["400"],
    text_button_color_orange_outline_inactive=GREIGE["500"],
    text_button_color_transparent05_filled_default=GREIGE["050"],
    text_button_color_transparent05_filled_inactive=GREIGE["500"],
    text_button_color_transparent10_filled_default=GREIGE["050"],
    text_button_color_transparent10_filled_inactive=GREIGE["500"],
    text_button_color_white_filled_default=GREIGE["050"],
    text_button_color_white_filled_inactive=GREIGE["500"],
    text_input_color_brand_filled_default=WHITE,
    text_input_color_transparent10_active=GREIGE["050"],
    text_input_color_transparent10_default=GREIGE["300"],
    text_input_color_transparent10_inactive=GREIGE["500"],
    text_input_color_white_outlined_default=GREIGE["050"],
    # Text on containers, fills, surfaces
    text_on=GREIGE["050"],
    text_on_brand_color_primary=WHITE,
    text_on_container_color_accent=BRAND["400"],
    text_on_container_color_accent2=BRAND["300"],
    text_on_container_color_error=CINNABAR["400"],
    text_on_container_color_inactive=GREIGE["500"],
    text_on_container_color_informational=MOONLIGHT["400"],
    text_on_container_color_inverse=GREIGE["900"],
    text_on_container_color_primary=GREIGE["050"],
    text_on_container_color_quatrenary=GREIGE["600"],
    text_on_container_color_secondary=GREIGE["200"],
    text_on_container_color_success=GREEN["400"],
    text_on_container_color_tertiary=GREIGE["400"],
    text_on_container_color_warning=LEMON["400"],
    text_on_error_color_primary=WHITE,
    text_on_primary_color_primary=WHITE,
    text_on_primary_color_secondary=translucent(WHITE, "800"),
    text_on_success_color_primary=WHITE,
    text_on_surface_color_accent=BRAND["400"],
    text_on_surface_color_accent2=BRAND["300"],
    text_on_surface_color_destructive=CINNABAR["400"],
    text_on_surface_color_disabled=GREIGE["600"],
    text_on_surface_color_error=CINNABAR["400"],
    text_on_surface_color_inactive=GREIGE["500"],
    text_on_surface_color_informational=MOONLIGHT["400"],
    text_on_surface_color_inverse=GREIGE["900"],
    text_on_surface_color_link=MOONLIGHT["300"],
    text_on_surface_color_placeholder=GREIGE["400"],
    text_on_surface_color_primary=GREIGE["050"],
    text_on_surface_color_quatrenary=GREIGE["600"],
    text_on_surface_color_secondary=GREIGE["200"],
    text_on_surface_color_success=GREEN["400"],
    text_on_surface_color_tertiary=GREIGE["400"],
    text_on_surface_color_warning=LEMON["400"],
    # Selector text
    text_selector_color_active=GREIGE["050"],
    text_selector_color_default=GREIGE["200"],
    text_selector_color_filled_active=GREIGE["050"],
    text_selector_color_filled_default=GREIGE["200"],
    text_selector_color_filled_inactive=GREIGE["500"],
    text_selector_color_filled_selected=GREIGE["900"],
    text_selector_color_inactive=GREIGE["500"],
    text_selector_color_outline_active=GREIGE["050"],
    text_selector_color_outline_default=GREIGE["200"],
    text_selector_color_outline_inactive=GREIGE["500"],
    text_selector_color_outline_selected=GREIGE["900"],
    text_selector_color_selected=GREIGE["900"],
    texture_notebook_alt=GREIGE["900"],
)
