"""Component token tables: light and dark.

Component tokens are bound to concrete UI elements. Every color here is a
semantic token re-exposed under the element's name, so both tables come out
of one mapping applied to each theme's semantic table. Motion, elevation and
layout spacing do not vary by theme.
"""

from typing import Final

from retail_tokens.design_system.providers import ComponentTokens, SemanticTokens
from retail_tokens.design_system.semantic import SEMANTIC_DARK, SEMANTIC_LIGHT
from retail_tokens.design_system.values import TokenValue

_STATIC: Final[dict[str, TokenValue]] = {
    # Durations in milliseconds
    "ui_animation_duration_instant": 0,
    "ui_animation_duration_fast": 150,
    "ui_animation_duration_normal": 250,
    "ui_animation_duration_slow": 400,
    "ui_animation_duration_very_slow": 600,
    # Easing curves, exported as a single control value
    "ui_animation_movement_easein": 0.42,
    "ui_animation_movement_easeinout": 0.65,
    "ui_animation_movement_easeout": 0.58,
    "ui_animation_movement_spring": 0.8,
    # Elevation levels
    "ui_elevation_none": 0,
    "ui_elevation_xs": 1,
    "ui_elevation_sm": 2,
    "ui_elevation_md": 4,
    "ui_elevation_lg": 8,
    "ui_elevation_xl": 12,
    "ui_elevation_2x": 16,
    # Layout spacing
    "ui_spacing_content_inset_horizontal": 16,
    "ui_spacing_content_inset_vertical": 12,
    "ui_spacing_content_padding_card": 16,
    "ui_spacing_content_padding_list_item": 12,
    "ui_spacing_content_padding_section": 24,
    "ui_spacing_content_padding_stack": 8,
    "ui_spacing_content_safe_area_bottom": 34,
    "ui_spacing_content_safe_area_top": 44,
    **{
        f"ui_spacing_spacing_{step}": value
        for step, value in enumerate((0, 2, 4, 8, 12, 16, 20, 24, 32, 40, 48))
    },
}


def _derive(s: SemanticTokens) -> ComponentTokens:
    """Bind a semantic table to the component layer."""
    return ComponentTokens(
        **_STATIC,
        # Action icons follow the label color of the same button style
        icon_action_color_ghost_filled_default=s.text_button_color_ghost_filled_default,
        icon_action_color_ghost_filled_inactive=s.text_button_color_ghost_filled_inactive,
        icon_action_color_gradient_filled_default=s.text_button_color_gradient_filled_default,
        icon_action_color_gradient_filled_inactive=s.text_button_color_gradient_filled_inactive,
        icon_action_color_orange_filled_default=s.text_button_color_orange_filled_default,
        icon_action_color_orange_filled_inactive=s.text_button_color_orange_filled_inactive,
        icon_action_color_orange_outline_default=s.text_button_color_orange_outline_default,
        icon_action_color_orange_outline_inactive=s.text_button_color_orange_outline_inactive,
        icon_action_color_transparent05_filled_default=s.text_button_color_transparent05_filled_default,
        icon_action_color_transparent05_filled_inactive=s.text_button_color_transparent05_filled_inactive,
        icon_action_color_transparent10_filled_default=s.text_button_color_transparent10_filled_default,
        icon_action_color_transparent10_filled_inactive=s.text_button_color_transparent10_filled_inactive,
        icon_action_color_white_filled_default=s.text_button_color_white_filled_default,
        icon_action_color_white_filled_inactive=s.text_button_color_white_filled_inactive,
        icon_color_primary=s.text_on_surface_color_primary,
        icon_color_secondary=s.text_on_surface_color_secondary,
        icon_color_tertiary=s.text_on_surface_color_tertiary,
        icon_input_color_active=s.text_input_color_transparent10_active,
        icon_input_color_default=s.text_input_color_transparent10_default,
        icon_input_color_inactive=s.text_input_color_transparent10_inactive,
        icon_on_container_color_accent=s.text_on_container_color_accent,
        icon_on_container_color_accent2=s.text_on_container_color_accent2,
        icon_on_container_color_error=s.text_on_container_color_error,
        icon_on_container_color_inactive=s.text_on_container_color_inactive,
        icon_on_container_color_informational=s.text_on_container_color_informational,
        icon_on_container_color_inverse=s.text_on_container_color_inverse,
        icon_on_container_color_primary=s.text_on_container_color_primary,
        icon_on_container_color_secondary=s.text_on_container_color_secondary,
        icon_on_container_color_success=s.text_on_container_color_success,
        icon_on_container_color_tertiary=s.text_on_container_color_tertiary,
        icon_on_container_color_warning=s.text_on_container_color_warning,
        icon_on_surface_color_accent=s.text_on_surface_color_accent,
        icon_on_surface_color_accent2=s.text_on_surface_color_accent2,
        icon_on_surface_color_danger=s.text_on_surface_color_destructive,
        icon_on_surface_color_error=s.text_on_surface_color_error,
        icon_on_surface_color_inactive=s.text_on_surface_color_inactive,
        icon_on_surface_color_informational=s.text_on_surface_color_informational,
        icon_on_surface_color_inverse=s.text_on_surface_color_inverse,
        icon_on_surface_color_primary=s.text_on_surface_color_primary,
        icon_on_surface_color_secondary=s.text_on_surface_color_secondary,
        icon_on_surface_color_success=s.text_on_surface_color_success,
        icon_on_surface_color_tertiary=s.text_on_surface_color_tertiary,
        icon_on_surface_color_warning=s.text_on_surface_color_warning,
        icon_selector_color_filled_active=s.text_selector_color_filled_active,
        icon_selector_color_filled_default=s.text_selector_color_filled_default,
        icon_selector_color_filled_iconcolorbrand=s.text_on_surface_color_accent,
        icon_selector_color_filled_iconcolorwarning=s.text_on_surface_color_warning,
        icon_selector_color_filled_icononbrandcolorprimary=s.text_on_brand_color_primary,
        icon_selector_color_filled_icononsurfacecolordisabled=s.text_on_surface_color_disabled,
        icon_selector_color_filled_icononsurfacecolorprimary=s.text_on_surface_color_primary,
        icon_selector_color_filled_icononsurfacecolorsecondary=s.text_on_surface_color_secondary,
        icon_selector_color_filled_icononsurfacecolortertiary=s.text_on_surface_color_tertiary,
        icon_selector_color_filled_inactive=s.text_selector_color_filled_inactive,
        icon_selector_color_filled_selected=s.text_selector_color_filled_selected,
        icon_selector_color_outline_active=s.text_selector_color_outline_active,
        icon_selector_color_outline_default=s.text_selector_color_outline_default,
        icon_selector_color_outline_inactive=s.text_selector_color_outline_inactive,
        icon_selector_color_outline_selected=s.text_selector_color_outline_selected,
        # Inputs
        input_background_default=s.background_input_color_white_outlined_default,
        input_background_error=s.background_feedback_color_error_accent1,
        input_background_focused=s.background_input_color_white_outlined_pressed,
        input_border_default=s.border_input_color_default,
        input_border_error=s.border_input_color_error,
        input_border_focused=s.border_input_color_focus,
        input_text_error=s.text_on_surface_color_error,
        input_text_helper=s.text_on_surface_color_tertiary,
        input_text_label=s.text_on_surface_color_secondary,
        input_text_placeholder=s.text_on_surface_color_placeholder,
        # System chrome; both spellings of the surface tokens are exported
        ui_background_menu_color=s.background_container_primary,
        ui_background_modal_color=s.background_container_primary,
        ui_background_navigationbar=s.background_container_primary,
        ui_background_popover_color=s.background_container_primary,
        ui_background_searchbar=s.background_surface_color_secondary,
        ui_background_sheet_color=s.background_container_primary,
        ui_background_statusbar=s.background_container_primary,
        ui_background_surface_color_elevated=s.background_container_primary,
        ui_background_surface_color_grouped=s.background_surface_color_secondary,
        ui_background_surface_color_primary=s.background_surface_color_greige,
        ui_background_surface_color_secondary=s.background_container_secondary,
        ui_background_surfacecolor_elevated=s.background_container_primary,
        ui_background_surfacecolor_grouped=s.background_surface_color_secondary,
        ui_background_surfacecolor_primary=s.background_surface_color_greige,
        ui_background_surfacecolor_secondary=s.background_container_secondary,
        ui_background_tabbar=s.background_container_primary,
        ui_background_toast_color=s.background_surface_color_inverse,
        ui_background_toolbar=s.background_container_primary,
        # Fills
        ui_fill_color_primary=s.background_button_color_transparent10_pressed,
        ui_fill_color_quaternary=s.background_button_color_transparent05_inactive,
        ui_fill_color_secondary=s.background_button_color_transparent10_default,
        ui_fill_color_tertiary=s.background_button_color_transparent05_default,
        ui_fill_primary=s.background_button_color_transparent10_pressed,
        ui_fill_quaternary=s.background_button_color_transparent05_inactive,
        ui_fill_secondary=s.background_button_color_transparent10_default,
        ui_fill_tertiary=s.background_button_color_transparent05_default,
        # System inputs
        ui_input_background_default=s.background_input_color_white_outlined_default,
        ui_input_background_error=s.background_feedback_color_error_accent1,
        ui_input_background_focused=s.background_input_color_white_outlined_pressed,
        ui_input_border_default=s.border_input_color_default,
        ui_input_border_error=s.border_input_color_error,
        ui_input_border_focused=s.border_input_color_focus,
        ui_input_text_error=s.text_on_surface_color_error,
        ui_input_text_helper=s.text_on_surface_color_tertiary,
        ui_input_text_label=s.text_on_surface_color_secondary,
        ui_input_text_placeholder=s.text_on_surface_color_placeholder,
        # Lists and navigation
        ui_list_table_default=s.background_container_primary,
        ui_list_table_footer=s.background_surface_color_greige,
        ui_list_table_header=s.background_surface_color_greige,
        ui_list_table_highlighted=s.background_selector_color_outline_pressed,
        ui_list_table_selected=s.background_selector_color_outline_selected_accent,
        ui_list_table_swipe_action=s.background_feedback_color_error_accent2,
        ui_navigation_backindicator=s.text_on_surface_color_primary,
        ui_navigation_buttontint=s.text_on_surface_color_accent,
        ui_navigation_titlecolor=s.text_on_surface_color_primary,
        # Tab bar and tint
        ui_tabbar_badgebackground=s.background_action_color_primary,
        ui_tabbar_badgetext=s.text_on_brand_color_primary,
        ui_tabbar_itemactive=s.text_on_surface_color_accent,
        ui_tabbar_iteminactive=s.text_on_surface_color_inactive,
        ui_tabbar_iteninactive=s.text_on_surface_color_inactive,
        ui_tint_color_primary=s.text_on_surface_color_accent,
        ui_tint_color_quaternary=s.text_on_surface_color_quatrenary,
        ui_tint_color_secondary=s.text_on_surface_color_secondary,
        ui_tint_color_tertiary=s.text_on_surface_color_tertiary,
    )


COMPONENTS_LIGHT: Final[ComponentTokens] = _derive(SEMANTIC_LIGHT)
COMPONENTS_DARK: Final[ComponentTokens] = _derive(SEMANTIC_DARK)
