"""Resolved colors for button and feedback components.

Each style names the tokens it reads; the theme only picks which tables those
names are read from. Nothing here compares against a theme.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

from retail_tokens.design_system.themes import Theme, ThemeResolver, get_resolver
from retail_tokens.design_system.values import Color


class ButtonStyle(str, Enum):
    """Button style variants."""

    ORANGE_FILLED = "orange_filled"
    GRADIENT_FILLED = "gradient_filled"
    OUTLINED = "outlined"
    WHITE_FILLED = "white_filled"
    BLACK5 = "black5"
    BLACK10 = "black10"
    GHOST = "ghost"


class FeedbackVariant(str, Enum):
    """Alert and banner variants."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class ButtonColors:
    background: Color
    foreground: Color
    border: Color
    pressed_background: Color
    icon: Color


@dataclass(frozen=True)
class FeedbackColors:
    background: Color
    text: Color
    icon: Color


@dataclass(frozen=True)
class _ButtonTokens:
    """Token names for one button style as (default, inactive) pairs.

    Backgrounds, labels and borders are semantic tokens; icons are component
    tokens. None means the part is transparent.
    """

    background: tuple[str, str] | None
    text: tuple[str, str]
    icon: tuple[str, str]
    border: tuple[str, str] | None = None
    pressed: str | None = None


_BUTTON_TOKENS: Final[dict[ButtonStyle, _ButtonTokens]] = {
    ButtonStyle.ORANGE_FILLED: _ButtonTokens(
        background=(
            "background_button_color_brand_filled_default",
            "background_button_color_brand_filled_inactive",
        ),
        text=(
            "text_button_color_orange_filled_default",
            "text_button_color_orange_filled_inactive",
        ),
        icon=(
            "icon_action_color_orange_filled_default",
            "icon_action_color_orange_filled_inactive",
        ),
    ),
    ButtonStyle.GRADIENT_FILLED: _ButtonTokens(
        background=(
            "background_button_color_brand_gradient_filled_default",
            "background_button_color_brand_gradient_filled_inactive",
        ),
        text=(
            "text_button_color_gradient_filled_default",
            "text_button_color_gradient_filled_inactive",
        ),
        icon=(
            "icon_action_color_gradient_filled_default",
            "icon_action_color_gradient_filled_inactive",
        ),
    ),
    ButtonStyle.OUTLINED: _ButtonTokens(
        background=None,
        text=(
            "text_button_color_orange_outline_default",
            "text_button_color_orange_outline_inactive",
        ),
        icon=(
            "icon_action_color_orange_outline_default",
            "icon_action_color_orange_outline_inactive",
        ),
        border=(
            "border_button_color_orange_outline_default",
            "border_button_color_orange_outline_inactive",
        ),
    ),
    ButtonStyle.WHITE_FILLED: _ButtonTokens(
        background=(
            "background_button_color_white_filled_default",
            "background_button_color_white_filled_inactive",
        ),
        text=(
            "text_button_color_white_filled_default",
            "text_button_color_white_filled_inactive",
        ),
        icon=(
            "icon_action_color_white_filled_default",
            "icon_action_color_white_filled_inactive",
        ),
    ),
    ButtonStyle.BLACK5: _ButtonTokens(
        background=(
            "background_button_color_transparent05_default",
            "background_button_color_transparent05_inactive",
        ),
        text=(
            "text_button_color_transparent05_filled_default",
            "text_button_color_transparent05_filled_inactive",
        ),
        icon=(
            "icon_action_color_transparent05_filled_default",
            "icon_action_color_transparent05_filled_inactive",
        ),
        pressed="background_button_color_transparent05_pressed",
    ),
    ButtonStyle.BLACK10: _ButtonTokens(
        background=(
            "background_button_color_transparent10_default",
            "background_button_color_transparent10_inactive",
        ),
        text=(
            "text_button_color_transparent10_filled_default",
            "text_button_color_transparent10_filled_inactive",
        ),
        icon=(
            "icon_action_color_transparent10_filled_default",
            "icon_action_color_transparent10_filled_inactive",
        ),
        pressed="background_button_color_transparent10_pressed",
    ),
    ButtonStyle.GHOST: _ButtonTokens(
        background=(
            "background_button_color_ghost_filled_default",
            "background_button_color_ghost_filled_inactive",
        ),
        text=(
            "text_button_color_ghost_filled_default",
            "text_button_color_ghost_filled_inactive",
        ),
        icon=(
            "icon_action_color_ghost_filled_default",
            "icon_action_color_ghost_filled_inactive",
        ),
        pressed="background_button_color_ghost_filled_pressed",
    ),
}


def resolve_button_colors(
    style: ButtonStyle | str,
    theme: Theme | str,
    disabled: bool = False,
    resolver: ThemeResolver | None = None,
) -> ButtonColors:
    """Resolve every color a button of ``style`` paints.

    Args:
        style: Button style
        theme: Theme to resolve against
        disabled: Use the inactive variant of each token
        resolver: Resolver to read from (default: the shared one)

    Returns:
        ButtonColors for the style in that theme
    """
    if resolver is None:
        resolver = get_resolver()
    tokens = _BUTTON_TOKENS[ButtonStyle(style)]
    semantic = resolver.semantic(theme)
    components = resolver.components(theme)
    clear = semantic.neutrals_transparent
    index = 1 if disabled else 0

    def pick(names: tuple[str, str] | None) -> Color:
        if names is None:
            return clear
        color = semantic.get(names[index])
        assert isinstance(color, Color)
        return color

    pressed = clear
    if tokens.pressed is not None and not disabled:
        pressed = semantic.get(tokens.pressed)
        assert isinstance(pressed, Color)

    icon = components.get(tokens.icon[index])
    assert isinstance(icon, Color)

    return ButtonColors(
        background=pick(tokens.background),
        foreground=pick(tokens.text),
        border=pick(tokens.border),
        pressed_background=pressed,
        icon=icon,
    )


def resolve_feedback_colors(
    variant: FeedbackVariant | str,
    theme: Theme | str,
    resolver: ThemeResolver | None = None,
) -> FeedbackColors:
    """Resolve the background, text and icon colors of a feedback banner."""
    if resolver is None:
        resolver = get_resolver()
    name = FeedbackVariant(variant).value
    semantic = resolver.semantic(theme)
    components = resolver.components(theme)

    background = semantic.get(f"background_feedback_color_{name}_accent1")
    text = semantic.get(f"text_on_container_color_{name}")
    icon = components.get(f"icon_on_container_color_{name}")
    assert isinstance(background, Color)
    assert isinstance(text, Color)
    assert isinstance(icon, Color)
    return FeedbackColors(background=background, text=text, icon=icon)


def get_button_css(
    style: ButtonStyle | str = ButtonStyle.ORANGE_FILLED,
    theme: Theme | str = Theme.LIGHT,
    disabled: bool = False,
) -> str:
    """Generate CSS for a button component.

    Args:
        style: Button style variant
        theme: Theme to resolve against
        disabled: Whether the button is inactive

    Returns:
        CSS string for the button
    """
    resolver = get_resolver()
    colors = resolve_button_colors(style, theme, disabled, resolver)
    core = resolver.core(theme)
    semantic = resolver.semantic(theme)

    border_width = semantic.border_2 if ButtonStyle(style) == ButtonStyle.OUTLINED else 0
    styles = [
        f"background-color: {colors.background.to_css()};",
        f"color: {colors.foreground.to_css()};",
        f"border: {border_width:g}px solid {colors.border.to_css()};",
        f"border-radius: {core.radius_999:g}px;",
        f"padding: {core.spacing_2:g}px {core.spacing_4:g}px;",
        f"font-size: {core.font_size_body_md:g}px;",
        f"font-weight: {core.font_weight_condensed_semibold:g};",
        "cursor: not-allowed;" if disabled else "cursor: pointer;",
    ]
    return " ".join(styles)
