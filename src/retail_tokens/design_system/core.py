"""Core token tables: light and dark.

Core tokens are raw primitives. Only the elevation shadows and elevation
colors change between themes; the type, radius and spacing scales are shared
and listed once.
"""

from typing import Final

from retail_tokens.design_system.palette import (
    BLACK,
    ELEVATION_ALPHAS_DARK,
    ELEVATION_ALPHAS_LIGHT,
)
from retail_tokens.design_system.providers import CoreTokens
from retail_tokens.design_system.values import Shadow, TokenValue

# Vertical offset and blur per elevation level 1..5
_ELEVATION_OFFSETS: Final = (1, 3, 4, 8, 16)
_ELEVATION_BLURS: Final = (2, 8, 12, 16, 24)
_ELEVATION_LEVELS: Final = ("lowest", "low", "med", "high", "highest")

FONT_SIZES: Final[dict[str, int]] = {
    "body_xs": 12,
    "body_sm": 14,
    "body_md": 16,
    "body_lg": 18,
    "body_xl": 20,
    "caption": 11,
    "h1": 40,
    "h2": 32,
    "h3": 28,
    "h4": 24,
    "h5": 22,
    "h6": 20,
    "hero_1": 80,
    "hero_2": 72,
    "hero_3": 64,
    "hero_4": 56,
    "hero_5": 48,
}

LINE_HEIGHTS: Final[dict[str, float]] = {"base": 1.4, "none": 1.0, "tight": 1.2}

_BODY_WEIGHTS: Final = ("bold", "regular", "semibold")
_HEADING_WEIGHTS: Final = ("extrabold", "semibold")

# Text style prefix -> (font size key, weights)
_TEXT_STYLES: Final[dict[str, tuple[str, tuple[str, ...]]]] = {
    "body_lg": ("body_lg", _BODY_WEIGHTS),
    "body_md": ("body_md", _BODY_WEIGHTS),
    "body_sm_default": ("body_sm", _BODY_WEIGHTS),
    "body_xl": ("body_xl", _BODY_WEIGHTS),
    "body_xs": ("body_xs", _BODY_WEIGHTS),
    **{f"heading_h{n}": (f"h{n}", _HEADING_WEIGHTS) for n in range(1, 7)},
}


def _elevation_pairs(alphas: tuple[float, ...]) -> list[tuple[str, TokenValue]]:
    """Shadows and elevation colors for one theme's shadow alphas."""
    colors = [BLACK.with_alpha(alpha) for alpha in alphas]
    pairs: list[tuple[str, TokenValue]] = []
    for level, (offset, blur, color) in enumerate(
        zip(_ELEVATION_OFFSETS, _ELEVATION_BLURS, colors), start=1
    ):
        pairs.append((f"elevation_above_{level}", Shadow(0, -offset, blur, 0, color)))
        pairs.append((f"elevation_below_{level}", Shadow(0, offset, blur, 0, color)))
    pairs.extend(
        (f"elevation_{name}", color) for name, color in zip(_ELEVATION_LEVELS, colors)
    )
    return pairs


def _text_style_pairs() -> list[tuple[str, TokenValue]]:
    """Font size, letter spacing and line height of every composite text style.

    Values are whole points. The line height is the font size scaled by the
    style's line height multiplier and rounded; letter spacing is the base 0.
    """
    pairs: list[tuple[str, TokenValue]] = []
    for prefix, (size_key, weights) in _TEXT_STYLES.items():
        size = FONT_SIZES[size_key]
        for weight in weights:
            for spacing, multiplier in LINE_HEIGHTS.items():
                style = f"{prefix}_{weight}_{spacing}"
                pairs.append((f"{style}_font_size", size))
                pairs.append((f"{style}_letter_spacing", 0))
                pairs.append((f"{style}_line_height", round(size * multiplier)))
    return pairs


_SHARED_PAIRS: Final[list[tuple[str, TokenValue]]] = [
    # Elevation parts
    *((f"elevation_blur_radius_blur_{i}", b) for i, b in enumerate(_ELEVATION_BLURS, 1)),
    *((f"elevation_position_x_{i}", x) for i, x in enumerate(_ELEVATION_OFFSETS, 1)),
    *((f"elevation_position_y_{i}", y) for i, y in enumerate(_ELEVATION_OFFSETS, 1)),
    # Letter spacing (n = negative, p = positive)
    ("font_letter_spacing_base", 0),
    ("font_letter_spacing_nlarge", -0.5),
    ("font_letter_spacing_nsmall", -0.25),
    ("font_letter_spacing_plarge", 0.5),
    ("font_letter_spacing_psmall", 0.25),
    # Line height multipliers
    *((f"font_line_height_{name}", value) for name, value in LINE_HEIGHTS.items()),
    # Font sizes
    *((f"font_size_{name}", size) for name, size in FONT_SIZES.items()),
    # Condensed face weights
    ("font_weight_condensed_bold", 700),
    ("font_weight_condensed_regular", 400),
    ("font_weight_condensed_semibold", 600),
    *_text_style_pairs(),
    # Radius: 2pt steps, plus the default and the pill radius
    ("radius", 4),
    *((f"radius_{step}", 2 * step) for step in range(21)),
    ("radius_999", 999),
    # Spacing: 4pt steps, plus hairline values
    *((f"spacing_{step}", 4 * step) for step in range(37)),
    ("spacing_1px", 1),
    ("spacing_2px", 2),
    ("spacing_6px", 6),
    ("spacing_2_tba", 8),
]

CORE_LIGHT: Final[CoreTokens] = CoreTokens.from_pairs(
    [*_SHARED_PAIRS, *_elevation_pairs(ELEVATION_ALPHAS_LIGHT)]
)

CORE_DARK: Final[CoreTokens] = CoreTokens.from_pairs(
    [*_SHARED_PAIRS, *_elevation_pairs(ELEVATION_ALPHAS_DARK)]
)
