"""Primitive palette shared by the token tables.

The hue ramps are the single place raw color literals live; the layer tables
reference them so that changing a primitive is visible at every token built
from it. Ramp steps follow the design-tool naming ("025" through "950").
"""

from typing import Final

from retail_tokens.design_system.values import Color


def _ramp(hexes: dict[str, str]) -> dict[str, Color]:
    return {step: Color.from_hex(value) for step, value in hexes.items()}


# =============================================================================
# Hue ramps
# =============================================================================

# Brand orange
BRAND: Final[dict[str, Color]] = _ramp(
    {
        "025": "#FFF8F2",
        "050": "#FFF0E5",
        "100": "#FEDCC4",
        "200": "#FDBB8E",
        "300": "#FB9450",
        "400": "#FA7A26",
        "500": "#F96302",  # Main brand
        "600": "#CA5002",
        "700": "#9E3E02",
        "800": "#7A3003",
        "900": "#5C2503",
        "950": "#3A1702",
    }
)

# Warm gray used for text, borders and most surfaces
GREIGE: Final[dict[str, Color]] = _ramp(
    {
        "025": "#FDFDFC",
        "050": "#FBFAF9",
        "100": "#F4F3F2",
        "200": "#E6E4E2",
        "300": "#CBC8C6",
        "400": "#979492",
        "500": "#6A6867",
        "600": "#585756",
        "700": "#474545",
        "800": "#343433",
        "900": "#252524",
        "950": "#161615",
    }
)

# Red, errors and destructive actions
CINNABAR: Final[dict[str, Color]] = _ramp(
    {
        "025": "#FFF7F6",
        "050": "#FEEFED",
        "100": "#FCD9D5",
        "200": "#F8B3AC",
        "300": "#F2867C",
        "400": "#EA5A4D",
        "500": "#DF3427",
        "600": "#BA2A1F",
        "700": "#942118",
        "800": "#721A13",
        "900": "#55130E",
        "950": "#360C09",
    }
)

# Yellow, warnings
LEMON: Final[dict[str, Color]] = _ramp(
    {
        "025": "#FFFDF2",
        "050": "#FFFAE0",
        "100": "#FFF3B8",
        "200": "#FCE67F",
        "300": "#F2D44B",
        "400": "#D9B92C",
        "500": "#B39A2A",
        "600": "#817747",
        "700": "#6A6039",
        "800": "#524A2C",
        "900": "#3C3620",
        "950": "#262214",
    }
)

# Blue, informational
MOONLIGHT: Final[dict[str, Color]] = _ramp(
    {
        "025": "#F8F9FC",
        "050": "#F1F3F9",
        "100": "#E0E4F0",
        "200": "#C5CCE3",
        "300": "#A2ACCF",
        "400": "#8591BC",
        "500": "#6974A5",
        "600": "#555F8A",
        "700": "#444C6F",
        "800": "#353B56",
        "900": "#272B3F",
        "950": "#181B28",
    }
)

# Green and brown are not exported as ramps; only a few accent tokens use them
GREEN: Final[dict[str, Color]] = _ramp(
    {
        "050": "#EEF6F1",
        "100": "#D6EADF",
        "300": "#8CC1A4",
        "400": "#6AA586",
        "500": "#4A8165",
        "600": "#3B6852",
        "800": "#254234",
        "900": "#1C3327",
    }
)

BROWN: Final[dict[str, Color]] = _ramp(
    {
        "100": "#EFE4D8",
        "500": "#8A6A4F",
        "800": "#4A3829",
    }
)

# =============================================================================
# Neutrals
# =============================================================================

WHITE: Final[Color] = Color(1.0, 1.0, 1.0)
BLACK: Final[Color] = Color(0.0, 0.0, 0.0)
TRANSPARENT: Final[Color] = Color(0.0, 0.0, 0.0, 0.0)

# Alpha per step of the translucent black/white ramps
TRANSPARENT_STEPS: Final[dict[str, float]] = {
    "025": 0.025,
    "050": 0.05,
    "075": 0.075,
    "100": 0.1,
    "200": 0.2,
    "300": 0.3,
    "400": 0.4,
    "500": 0.5,
    "600": 0.6,
    "700": 0.7,
    "800": 0.8,
    "900": 0.9,
    "950": 0.95,
}


def translucent(color: Color, step: str) -> Color:
    """Return ``color`` at the alpha of a TRANSPARENT_STEPS step."""
    return color.with_alpha(TRANSPARENT_STEPS[step])


# =============================================================================
# Elevation shadow alphas, lowest to highest
# =============================================================================

ELEVATION_ALPHAS_LIGHT: Final[tuple[float, ...]] = (0.05, 0.10, 0.12, 0.18, 0.24)
ELEVATION_ALPHAS_DARK: Final[tuple[float, ...]] = (0.30, 0.36, 0.42, 0.50, 0.60)
