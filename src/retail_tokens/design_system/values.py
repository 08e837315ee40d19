"""Value shapes a design token can hold.

A token is always one of three kinds: a Color, a Dimension (a bare float,
interpreted by consumers as points) or a Shadow. All of them are immutable
value objects compared field by field.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias

from retail_tokens.exceptions import InvalidColorError

Dimension: TypeAlias = float

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


def _check_channel(name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidColorError(value, f"{name} channel must be a number")
    if not 0.0 <= value <= 1.0:
        raise InvalidColorError(value, f"{name} channel must be within [0, 1]")
    return float(value)


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with channels in the unit interval."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for channel in ("red", "green", "blue", "alpha"):
            object.__setattr__(
                self, channel, _check_channel(channel, getattr(self, channel))
            )

    @classmethod
    def from_hex(cls, value: str, alpha: float | None = None) -> "Color":
        """Build a color from ``#RRGGBB`` or ``#RRGGBBAA``.

        An explicit ``alpha`` overrides the alpha byte of an 8-digit value.
        """
        match = _HEX_PATTERN.match(value.strip())
        if match is None:
            raise InvalidColorError(value, "expected #RRGGBB or #RRGGBBAA")
        rgb, alpha_hex = match.groups()
        red, green, blue = (int(rgb[i : i + 2], 16) / 255 for i in (0, 2, 4))
        if alpha is None:
            alpha = int(alpha_hex, 16) / 255 if alpha_hex else 1.0
        return cls(red, green, blue, alpha)

    @classmethod
    def from_rgb255(cls, red: int, green: int, blue: int, alpha: float = 1.0) -> "Color":
        for channel in (red, green, blue):
            if not 0 <= channel <= 255:
                raise InvalidColorError(channel, "8-bit channel must be within [0, 255]")
        return cls(red / 255, green / 255, blue / 255, alpha)

    def with_alpha(self, alpha: float) -> "Color":
        return Color(self.red, self.green, self.blue, alpha)

    def to_rgb255(self) -> tuple[int, int, int]:
        return (
            round(self.red * 255),
            round(self.green * 255),
            round(self.blue * 255),
        )

    def to_hex(self) -> str:
        """Render as ``#RRGGBB``, or ``#RRGGBBAA`` when not fully opaque."""
        red, green, blue = self.to_rgb255()
        text = f"#{red:02X}{green:02X}{blue:02X}"
        if self.alpha < 1.0:
            text += f"{round(self.alpha * 255):02X}"
        return text

    def to_css(self) -> str:
        red, green, blue = self.to_rgb255()
        return f"rgba({red}, {green}, {blue}, {self.alpha:g})"


@dataclass(frozen=True, slots=True)
class Shadow:
    """A drop shadow: offset, blur and spread in points plus a color."""

    offset_x: float
    offset_y: float
    blur_radius: float
    spread_radius: float
    color: Color

    def __post_init__(self) -> None:
        for name in ("offset_x", "offset_y", "blur_radius", "spread_radius"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise TypeError(f"Shadow {name} must be a number, got {value!r}")
            object.__setattr__(self, name, float(value))
        if not isinstance(self.color, Color):
            raise TypeError(f"Shadow color must be a Color, got {self.color!r}")

    def to_css(self) -> str:
        """Render as a CSS ``box-shadow`` value."""
        return (
            f"{self.offset_x:g}px {self.offset_y:g}px "
            f"{self.blur_radius:g}px {self.spread_radius:g}px {self.color.to_css()}"
        )


class TokenKind(str, Enum):
    """The closed set of token value kinds."""

    COLOR = "color"
    DIMENSION = "dimension"
    SHADOW = "shadow"

    @classmethod
    def of(cls, value: object) -> "TokenKind":
        """Classify a token value, raising TypeError for anything else."""
        if isinstance(value, Color):
            return cls.COLOR
        if isinstance(value, Shadow):
            return cls.SHADOW
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return cls.DIMENSION
        raise TypeError(f"Not a token value: {value!r}")

    @classmethod
    def from_annotation(cls, annotation: object) -> "TokenKind | None":
        """Map a provider field annotation to its kind, or None if unsupported."""
        if annotation is Color:
            return cls.COLOR
        if annotation is Shadow:
            return cls.SHADOW
        if annotation is float:
            return cls.DIMENSION
        return None


TokenValue: TypeAlias = Color | Dimension | Shadow
