"""Token provider interfaces, one per layer.

Each layer (Core, Semantic, Component) is declared as a frozen dataclass with
one typed field per token. The light and dark tables of a layer are both
instances of the same class, so a table that leaves a token out fails when
its module is imported, and a misspelled attribute fails the type checker.

Attribute names are snake_case. The design-tool export spells the same tokens
in PascalCase (``elevation_below_1`` is exported as ``ElevationBelow1``); the
string lookup helpers accept either spelling.
"""

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, fields, is_dataclass
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, TypeVar, get_type_hints

from retail_tokens.design_system.values import (
    Color,
    Dimension,
    Shadow,
    TokenKind,
    TokenValue,
)
from retail_tokens.exceptions import (
    DuplicateTokenError,
    InvalidTokenValueError,
    MissingTokenError,
    TokenDefinitionError,
    TokenNotFoundError,
    UnknownTokenError,
)


class Layer(str, Enum):
    """Abstraction tiers of the token catalog, in derivation order."""

    CORE = "core"
    SEMANTIC = "semantic"
    COMPONENT = "component"


def to_export_name(attribute: str) -> str:
    """Convert a snake_case attribute name to its PascalCase export name."""
    return "".join(part[:1].upper() + part[1:] for part in attribute.split("_"))


class TokenSet:
    """Behaviour shared by every layer's provider dataclass.

    Subclasses are frozen dataclasses registered with :func:`token_layer`,
    which fills in the class-level metadata below.
    """

    layer: ClassVar[Layer]
    _kinds: ClassVar[Mapping[str, TokenKind]]
    _export_index: ClassVar[Mapping[str, str]]

    def __post_init__(self) -> None:
        layer = self.layer.value
        for name, kind in self._kinds.items():
            value = getattr(self, name)
            if kind is TokenKind.DIMENSION:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise InvalidTokenValueError(layer, name, kind.value, value)
                object.__setattr__(self, name, float(value))
            elif kind is TokenKind.COLOR and not isinstance(value, Color):
                raise InvalidTokenValueError(layer, name, kind.value, value)
            elif kind is TokenKind.SHADOW and not isinstance(value, Shadow):
                raise InvalidTokenValueError(layer, name, kind.value, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._kinds)} tokens)"

    # -------------------------------------------------------------------------
    # Schema
    # -------------------------------------------------------------------------

    @classmethod
    def names(cls) -> tuple[str, ...]:
        """Attribute names of every token the layer declares."""
        return tuple(cls._kinds)

    @classmethod
    def export_names(cls) -> tuple[str, ...]:
        return tuple(cls._export_index)

    @classmethod
    def attribute_name(cls, name: str) -> str:
        """Resolve an attribute or export name to the attribute name."""
        if name in cls._kinds:
            return name
        try:
            return cls._export_index[name]
        except KeyError:
            raise TokenNotFoundError(cls.layer.value, name) from None

    @classmethod
    def export_name(cls, name: str) -> str:
        return to_export_name(cls.attribute_name(name))

    @classmethod
    def kind_of(cls, name: str) -> TokenKind:
        return cls._kinds[cls.attribute_name(name)]

    @classmethod
    def declares(cls, name: str) -> bool:
        return name in cls._kinds or name in cls._export_index

    @classmethod
    def from_pairs(cls: "type[T]", pairs: Iterable[tuple[str, TokenValue]]) -> "T":
        """Build a table from ``(name, value)`` pairs.

        Names may use either spelling. Raises DuplicateTokenError when a token
        appears twice, UnknownTokenError for names the layer does not declare
        and MissingTokenError when declared tokens are absent.
        """
        layer = cls.layer.value
        values: dict[str, TokenValue] = {}
        for name, value in pairs:
            attribute = cls._export_index.get(name, name)
            if attribute in values:
                raise DuplicateTokenError(layer, name)
            values[attribute] = value

        unknown = sorted(name for name in values if name not in cls._kinds)
        if unknown:
            raise UnknownTokenError(layer, unknown)
        missing = [name for name in cls._kinds if name not in values]
        if missing:
            raise MissingTokenError(layer, missing)
        return cls(**values)

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get(self, name: str) -> TokenValue:
        """Look a token up by attribute or export name."""
        value: TokenValue = getattr(self, self.attribute_name(name))
        return value

    def items(self) -> Iterator[tuple[str, TokenValue]]:
        for name in self._kinds:
            yield name, getattr(self, name)

    def as_dict(self, export_names: bool = False) -> dict[str, TokenValue]:
        """Return a new dict of every token, keyed by attribute or export name."""
        if export_names:
            return {to_export_name(name): value for name, value in self.items()}
        return dict(self.items())


T = TypeVar("T", bound=TokenSet)

_PROVIDERS: dict[Layer, type[TokenSet]] = {}


def token_layer(layer: Layer) -> Callable[[type[T]], type[T]]:
    """Register a provider dataclass as the interface of ``layer``.

    Runs at class definition time: records the kind of every field, builds the
    export-name index and rejects unsupported field types or two attributes
    that collapse onto the same export name.
    """

    def decorator(cls: type[T]) -> type[T]:
        if not is_dataclass(cls):
            raise TokenDefinitionError(f"{cls.__name__} must be a dataclass")

        hints = get_type_hints(cls)
        kinds: dict[str, TokenKind] = {}
        export_index: dict[str, str] = {}
        for field in fields(cls):
            kind = TokenKind.from_annotation(hints[field.name])
            if kind is None:
                raise TokenDefinitionError(
                    f"{cls.__name__}.{field.name} has unsupported type "
                    f"{hints[field.name]!r}",
                    context={"layer": layer.value, "token": field.name},
                )
            export = to_export_name(field.name)
            if export in export_index:
                raise DuplicateTokenError(layer.value, export)
            kinds[field.name] = kind
            export_index[export] = field.name

        if layer in _PROVIDERS:
            raise TokenDefinitionError(
                f"Layer {layer.value} already has a provider: "
                f"{_PROVIDERS[layer].__name__}",
                context={"layer": layer.value},
            )
        cls.layer = layer
        cls._kinds = MappingProxyType(kinds)
        cls._export_index = MappingProxyType(export_index)
        _PROVIDERS[layer] = cls
        return cls

    return decorator


def provider_for(layer: Layer) -> type[TokenSet]:
    """Return the provider class registered for ``layer``."""
    return _PROVIDERS[layer]


# =============================================================================
# Core layer
# =============================================================================


@token_layer(Layer.CORE)
@dataclass(frozen=True, repr=False)
class CoreTokens(TokenSet):
    """Raw primitives: elevation, type scale, radii and spacing."""

    # Elevation shadows
    elevation_above_1: Shadow
    elevation_above_2: Shadow
    elevation_above_3: Shadow
    elevation_above_4: Shadow
    elevation_above_5: Shadow
    elevation_below_1: Shadow
    elevation_below_2: Shadow
    elevation_below_3: Shadow
    elevation_below_4: Shadow
    elevation_below_5: Shadow

    # Elevation parts
    elevation_blur_radius_blur_1: Dimension
    elevation_blur_radius_blur_2: Dimension
    elevation_blur_radius_blur_3: Dimension
    elevation_blur_radius_blur_4: Dimension
    elevation_blur_radius_blur_5: Dimension
    elevation_high: Color
    elevation_highest: Color
    elevation_low: Color
    elevation_lowest: Color
    elevation_med: Color
    elevation_position_x_1: Dimension
    elevation_position_x_2: Dimension
    elevation_position_x_3: Dimension
    elevation_position_x_4: Dimension
    elevation_position_x_5: Dimension
    elevation_position_y_1: Dimension
    elevation_position_y_2: Dimension
    elevation_position_y_3: Dimension
    elevation_position_y_4: Dimension
    elevation_position_y_5: Dimension

    # Typography
    font_letter_spacing_base: Dimension
    font_letter_spacing_nlarge: Dimension
    font_letter_spacing_nsmall: Dimension
    font_letter_spacing_plarge: Dimension
    font_letter_spacing_psmall: Dimension
    font_line_height_base: Dimension
    font_line_height_none: Dimension
    font_line_height_tight: Dimension
    font_size_body_lg: Dimension
    font_size_body_md: Dimension
    font_size_body_sm: Dimension
    font_size_body_xl: Dimension
    font_size_body_xs: Dimension
    font_size_caption: Dimension
    font_size_h1: Dimension
    font_size_h2: Dimension
    font_size_h3: Dimension
    font_size_h4: Dimension
    font_size_h5: Dimension
    font_size_h6: Dimension
    font_size_hero_1: Dimension
    font_size_hero_2: Dimension
    font_size_hero_3: Dimension
    font_size_hero_4: Dimension
    font_size_hero_5: Dimension
    font_weight_condensed_bold: Dimension
    font_weight_condensed_regular: Dimension
    font_weight_condensed_semibold: Dimension

    # Composite text styles
    body_lg_bold_base_font_size: Dimension
    body_lg_bold_base_letter_spacing: Dimension
    body_lg_bold_base_line_height: Dimension
    body_lg_bold_none_font_size: Dimension
    body_lg_bold_none_letter_spacing: Dimension
    body_lg_bold_none_line_height: Dimension
    body_lg_bold_tight_font_size: Dimension
    body_lg_bold_tight_letter_spacing: Dimension
    body_lg_bold_tight_line_height: Dimension
    body_lg_regular_base_font_size: Dimension
    body_lg_regular_base_letter_spacing: Dimension
    body_lg_regular_base_line_height: Dimension
    body_lg_regular_none_font_size: Dimension
    body_lg_regular_none_letter_spacing: Dimension
    body_lg_regular_none_line_height: Dimension
    body_lg_regular_tight_font_size: Dimension
    body_lg_regular_tight_letter_spacing: Dimension
    body_lg_regular_tight_line_height: Dimension
    body_lg_semibold_base_font_size: Dimension
    body_lg_semibold_base_letter_spacing: Dimension
    body_lg_semibold_base_line_height: Dimension
    body_lg_semibold_none_font_size: Dimension
    body_lg_semibold_none_letter_spacing: Dimension
    body_lg_semibold_none_line_height: Dimension
    body_lg_semibold_tight_font_size: Dimension
    body_lg_semibold_tight_letter_spacing: Dimension
    body_lg_semibold_tight_line_height: Dimension
    body_md_bold_base_font_size: Dimension
    body_md_bold_base_letter_spacing: Dimension
    body_md_bold_base_line_height: Dimension
    body_md_bold_none_font_size: Dimension
    body_md_bold_none_letter_spacing: Dimension
    body_md_bold_none_line_height: Dimension
    body_md_bold_tight_font_size: Dimension
    body_md_bold_tight_letter_spacing: Dimension
    body_md_bold_tight_line_height: Dimension
    body_md_regular_base_font_size: Dimension
    body_md_regular_base_letter_spacing: Dimension
    body_md_regular_base_line_height: Dimension
    body_md_regular_none_font_size: Dimension
    body_md_regular_none_letter_spacing: Dimension
    body_md_regular_none_line_height: Dimension
    body_md_regular_tight_font_size: Dimension
    body_md_regular_tight_letter_spacing: Dimension
    body_md_regular_tight_line_height: Dimension
    body_md_semibold_base_font_size: Dimension
    body_md_semibold_base_letter_spacing: Dimension
    body_md_semibold_base_line_height: Dimension
    body_md_semibold_none_font_size: Dimension
    body_md_semibold_none_letter_spacing: Dimension
    body_md_semibold_none_line_height: Dimension
    body_md_semibold_tight_font_size: Dimension
    body_md_semibold_tight_letter_spacing: Dimension
    body_md_semibold_tight_line_height: Dimension
    body_sm_default_bold_base_font_size: Dimension
    body_sm_default_bold_base_letter_spacing: Dimension
    body_sm_default_bold_base_line_height: Dimension
    body_sm_default_bold_none_font_size: Dimension
    body_sm_default_bold_none_letter_spacing: Dimension
    body_sm_default_bold_none_line_height: Dimension
    body_sm_default_bold_tight_font_size: Dimension
    body_sm_default_bold_tight_letter_spacing: Dimension
    body_sm_default_bold_tight_line_height: Dimension
    body_sm_default_regular_base_font_size: Dimension
    body_sm_default_regular_base_letter_spacing: Dimension
    body_sm_default_regular_base_line_height: Dimension
    body_sm_default_regular_none_font_size: Dimension
    body_sm_default_regular_none_letter_spacing: Dimension
    body_sm_default_regular_none_line_height: Dimension
    body_sm_default_regular_tight_font_size: Dimension
    body_sm_default_regular_tight_letter_spacing: Dimension
    body_sm_default_regular_tight_line_height: Dimension
    body_sm_default_semibold_base_font_size: Dimension
    body_sm_default_semibold_base_letter_spacing: Dimension
    body_sm_default_semibold_base_line_height: Dimension
    body_sm_default_semibold_none_font_size: Dimension
    body_sm_default_semibold_none_letter_spacing: Dimension
    body_sm_default_semibold_none_line_height: Dimension
    body_sm_default_semibold_tight_font_size: Dimension
    body_sm_default_semibold_tight_letter_spacing: Dimension
    body_sm_default_semibold_tight_line_height: Dimension
    body_xl_bold_base_font_size: Dimension
    body_xl_bold_base_letter_spacing: Dimension
    body_xl_bold_base_line_height: Dimension
    body_xl_bold_none_font_size: Dimension
    body_xl_bold_none_letter_spacing: Dimension
    body_xl_bold_none_line_height: Dimension
    body_xl_bold_tight_font_size: Dimension
    body_xl_bold_tight_letter_spacing: Dimension
    body_xl_bold_tight_line_height: Dimension
    body_xl_regular_base_font_size: Dimension
    body_xl_regular_base_letter_spacing: Dimension
    body_xl_regular_base_line_height: Dimension
    body_xl_regular_none_font_size: Dimension
    body_xl_regular_none_letter_spacing: Dimension
    body_xl_regular_none_line_height: Dimension
    body_xl_regular_tight_font_size: Dimension
    body_xl_regular_tight_letter_spacing: Dimension
    body_xl_regular_tight_line_height: Dimension
    body_xl_semibold_base_font_size: Dimension
    body_xl_semibold_base_letter_spacing: Dimension
    body_xl_semibold_base_line_height: Dimension
    body_xl_semibold_none_font_size: Dimension
    body_xl_semibold_none_letter_spacing: Dimension
    body_xl_semibold_none_line_height: Dimension
    body_xl_semibold_tight_font_size: Dimension
    body_xl_semibold_tight_letter_spacing: Dimension
    body_xl_semibold_tight_line_height: Dimension
    body_xs_bold_base_font_size: Dimension
    body_xs_bold_base_letter_spacing: Dimension
    body_xs_bold_base_line_height: Dimension
    body_xs_bold_none_font_size: Dimension
    body_xs_bold_none_letter_spacing: Dimension
    body_xs_bold_none_line_height: Dimension
    body_xs_bold_tight_font_size: Dimension
    body_xs_bold_tight_letter_spacing: Dimension
    body_xs_bold_tight_line_height: Dimension
    body_xs_regular_base_font_size: Dimension
    body_xs_regular_base_letter_spacing: Dimension
    body_xs_regular_base_line_height: Dimension
    body_xs_regular_none_font_size: Dimension
    body_xs_regular_none_letter_spacing: Dimension
    body_xs_regular_none_line_height: Dimension
    body_xs_regular_tight_font_size: Dimension
    body_xs_regular_tight_letter_spacing: Dimension
    body_xs_regular_tight_line_height: Dimension
    body_xs_semibold_base_font_size: Dimension
    body_xs_semibold_base_letter_spacing: Dimension
    body_xs_semibold_base_line_height: Dimension
    body_xs_semibold_none_font_size: Dimension
    body_xs_semibold_none_letter_spacing: Dimension
    body_xs_semibold_none_line_height: Dimension
    body_xs_semibold_tight_font_size: Dimension
    body_xs_semibold_tight_letter_spacing: Dimension
    body_xs_semibold_tight_line_height: Dimension
    heading_h1_extrabold_base_font_size: Dimension
    heading_h1_extrabold_base_letter_spacing: Dimension
    heading_h1_extrabold_base_line_height: Dimension
    heading_h1_extrabold_none_font_size: Dimension
    heading_h1_extrabold_none_letter_spacing: Dimension
    heading_h1_extrabold_none_line_height: Dimension
    heading_h1_extrabold_tight_font_size: Dimension
    heading_h1_extrabold_tight_letter_spacing: Dimension
    heading_h1_extrabold_tight_line_height: Dimension
    heading_h1_semibold_base_font_size: Dimension
    heading_h1_semibold_base_letter_spacing: Dimension
    heading_h1_semibold_base_line_height: Dimension
    heading_h1_semibold_none_font_size: Dimension
    heading_h1_semibold_none_letter_spacing: Dimension
    heading_h1_semibold_none_line_height: Dimension
    heading_h1_semibold_tight_font_size: Dimension
    heading_h1_semibold_tight_letter_spacing: Dimension
    heading_h1_semibold_tight_line_height: Dimension
    heading_h2_extrabold_base_font_size: Dimension
    heading_h2_extrabold_base_letter_spacing: Dimension
    heading_h2_extrabold_base_line_height: Dimension
    heading_h2_extrabold_none_font_size: Dimension
    heading_h2_extrabold_none_letter_spacing: Dimension
    heading_h2_extrabold_none_line_height: Dimension
    heading_h2_extrabold_tight_font_size: Dimension
    heading_h2_extrabold_tight_letter_spacing: Dimension
    heading_h2_extrabold_tight_line_height: Dimension
    heading_h2_semibold_base_font_size: Dimension
    heading_h2_semibold_base_letter_spacing: Dimension
    heading_h2_semibold_base_line_height: Dimension
    heading_h2_semibold_none_font_size: Dimension
    heading_h2_semibold_none_letter_spacing: Dimension
    heading_h2_semibold_none_line_height: Dimension
    heading_h2_semibold_tight_font_size: Dimension
    heading_h2_semibold_tight_letter_spacing: Dimension
    heading_h2_semibold_tight_line_height: Dimension
    heading_h3_extrabold_base_font_size: Dimension
    heading_h3_extrabold_base_letter_spacing: Dimension
    heading_h3_extrabold_base_line_height: Dimension
    heading_h3_extrabold_none_font_size: Dimension
    heading_h3_extrabold_none_letter_spacing: Dimension
    heading_h3_extrabold_none_line_height: Dimension
    heading_h3_extrabold_tight_font_size: Dimension
    heading_h3_extrabold_tight_letter_spacing: Dimension
    heading_h3_extrabold_tight_line_height: Dimension
    heading_h3_semibold_base_font_size: Dimension
    heading_h3_semibold_base_letter_spacing: Dimension
    heading_h3_semibold_base_line_height: Dimension
    heading_h3_semibold_none_font_size: Dimension
    heading_h3_semibold_none_letter_spacing: Dimension
    heading_h3_semibold_none_line_height: Dimension
    heading_h3_semibold_tight_font_size: Dimension
    heading_h3_semibold_tight_letter_spacing: Dimension
    heading_h3_semibold_tight_line_height: Dimension
    heading_h4_extrabold_base_font_size: Dimension
    heading_h4_extrabold_base_letter_spacing: Dimension
    heading_h4_extrabold_base_line_height: Dimension
    heading_h4_extrabold_none_font_size: Dimension
    heading_h4_extrabold_none_letter_spacing: Dimension
    heading_h4_extrabold_none_line_height: Dimension
    heading_h4_extrabold_tight_font_size: Dimension
    heading_h4_extrabold_tight_letter_spacing: Dimension
    heading_h4_extrabold_tight_line_height: Dimension
    heading_h4_semibold_base_font_size: Dimension
    heading_h4_semibold_base_letter_spacing: Dimension
    heading_h4_semibold_base_line_height: Dimension
    heading_h4_semibold_none_font_size: Dimension
    heading_h4_semibold_none_letter_spacing: Dimension
    heading_h4_semibold_none_line_height: Dimension
    heading_h4_semibold_tight_font_size: Dimension
    heading_h4_semibold_tight_letter_spacing: Dimension
    heading_h4_semibold_tight_line_height: Dimension
    heading_h5_extrabold_base_font_size: Dimension
    heading_h5_extrabold_base_letter_spacing: Dimension
    heading_h5_extrabold_base_line_height: Dimension
    heading_h5_extrabold_none_font_size: Dimension
    heading_h5_extrabold_none_letter_spacing: Dimension
    heading_h5_extrabold_none_line_height: Dimension
    heading_h5_extrabold_tight_font_size: Dimension
    heading_h5_extrabold_tight_letter_spacing: Dimension
    heading_h5_extrabold_tight_line_height: Dimension
    heading_h5_semibold_base_font_size: Dimension
    heading_h5_semibold_base_letter_spacing: Dimension
    heading_h5_semibold_base_line_height: Dimension
    heading_h5_semibold_none_font_size: Dimension
    heading_h5_semibold_none_letter_spacing: Dimension
    heading_h5_semibold_none_line_height: Dimension
    heading_h5_semibold_tight_font_size: Dimension
    heading_h5_semibold_tight_letter_spacing: Dimension
    heading_h5_semibold_tight_line_height: Dimension
    heading_h6_extrabold_base_font_size: Dimension
    heading_h6_extrabold_base_letter_spacing: Dimension
    heading_h6_extrabold_base_line_height: Dimension
    heading_h6_extrabold_none_font_size: Dimension
    heading_h6_extrabold_none_letter_spacing: Dimension
    heading_h6_extrabold_none_line_height: Dimension
    heading_h6_extrabold_tight_font_size: Dimension
    heading_h6_extrabold_tight_letter_spacing: Dimension
    heading_h6_extrabold_tight_line_height: Dimension
    heading_h6_semibold_base_font_size: Dimension
    heading_h6_semibold_base_letter_spacing: Dimension
    heading_h6_semibold_base_line_height: Dimension
    heading_h6_semibold_none_font_size: Dimension
    heading_h6_semibold_none_letter_spacing: Dimension
    heading_h6_semibold_none_line_height: Dimension
    heading_h6_semibold_tight_font_size: Dimension
    heading_h6_semibold_tight_letter_spacing: Dimension
    heading_h6_semibold_tight_line_height: Dimension

    # Radius
    radius: Dimension
    radius_0: Dimension
    radius_1: Dimension
    radius_2: Dimension
    radius_3: Dimension
    radius_4: Dimension
    radius_5: Dimension
    radius_6: Dimension
    radius_7: Dimension
    radius_8: Dimension
    radius_9: Dimension
    radius_10: Dimension
    radius_11: Dimension
    radius_12: Dimension
    radius_13: Dimension
    radius_14: Dimension
    radius_15: Dimension
    radius_16: Dimension
    radius_17: Dimension
    radius_18: Dimension
    radius_19: Dimension
    radius_20: Dimension
    radius_999: Dimension

    # Spacing
    spacing_0: Dimension
    spacing_1: Dimension
    spacing_2: Dimension
    spacing_3: Dimension
    spacing_4: Dimension
    spacing_5: Dimension
    spacing_6: Dimension
    spacing_7: Dimension
    spacing_8: Dimension
    spacing_9: Dimension
    spacing_10: Dimension
    spacing_11: Dimension
    spacing_12: Dimension
    spacing_13: Dimension
    spacing_14: Dimension
    spacing_15: Dimension
    spacing_16: Dimension
    spacing_17: Dimension
    spacing_18: Dimension
    spacing_19: Dimension
    spacing_20: Dimension
    spacing_21: Dimension
    spacing_22: Dimension
    spacing_23: Dimension
    spacing_24: Dimension
    spacing_25: Dimension
    spacing_26: Dimension
    spacing_27: Dimension
    spacing_28: Dimension
    spacing_29: Dimension
    spacing_30: Dimension
    spacing_31: Dimension
    spacing_32: Dimension
    spacing_33: Dimension
    spacing_34: Dimension
    spacing_35: Dimension
    spacing_36: Dimension
    spacing_1px: Dimension
    spacing_2px: Dimension
    spacing_6px: Dimension
    spacing_2_tba: Dimension


# =============================================================================
# Semantic layer
# =============================================================================


@token_layer(Layer.SEMANTIC)
@dataclass(frozen=True, repr=False)
class SemanticTokens(TokenSet):
    """Contextual tokens: surfaces, text, borders and the named hue ramps."""

    # Accent and action backgrounds
    background_accent_color_blue: Color
    background_accent_color_brand: Color
    background_accent_color_brown: Color
    background_accent_color_dark_greige: Color
    background_accent_color_green: Color
    background_accent_color_greige: Color
    background_accent_color_red: Color
    background_accent_color_yellow: Color
    background_action_color_primary: Color
    background_action_color_secondary: Color

    # Button backgrounds
    background_button_color_brand_filled_default: Color
    background_button_color_brand_filled_inactive: Color
    background_button_color_brand_gradient_filled_default: Color
    background_button_color_brand_gradient_filled_inactive: Color
    background_button_color_ghost_filled_default: Color
    background_button_color_ghost_filled_inactive: Color
    background_button_color_ghost_filled_pressed: Color
    background_button_color_transparent05_active: Color
    background_button_color_transparent05_default: Color
    background_button_color_transparent05_inactive: Color
    background_button_color_transparent05_pressed: Color
    background_button_color_transparent10_active: Color
    background_button_color_transparent10_default: Color
    background_button_color_transparent10_inactive: Color
    background_button_color_transparent10_pressed: Color
    background_button_color_white_filled_default: Color
    background_button_color_white_filled_inactive: Color

    # Container backgrounds
    background_container_color_brand: Color
    background_container_color_brand_accent: Color
    background_container_color_greige: Color
    background_container_color_inverse: Color
    background_container_color_transparent05: Color
    background_container_color_transparent10: Color
    background_container_color_transparent20: Color
    background_container_color_white: Color
    background_container_primary: Color
    background_container_secondary: Color

    # Feedback backgrounds
    background_feedback_color_error_accent1: Color
    background_feedback_color_error_accent2: Color
    background_feedback_color_informational_accent1: Color
    background_feedback_color_informational_accent2: Color
    background_feedback_color_success_accent1: Color
    background_feedback_color_success_accent2: Color
    background_feedback_color_warning_accent1: Color
    background_feedback_color_warning_accent2: Color

    # Input, overlay, selector and surface backgrounds
    background_input_color_brand_filled_default: Color
    background_input_color_transparent10_default: Color
    background_input_color_white_outlined_default: Color
    background_input_color_white_outlined_inactive: Color
    background_input_color_white_outlined_pressed: Color
    background_overlay_color_page_scrim: Color
    background_selector_color_filled_default: Color
    background_selector_color_filled_inactive: Color
    background_selector_color_filled_pressed: Color
    background_selector_color_filled_selected: Color
    background_selector_color_filled_switch_handle_default: Color
    background_selector_color_filled_switch_handle_selected: Color
    background_selector_color_filled_transparent: Color
    background_selector_color_outline_default: Color
    background_selector_color_outline_inactive: Color
    background_selector_color_outline_pressed: Color
    background_selector_color_outline_selected: Color
    background_selector_color_outline_selected_accent: Color
    background_surface_color_greige: Color
    background_surface_color_inverse: Color
    background_surface_color_secondary: Color
    background_surface_color_tertiary: Color

    # Border scale (exported under one name for widths and offsets)
    border_0: Dimension
    border_1: Dimension
    border_2: Dimension
    border_3: Dimension
    border_4: Dimension
    border_5: Dimension
    border_6: Dimension
    border_7: Dimension
    border_8: Dimension
    border_9: Dimension
    border_10: Dimension
    border_11: Dimension
    border_12: Dimension

    # Border colors
    border_button_color_accent: Color
    border_button_color_accent2: Color
    border_button_color_default: Color
    border_button_color_focus: Color
    border_button_color_inactive: Color
    border_button_color_orange_outline_default: Color
    border_button_color_orange_outline_inactive: Color
    border_button_color_pressed: Color
    border_color_focus: Color
    border_color_primary: Color
    border_input_color_accent: Color
    border_input_color_accent2: Color
    border_input_color_active: Color
    border_input_color_default: Color
    border_input_color_error: Color
    border_input_color_focus: Color
    border_input_color_inactive: Color
    border_input_color_pressed: Color
    border_input_color_success: Color
    border_input_color_warning: Color
    border_on_container_active: Color
    border_on_container_default: Color
    border_on_container_inactive: Color
    border_on_container_inverse: Color
    border_on_container_pressed: Color
    border_selector_color_filled_default: Color
    border_selector_color_filled_inactive: Color
    border_selector_color_filled_pressed: Color
    border_selector_color_filled_selected: Color
    border_selector_color_outline_default: Color
    border_selector_color_outline_inactive: Color
    border_selector_color_outline_pressed: Color
    border_selector_color_outline_selected: Color
    border_selector_color_outline_selected_accent: Color

    # Border radius and width
    border_radius_2xl: Dimension
    border_radius_3xl: Dimension
    border_radius_full: Dimension
    border_radius_lg: Dimension
    border_radius_md: Dimension
    border_radius_none: Dimension
    border_radius_sm: Dimension
    border_radius_xl: Dimension
    border_radius_xs: Dimension
    border_width_2xl: Dimension
    border_width_lg: Dimension
    border_width_md: Dimension
    border_width_none: Dimension
    border_width_sm: Dimension
    border_width_xl: Dimension
    border_width_xs: Dimension

    # Hue ramps
    brand_025: Color
    brand_050: Color
    brand_100: Color
    brand_200: Color
    brand_300: Color
    brand_400: Color
    brand_500: Color
    brand_600: Color
    brand_700: Color
    brand_800: Color
    brand_900: Color
    brand_950: Color
    cinnabar_025: Color
    cinnabar_050: Color
    cinnabar_100: Color
    cinnabar_200: Color
    cinnabar_300: Color
    cinnabar_400: Color
    cinnabar_500: Color
    cinnabar_600: Color
    cinnabar_700: Color
    cinnabar_800: Color
    cinnabar_900: Color
    cinnabar_950: Color
    greige_025: Color
    greige_050: Color
    greige_100: Color
    greige_200: Color
    greige_300: Color
    greige_400: Color
    greige_500: Color
    greige_600: Color
    greige_700: Color
    greige_800: Color
    greige_900: Color
    greige_950: Color
    lemon_025: Color
    lemon_050: Color
    lemon_100: Color
    lemon_200: Color
    lemon_300: Color
    lemon_400: Color
    lemon_500: Color
    lemon_600: Color
    lemon_700: Color
    lemon_800: Color
    lemon_900: Color
    lemon_950: Color
    moonlight_025: Color
    moonlight_050: Color
    moonlight_100: Color
    moonlight_200: Color
    moonlight_300: Color
    moonlight_400: Color
    moonlight_500: Color
    moonlight_600: Color
    moonlight_700: Color
    moonlight_800: Color
    moonlight_900: Color
    moonlight_950: Color
    neutrals_black: Color
    neutrals_transparent: Color
    neutrals_white: Color

    # Pressed-state overlays
    overlay_pressed_darken: Color
    overlay_pressed_darken_more: Color
    overlay_pressed_lighten: Color
    overlay_pressed_lighten_more: Color

    # Button and input text
    text_button_color_ghost_filled_default: Color
    text_button_color_ghost_filled_inactive: Color
    text_button_color_gradient_filled_default: Color
    text_button_color_gradient_filled_inactive: Color
    text_button_color_orange_filled_default: Color
    text_button_color_orange_filled_inactive: Color
    text_button_color_orange_outline_default: Color
    text_button_color_orange_outline_inactive: Color
    text_button_color_transparent05_filled_default: Color
    text_button_color_transparent05_filled_inactive: Color
    text_button_color_transparent10_filled_default: Color
    text_button_color_transparent10_filled_inactive: Color
    text_button_color_white_filled_default: Color
    text_button_color_white_filled_inactive: Color
    text_input_color_brand_filled_default: Color
    text_input_color_transparent10_active: Color
    text_input_color_transparent10_default: Color
    text_input_color_transparent10_inactive: Color
    text_input_color_white_outlined_default: Color

    # Text on containers, fills and surfaces
    text_on: Color
    text_on_brand_color_primary: Color
    text_on_container_color_accent: Color
    text_on_container_color_accent2: Color
    text_on_container_color_error: Color
    text_on_container_color_inactive: Color
    text_on_container_color_informational: Color
    text_on_container_color_inverse: Color
    text_on_container_color_primary: Color
    text_on_container_color_quatrenary: Color
    text_on_container_color_secondary: Color
    text_on_container_color_success: Color
    text_on_container_color_tertiary: Color
    text_on_container_color_warning: Color
    text_on_error_color_primary: Color
    text_on_primary_color_primary: Color
    text_on_primary_color_secondary: Color
    text_on_success_color_primary: Color
    text_on_surface_color_accent: Color
    text_on_surface_color_accent2: Color
    text_on_surface_color_destructive: Color
    text_on_surface_color_disabled: Color
    text_on_surface_color_error: Color
    text_on_surface_color_inactive: Color
    text_on_surface_color_informational: Color
    text_on_surface_color_inverse: Color
    text_on_surface_color_link: Color
    text_on_surface_color_placeholder: Color
    text_on_surface_color_primary: Color
    text_on_surface_color_quatrenary: Color
    text_on_surface_color_secondary: Color
    text_on_surface_color_success: Color
    text_on_surface_color_tertiary: Color
    text_on_surface_color_warning: Color

    # Selector text
    text_selector_color_active: Color
    text_selector_color_default: Color
    text_selector_color_filled_active: Color
    text_selector_color_filled_default: Color
    text_selector_color_filled_inactive: Color
    text_selector_color_filled_selected: Color
    text_selector_color_inactive: Color
    text_selector_color_outline_active: Color
    text_selector_color_outline_default: Color
    text_selector_color_outline_inactive: Color
    text_selector_color_outline_selected: Color
    text_selector_color_selected: Color
    texture_notebook_alt: Color

    # Translucent black and white
    transparent_black_transparent_black_025: Color
    transparent_black_transparent_black_050: Color
    transparent_black_transparent_black_075: Color
    transparent_black_transparent_black_100: Color
    transparent_black_transparent_black_200: Color
    transparent_black_transparent_black_300: Color
    transparent_black_transparent_black_400: Color
    transparent_black_transparent_black_500: Color
    transparent_black_transparent_black_600: Color
    transparent_black_transparent_black_700: Color
    transparent_black_transparent_black_800: Color
    transparent_black_transparent_black_900: Color
    transparent_black_transparent_black_950: Color
    transparent_white_transparent_white_025: Color
    transparent_white_transparent_white_050: Color
    transparent_white_transparent_white_075: Color
    transparent_white_transparent_white_100: Color
    transparent_white_transparent_white_200: Color
    transparent_white_transparent_white_300: Color
    transparent_white_transparent_white_400: Color
    transparent_white_transparent_white_500: Color
    transparent_white_transparent_white_600: Color
    transparent_white_transparent_white_700: Color
    transparent_white_transparent_white_800: Color
    transparent_white_transparent_white_900: Color
    transparent_white_transparent_white_950: Color


# =============================================================================
# Component layer
# =============================================================================


@token_layer(Layer.COMPONENT)
@dataclass(frozen=True, repr=False)
class ComponentTokens(TokenSet):
    """UI-element tokens: icons, inputs, system chrome, motion and spacing."""

    # Action icons
    icon_action_color_ghost_filled_default: Color
    icon_action_color_ghost_filled_inactive: Color
    icon_action_color_gradient_filled_default: Color
    icon_action_color_gradient_filled_inactive: Color
    icon_action_color_orange_filled_default: Color
    icon_action_color_orange_filled_inactive: Color
    icon_action_color_orange_outline_default: Color
    icon_action_color_orange_outline_inactive: Color
    icon_action_color_transparent05_filled_default: Color
    icon_action_color_transparent05_filled_inactive: Color
    icon_action_color_transparent10_filled_default: Color
    icon_action_color_transparent10_filled_inactive: Color
    icon_action_color_white_filled_default: Color
    icon_action_color_white_filled_inactive: Color

    # General, input and on-container icons
    icon_color_primary: Color
    icon_color_secondary: Color
    icon_color_tertiary: Color
    icon_input_color_active: Color
    icon_input_color_default: Color
    icon_input_color_inactive: Color
    icon_on_container_color_accent: Color
    icon_on_container_color_accent2: Color
    icon_on_container_color_error: Color
    icon_on_container_color_inactive: Color
    icon_on_container_color_informational: Color
    icon_on_container_color_inverse: Color
    icon_on_container_color_primary: Color
    icon_on_container_color_secondary: Color
    icon_on_container_color_success: Color
    icon_on_container_color_tertiary: Color
    icon_on_container_color_warning: Color

    # On-surface icons
    icon_on_surface_color_accent: Color
    icon_on_surface_color_accent2: Color
    icon_on_surface_color_danger: Color
    icon_on_surface_color_error: Color
    icon_on_surface_color_inactive: Color
    icon_on_surface_color_informational: Color
    icon_on_surface_color_inverse: Color
    icon_on_surface_color_primary: Color
    icon_on_surface_color_secondary: Color
    icon_on_surface_color_success: Color
    icon_on_surface_color_tertiary: Color
    icon_on_surface_color_warning: Color

    # Selector icons
    icon_selector_color_filled_active: Color
    icon_selector_color_filled_default: Color
    icon_selector_color_filled_iconcolorbrand: Color
    icon_selector_color_filled_iconcolorwarning: Color
    icon_selector_color_filled_icononbrandcolorprimary: Color
    icon_selector_color_filled_icononsurfacecolordisabled: Color
    icon_selector_color_filled_icononsurfacecolorprimary: Color
    icon_selector_color_filled_icononsurfacecolorsecondary: Color
    icon_selector_color_filled_icononsurfacecolortertiary: Color
    icon_selector_color_filled_inactive: Color
    icon_selector_color_filled_selected: Color
    icon_selector_color_outline_active: Color
    icon_selector_color_outline_default: Color
    icon_selector_color_outline_inactive: Color
    icon_selector_color_outline_selected: Color

    # Inputs
    input_background_default: Color
    input_background_error: Color
    input_background_focused: Color
    input_border_default: Color
    input_border_error: Color
    input_border_focused: Color
    input_text_error: Color
    input_text_helper: Color
    input_text_label: Color
    input_text_placeholder: Color

    # Motion
    ui_animation_duration_fast: Dimension
    ui_animation_duration_instant: Dimension
    ui_animation_duration_normal: Dimension
    ui_animation_duration_slow: Dimension
    ui_animation_duration_very_slow: Dimension
    ui_animation_movement_easein: Dimension
    ui_animation_movement_easeinout: Dimension
    ui_animation_movement_easeout: Dimension
    ui_animation_movement_spring: Dimension

    # System chrome backgrounds
    ui_background_menu_color: Color
    ui_background_modal_color: Color
    ui_background_navigationbar: Color
    ui_background_popover_color: Color
    ui_background_searchbar: Color
    ui_background_sheet_color: Color
    ui_background_statusbar: Color
    ui_background_surface_color_elevated: Color
    ui_background_surface_color_grouped: Color
    ui_background_surface_color_primary: Color
    ui_background_surface_color_secondary: Color
    ui_background_surfacecolor_elevated: Color
    ui_background_surfacecolor_grouped: Color
    ui_background_surfacecolor_primary: Color
    ui_background_surfacecolor_secondary: Color
    ui_background_tabbar: Color
    ui_background_toast_color: Color
    ui_background_toolbar: Color

    # Elevation levels
    ui_elevation_2x: Dimension
    ui_elevation_lg: Dimension
    ui_elevation_md: Dimension
    ui_elevation_none: Dimension
    ui_elevation_sm: Dimension
    ui_elevation_xl: Dimension
    ui_elevation_xs: Dimension

    # Fills
    ui_fill_color_primary: Color
    ui_fill_color_quaternary: Color
    ui_fill_color_secondary: Color
    ui_fill_color_tertiary: Color
    ui_fill_primary: Color
    ui_fill_quaternary: Color
    ui_fill_secondary: Color
    ui_fill_tertiary: Color

    # System inputs
    ui_input_background_default: Color
    ui_input_background_error: Color
    ui_input_background_focused: Color
    ui_input_border_default: Color
    ui_input_border_error: Color
    ui_input_border_focused: Color
    ui_input_text_error: Color
    ui_input_text_helper: Color
    ui_input_text_label: Color
    ui_input_text_placeholder: Color

    # Lists and navigation
    ui_list_table_default: Color
    ui_list_table_footer: Color
    ui_list_table_header: Color
    ui_list_table_highlighted: Color
    ui_list_table_selected: Color
    ui_list_table_swipe_action: Color
    ui_navigation_backindicator: Color
    ui_navigation_buttontint: Color
    ui_navigation_titlecolor: Color

    # Layout spacing
    ui_spacing_content_inset_horizontal: Dimension
    ui_spacing_content_inset_vertical: Dimension
    ui_spacing_content_padding_card: Dimension
    ui_spacing_content_padding_list_item: Dimension
    ui_spacing_content_padding_section: Dimension
    ui_spacing_content_padding_stack: Dimension
    ui_spacing_content_safe_area_bottom: Dimension
    ui_spacing_content_safe_area_top: Dimension
    ui_spacing_spacing_0: Dimension
    ui_spacing_spacing_1: Dimension
    ui_spacing_spacing_2: Dimension
    ui_spacing_spacing_3: Dimension
    ui_spacing_spacing_4: Dimension
    ui_spacing_spacing_5: Dimension
    ui_spacing_spacing_6: Dimension
    ui_spacing_spacing_7: Dimension
    ui_spacing_spacing_8: Dimension
    ui_spacing_spacing_9: Dimension
    ui_spacing_spacing_10: Dimension

    # Tab bar and tint
    ui_tabbar_badgebackground: Color
    ui_tabbar_badgetext: Color
    ui_tabbar_itemactive: Color
    ui_tabbar_iteminactive: Color
    ui_tabbar_iteninactive: Color
    ui_tint_color_primary: Color
    ui_tint_color_quaternary: Color
    ui_tint_color_secondary: Color
    ui_tint_color_tertiary: Color
