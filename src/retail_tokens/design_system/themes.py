"""Theme selection and token resolution.

The resolver is the one place that maps a (layer, theme) pair to a token
table. Consumers pass the theme explicitly and read attributes off whatever
provider comes back, so nothing outside this module branches on the theme.

Usage:
    from retail_tokens.design_system.themes import Theme, resolve

    shadow = resolve("core", Theme.DARK).elevation_below_1
"""

from collections.abc import Iterable, Mapping
from enum import Enum
from functools import lru_cache
from types import MappingProxyType
from typing import Final

from retail_tokens.design_system.components import COMPONENTS_DARK, COMPONENTS_LIGHT
from retail_tokens.design_system.core import CORE_DARK, CORE_LIGHT
from retail_tokens.design_system.providers import (
    ComponentTokens,
    CoreTokens,
    Layer,
    SemanticTokens,
    TokenSet,
    provider_for,
)
from retail_tokens.design_system.semantic import SEMANTIC_DARK, SEMANTIC_LIGHT
from retail_tokens.design_system.values import Color, Shadow, TokenValue
from retail_tokens.exceptions import (
    InvalidLayerError,
    InvalidThemeError,
    TokenDefinitionError,
)
from retail_tokens.logging_config import get_logger

logger = get_logger(__name__)


class Theme(str, Enum):
    """A concrete appearance. Every token table belongs to exactly one."""

    LIGHT = "light"
    DARK = "dark"


class ThemeMode(str, Enum):
    """What a user or platform asks for, before it is made concrete."""

    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


def _coerce_theme(theme: Theme | str) -> Theme:
    try:
        return Theme(theme.lower() if isinstance(theme, str) else theme)
    except (TypeError, ValueError):
        raise InvalidThemeError(theme) from None


def _coerce_layer(layer: Layer | str) -> Layer:
    try:
        return Layer(layer.lower() if isinstance(layer, str) else layer)
    except (TypeError, ValueError):
        raise InvalidLayerError(layer) from None


def effective_theme(
    mode: ThemeMode | str, system_theme: Theme | str = Theme.LIGHT
) -> Theme:
    """Turn a theme mode into a concrete theme.

    Args:
        mode: Requested mode (light, dark or system)
        system_theme: The platform's current appearance, used for system mode

    Returns:
        The theme to resolve tokens against
    """
    try:
        mode = ThemeMode(mode.lower() if isinstance(mode, str) else mode)
    except (TypeError, ValueError):
        raise InvalidThemeError(mode) from None

    if mode == ThemeMode.SYSTEM:
        return _coerce_theme(system_theme)
    return Theme(mode.value)


# =============================================================================
# Resolver
# =============================================================================

TableKey = tuple[Layer, Theme]

DEFAULT_TABLES: Final[Mapping[TableKey, TokenSet]] = MappingProxyType(
    {
        (Layer.CORE, Theme.LIGHT): CORE_LIGHT,
        (Layer.CORE, Theme.DARK): CORE_DARK,
        (Layer.SEMANTIC, Theme.LIGHT): SEMANTIC_LIGHT,
        (Layer.SEMANTIC, Theme.DARK): SEMANTIC_DARK,
        (Layer.COMPONENT, Theme.LIGHT): COMPONENTS_LIGHT,
        (Layer.COMPONENT, Theme.DARK): COMPONENTS_DARK,
    }
)


class ThemeResolver:
    """Maps (layer, theme) to the provider table for that pair.

    A resolver built without arguments serves the built-in tables. A custom
    mapping must cover every layer in both themes, each entry an instance of
    that layer's provider class.
    """

    def __init__(self, tables: Mapping[TableKey, TokenSet] | None = None) -> None:
        if tables is None:
            tables = DEFAULT_TABLES
        self._tables: Mapping[TableKey, TokenSet] = MappingProxyType(
            self._check_tables(tables)
        )
        logger.debug(
            "token_tables_loaded",
            tables=len(self._tables),
            tokens=sum(len(table.names()) for table in self._tables.values()),
        )

    @staticmethod
    def _check_tables(tables: Mapping[TableKey, TokenSet]) -> dict[TableKey, TokenSet]:
        checked: dict[TableKey, TokenSet] = {}
        for (layer, theme), table in tables.items():
            key = (_coerce_layer(layer), _coerce_theme(theme))
            if key in checked:
                raise TokenDefinitionError(
                    f"Table for {key[0].value}/{key[1].value} given twice",
                    context={"layer": key[0].value, "theme": key[1].value},
                )
            expected = provider_for(key[0])
            if not isinstance(table, expected):
                raise TokenDefinitionError(
                    f"Table for {key[0].value}/{key[1].value} must be "
                    f"{expected.__name__}, got {type(table).__name__}",
                    context={"layer": key[0].value, "theme": key[1].value},
                )
            checked[key] = table

        missing = [
            f"{layer.value}/{theme.value}"
            for layer in Layer
            for theme in Theme
            if (layer, theme) not in checked
        ]
        if missing:
            raise TokenDefinitionError(
                f"Missing token tables: {', '.join(missing)}",
                context={"missing": missing},
            )
        return checked

    @property
    def tables(self) -> Mapping[TableKey, TokenSet]:
        """Read-only view of every (layer, theme) table."""
        return self._tables

    def resolve(self, layer: Layer | str, theme: Theme | str) -> TokenSet:
        """Return the table of ``layer`` for ``theme``.

        Raises InvalidLayerError or InvalidThemeError for selectors outside
        the closed sets; ``"system"`` is not a theme.
        """
        key = (_coerce_layer(layer), _coerce_theme(theme))
        logger.debug("theme_resolved", layer=key[0].value, theme=key[1].value)
        return self._tables[key]

    def core(self, theme: Theme | str) -> CoreTokens:
        table = self.resolve(Layer.CORE, theme)
        assert isinstance(table, CoreTokens)
        return table

    def semantic(self, theme: Theme | str) -> SemanticTokens:
        table = self.resolve(Layer.SEMANTIC, theme)
        assert isinstance(table, SemanticTokens)
        return table

    def components(self, theme: Theme | str) -> ComponentTokens:
        table = self.resolve(Layer.COMPONENT, theme)
        assert isinstance(table, ComponentTokens)
        return table

    def get_token(self, layer: Layer | str, name: str, theme: Theme | str) -> TokenValue:
        """Look a token up by attribute or export name."""
        return self.resolve(layer, theme).get(name)


@lru_cache
def get_resolver() -> ThemeResolver:
    """Get the shared resolver over the built-in tables.

    Call get_resolver.cache_clear() to rebuild it.
    """
    return ThemeResolver()


def resolve(layer: Layer | str, theme: Theme | str) -> TokenSet:
    return get_resolver().resolve(layer, theme)


def get_token(layer: Layer | str, name: str, theme: Theme | str) -> TokenValue:
    """Resolve one token by layer, name and theme.

    Example:
        get_token("semantic", "TextOnSurfaceColorPrimary", "dark")
    """
    return get_resolver().get_token(layer, name, theme)


# =============================================================================
# CSS export
# =============================================================================


def _kebab(attribute: str) -> str:
    return attribute.replace("_", "-")


def format_css_value(value: TokenValue) -> str:
    """Render a token value as a CSS value."""
    if isinstance(value, (Color, Shadow)):
        return value.to_css()
    return f"{value:g}"


def to_css_variables(table: TokenSet) -> list[str]:
    """Generate CSS custom property declarations for one table.

    Names are ``--<layer>-<kebab-name>``, e.g. ``--core-elevation-below-1``.
    """
    prefix = table.layer.value
    return [
        f"--{prefix}-{_kebab(name)}: {format_css_value(value)};"
        for name, value in table.items()
    ]


def generate_css(
    layers: Iterable[Layer | str] | None = None,
    resolver: ThemeResolver | None = None,
    dark_selector: str = '[data-theme="dark"]',
) -> str:
    """Generate a stylesheet with light and dark token variables.

    Light values go in ``:root``. Dark values are emitted twice: under a
    ``prefers-color-scheme: dark`` media query and under ``dark_selector`` so
    a page can force the theme.

    Args:
        layers: Layers to include (default: all three)
        resolver: Resolver to read tables from (default: the shared one)
        dark_selector: Selector that forces the dark theme

    Returns:
        Complete CSS string
    """
    if resolver is None:
        resolver = get_resolver()
    if layers is None:
        selected = list(Layer)
    else:
        selected = [_coerce_layer(layer) for layer in layers]

    def declarations(theme: Theme, indent: str) -> str:
        lines: list[str] = []
        for layer in selected:
            lines.extend(to_css_variables(resolver.resolve(layer, theme)))
        return "\n".join(f"{indent}{line}" for line in lines)

    return "\n".join(
        [
            "/* Design tokens - generated CSS variables */",
            ":root {",
            declarations(Theme.LIGHT, "    "),
            "}",
            "",
            "@media (prefers-color-scheme: dark) {",
            "    :root {",
            declarations(Theme.DARK, "        "),
            "    }",
            "}",
            "",
            f"{dark_selector} {{",
            declarations(Theme.DARK, "    "),
            "}",
            "",
        ]
    )
