"""Layered design tokens for the retail app design system.

Tokens come in three layers (core primitives, semantic roles, component
bindings), each with a light and a dark table. Consumers pick a theme once and
read typed attributes off the table the resolver returns.

Usage:
    from retail_tokens.design_system import Layer, Theme, get_token, resolve

    # Typed attribute access
    shadow = resolve(Layer.CORE, Theme.LIGHT).elevation_below_1
    print(shadow.to_css())  # 0px 1px 2px 0px rgba(0, 0, 0, 0.05)

    # String lookup, either spelling
    get_token("semantic", "TextOnSurfaceColorPrimary", "dark")
"""

from retail_tokens.design_system.values import (
    Color,
    Dimension,
    Shadow,
    TokenKind,
    TokenValue,
)
from retail_tokens.design_system.providers import (
    ComponentTokens,
    CoreTokens,
    Layer,
    SemanticTokens,
    TokenSet,
    to_export_name,
)
from retail_tokens.design_system.core import CORE_DARK, CORE_LIGHT
from retail_tokens.design_system.semantic import SEMANTIC_DARK, SEMANTIC_LIGHT
from retail_tokens.design_system.components import COMPONENTS_DARK, COMPONENTS_LIGHT
from retail_tokens.design_system.themes import (
    Theme,
    ThemeMode,
    ThemeResolver,
    effective_theme,
    generate_css,
    get_resolver,
    get_token,
    resolve,
    to_css_variables,
)
from retail_tokens.design_system.styles import (
    ButtonColors,
    ButtonStyle,
    FeedbackColors,
    FeedbackVariant,
    get_button_css,
    resolve_button_colors,
    resolve_feedback_colors,
)
from retail_tokens.design_system.validation import ValidationResult, validate_catalog

__all__ = [
    # Values
    "Color",
    "Dimension",
    "Shadow",
    "TokenKind",
    "TokenValue",
    # Providers
    "Layer",
    "TokenSet",
    "CoreTokens",
    "SemanticTokens",
    "ComponentTokens",
    "to_export_name",
    # Tables
    "CORE_LIGHT",
    "CORE_DARK",
    "SEMANTIC_LIGHT",
    "SEMANTIC_DARK",
    "COMPONENTS_LIGHT",
    "COMPONENTS_DARK",
    # Themes
    "Theme",
    "ThemeMode",
    "ThemeResolver",
    "effective_theme",
    "get_resolver",
    "resolve",
    "get_token",
    "to_css_variables",
    "generate_css",
    # Styles
    "ButtonStyle",
    "ButtonColors",
    "FeedbackVariant",
    "FeedbackColors",
    "resolve_button_colors",
    "resolve_feedback_colors",
    "get_button_css",
    # Validation
    "ValidationResult",
    "validate_catalog",
]
