from retail_tokens.design_system import (
    Color,
    Layer,
    Shadow,
    Theme,
    ThemeMode,
    ThemeResolver,
    get_token,
    resolve,
)

__all__ = [
    "Color",
    "Layer",
    "Shadow",
    "Theme",
    "ThemeMode",
    "ThemeResolver",
    "get_token",
    "resolve",
]

__version__ = "0.1.0"
