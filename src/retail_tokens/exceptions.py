"""Exception hierarchy for the retail design token system.

All token-system exceptions inherit from TokenSystemError. Definition-time
problems (a table that is missing a token, a duplicated name, a value of the
wrong kind) derive from TokenDefinitionError and surface when the token
modules are imported. Selector problems (an unknown theme or layer) are
raised eagerly by the resolver instead of falling back to a default.
"""

from typing import Any


class TokenSystemError(Exception):
    """Base exception for all design token errors.

    Includes an error_code for machine-readable reporting and extra context.
    """

    error_code: str = "TOKEN_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for CLI/JSON output."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Definition Errors
# =============================================================================


class TokenDefinitionError(TokenSystemError):
    """Base exception for token tables or providers that are malformed."""

    error_code = "TOKEN_DEFINITION_ERROR"


class DuplicateTokenError(TokenDefinitionError):
    """Raised when the same token name appears twice in one table."""

    error_code = "DUPLICATE_TOKEN"

    def __init__(self, layer: str, name: str) -> None:
        super().__init__(
            f"Token defined more than once in {layer} table: {name}",
            context={"layer": layer, "token": name},
        )


class MissingTokenError(TokenDefinitionError):
    """Raised when a table omits tokens its layer declares."""

    error_code = "MISSING_TOKEN"

    def __init__(self, layer: str, names: list[str]) -> None:
        super().__init__(
            f"{layer} table is missing {len(names)} token(s): {', '.join(names)}",
            context={"layer": layer, "tokens": names},
        )


class UnknownTokenError(TokenDefinitionError):
    """Raised when a table defines a token its layer does not declare."""

    error_code = "UNKNOWN_TOKEN"

    def __init__(self, layer: str, names: list[str]) -> None:
        super().__init__(
            f"{layer} table defines undeclared token(s): {', '.join(names)}",
            context={"layer": layer, "tokens": names},
        )


class InvalidTokenValueError(TokenDefinitionError):
    """Raised when a token value does not match its declared kind."""

    error_code = "INVALID_TOKEN_VALUE"

    def __init__(self, layer: str, name: str, expected: str, actual: Any) -> None:
        super().__init__(
            f"{layer} token {name} expects a {expected} value, "
            f"got {type(actual).__name__}",
            context={
                "layer": layer,
                "token": name,
                "expected": expected,
                "actual": type(actual).__name__,
            },
        )


# =============================================================================
# Lookup Errors
# =============================================================================


class TokenNotFoundError(TokenSystemError):
    """Raised when a token name is not declared by the requested layer."""

    error_code = "TOKEN_NOT_FOUND"

    def __init__(self, layer: str, name: str) -> None:
        super().__init__(
            f"Token not found in {layer} layer: {name}",
            context={"layer": layer, "token": name},
        )


class InvalidThemeError(TokenSystemError):
    """Raised when a theme selector is not exactly light or dark."""

    error_code = "INVALID_THEME"

    def __init__(self, theme: Any) -> None:
        super().__init__(
            f"Invalid theme: {theme!r} (expected 'light' or 'dark')",
            context={"theme": str(theme)},
        )


class InvalidLayerError(TokenSystemError):
    """Raised when a layer selector is not core, semantic or component."""

    error_code = "INVALID_LAYER"

    def __init__(self, layer: Any) -> None:
        super().__init__(
            f"Invalid layer: {layer!r} (expected 'core', 'semantic' or 'component')",
            context={"layer": str(layer)},
        )


# =============================================================================
# Value Errors
# =============================================================================


class InvalidColorError(TokenSystemError):
    """Raised when a color cannot be built from the given input."""

    error_code = "INVALID_COLOR"

    def __init__(self, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid color {value!r}: {reason}",
            context={"value": str(value), "reason": reason},
        )
