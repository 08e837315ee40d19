"""Tests for the exception hierarchy."""

import pytest

from retail_tokens.exceptions import (
    DuplicateTokenError,
    InvalidColorError,
    InvalidLayerError,
    InvalidThemeError,
    InvalidTokenValueError,
    MissingTokenError,
    TokenDefinitionError,
    TokenNotFoundError,
    TokenSystemError,
    UnknownTokenError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            DuplicateTokenError("core", "Spacing4"),
            MissingTokenError("core", ["spacing_4"]),
            UnknownTokenError("core", ["text_on"]),
            InvalidTokenValueError("core", "spacing_4", "dimension", "16px"),
        ],
    )
    def test_definition_errors(self, error):
        assert isinstance(error, TokenDefinitionError)
        assert isinstance(error, TokenSystemError)

    @pytest.mark.parametrize(
        "error",
        [
            TokenNotFoundError("core", "TextOn"),
            InvalidThemeError("system"),
            InvalidLayerError("palette"),
            InvalidColorError("#FFF", "expected #RRGGBB or #RRGGBBAA"),
        ],
    )
    def test_lookup_and_value_errors_are_not_definition_errors(self, error):
        assert isinstance(error, TokenSystemError)
        assert not isinstance(error, TokenDefinitionError)


class TestToDict:
    def test_carries_code_message_and_context(self):
        error = TokenNotFoundError("semantic", "ElevationBelow1")

        assert error.to_dict() == {
            "error": "TOKEN_NOT_FOUND",
            "message": "Token not found in semantic layer: ElevationBelow1",
            "context": {"layer": "semantic", "token": "ElevationBelow1"},
        }

    def test_error_code_override(self):
        error = TokenSystemError("boom", error_code="CUSTOM")

        assert error.error_code == "CUSTOM"
        assert error.to_dict()["context"] == {}

    def test_invalid_theme_message(self):
        assert "'system'" in str(InvalidThemeError("system"))
