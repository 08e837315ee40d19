"""Tests for catalog validation."""

import dataclasses
import logging

from retail_tokens.design_system.core import CORE_LIGHT
from retail_tokens.design_system.providers import Layer
from retail_tokens.design_system.themes import DEFAULT_TABLES, Theme, ThemeResolver
from retail_tokens.design_system.validation import ValidationResult, validate_catalog
from retail_tokens.design_system.values import Color


def _resolver_with(layer: Layer, theme: Theme, table) -> ThemeResolver:
    tables = dict(DEFAULT_TABLES)
    tables[(layer, theme)] = table
    return ThemeResolver(tables)


class TestValidationResult:
    def test_empty_result_is_valid(self):
        assert ValidationResult().is_valid

    def test_warnings_do_not_invalidate(self):
        assert ValidationResult(warnings=["identical"]).is_valid

    def test_violations_invalidate(self):
        assert not ValidationResult(violations=["broken"]).is_valid


class TestValidateCatalog:
    def test_builtin_catalog_is_valid(self):
        result = validate_catalog()

        assert result.is_valid
        assert result.violations == []
        assert result.warnings == []

    def test_identical_themes_warn(self):
        resolver = _resolver_with(Layer.CORE, Theme.DARK, CORE_LIGHT)

        result = validate_catalog(resolver)

        assert result.is_valid
        assert result.warnings == ["core light and dark tables are identical"]

    def test_value_of_wrong_kind_is_a_violation(self):
        # Bypass construction-time checks to simulate a corrupted table
        broken = dataclasses.replace(CORE_LIGHT)
        object.__setattr__(broken, "spacing_4", Color(0, 0, 0))
        resolver = _resolver_with(Layer.CORE, Theme.LIGHT, broken)

        result = validate_catalog(resolver)

        assert not result.is_valid
        assert result.violations == [
            "core/light spacing_4 holds Color, expected dimension"
        ]

    def test_missing_token_is_a_violation(self):
        broken = dataclasses.replace(CORE_LIGHT)
        object.__delattr__(broken, "spacing_4")
        resolver = _resolver_with(Layer.CORE, Theme.LIGHT, broken)

        result = validate_catalog(resolver)

        assert not result.is_valid
        assert result.violations == ["core/light does not define spacing_4"]

    def test_violations_are_logged(self, debug_logging, caplog):
        broken = dataclasses.replace(CORE_LIGHT)
        object.__setattr__(broken, "spacing_4", "16px")
        resolver = _resolver_with(Layer.CORE, Theme.LIGHT, broken)

        with caplog.at_level(logging.WARNING, logger="retail_tokens"):
            validate_catalog(resolver)

        assert "catalog_violation" in caplog.text
        assert "spacing_4" in caplog.text
