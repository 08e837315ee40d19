"""Consistency checks over a resolver's token catalog.

The dataclass providers already make an incomplete table fail at import.
These checks cover what a single table cannot see on its own: that a layer's
light and dark tables agree with each other and with the provider, and that
the three layers never share a token name.
"""

from dataclasses import dataclass, field, fields
from itertools import combinations

from retail_tokens.design_system.providers import Layer, TokenSet, provider_for
from retail_tokens.design_system.themes import Theme, ThemeResolver, get_resolver
from retail_tokens.design_system.values import TokenKind
from retail_tokens.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class ValidationResult:
    """Outcome of a catalog validation run."""

    violations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations


def _defined(table: TokenSet) -> dict[str, object]:
    """Tokens the table instance actually holds, by attribute name."""
    return {
        f.name: getattr(table, f.name) for f in fields(table) if hasattr(table, f.name)
    }


def _check_symmetry(resolver: ThemeResolver, result: ValidationResult) -> None:
    for layer in Layer:
        declared = set(provider_for(layer).names())
        for theme in Theme:
            defined = set(_defined(resolver.resolve(layer, theme)))
            for name in sorted(declared - defined):
                result.violations.append(
                    f"{layer.value}/{theme.value} does not define {name}"
                )
            for name in sorted(defined - declared):
                result.violations.append(
                    f"{layer.value}/{theme.value} defines undeclared {name}"
                )


def _check_kinds(resolver: ThemeResolver, result: ValidationResult) -> None:
    for (layer, theme), table in resolver.tables.items():
        for name, value in _defined(table).items():
            expected = table.kind_of(name)
            try:
                actual = TokenKind.of(value)
            except TypeError:
                actual = None
            if actual is not expected:
                result.violations.append(
                    f"{layer.value}/{theme.value} {name} holds "
                    f"{type(value).__name__}, expected {expected.value}"
                )


def _check_isolation(result: ValidationResult) -> None:
    for first, second in combinations(Layer, 2):
        a, b = provider_for(first), provider_for(second)
        shared = (set(a.names()) | set(a.export_names())) & (
            set(b.names()) | set(b.export_names())
        )
        for name in sorted(shared):
            result.violations.append(
                f"{name} is declared by both {first.value} and {second.value}"
            )


def _check_themes_differ(resolver: ThemeResolver, result: ValidationResult) -> None:
    for layer in Layer:
        light = resolver.resolve(layer, Theme.LIGHT)
        dark = resolver.resolve(layer, Theme.DARK)
        if light is dark or _defined(light) == _defined(dark):
            result.warnings.append(
                f"{layer.value} light and dark tables are identical"
            )


def validate_catalog(resolver: ThemeResolver | None = None) -> ValidationResult:
    """Run every catalog check against ``resolver``.

    Args:
        resolver: Resolver to validate (default: the shared built-in one)

    Returns:
        ValidationResult listing violations and warnings
    """
    if resolver is None:
        resolver = get_resolver()

    result = ValidationResult()
    _check_symmetry(resolver, result)
    _check_kinds(resolver, result)
    _check_isolation(result)
    _check_themes_differ(resolver, result)

    for violation in result.violations:
        logger.warning("catalog_violation", detail=violation)
    for warning in result.warnings:
        logger.warning("catalog_warning", detail=warning)
    logger.info(
        "catalog_validated",
        violations=len(result.violations),
        warnings=len(result.warnings),
    )
    return result
