"""Command-line interface for Retail Design Tokens."""

import argparse
import sys
from pathlib import Path

from retail_tokens import __version__
from retail_tokens.config import get_settings
from retail_tokens.design_system.providers import Layer
from retail_tokens.design_system.themes import (
    Theme,
    ThemeMode,
    effective_theme,
    format_css_value,
    generate_css,
    get_resolver,
)
from retail_tokens.design_system.validation import validate_catalog
from retail_tokens.design_system.values import Color, TokenKind, TokenValue
from retail_tokens.exceptions import TokenSystemError
from retail_tokens.logging_config import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

logger = get_logger(__name__)


def get_theme(args: argparse.Namespace) -> Theme:
    """Pick the theme for a command.

    An explicit --theme wins; otherwise the theme mode (flag, then settings)
    is made concrete against the system theme (flag, then settings).
    """
    if getattr(args, "theme", None):
        return Theme(args.theme)
    settings = get_settings()
    mode = args.theme_mode or settings.theme_mode
    system_theme = args.system_theme or settings.system_theme
    return effective_theme(mode, system_theme)


def format_value(value: TokenValue) -> str:
    """Human-readable token value: hex for colors, CSS for the rest."""
    if isinstance(value, Color):
        return value.to_hex()
    return format_css_value(value)


def cmd_list(args: argparse.Namespace) -> int:
    """List tokens with their values."""
    theme = get_theme(args)
    resolver = get_resolver()
    layers = [Layer(args.layer)] if args.layer else list(Layer)
    kind = TokenKind(args.kind) if args.kind else None

    count = 0
    for layer in layers:
        table = resolver.resolve(layer, theme)
        for name, value in table.items():
            if kind is not None and table.kind_of(name) is not kind:
                continue
            label = table.export_name(name) if args.export_names else name
            print(f"{layer.value:<10} {label:<60} {format_value(value)}")
            count += 1

    print(f"\n{count} token(s), theme: {theme.value}")
    return 0


def cmd_get(args: argparse.Namespace) -> int:
    """Show a single token."""
    theme = get_theme(args)
    with LogContext(layer=args.layer, token=args.name, theme=theme.value):
        try:
            table = get_resolver().resolve(args.layer, theme)
            value = table.get(args.name)
        except TokenSystemError as e:
            logger.warning("token_lookup_failed", **e.to_dict())
            print(f"Error: {e}")
            return 1

    print(f"{table.export_name(args.name)} ({table.kind_of(args.name).value})")
    print(f"  Attribute: {table.attribute_name(args.name)}")
    print(f"  Theme: {theme.value}")
    print(f"  Value: {format_value(value)}")
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Validate the token catalog."""
    result = validate_catalog()

    for violation in result.violations:
        print(f"VIOLATION: {violation}")
    for warning in result.warnings:
        print(f"WARNING: {warning}")

    if not result.is_valid:
        print(f"\nCatalog check failed: {len(result.violations)} violation(s)")
        return 1

    tables = get_resolver().tables
    total = sum(len(table.names()) for table in tables.values())
    print(f"Catalog OK: {total} tokens across {len(tables)} tables")
    return 0


def cmd_css(args: argparse.Namespace) -> int:
    """Generate CSS custom properties."""
    settings = get_settings()
    css = generate_css(layers=args.layer, dark_selector=settings.css_selector_dark)

    if args.output:
        output = Path(args.output)
        try:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(css, encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not write {output}: {e}")
            return 1
        logger.info("css_written", path=str(output), bytes=len(css))
        print(f"Wrote CSS to {output}")
        return 0

    print(css, end="")
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version information."""
    print(f"{get_settings().app_name} v{__version__}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rdt",
        description="Retail Design Tokens - inspect, validate and export design tokens",
    )
    parser.add_argument(
        "--theme-mode",
        choices=[mode.value for mode in ThemeMode],
        default=None,
        help="Theme mode (default: from RDT_THEME_MODE, else system)",
    )
    parser.add_argument(
        "--system-theme",
        choices=[theme.value for theme in Theme],
        default=None,
        help="Platform appearance used by system mode (default: from RDT_SYSTEM_THEME)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    theme_choices = [theme.value for theme in Theme]
    layer_choices = [layer.value for layer in Layer]

    # list command
    list_parser = subparsers.add_parser("list", help="List tokens and values")
    list_parser.add_argument(
        "--layer", "-l", choices=layer_choices, help="Only list one layer"
    )
    list_parser.add_argument(
        "--theme", "-t", choices=theme_choices, help="Theme (overrides theme mode)"
    )
    list_parser.add_argument(
        "--kind",
        "-k",
        choices=[kind.value for kind in TokenKind],
        help="Only list tokens of one kind",
    )
    list_parser.add_argument(
        "--export-names",
        action="store_true",
        help="Show PascalCase export names instead of attribute names",
    )
    list_parser.set_defaults(func=cmd_list)

    # get command
    get_parser = subparsers.add_parser("get", help="Show one token")
    get_parser.add_argument("layer", choices=layer_choices, help="Token layer")
    get_parser.add_argument("name", help="Attribute or export name")
    get_parser.add_argument(
        "--theme", "-t", choices=theme_choices, help="Theme (overrides theme mode)"
    )
    get_parser.set_defaults(func=cmd_get)

    # check command
    check_parser = subparsers.add_parser("check", help="Validate the token catalog")
    check_parser.set_defaults(func=cmd_check)

    # css command
    css_parser = subparsers.add_parser("css", help="Generate CSS custom properties")
    css_parser.add_argument(
        "--layer",
        "-l",
        choices=layer_choices,
        action="append",
        help="Layer to include (repeatable, default: all)",
    )
    css_parser.add_argument(
        "--output", "-o", help="Write to this file instead of stdout", default=None
    )
    css_parser.set_defaults(func=cmd_css)

    # version command
    version_parser = subparsers.add_parser("version", help="Show version")
    version_parser.set_defaults(func=cmd_version)

    args = parser.parse_args(argv)

    configure_logging(get_settings())

    if args.command is None:
        parser.print_help()
        return 0

    clear_context()
    bind_context(command=args.command)
    try:
        result: int = args.func(args)
    finally:
        unbind_context("command")
    return result


if __name__ == "__main__":
    sys.exit(main())
