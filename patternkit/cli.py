"""
Meal ordering CLI

Picks a themed meal factory and serves one meal from it.

Usage:
    order-meal                          # Theme from PATTERNKIT_THEME (default: american)
    order-meal --theme italian          # Pick a theme
    order-meal --format json            # Output as JSON
    order-meal --list-themes            # Show registered themes
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import AppConfig, load_environment, setup_logging, validate_config
from .exceptions import ConfigurationError, ThemeLookupError
from .formatters import MealFormatter
from .registry import get_registry
from .services import KitchenService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="order-meal",
        description="Serve a meal from a themed abstract factory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Serve the default theme
  order-meal

  # Serve an Italian meal
  order-meal --theme italian

  # Show results as JSON
  order-meal --theme american --json

  # Verbose logging
  order-meal --verbose
        """
    )

    parser.add_argument(
        "--theme", "-t",
        help="Theme to order from (default: PATTERNKIT_THEME or american)"
    )

    parser.add_argument(
        "--format", "-f",
        choices=list(AppConfig.OUTPUT_FORMATS),
        help="Output format: list (default), table, or json"
    )

    parser.add_argument(
        "--json", "-j",
        action="store_true",
        help="Output as JSON (shortcut for --format json)"
    )

    parser.add_argument(
        "--list-themes",
        action="store_true",
        help="List registered themes and exit"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.env_file:
        load_environment(args.env_file)

    setup_logging(verbose=args.verbose)

    try:
        validate_config()
    except ConfigurationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    registry = get_registry()

    if args.list_themes:
        for theme in registry.get_available():
            print(theme)
        return 0

    theme = args.theme or AppConfig.DEFAULT_THEME

    try:
        kitchen = KitchenService.from_theme(theme, registry)
    except ThemeLookupError as e:
        logger.error(f"Theme lookup failed: {e}")
        print(f"❌ {e}", file=sys.stderr)
        return 2

    output_format = "json" if args.json else (args.format or AppConfig.DEFAULT_OUTPUT_FORMAT)
    formatter = MealFormatter(output_format=output_format)

    meal = kitchen.order_meal()
    print(formatter.format(meal))
    return 0


def run():
    """Console-script entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nOrder cancelled by user.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\n❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)
