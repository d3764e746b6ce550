"""CLI entry point for termflex.

Lays out HTML-like markup on a terminal character grid.

Usage:
    python -m termflex render layout.html --width 60
    python -m termflex measure layout.html
    python -m termflex translators
    python -m termflex env
"""

import argparse
import sys

from dotenv import load_dotenv

from termflex.config import (
    EnvVar,
    get_environment,
    get_environment_info,
    get_translator_order,
    list_environment_variables,
)
from termflex.core import get_logger, setup_logging
from termflex.render import RenderConfig, create_console, measure, render_text
from termflex.translation import TranslationError, create_context, list_translators
from termflex.vdom import parse_markup

logger = get_logger("cli")


def positive_int(value: str) -> int:
    """Argparse type accepting integers of at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


def _read_source(path: str) -> str:
    """Read markup from a file, or from stdin when `path` is "-"."""
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


# =============================================================================
# Layout Commands
# =============================================================================


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the render command."""
    try:
        config = RenderConfig.from_environment(args.width)
        context = create_context(args.translators)
        renderable = context.translate(parse_markup(_read_source(args.file)))

        if args.plain:
            sys.stdout.write(render_text(renderable, config.width))
        else:
            create_console(config, file=sys.stdout).print(renderable)
        return 0

    except (TranslationError, KeyError, ValueError, OSError) as e:
        logger.error(f"Render failed: {e}")
        return 1


def cmd_measure(args: argparse.Namespace) -> int:
    """Handle the measure command."""
    try:
        config = RenderConfig.from_environment(args.width)
        context = create_context(args.translators)
        renderable = context.translate(parse_markup(_read_source(args.file)))
        result = measure(renderable, config.width)
        print(f"{result.minimum} {result.maximum}")
        return 0

    except (TranslationError, KeyError, ValueError, OSError) as e:
        logger.error(f"Measure failed: {e}")
        return 1


# =============================================================================
# Inspection Commands
# =============================================================================


def cmd_translators(_args: argparse.Namespace) -> int:
    """Handle the translators command."""
    order = get_translator_order()
    registered = list_translators()

    print("Active translators (highest precedence first):")
    for index, name in enumerate(order, 1):
        marker = "" if name in registered else "  (not registered)"
        print(f"  {index}. {name}{marker}")

    inactive = [name for name in registered if name not in order]
    if inactive:
        print(f"Registered but inactive: {', '.join(inactive)}")
    return 0


def cmd_env(args: argparse.Namespace) -> int:
    """Handle the env command."""
    for var in list_environment_variables(args.category):
        info = get_environment_info(var)
        value = get_environment(var)
        print(f"{info.name}={'' if value is None else value}")
        print(f"    [{info.category}] {info.description} (default: {info.default})")
    return 0


# =============================================================================
# Main Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="termflex",
        description="Flex layout for terminal character grids",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    render_parser = subparsers.add_parser(
        "render",
        help="Render markup to the terminal",
    )
    render_parser.add_argument("file", help="Markup file, or - for stdin")
    render_parser.add_argument(
        "--width",
        "-w",
        type=positive_int,
        default=None,
        help="Render width in cells (default: TERMFLEX_WIDTH or 80)",
    )
    render_parser.add_argument(
        "--translators",
        "-t",
        default=None,
        help="Comma-separated translator names (default: TERMFLEX_TRANSLATORS)",
    )
    render_parser.add_argument(
        "--plain",
        action="store_true",
        help="Write plain text without styles",
    )
    render_parser.set_defaults(func=cmd_render)

    measure_parser = subparsers.add_parser(
        "measure",
        help="Print the minimum and maximum width of rendered markup",
    )
    measure_parser.add_argument("file", help="Markup file, or - for stdin")
    measure_parser.add_argument(
        "--width",
        "-w",
        type=positive_int,
        default=None,
        help="Available width in cells (default: TERMFLEX_WIDTH or 80)",
    )
    measure_parser.add_argument(
        "--translators",
        "-t",
        default=None,
        help="Comma-separated translator names (default: TERMFLEX_TRANSLATORS)",
    )
    measure_parser.set_defaults(func=cmd_measure)

    translators_parser = subparsers.add_parser(
        "translators",
        help="List translation middleware",
    )
    translators_parser.set_defaults(func=cmd_translators)

    env_parser = subparsers.add_parser(
        "env",
        help="Show configuration variables",
    )
    env_parser.add_argument(
        "--category",
        "-c",
        choices=["render", "translation", "logging"],
        default=None,
        help="Only show one category",
    )
    env_parser.set_defaults(func=cmd_env)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    # Load environment variables from .env file
    load_dotenv()
    setup_logging(get_environment(EnvVar.TERMFLEX_LOG_LEVEL))

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
