"""``generate-component`` command-line entry point."""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from component_kit.config import Config
from component_kit.utils import CLIArgumentParser, console, print_error, print_success

from .generator import ComponentGenerator, GenerationOptions, ScaffoldError
from .templates import available_variants


def build_parser(config: Config) -> CLIArgumentParser:
    parser = CLIArgumentParser(
        prog="generate-component",
        description="Generate a React component with CSS module, barrel file and test stub",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  generate-component Button\n"
            "  generate-component LoginForm --type=form\n"
            "  generate-component Toggle --type=interactive --no-styled\n"
        ),
    )
    parser.add_argument("component_name", metavar="ComponentName", help="PascalCase component name")
    parser.add_argument(
        "--type",
        default=config.default_template,
        help=f"Template variant: {'|'.join(available_variants())} (default: {config.default_template})",
    )
    parser.add_argument(
        "--styled",
        action=argparse.BooleanOptionalAction,
        default=config.styled,
        help="Write a CSS module",
    )
    parser.add_argument(
        "--typed",
        action=argparse.BooleanOptionalAction,
        default=config.typed,
        help="Export the Props type from index.ts",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``generate-component``."""
    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        sys.exit(1)
    parser = build_parser(config)
    args = parser.parse_args(argv)

    options = GenerationOptions(type=args.type, styled=args.styled, typed=args.typed)

    try:
        result = ComponentGenerator(config).generate(args.component_name, options)
    except (ScaffoldError, OSError) as exc:
        print_error(f"Error creating component: {exc}")
        sys.exit(1)

    print_success(f"Created component: {result.component_name}")
    console.print(f"   Location: {result.component_dir}")
    console.print("   Files created:")
    for path in result.files:
        console.print(f"   - {path.name}")


if __name__ == "__main__":
    main()
