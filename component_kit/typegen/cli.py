"""``type-generator`` command-line entry point.

Commands::

    type-generator json <schema-file> <TypeName> [output-file]
    type-generator graphql <schema-file> <TypeName> [output-file]

The output file defaults to ``<typename lowercased>.ts`` in the working
directory.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from component_kit.utils import (
    CLIArgumentParser,
    load_json,
    print_error,
    print_success,
    read_text,
    write_text,
)

from .graphql import generate_from_graphql
from .json_schema import generate_from_json
from .models import TypeGenerationError


def build_parser() -> CLIArgumentParser:
    parser = CLIArgumentParser(
        prog="type-generator",
        description="Generate TypeScript interfaces from a JSON or GraphQL schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  type-generator json user-schema.json User\n"
            "  type-generator graphql schema.graphql User src/types/user.ts\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    for command, help_text in (
        ("json", "Generate types from a JSON schema"),
        ("graphql", "Generate types from a GraphQL schema"),
    ):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument("schema_file", help="Path to the schema file")
        sub.add_argument("type_name", metavar="TypeName", help="Name of the generated interface")
        sub.add_argument("output_file", nargs="?", default=None, help="Destination .ts file")

    return parser


def default_output_path(type_name: str) -> Path:
    return Path(f"{type_name.lower()}.ts")


def generate(command: str, schema_file: str, type_name: str) -> str:
    """Read *schema_file* and return the generated TypeScript source.

    Raises:
        OSError: If the schema file cannot be read.
        json.JSONDecodeError: If a JSON schema is malformed.
        TypeGenerationError: If the schema cannot be converted.
    """
    if command == "json":
        return generate_from_json(load_json(schema_file), type_name)
    if command == "graphql":
        return generate_from_graphql(read_text(schema_file), type_name)
    raise TypeGenerationError(f"Unknown command: {command}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``type-generator``."""
    args = build_parser().parse_args(argv)

    try:
        output = generate(args.command, args.schema_file, args.type_name)
        output_file = Path(args.output_file) if args.output_file else default_output_path(args.type_name)
        write_text(output_file, output)
    except json.JSONDecodeError as exc:
        print_error(f"Invalid JSON in {args.schema_file}: {exc}")
        sys.exit(1)
    except (TypeGenerationError, OSError, ValueError) as exc:
        print_error(str(exc))
        sys.exit(1)

    print_success(f"Generated TypeScript types: {output_file}")


if __name__ == "__main__":
    main()
