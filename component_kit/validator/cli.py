"""``style-validator`` command-line entry point.

Commands::

    style-validator file <path>         validate a single CSS module
    style-validator dir [directory]     validate every CSS module under a directory
    style-validator watch [directory]   re-validate CSS modules as they change
"""

from __future__ import annotations

import argparse
import sys

from rich.markup import escape

from component_kit.config import Config
from component_kit.utils import (
    CLIArgumentParser,
    console,
    print_error,
    print_success,
    print_summary_table,
)

from .rules import ValidationIssue
from .validator import validate_directory, validate_file
from .watcher import StyleWatcher, WatchError


def build_parser(config: Config) -> CLIArgumentParser:
    parser = CLIArgumentParser(
        prog="style-validator",
        description="Validate CSS modules against naming and unit conventions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  style-validator file components/Button/Button.module.css\n"
            "  style-validator dir components\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")
    subparsers.required = True

    file_cmd = subparsers.add_parser("file", help="Validate a single CSS module file")
    file_cmd.add_argument("path", help="Path to the CSS module")

    default_dir = str(config.components_dir)
    dir_cmd = subparsers.add_parser("dir", help="Validate all CSS modules in a directory")
    dir_cmd.add_argument("directory", nargs="?", default=default_dir)

    watch_cmd = subparsers.add_parser("watch", help="Watch a directory and validate on change")
    watch_cmd.add_argument("directory", nargs="?", default=default_dir)

    return parser


def _print_issues(issues: list[ValidationIssue]) -> None:
    for issue in issues:
        console.print(f"  Line {issue.line}: \\[{issue.rule}] {escape(issue.message)}")
        if issue.content:
            console.print(f"    {issue.content}", markup=False)
        console.print()


def run_file(path: str) -> int:
    console.print(f"Validating: {path}")
    issues = validate_file(path)

    if not issues:
        print_success("No issues found")
        return 0

    console.print(f"\n[bold red]Found {len(issues)} issue(s):[/bold red]\n")
    _print_issues(issues)
    return 1


def run_dir(directory: str, config: Config) -> int:
    console.print(f"Scanning directory: {directory}")
    try:
        report = validate_directory(directory, config.css_module_suffix)
    except OSError as exc:
        print_error(str(exc))
        return 1

    console.print(f"Found {len(report.files)} CSS module(s)\n")
    for file_report in report.files:
        console.print(f"Validating: {file_report.path}")
        if file_report.issues:
            console.print(f"  [red]{len(file_report.issues)} issue(s) found[/red]")
            for issue in file_report.issues:
                console.print(f"    Line {issue.line}: {escape(issue.message)}")
        else:
            console.print("  [green]No issues[/green]")

    console.print()
    print_summary_table(
        {
            "Directory": report.directory,
            "Files scanned": len(report.files),
            "Files with issues": report.files_with_issues,
            "Total issues": report.total_issues,
        },
        title="Style Validation Summary",
    )
    return 0 if report.passed else 1


def run_watch(directory: str, config: Config) -> int:
    watcher = StyleWatcher(
        directory,
        suffix=config.css_module_suffix,
        poll_interval=config.watch_poll_interval,
    )
    try:
        watcher.run()
    except WatchError as exc:
        print_error(str(exc))
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``style-validator``."""
    try:
        config = Config.from_env()
    except ValueError as exc:
        print_error(f"Invalid configuration: {escape(str(exc))}")
        sys.exit(1)
    args = build_parser(config).parse_args(argv)

    if args.command == "file":
        code = run_file(args.path)
    elif args.command == "dir":
        code = run_dir(args.directory, config)
    else:
        code = run_watch(args.directory, config)

    sys.exit(code)


if __name__ == "__main__":
    main()
