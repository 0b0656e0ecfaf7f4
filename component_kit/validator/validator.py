"""Line-based validation of CSS module files.

Each non-blank, non-comment line is checked in two independent passes:

1. If the line opens a block (contains ``{``), the selector before the brace
   is tested against every selector rule.
2. The full line is tested against every line rule (unit preference).

Issues are ordered by line, then by rule order within a line. Unreadable
files produce a single ``fileError`` issue instead of raising, so a directory
scan always covers every file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .rules import (
    FILE_ERROR_RULE,
    LINE_RULES,
    SELECTOR_RULES,
    ValidationIssue,
)


DEFAULT_SUFFIX = ".module.css"

_COMMENT_PREFIXES = ("/*", "//")


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------


class FileReport(BaseModel):
    """Validation results for one CSS module."""

    path: Path
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues


class DirectoryReport(BaseModel):
    """Aggregated results of a directory scan."""

    directory: Path
    files: list[FileReport] = Field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return sum(len(f.issues) for f in self.files)

    @property
    def files_with_issues(self) -> int:
        return sum(1 for f in self.files if f.issues)

    @property
    def passed(self) -> bool:
        return self.total_issues == 0


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_css(content: str) -> list[ValidationIssue]:
    """Validate CSS module source text and return the issues found."""
    issues: list[ValidationIssue] = []

    for line_num, line in enumerate(content.split("\n"), start=1):
        trimmed = line.strip()
        if not trimmed or trimmed.startswith(_COMMENT_PREFIXES):
            continue

        if "{" in trimmed:
            selector = trimmed.split("{", 1)[0].strip()
            for rule in SELECTOR_RULES:
                if not rule.check(selector):
                    issues.append(
                        ValidationIssue(
                            line=line_num,
                            rule=rule.name,
                            message=rule.message,
                            content=trimmed,
                        )
                    )

        for line_rule in LINE_RULES:
            verdict = line_rule.check(trimmed)
            if not verdict.valid:
                issues.append(
                    ValidationIssue(
                        line=line_num,
                        rule=line_rule.name,
                        message=verdict.message,
                        content=trimmed,
                    )
                )

    return issues


def validate_file(path: str | Path) -> list[ValidationIssue]:
    """Validate a single CSS module file.

    Read failures are reported as one ``fileError`` issue at line 0.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return [
            ValidationIssue(
                line=0,
                rule=FILE_ERROR_RULE,
                message=f"Could not read file: {exc}",
                content="",
            )
        ]
    return validate_css(content)


def find_css_modules(directory: str | Path, suffix: str = DEFAULT_SUFFIX) -> list[Path]:
    """Recursively collect files under *directory* whose name ends with *suffix*.

    Raises:
        FileNotFoundError: If *directory* does not exist.
        NotADirectoryError: If *directory* is not a directory.
    """
    root = Path(directory)
    if not root.exists():
        raise FileNotFoundError(f"Directory not found: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Not a directory: {root}")
    return sorted(p for p in root.rglob(f"*{suffix}") if p.is_file())


def validate_directory(directory: str | Path, suffix: str = DEFAULT_SUFFIX) -> DirectoryReport:
    """Validate every CSS module found under *directory*."""
    modules = find_css_modules(directory, suffix)
    return DirectoryReport(
        directory=Path(directory),
        files=[FileReport(path=module, issues=validate_file(module)) for module in modules],
    )
