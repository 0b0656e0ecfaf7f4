"""CSS module style validation.

Checks class naming, forbidden selectors (ids, universal, ``!``) and unit
preference line by line, for a single file, a directory tree, or
continuously in watch mode.
"""

from component_kit.validator.rules import (
    VALIDATION_RULES,
    PatternRule,
    PredicateRule,
    RuleVerdict,
    ValidationIssue,
)
from component_kit.validator.validator import (
    DirectoryReport,
    FileReport,
    find_css_modules,
    validate_css,
    validate_directory,
    validate_file,
)
from component_kit.validator.watcher import StyleWatcher, WatchError

__all__ = [
    "DirectoryReport",
    "FileReport",
    "PatternRule",
    "PredicateRule",
    "RuleVerdict",
    "StyleWatcher",
    "VALIDATION_RULES",
    "ValidationIssue",
    "WatchError",
    "find_css_modules",
    "validate_css",
    "validate_directory",
    "validate_file",
]
