"""CSS module validation rules.

Two kinds of rule are defined:

- :class:`PatternRule` -- a regular expression every selector (the text
  before ``{`` on a line) must satisfy.
- :class:`PredicateRule` -- a function from the full line text to a
  :class:`RuleVerdict`.

``VALIDATION_RULES`` is the fixed rule set, in the order the checks run.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Data Models
# ---------------------------------------------------------------------------


class ValidationIssue(BaseModel):
    """A single rule violation found in a CSS module."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0, description="1-based line number, 0 for file-level errors")
    rule: str = Field(..., description="Identifier of the violated rule, e.g. 'noIds'")
    message: str = Field(..., description="Human-readable explanation")
    content: str = Field(default="", description="The offending source line, stripped")


@dataclass(frozen=True)
class RuleVerdict:
    valid: bool
    message: str


@dataclass(frozen=True)
class PatternRule:
    """Selector rule: *pattern* must match every checked subject."""

    name: str
    pattern: re.Pattern[str]
    message: str
    subjects: Callable[[str], list[str]] | None = None

    def check(self, selector: str) -> bool:
        """Return ``True`` when *selector* satisfies the rule."""
        targets = self.subjects(selector) if self.subjects else [selector]
        return all(self.pattern.match(target) for target in targets)


@dataclass(frozen=True)
class PredicateRule:
    """Line rule: *predicate* returns a verdict for the full line."""

    name: str
    predicate: Callable[[str], RuleVerdict]

    def check(self, line: str) -> RuleVerdict:
        return self.predicate(line)


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_RE_CLASS_NAME = re.compile(r"\.(-?[_a-zA-Z][\w-]*)")
_RE_PX = re.compile(r"\b\d+px\b")
_RE_RELATIVE = re.compile(r"\b\d+(?:rem|em)\b")


def _class_names(selector: str) -> list[str]:
    """Class names referenced in *selector* (``.a:hover .b`` -> ``['a', 'b']``)."""
    return _RE_CLASS_NAME.findall(selector)


def _prefer_relative_units(line: str) -> RuleVerdict:
    px_count = len(_RE_PX.findall(line))
    relative_count = len(_RE_RELATIVE.findall(line))
    return RuleVerdict(
        valid=relative_count > 0 or px_count == 0,
        message=(
            f"Found {px_count} px units. "
            "Consider using rem/em for better accessibility"
        ),
    )


# ---------------------------------------------------------------------------
# Rule set
# ---------------------------------------------------------------------------

CLASS_NAMING = PatternRule(
    name="classNaming",
    pattern=re.compile(r"^[a-z][a-zA-Z0-9]*$"),
    message="Class names should use camelCase starting with a lowercase letter",
    subjects=_class_names,
)

NO_IDS = PatternRule(
    name="noIds",
    pattern=re.compile(r"^[^#]*$"),
    message="Avoid using ID selectors (#) in CSS modules",
)

NO_UNIVERSAL = PatternRule(
    name="noUniversal",
    pattern=re.compile(r"^[^*]*$"),
    message="Avoid using universal selector (*) in CSS modules",
)

NO_IMPORTANT = PatternRule(
    name="noImportant",
    pattern=re.compile(r"^[^!]*$"),
    message="Avoid using !important in CSS modules",
)

PREFER_RELATIVE_UNITS = PredicateRule(
    name="preferRelativeUnits",
    predicate=_prefer_relative_units,
)

SELECTOR_RULES: tuple[PatternRule, ...] = (CLASS_NAMING, NO_IDS, NO_UNIVERSAL, NO_IMPORTANT)
LINE_RULES: tuple[PredicateRule, ...] = (PREFER_RELATIVE_UNITS,)

VALIDATION_RULES: dict[str, PatternRule | PredicateRule] = {
    rule.name: rule for rule in (*SELECTOR_RULES, *LINE_RULES)
}

FILE_ERROR_RULE = "fileError"
