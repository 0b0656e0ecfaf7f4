"""Tests for the individual CSS module validation rules."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from component_kit.validator.rules import (
    CLASS_NAMING,
    NO_IDS,
    NO_IMPORTANT,
    NO_UNIVERSAL,
    PREFER_RELATIVE_UNITS,
    VALIDATION_RULES,
    ValidationIssue,
)


class TestClassNaming:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        "selector",
        [".myClass", ".card:hover", ".item:last-child", ".a.b", ".submitButton:hover:not(:disabled)", ":root", "0%"],
    )
    def test_accepts(self, selector: str):
        assert CLASS_NAMING.check(selector)

    @pytest.mark.unit
    @pytest.mark.parametrize("selector", [".MyClass", ".my-class", ".my_class", ".ok .Bad"])
    def test_rejects(self, selector: str):
        assert not CLASS_NAMING.check(selector)

    @pytest.mark.unit
    def test_decimal_in_media_query_is_not_a_class(self):
        assert CLASS_NAMING.check("@media (min-width: 37.5em)")


class TestSelectorCharacterRules:
    @pytest.mark.unit
    def test_no_ids(self):
        assert NO_IDS.check(".card")
        assert not NO_IDS.check("#main")
        assert not NO_IDS.check(".card #title")

    @pytest.mark.unit
    def test_no_universal(self):
        assert NO_UNIVERSAL.check(".card > .title")
        assert not NO_UNIVERSAL.check("*")
        assert not NO_UNIVERSAL.check(".card > *")

    @pytest.mark.unit
    def test_no_important(self):
        assert NO_IMPORTANT.check(".card")
        assert not NO_IMPORTANT.check(".card !important")


class TestPreferRelativeUnits:
    @pytest.mark.unit
    def test_px_only_is_invalid(self):
        verdict = PREFER_RELATIVE_UNITS.check("padding: 8px 16px;")
        assert not verdict.valid
        assert verdict.message.startswith("Found 2 px units")

    @pytest.mark.unit
    def test_px_with_rem_is_valid(self):
        assert PREFER_RELATIVE_UNITS.check("width: 10px; /* also */ margin: 1rem;").valid

    @pytest.mark.unit
    def test_px_with_em_is_valid(self):
        assert PREFER_RELATIVE_UNITS.check("border: 1px solid; padding: 2em;").valid

    @pytest.mark.unit
    def test_no_units_is_valid(self):
        assert PREFER_RELATIVE_UNITS.check("color: red;").valid

    @pytest.mark.unit
    def test_px_inside_word_not_counted(self):
        assert PREFER_RELATIVE_UNITS.check("font-family: 10pxfont;").valid


class TestRuleRegistry:
    @pytest.mark.unit
    def test_rule_order(self):
        assert list(VALIDATION_RULES) == [
            "classNaming",
            "noIds",
            "noUniversal",
            "noImportant",
            "preferRelativeUnits",
        ]

    @pytest.mark.unit
    def test_issue_is_immutable(self):
        issue = ValidationIssue(line=1, rule="noIds", message="m", content=".x")
        with pytest.raises(ValidationError):
            issue.line = 2

    @pytest.mark.unit
    def test_issue_line_not_negative(self):
        with pytest.raises(ValidationError):
            ValidationIssue(line=-1, rule="noIds", message="m")
