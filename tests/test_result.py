"""Tests for result aggregation."""

from __future__ import annotations

import dataclasses

import pytest

from c_rule_check.annotate import annotate
from c_rule_check.output import render_report
from c_rule_check.result import CheckResult, build_result, check_code
from c_rule_check.violation import RuleType, Violation


def test_missing_terminator_makes_result_incorrect() -> None:
    result = check_code("int x = 5\n", "")
    assert result.is_correct is False
    assert result.violations[0].description == "セミコロンが不足しています"
    assert result.corrected_code is not None
    assert result.corrected_code.startswith("// " + "-" * 40)


def test_empty_source_is_correct() -> None:
    result = check_code("", "インデントは4スペースで揃える")
    assert result.is_correct is True
    assert result.violations == ()
    assert result.corrected_code is None
    assert result.report_content == "correct"


def test_result_fields_derive_from_violations() -> None:
    source = "int x = 5\n    y = 2;\n"
    result = check_code(source, "課題3", "コメントを書く")
    assert result.corrected_code == annotate(source, list(result.violations))
    assert result.report_content == render_report(result.violations)


def test_secondary_then_primary_ordering_in_result() -> None:
    result = check_code("  int x = 5", "課題4", "課題4")
    origins = [item.rule_type for item in result.violations]
    assert origins == [
        RuleType.SECONDARY,
        RuleType.SECONDARY,
        RuleType.ASSIGNMENT,
        RuleType.PRIMARY,
        RuleType.PRIMARY,
        RuleType.ASSIGNMENT,
    ]
    assignment = [item for item in result.violations if item.rule_type is RuleType.ASSIGNMENT]
    assert all(item.line == 1 for item in assignment)


def test_same_line_assignment_comment_comes_first() -> None:
    violations = [
        Violation(
            line=1,
            description="空のコメントは避けてください",
            rule="コメント",
            rule_type=RuleType.SECONDARY,
        ),
        Violation(
            line=1,
            description="課題4: ループ処理(for文、while文、またはdo-while文)が必要です",
            rule="課題4",
            rule_type=RuleType.ASSIGNMENT,
        ),
    ]
    result = build_result("    x = 1; //", violations)
    assert result.corrected_code is not None
    lines = result.corrected_code.split("\n")
    assert lines[0] == lines[3] == "// " + "-" * 40
    assert lines[1].startswith("// [違反] [課題要件]")
    assert lines[2].startswith("// [違反] [二次規約]")
    assert lines[4] == "    x = 1; //"


def test_check_result_is_immutable() -> None:
    result = build_result("", [])
    assert isinstance(result, CheckResult)
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.is_correct = False  # type: ignore[misc]


def test_build_result_copies_violation_sequence() -> None:
    violations = [Violation(line=1, description="d", rule="r", rule_type=RuleType.PRIMARY)]
    result = build_result("x", violations)
    violations.clear()
    assert len(result.violations) == 1
