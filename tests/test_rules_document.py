"""Tests for checks driven by rule-document text."""

from __future__ import annotations

import pytest

from c_rule_check.engine import evaluate
from c_rule_check.rules import build_rules, default_rules, list_rule_info
from c_rule_check.rules.assignment import AssignmentRequirementRule
from c_rule_check.rules.comments import EmptyCommentRule
from c_rule_check.rules.naming import CamelCaseNamingRule
from c_rule_check.violation import RuleType

# A single balanced, correctly indented line keeps the basic syntax pass quiet.
QUIET_SOURCE = "    x = 1;"


def test_hello_world_requirement_is_met() -> None:
    source = '    printf("Hello World");'
    violations = evaluate(source, "課題1: Hello Worldを出力すること")
    assert [item for item in violations if item.rule_type is RuleType.ASSIGNMENT] == []


def test_hello_world_requirement_reports_at_line_one() -> None:
    violations = evaluate("\n\n" + QUIET_SOURCE, "課題1: 出力すること")
    assert len(violations) == 1
    violation = violations[0]
    assert violation.line == 1
    assert violation.rule_type is RuleType.ASSIGNMENT
    assert violation.description == "課題1: Hello Worldの出力が必要です"
    assert violation.rule == "課題1: 出力すること"


@pytest.mark.parametrize(
    ("rule_line", "description"),
    [
        ("変数を使うこと", "課題2: 変数の宣言が必要です"),
        ("課題3", "課題3: 条件分岐(if文またはswitch文)が必要です"),
        ("ループを使うこと", "課題4: ループ処理(for文、while文、またはdo-while文)が必要です"),
    ],
)
def test_assignment_markers_select_requirements(rule_line: str, description: str) -> None:
    violations = AssignmentRequirementRule().check_rule_line(
        rule_line, QUIET_SOURCE, [QUIET_SOURCE], RuleType.PRIMARY
    )
    assert [item.description for item in violations] == [description]


@pytest.mark.parametrize(
    ("rule_line", "source"),
    [
        ("課題2", "    float y;"),
        ("課題3", "    if (x) y = 1;"),
        ("課題4", "    while (x) x--;"),
    ],
)
def test_met_requirements_produce_nothing(rule_line: str, source: str) -> None:
    assert AssignmentRequirementRule().check_rule_line(
        rule_line, source, [source], RuleType.SECONDARY
    ) == []


def test_only_first_unmet_requirement_is_reported_per_rule_line() -> None:
    violations = AssignmentRequirementRule().check_rule_line(
        "課題1と課題2", QUIET_SOURCE, [QUIET_SOURCE], RuleType.PRIMARY
    )
    assert [item.description for item in violations] == ["課題1: Hello Worldの出力が必要です"]


def test_later_requirement_reported_when_earlier_one_is_met() -> None:
    source = '    printf("Hello");'
    violations = AssignmentRequirementRule().check_rule_line(
        "課題1と課題2", source, [source], RuleType.PRIMARY
    )
    assert [item.description for item in violations] == ["課題2: 変数の宣言が必要です"]


def test_assignment_violations_from_secondary_document_are_reclassified() -> None:
    violations = evaluate(QUIET_SOURCE, "", "課題4")
    assert [(item.line, item.rule_type) for item in violations] == [(1, RuleType.ASSIGNMENT)]


def test_each_rule_line_is_checked_independently() -> None:
    violations = evaluate(QUIET_SOURCE, "課題2\n\n   \n課題2 ")
    assert len(violations) == 2
    assert all(item.rule == "課題2" for item in violations)


def test_empty_comment_rule_flags_blank_comments() -> None:
    source_lines = [
        "    x = 1; //   ",
        "    // explained",
        "    y = 2;",
        "    //",
    ]
    violations = EmptyCommentRule().check_rule_line(
        "コメントは内容を書くこと", "\n".join(source_lines), source_lines, RuleType.SECONDARY
    )
    assert [(item.line, item.description) for item in violations] == [
        (1, "空のコメントは避けてください"),
        (4, "空のコメントは避けてください"),
    ]
    assert all(item.rule_type is RuleType.SECONDARY for item in violations)


def test_empty_comment_rule_uses_text_after_first_marker() -> None:
    source_lines = ["    url = 1; // see //"]
    violations = EmptyCommentRule().check_rule_line(
        "コメント", source_lines[0], source_lines, RuleType.PRIMARY
    )
    assert violations == []


def test_empty_comment_rule_needs_trigger_word() -> None:
    source_lines = ["    //"]
    assert EmptyCommentRule().check_rule_line(
        "説明を書くこと", source_lines[0], source_lines, RuleType.PRIMARY
    ) == []


def test_camel_case_rule_flags_snake_case_calls() -> None:
    source_lines = [
        "int add_numbers(int a, int b) {",
        "    total = addNumbers(1, 2);",
        "    printf(\"%d\", my_value);",
        "int main(void) {",
        "    my_value = 3;",
    ]
    violations = CamelCaseNamingRule().check_rule_line(
        "関数名はキャメルケースで命名する",
        "\n".join(source_lines),
        source_lines,
        RuleType.PRIMARY,
    )
    assert [item.line for item in violations] == [1]
    assert violations[0].description == "関数名はキャメルケースで命名してください"


def test_camel_case_rule_requires_camel_case_keyword() -> None:
    source_lines = ["int add_numbers(int a, int b) {"]
    assert CamelCaseNamingRule().check_rule_line(
        "命名規則に従うこと", source_lines[0], source_lines, RuleType.PRIMARY
    ) == []


def test_rule_text_checks_follow_basic_checks() -> None:
    source = "int x = 5 //"
    violations = evaluate(source, "コメントを書く")
    assert [item.description for item in violations] == [
        "インデントが正しくありません（4スペース必要）",
        "空のコメントは避けてください",
    ]


def test_rule_registry_lists_checks_in_pipeline_order() -> None:
    info = list_rule_info()
    assert [item.rule_id for item in info] == [
        "semicolon",
        "indentation",
        "bracket_balance",
        "assignment_requirements",
        "empty_comment",
        "camel_case_naming",
    ]
    assert [item.kind for item in info] == ["syntax"] * 3 + ["document"] * 3
    assert all(item.description for item in info)
    assert default_rules().rule_ids == [item.rule_id for item in info]


def test_build_rules_rejects_unknown_ids() -> None:
    with pytest.raises(ValueError, match="Unknown rule ids: nope"):
        build_rules(disabled_rule_ids=["nope"])


def test_build_rules_splits_line_and_document_checks() -> None:
    rule_set = build_rules(disabled_rule_ids=["indentation", "empty_comment"])
    assert [rule.rule_id for rule in rule_set.line_rules] == ["semicolon", "bracket_balance"]
    assert [rule.rule_id for rule in rule_set.document_rules] == [
        "assignment_requirements",
        "camel_case_naming",
    ]
    assert all(hasattr(rule, "check_line") for rule in rule_set.line_rules)
    assert all(hasattr(rule, "check_rule_line") for rule in rule_set.document_rules)
