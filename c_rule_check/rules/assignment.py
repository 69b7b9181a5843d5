"""Assignment requirement rule."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from c_rule_check.violation import RuleType, Violation


@dataclass(frozen=True, slots=True)
class AssignmentRequirement:
    """Whole-source requirement selected by markers in a rule line."""

    label: str
    markers: tuple[str, ...]
    is_met: Callable[[str], bool]
    description: str


ASSIGNMENT_REQUIREMENTS = [
    AssignmentRequirement(
        label="課題1",
        markers=("課題1", "Hello"),
        is_met=lambda source: "printf" in source and "Hello" in source,
        description="課題1: Hello Worldの出力が必要です",
    ),
    AssignmentRequirement(
        label="課題2",
        markers=("課題2", "変数"),
        is_met=lambda source: any(token in source for token in ("int ", "float ", "double ")),
        description="課題2: 変数の宣言が必要です",
    ),
    AssignmentRequirement(
        label="課題3",
        markers=("課題3", "条件分岐"),
        is_met=lambda source: "if" in source or "switch" in source,
        description="課題3: 条件分岐(if文またはswitch文)が必要です",
    ),
    AssignmentRequirement(
        label="課題4",
        markers=("課題4", "ループ"),
        is_met=lambda source: any(token in source for token in ("for", "while", "do")),
        description="課題4: ループ処理(for文、while文、またはdo-while文)が必要です",
    ),
]


class AssignmentRequirementRule:
    """Checks assignment requirements named in rule documents.

    Only the first unmet requirement whose marker appears in the rule line is
    reported, always anchored at line 1 and always classified as an
    assignment violation regardless of which document named it.
    """

    rule_id = "assignment_requirements"

    def check_rule_line(
        self,
        rule_line: str,
        source: str,
        source_lines: list[str],
        rule_type: RuleType,
    ) -> list[Violation]:
        _ = (source_lines, rule_type)
        for requirement in ASSIGNMENT_REQUIREMENTS:
            if not any(marker in rule_line for marker in requirement.markers):
                continue
            if requirement.is_met(source):
                continue
            return [
                Violation(
                    line=1,
                    description=requirement.description,
                    rule=rule_line,
                    rule_type=RuleType.ASSIGNMENT,
                )
            ]
        return []
