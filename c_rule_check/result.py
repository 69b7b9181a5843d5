"""Check result aggregation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from c_rule_check.annotate import annotate
from c_rule_check.engine import evaluate
from c_rule_check.output import render_report
from c_rule_check.rules import RuleSet
from c_rule_check.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Immutable outcome of one evaluation."""

    is_correct: bool
    violations: tuple[Violation, ...]
    corrected_code: str | None
    report_content: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_correct": self.is_correct,
            "violations": [violation.to_dict() for violation in self.violations],
            "corrected_code": self.corrected_code,
            "report": self.report_content,
        }


def build_result(source: str, violations: Sequence[Violation]) -> CheckResult:
    """Compose the verdict, annotated source and report for ``violations``."""
    ordered = tuple(violations)
    return CheckResult(
        is_correct=not ordered,
        violations=ordered,
        corrected_code=annotate(source, list(ordered)) if ordered else None,
        report_content=render_report(ordered),
    )


def check_code(
    source: str,
    primary_rules: str,
    secondary_rules: str | None = None,
    *,
    rules: RuleSet | None = None,
) -> CheckResult:
    """Evaluate ``source`` and build the aggregated result."""
    violations = evaluate(source, primary_rules, secondary_rules, rules=rules)
    return build_result(source, violations)
