"""Rule evaluation orchestration."""

from __future__ import annotations

import logging

from c_rule_check.rules import RuleSet, default_rules
from c_rule_check.rules.base import split_lines
from c_rule_check.violation import RuleType, Violation

logger = logging.getLogger(__name__)


def evaluate(
    source: str,
    primary_rules: str,
    secondary_rules: str | None = None,
    *,
    rules: RuleSet | None = None,
) -> list[Violation]:
    """Evaluate C source text against primary and optional secondary rule documents.

    The secondary document, when given, is evaluated first so its violations
    precede those of the primary document. The function is pure: identical
    inputs always produce an identical violation list.
    """
    active_rules = rules if rules is not None else default_rules()
    violations: list[Violation] = []
    if secondary_rules is not None:
        violations.extend(
            run_pipeline(source, secondary_rules, RuleType.SECONDARY, rules=active_rules)
        )
    violations.extend(run_pipeline(source, primary_rules, RuleType.PRIMARY, rules=active_rules))
    return violations


def run_pipeline(
    source: str,
    rule_text: str,
    rule_type: RuleType,
    *,
    rules: RuleSet | None = None,
) -> list[Violation]:
    """Run the basic syntax pass then the rule-text pass for one rule document."""
    active_rules = rules if rules is not None else default_rules()
    source_lines = split_lines(source)

    violations = _check_basic_syntax(source_lines, rule_type, active_rules)
    violations.extend(
        _check_rule_document(source, source_lines, rule_text, rule_type, active_rules)
    )
    logger.debug("%s rules produced %d violation(s)", rule_type.value, len(violations))
    return violations


def _check_basic_syntax(
    source_lines: list[str], rule_type: RuleType, rules: RuleSet
) -> list[Violation]:
    violations: list[Violation] = []
    for line_number, line in enumerate(source_lines, start=1):
        if not line.strip():
            continue
        for rule in rules.line_rules:
            violations.extend(rule.check_line(line, line_number, rule_type))
    return violations


def _check_rule_document(
    source: str,
    source_lines: list[str],
    rule_text: str,
    rule_type: RuleType,
    rules: RuleSet,
) -> list[Violation]:
    violations: list[Violation] = []
    for raw_rule in split_lines(rule_text):
        rule_line = raw_rule.strip()
        if not rule_line:
            continue
        for rule in rules.document_rules:
            violations.extend(rule.check_rule_line(rule_line, source, source_lines, rule_type))
    return violations
