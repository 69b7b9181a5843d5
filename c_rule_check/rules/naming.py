"""Function naming convention rule."""

from __future__ import annotations

from c_rule_check.violation import RuleType, Violation

TRIGGERS = ("関数名", "命名")
CAMEL_CASE = "キャメルケース"
EXEMPT_TOKENS = ("main", "printf")


class CamelCaseNamingRule:
    """Flags snake_case call or definition lines when camel case is required."""

    rule_id = "camel_case_naming"

    def check_rule_line(
        self,
        rule_line: str,
        source: str,
        source_lines: list[str],
        rule_type: RuleType,
    ) -> list[Violation]:
        _ = source
        if not any(trigger in rule_line for trigger in TRIGGERS):
            return []
        if CAMEL_CASE not in rule_line:
            return []

        violations: list[Violation] = []
        for index, line in enumerate(source_lines, start=1):
            if "(" not in line or ")" not in line:
                continue
            if any(token in line for token in EXEMPT_TOKENS):
                continue
            if "_" in line:
                violations.append(
                    Violation(
                        line=index,
                        description="関数名はキャメルケースで命名してください",
                        rule=rule_line,
                        rule_type=rule_type,
                    )
                )
        return violations
