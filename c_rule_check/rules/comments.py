"""Empty inline comment rule."""

from __future__ import annotations

from c_rule_check.violation import RuleType, Violation

TRIGGER = "コメント"


class EmptyCommentRule:
    """Flags `//` comments with no text when a rule line mentions comments."""

    rule_id = "empty_comment"

    def check_rule_line(
        self,
        rule_line: str,
        source: str,
        source_lines: list[str],
        rule_type: RuleType,
    ) -> list[Violation]:
        _ = source
        if TRIGGER not in rule_line:
            return []

        violations: list[Violation] = []
        for index, line in enumerate(source_lines, start=1):
            if "//" not in line:
                continue
            comment_text = line.split("//", 1)[1]
            if not comment_text.strip():
                violations.append(
                    Violation(
                        line=index,
                        description="空のコメントは避けてください",
                        rule=rule_line,
                        rule_type=rule_type,
                    )
                )
        return violations
