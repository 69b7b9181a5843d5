"""Single-line bracket balance rule."""

from __future__ import annotations

from c_rule_check.violation import RuleType, Violation

BRACKET_KINDS = [
    ("{", "}", "波括弧の対応が正しくありません", "波括弧は正しく対応させてください"),
    ("(", ")", "丸括弧の対応が正しくありません", "丸括弧は正しく対応させてください"),
]


class BracketBalanceRule:
    """Flags lines whose own braces or parentheses do not pair up.

    Balance is counted per line only, so a block opened on one line and closed
    on another is reported on both lines.
    """

    rule_id = "bracket_balance"

    def check_line(self, line: str, line_number: int, rule_type: RuleType) -> list[Violation]:
        stripped = line.strip()
        violations: list[Violation] = []
        for opener, closer, description, rule in BRACKET_KINDS:
            opened = stripped.count(opener)
            closed = stripped.count(closer)
            if opened != closed and (opened > 0 or closed > 0):
                violations.append(
                    Violation(
                        line=line_number,
                        description=description,
                        rule=rule,
                        rule_type=rule_type,
                    )
                )
        return violations
