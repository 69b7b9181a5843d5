"""Missing statement terminator rule."""

from __future__ import annotations

from c_rule_check.violation import RuleType, Violation

STATEMENT_TOKENS = ("printf", "scanf", "return", "int ", "float ", "double ", "char ")


class SemicolonRule:
    """Flags statement-like lines that do not end with a semicolon."""

    rule_id = "semicolon"

    def check_line(self, line: str, line_number: int, rule_type: RuleType) -> list[Violation]:
        stripped = line.strip()
        if not any(token in stripped for token in STATEMENT_TOKENS):
            return []
        if _is_special_case(stripped) or stripped.endswith(";"):
            return []
        return [
            Violation(
                line=line_number,
                description="セミコロンが不足しています",
                rule="C言語では文の終わりにセミコロンが必要です",
                rule_type=rule_type,
            )
        ]


def _is_special_case(stripped: str) -> bool:
    return (
        "{" in stripped
        or "}" in stripped
        or stripped.startswith("#")
        or "//" in stripped
        or "int main" in stripped
    )
