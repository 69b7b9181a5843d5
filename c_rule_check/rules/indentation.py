"""Four-space indentation rule."""

from __future__ import annotations

from c_rule_check.violation import RuleType, Violation

INDENT = "    "


class IndentationRule:
    """Flags function-body lines not indented with exactly four spaces."""

    rule_id = "indentation"

    def check_line(self, line: str, line_number: int, rule_type: RuleType) -> list[Violation]:
        stripped = line.strip()
        if not stripped or not _is_function_body_line(stripped):
            return []
        if has_standard_indent(line):
            return []
        return [
            Violation(
                line=line_number,
                description="インデントが正しくありません（4スペース必要）",
                rule="関数内のコードは4スペースでインデントしてください",
                rule_type=rule_type,
            )
        ]


def has_standard_indent(line: str) -> bool:
    """True when the leading whitespace of ``line`` is exactly four spaces."""
    leading = line[: len(line) - len(line.lstrip())]
    return leading == INDENT


def _is_function_body_line(stripped: str) -> bool:
    # Preprocessor lines, main's signature and brace lines are never indented.
    return not (
        stripped.startswith("#")
        or "int main" in stripped
        or "{" in stripped
        or "}" in stripped
    )
