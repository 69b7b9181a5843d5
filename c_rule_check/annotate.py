"""Inline violation comments and mechanical auto-correction."""

from __future__ import annotations

from collections import defaultdict

from c_rule_check.rules.base import split_lines
from c_rule_check.rules.indentation import INDENT
from c_rule_check.violation import Violation

COMMENT_PREFIX = "// [違反]"
SEPARATOR = "// " + "-" * 40

_CONTENT_WEIGHTS = [
    ("セミコロン", 20),
    ("インデント", 10),
    ("コメント", 5),
]


def annotate(source: str, violations: list[Violation]) -> str:
    """Insert violation comments above each offending line of ``source``.

    Line groups are handled bottom-up so earlier insertions never shift the
    indices of lines still to be processed. Violations anchored outside the
    source are skipped.
    """
    if not violations:
        return source

    lines = split_lines(source)
    grouped: dict[int, list[Violation]] = defaultdict(list)
    for violation in violations:
        grouped[violation.line].append(violation)

    for line_number in sorted(grouped, reverse=True):
        index = line_number - 1
        if index < 0 or index >= len(lines):
            continue
        lines[index:index] = comment_block(grouped[line_number])

    return "\n".join(lines)


def comment_block(violations: list[Violation]) -> list[str]:
    """Render the comment lines for violations sharing one source line."""
    ranked = sorted(violations, key=violation_priority, reverse=True)
    comments = [render_comment(violation) for violation in ranked]
    if len(violations) > 1:
        return [SEPARATOR, *comments, SEPARATOR]
    return comments


def render_comment(violation: Violation) -> str:
    return f"{COMMENT_PREFIX} [{violation.rule_type.marker}] {violation.description}"


def violation_priority(violation: Violation) -> int:
    """Rule-type weight plus the weight of the first matching content keyword."""
    priority = violation.rule_type.weight
    for keyword, weight in _CONTENT_WEIGHTS:
        if keyword in violation.description:
            return priority + weight
    return priority


def attempt_auto_correction(source: str, violations: list[Violation]) -> str:
    """Apply best-effort semicolon and indentation fixes.

    The result is not validated as C.
    """
    lines = split_lines(source)

    for violation in violations:
        if "セミコロンが不足" not in violation.description:
            continue
        index = violation.line - 1
        if 0 <= index < len(lines):
            line = lines[index]
            if not line.endswith(";") and "{" not in line and "}" not in line:
                lines[index] = line + ";"

    for violation in violations:
        if "インデント" not in violation.description:
            continue
        index = violation.line - 1
        if 0 <= index < len(lines):
            stripped = lines[index].strip()
            if not stripped.startswith("#") and "int main" not in stripped and "}" not in stripped:
                lines[index] = INDENT + stripped

    return "\n".join(lines)
