"""Base rule protocols and line helpers."""

from __future__ import annotations

import re
from typing import Protocol

from c_rule_check.violation import RuleType, Violation

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class LineRule(Protocol):
    """Protocol for checks applied to every non-empty source line."""

    rule_id: str

    def check_line(self, line: str, line_number: int, rule_type: RuleType) -> list[Violation]:
        """Check one untrimmed source line and return violations."""


class DocumentRule(Protocol):
    """Protocol for checks triggered by a line of a rule document."""

    rule_id: str

    def check_rule_line(
        self,
        rule_line: str,
        source: str,
        source_lines: list[str],
        rule_type: RuleType,
    ) -> list[Violation]:
        """Check the source against one trimmed rule line and return violations."""


def split_lines(text: str) -> list[str]:
    """Split text on any line break, keeping a trailing empty line."""
    return _LINE_BREAK_RE.split(text)