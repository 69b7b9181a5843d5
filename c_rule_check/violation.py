"""Violation model and rule-type classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RuleType(str, Enum):
    """Origin of a violation."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ASSIGNMENT = "assignment"

    @property
    def label(self) -> str:
        """Label used in the text report."""
        return _REPORT_LABELS[self]

    @property
    def marker(self) -> str:
        """Label used in inline annotation comments."""
        return _MARKER_LABELS[self]

    @property
    def weight(self) -> int:
        """Base annotation priority; higher sits closer to the code line."""
        return _WEIGHTS[self]


_REPORT_LABELS = {
    RuleType.PRIMARY: "主要規約",
    RuleType.SECONDARY: "二次規約",
    RuleType.ASSIGNMENT: "課題規約",
}

_MARKER_LABELS = {
    RuleType.PRIMARY: "主要規約",
    RuleType.SECONDARY: "二次規約",
    RuleType.ASSIGNMENT: "課題要件",
}

_WEIGHTS = {
    RuleType.ASSIGNMENT: 100,
    RuleType.PRIMARY: 50,
    RuleType.SECONDARY: 25,
}


@dataclass(frozen=True, slots=True)
class Violation:
    """A single located rule breach."""

    line: int
    description: str
    rule: str
    rule_type: RuleType

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line,
            "description": self.description,
            "rule": self.rule,
            "rule_type": self.rule_type.value,
        }
