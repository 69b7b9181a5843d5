"""Rules package."""

from dataclasses import dataclass, field
from typing import Literal

from c_rule_check.rules.assignment import AssignmentRequirementRule
from c_rule_check.rules.base import DocumentRule, LineRule
from c_rule_check.rules.brackets import BracketBalanceRule
from c_rule_check.rules.comments import EmptyCommentRule
from c_rule_check.rules.indentation import IndentationRule
from c_rule_check.rules.naming import CamelCaseNamingRule
from c_rule_check.rules.semicolon import SemicolonRule

RuleKind = Literal["syntax", "document"]

LINE_RULES: list[type[LineRule]] = [SemicolonRule, IndentationRule, BracketBalanceRule]
DOCUMENT_RULES: list[type[DocumentRule]] = [
    AssignmentRequirementRule,
    EmptyCommentRule,
    CamelCaseNamingRule,
]


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing and selection."""

    rule_id: str
    name: str
    description: str
    kind: RuleKind


@dataclass(slots=True)
class RuleSet:
    """Active checks, in pipeline order."""

    line_rules: list[LineRule] = field(default_factory=list)
    document_rules: list[DocumentRule] = field(default_factory=list)

    @property
    def rule_ids(self) -> list[str]:
        return [rule.rule_id for rule in self.line_rules] + [
            rule.rule_id for rule in self.document_rules
        ]


@dataclass(frozen=True, slots=True)
class _RuleSpec:
    rule_id: str
    name: str
    description: str
    kind: RuleKind


def default_rules() -> RuleSet:
    """Return every known check."""
    return build_rules()


def build_rules(*, disabled_rule_ids: list[str] | None = None) -> RuleSet:
    """Build the active checks, skipping disabled ids."""
    specs = _ordered_rule_specs()
    known = {spec.rule_id for spec in specs}
    disabled = set(disabled_rule_ids or [])

    unknown = [rule_id for rule_id in disabled if rule_id not in known]
    if unknown:
        joined = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown rule ids: {joined}")

    return RuleSet(
        line_rules=[rule_cls() for rule_cls in LINE_RULES if rule_cls.rule_id not in disabled],
        document_rules=[
            rule_cls() for rule_cls in DOCUMENT_RULES if rule_cls.rule_id not in disabled
        ],
    )


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for all known checks in pipeline order."""
    return [
        RuleInfo(
            rule_id=spec.rule_id,
            name=spec.name,
            description=spec.description,
            kind=spec.kind,
        )
        for spec in _ordered_rule_specs()
    ]


def _ordered_rule_specs() -> list[_RuleSpec]:
    return [_spec(rule_cls, kind="syntax") for rule_cls in LINE_RULES] + [
        _spec(rule_cls, kind="document") for rule_cls in DOCUMENT_RULES
    ]


def _spec(rule_cls: type[LineRule] | type[DocumentRule], *, kind: RuleKind) -> _RuleSpec:
    return _RuleSpec(
        rule_id=rule_cls.rule_id,
        name=rule_cls.__name__,
        description=(rule_cls.__doc__ or "").strip().partition("\n")[0],
        kind=kind,
    )
