"""Output rendering."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from c_rule_check import __version__
from c_rule_check.violation import RuleType, Violation

if TYPE_CHECKING:
    from c_rule_check.result import CheckResult

CORRECT_SENTINEL = "correct"
REPORT_HEADER = "コーディング規約違反レポート"


def render_report(violations: list[Violation] | tuple[Violation, ...]) -> str:
    """Render the deterministic violation report, or ``"correct"`` when clean."""
    if not violations:
        return CORRECT_SENTINEL

    lines: list[str] = [REPORT_HEADER, "=" * 30, ""]
    for index, violation in enumerate(violations, start=1):
        lines.append(f"{index}. 行 {violation.line}: {violation.description}")
        lines.append(f"   規約種別: {violation.rule_type.label}")
        lines.append(f"   規約内容: {violation.rule}")
        lines.append("")
    return "\n".join(lines) + "\n"


def render_human(result: CheckResult) -> str:
    """Render a compact colorized summary."""
    if result.is_correct:
        return click.style("No coding-rule violations found.", fg="green", bold=True)

    counts = _count_by_rule_type(result.violations)
    lines: list[str] = [
        click.style(f"{len(result.violations)} violation(s) found", fg="red", bold=True),
        "  ".join(f"{rule_type.label}: {counts[rule_type]}" for rule_type in RuleType),
    ]
    for index, violation in enumerate(result.violations, start=1):
        marker = click.style(f"[{violation.rule_type.marker}]", fg=_color(violation.rule_type))
        lines.append(f"{index}. line {violation.line} {marker} {violation.description}")
        lines.append(f"   rule: {violation.rule}")
    return "\n".join(lines)


def render_json(
    result: CheckResult,
    *,
    source_name: str | None = None,
    primary_name: str | None = None,
    secondary_name: str | None = None,
) -> str:
    """Render stable JSON output for CI and automation."""
    payload = build_json_payload(
        result,
        source_name=source_name,
        primary_name=primary_name,
        secondary_name=secondary_name,
    )
    return json.dumps(payload, sort_keys=True, ensure_ascii=False)


def build_json_payload(
    result: CheckResult,
    *,
    source_name: str | None = None,
    primary_name: str | None = None,
    secondary_name: str | None = None,
) -> dict[str, Any]:
    """Build a JSON payload without timestamps so identical runs compare equal."""
    payload = result.to_dict()
    payload["meta"] = {
        "source": source_name,
        "primary_rules": primary_name,
        "secondary_rules": secondary_name,
        "version": __version__,
    }
    return payload


def _count_by_rule_type(violations: tuple[Violation, ...]) -> dict[RuleType, int]:
    counts = {rule_type: 0 for rule_type in RuleType}
    for violation in violations:
        counts[violation.rule_type] += 1
    return counts


def _color(rule_type: RuleType) -> str:
    if rule_type is RuleType.ASSIGNMENT:
        return "red"
    if rule_type is RuleType.PRIMARY:
        return "yellow"
    return "cyan"
