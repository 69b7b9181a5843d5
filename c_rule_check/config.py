"""Configuration loading for c-rule-check."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from c_rule_check.files import DEFAULT_MAX_FILE_SIZE

CONFIG_FILENAMES = (".c-rule-check.toml", "c-rule-check.toml")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEYS = ("c_rule_check", "c-rule-check")
OUTPUT_FORMATS = {"human", "json", "report"}


@dataclass(slots=True)
class AppConfig:
    """Runtime configuration values resolved from project files."""

    format: str = "human"
    primary_rules: str | None = None
    secondary_rules: str | None = None
    fail_on_violations: bool = False
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    debug: bool = False
    rule_disable: list[str] = field(default_factory=list)
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "primary_rules": self.primary_rules,
            "secondary_rules": self.secondary_rules,
            "fail_on_violations": self.fail_on_violations,
            "max_file_size": self.max_file_size,
            "debug": self.debug,
            "rules": {"disable": list(self.rule_disable)},
            "source": self.source,
        }


def load_app_config(root: Path, config_path: Path | None = None) -> AppConfig:
    """Load config from explicit path or directory-local files with precedence."""
    root = root.resolve()
    if config_path is not None:
        resolved = config_path if config_path.is_absolute() else (root / config_path)
        if not resolved.exists():
            raise ValueError(f"Config file does not exist: {resolved}")
        mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
        return _from_mapping(mapping, source=str(resolved))

    for filename in CONFIG_FILENAMES:
        resolved = root / filename
        if resolved.exists():
            mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
            return _from_mapping(mapping, source=str(resolved))

    pyproject_path = root / PYPROJECT_FILENAME
    if pyproject_path.exists():
        mapping = _extract_config_mapping(_load_toml(pyproject_path), source_path=pyproject_path)
        if mapping:
            return _from_mapping(mapping, source=str(pyproject_path))

    return AppConfig()


def default_config_template() -> str:
    """Return a starter config template."""
    return "\n".join(
        [
            'format = "human"',
            'primary_rules = "rules/primary.txt"',
            '# secondary_rules = "rules/assignment.txt"',
            "fail_on_violations = false",
            "max_file_size = 10000000",
            "debug = false",
            "",
            "[rules]",
            "# Known ids: semicolon, indentation, bracket_balance,",
            "# assignment_requirements, empty_comment, camel_case_naming",
            "disable = []",
            "",
        ]
    )


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as file_obj:
            loaded = tomllib.load(file_obj)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc
    return loaded


def _extract_config_mapping(loaded: dict[str, Any], *, source_path: Path) -> dict[str, Any]:
    if source_path.name != PYPROJECT_FILENAME:
        return loaded
    tool = loaded.get("tool")
    if not isinstance(tool, dict):
        return {}
    for key in PYPROJECT_TOOL_KEYS:
        section = tool.get(key)
        if isinstance(section, dict):
            return section
    return {}


def _from_mapping(mapping: dict[str, Any], *, source: str) -> AppConfig:
    rules_mapping = _as_table(mapping.get("rules"), "rules")

    max_file_size = _as_int(mapping.get("max_file_size", DEFAULT_MAX_FILE_SIZE), "max_file_size")
    if max_file_size <= 0:
        raise ValueError("max_file_size must be > 0")

    return AppConfig(
        format=_as_choice(mapping.get("format", "human"), OUTPUT_FORMATS, "format"),
        primary_rules=_as_optional_str(mapping.get("primary_rules"), "primary_rules"),
        secondary_rules=_as_optional_str(mapping.get("secondary_rules"), "secondary_rules"),
        fail_on_violations=_as_bool(
            mapping.get("fail_on_violations", False), "fail_on_violations"
        ),
        max_file_size=max_file_size,
        debug=_as_bool(mapping.get("debug", False), "debug"),
        rule_disable=_as_str_list(rules_mapping.get("disable")),
        source=source,
    )


def _as_table(value: Any, field_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{field_name} must be a table/object")
    return value


def _as_str_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("Expected a list of strings")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError("Expected a list of strings")
        items.append(item)
    return items


def _as_optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value


def _as_choice(raw: Any, allowed: set[str], field_name: str) -> str:
    value = str(raw).lower()
    if value not in allowed:
        choices = ", ".join(sorted(allowed))
        raise ValueError(f"{field_name} must be one of: {choices}")
    return value


def _as_int(raw: Any, field_name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"{field_name} must be an integer")
    return raw


def _as_bool(raw: Any, field_name: str) -> bool:
    if not isinstance(raw, bool):
        raise ValueError(f"{field_name} must be a boolean")
    return raw
