"""CLI entrypoint for c-rule-check."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer

from c_rule_check import __version__
from c_rule_check.annotate import attempt_auto_correction
from c_rule_check.config import OUTPUT_FORMATS, AppConfig, default_config_template, load_app_config
from c_rule_check.engine import evaluate
from c_rule_check.export import write_corrected, write_report, write_template
from c_rule_check.files import FileKind, FileLoadError, LoadedFile, load_text_file
from c_rule_check.output import render_human, render_json
from c_rule_check.result import check_code
from c_rule_check.rules import RuleSet, build_rules, list_rule_info
from c_rule_check.templates import get_template, list_assignments

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="c-rule-check",
    no_args_is_help=True,
    help="Check C sources against natural-language coding-rule documents.",
)

SourceOption = Annotated[Path, typer.Option("--source", help="C source file (.c).")]
PrimaryOption = Annotated[
    Path | None, typer.Option("--primary", help="Primary rule document (.txt).")
]
SecondaryOption = Annotated[
    Path | None, typer.Option("--secondary", help="Secondary rule document (.txt).")
]
RootOption = Annotated[Path, typer.Option(help="Project directory for config lookup.")]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to config TOML file."),
]


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug logging.")] = False,
) -> None:
    """Root command callback."""
    _ = version
    ctx.obj = {"verbose": verbose}


@app.command("check")
def check_command(
    ctx: typer.Context,
    source: SourceOption,
    primary: PrimaryOption = None,
    secondary: SecondaryOption = None,
    root: RootOption = Path("."),
    format: Annotated[
        str | None,
        typer.Option(help="Output format: human|json|report.", show_default="human"),
    ] = None,
    report_out: Annotated[
        Path | None, typer.Option("--report-out", help="Directory to write the report into.")
    ] = None,
    corrected_out: Annotated[
        Path | None,
        typer.Option("--corrected-out", help="Directory to write the annotated source into."),
    ] = None,
    fail_on_violations: Annotated[
        bool | None,
        typer.Option(
            "--fail-on-violations/--no-fail-on-violations",
            help="Exit with code 1 when violations are found.",
        ),
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Check a C source and print the verdict."""
    app_config = _load_config_or_raise(root, config_file)
    _configure_logging(ctx, app_config)
    output_format = (format or app_config.format).lower()
    if output_format not in OUTPUT_FORMATS:
        raise typer.BadParameter(
            "format must be one of: human, json, report", param_hint="--format"
        )

    inputs = _load_inputs(
        source=source,
        primary=primary,
        secondary=secondary,
        root=root,
        app_config=app_config,
    )
    result = check_code(
        inputs.source.content,
        inputs.primary.content,
        inputs.secondary.content if inputs.secondary is not None else None,
        rules=_build_configured_rules_or_raise(app_config),
    )
    logger.debug("Check finished with %d violation(s)", len(result.violations))

    if output_format == "json":
        typer.echo(
            render_json(
                result,
                source_name=inputs.source.name,
                primary_name=inputs.primary.name,
                secondary_name=inputs.secondary.name if inputs.secondary is not None else None,
            )
        )
    elif output_format == "report":
        typer.echo(result.report_content)
    else:
        typer.echo(render_human(result))

    if report_out is not None:
        report_path = write_report(result.report_content, report_out)
        typer.echo(f"Report written to: {report_path}", err=True)
    if corrected_out is not None and result.corrected_code is not None:
        path = write_corrected(result.corrected_code, inputs.source.name, corrected_out)
        typer.echo(f"Annotated source written to: {path}", err=True)

    should_fail = (
        fail_on_violations if fail_on_violations is not None else app_config.fail_on_violations
    )
    if should_fail and not result.is_correct:
        raise typer.Exit(code=1)


@app.command("fix")
def fix_command(
    ctx: typer.Context,
    source: SourceOption,
    primary: PrimaryOption = None,
    secondary: SecondaryOption = None,
    root: RootOption = Path("."),
    out: Annotated[
        Path | None, typer.Option(help="Write the corrected source here instead of stdout.")
    ] = None,
    config_file: ConfigOption = None,
) -> None:
    """Apply mechanical semicolon and indentation fixes."""
    app_config = _load_config_or_raise(root, config_file)
    _configure_logging(ctx, app_config)
    inputs = _load_inputs(
        source=source,
        primary=primary,
        secondary=secondary,
        root=root,
        app_config=app_config,
    )
    violations = evaluate(
        inputs.source.content,
        inputs.primary.content,
        inputs.secondary.content if inputs.secondary is not None else None,
        rules=_build_configured_rules_or_raise(app_config),
    )
    fixed = attempt_auto_correction(inputs.source.content, violations)

    if out is None:
        typer.echo(fixed)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(fixed, encoding="utf-8")
    typer.echo(f"Corrected source written to: {out}")


@app.command("template")
def template_command(
    label: Annotated[str | None, typer.Argument(help="Assignment label, e.g. 課題1.")] = None,
    all_templates: Annotated[
        bool, typer.Option("--all", help="Export every assignment template.")
    ] = False,
    out: Annotated[
        Path | None, typer.Option(help="Directory to write template files into.")
    ] = None,
) -> None:
    """Print, list or export assignment templates."""
    if all_templates:
        if out is None:
            raise typer.BadParameter("--all requires --out.", param_hint="--out")
        for item in list_assignments():
            typer.echo(f"Template written to: {write_template(item, out)}")
        return

    if label is None:
        lines = ["Available templates:", *[f"- {item}" for item in list_assignments()]]
        typer.echo("\n".join(lines))
        return

    template = get_template(label)
    if template is None:
        choices = ", ".join(list_assignments())
        raise typer.BadParameter(f"Unknown assignment '{label}'. Expected one of: {choices}")
    if out is None:
        typer.echo(template)
        return
    typer.echo(f"Template written to: {write_template(label, out)}")


@app.command("rules")
def rules_command(
    root: RootOption = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: ConfigOption = None,
) -> None:
    """List available checks."""
    output_format = _human_or_json(format)
    app_config = _load_config_or_raise(root, config_file)
    active_ids = set(_build_configured_rules_or_raise(app_config).rule_ids)
    rule_info = list_rule_info()

    if output_format == "json":
        payload = {
            "rules": [
                {
                    "rule_id": item.rule_id,
                    "name": item.name,
                    "description": item.description,
                    "kind": item.kind,
                    "enabled": item.rule_id in active_ids,
                }
                for item in rule_info
            ],
            "meta": {"config_source": app_config.source},
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available rules:"]
    for item in rule_info:
        status = "enabled" if item.rule_id in active_ids else "disabled"
        lines.append(f"- {item.rule_id} [{item.kind}, {status}] - {item.description}")
    typer.echo("\n".join(lines))


@app.command("config")
def config_command(
    root: RootOption = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: ConfigOption = None,
) -> None:
    """Show resolved configuration."""
    output_format = _human_or_json(format)
    app_config = _load_config_or_raise(root, config_file)
    payload = app_config.to_dict()
    payload["active_rule_ids"] = _build_configured_rules_or_raise(app_config).rule_ids

    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = [
        "Resolved configuration:",
        f"- source: {payload['source'] or 'defaults'}",
        f"- format: {payload['format']}",
        f"- primary_rules: {payload['primary_rules']}",
        f"- secondary_rules: {payload['secondary_rules']}",
        f"- fail_on_violations: {payload['fail_on_violations']}",
        f"- max_file_size: {payload['max_file_size']}",
        f"- debug: {payload['debug']}",
        f"- rules.disable: {payload['rules']['disable']}",
        f"- active_rule_ids: {payload['active_rule_ids']}",
    ]
    typer.echo("\n".join(lines))


@app.command("config-init")
def config_init_command(
    out: Annotated[Path, typer.Option(help="Output path for starter config TOML.")] = Path(
        ".c-rule-check.toml"
    ),
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite if file already exists."),
    ] = False,
) -> None:
    """Create a starter config file."""
    out_path = out.resolve()
    if out_path.exists() and not force:
        raise typer.BadParameter(
            f"Refusing to overwrite existing file: {out_path}. Use --force to overwrite."
        )
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(default_config_template(), encoding="utf-8")
    typer.echo(f"Wrote starter config: {out_path}")


def main() -> None:
    """Console script entrypoint."""
    app()


@dataclass(frozen=True, slots=True)
class _Inputs:
    """Loaded source and rule documents for one run."""

    source: LoadedFile
    primary: LoadedFile
    secondary: LoadedFile | None


def _load_inputs(
    *,
    source: Path,
    primary: Path | None,
    secondary: Path | None,
    root: Path,
    app_config: AppConfig,
) -> _Inputs:
    primary_path = primary or _config_path(root, app_config.primary_rules)
    if primary_path is None:
        raise typer.BadParameter(
            "A primary rule document is required (--primary or primary_rules in config).",
            param_hint="--primary",
        )
    secondary_path = secondary or _config_path(root, app_config.secondary_rules)

    max_size = app_config.max_file_size
    try:
        return _Inputs(
            source=load_text_file(source, FileKind.C_SOURCE, max_size=max_size),
            primary=load_text_file(primary_path, FileKind.PRIMARY_RULE, max_size=max_size),
            secondary=(
                load_text_file(secondary_path, FileKind.SECONDARY_RULE, max_size=max_size)
                if secondary_path is not None
                else None
            ),
        )
    except FileLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _config_path(root: Path, value: str | None) -> Path | None:
    if value is None:
        return None
    path = Path(value)
    return path if path.is_absolute() else root / path


def _load_config_or_raise(root: Path, config_file: Path | None = None) -> AppConfig:
    try:
        return load_app_config(root, config_path=config_file)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _build_configured_rules_or_raise(app_config: AppConfig) -> RuleSet:
    try:
        return build_rules(disabled_rule_ids=app_config.rule_disable)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config.rules") from exc


def _human_or_json(value: str) -> str:
    output_format = value.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")
    return output_format


def _configure_logging(ctx: typer.Context, app_config: AppConfig) -> None:
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    level = logging.DEBUG if verbose or app_config.debug else logging.WARNING
    logging.getLogger("c_rule_check").setLevel(level)
