"""Writing reports, corrected sources and assignment templates."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from c_rule_check.templates import get_template

REPORT_BASENAME = "coding_rule_report"


def timestamped_filename(base: str, extension: str, now: datetime | None = None) -> str:
    """Return ``<base>_<YYYYmmdd_HHMMSS>.<extension>``."""
    moment = now or datetime.now()
    return f"{base}_{moment.strftime('%Y%m%d_%H%M%S')}.{extension}"


def corrected_basename(original_name: str) -> str:
    return original_name.replace(".c", "_corrected")


def write_report(report_content: str, out_dir: Path, now: datetime | None = None) -> Path:
    return _write(out_dir, timestamped_filename(REPORT_BASENAME, "txt", now), report_content)


def write_corrected(
    corrected_code: str, original_name: str, out_dir: Path, now: datetime | None = None
) -> Path:
    filename = timestamped_filename(corrected_basename(original_name), "c", now)
    return _write(out_dir, filename, corrected_code)


def write_template(label: str, out_dir: Path, now: datetime | None = None) -> Path:
    """Write one assignment template; raises ``KeyError`` for unknown labels."""
    template = get_template(label)
    if template is None:
        raise KeyError(label)
    return _write(out_dir, timestamped_filename(label.lower(), "c", now), template)


def _write(out_dir: Path, filename: str, content: str) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / filename
    path.write_text(content, encoding="utf-8")
    return path
