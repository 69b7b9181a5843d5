"""Loading and validation of rule documents and C sources."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 10_000_000
SUPPORTED_ENCODINGS = ("utf-8", "shift_jis", "euc-jp", "iso-2022-jp")
ISO_2022_ESCAPES = (b"\x1b$", b"\x1b(")


class FileLoadError(RuntimeError):
    """Raised when an input file cannot be evaluated."""


class FileKind(str, Enum):
    """Role of an input file."""

    PRIMARY_RULE = "primary_rule"
    SECONDARY_RULE = "secondary_rule"
    C_SOURCE = "c_source"

    @property
    def label(self) -> str:
        return _KIND_LABELS[self]

    @property
    def extension(self) -> str:
        return ".c" if self is FileKind.C_SOURCE else ".txt"


_KIND_LABELS = {
    FileKind.PRIMARY_RULE: "主要規約ファイル",
    FileKind.SECONDARY_RULE: "二次規約ファイル",
    FileKind.C_SOURCE: "Cソースファイル",
}


@dataclass(frozen=True, slots=True)
class LoadedFile:
    """Decoded, validated input file."""

    path: Path
    name: str
    content: str
    kind: FileKind
    encoding: str


def load_text_file(
    path: Path,
    kind: FileKind,
    *,
    max_size: int = DEFAULT_MAX_FILE_SIZE,
) -> LoadedFile:
    """Read and validate an input file, detecting its text encoding."""
    if path.suffix.lower() != kind.extension:
        raise FileLoadError(f"{kind.label} must have a {kind.extension} extension: {path}")

    try:
        size = path.stat().st_size
    except OSError as exc:
        raise FileLoadError(f"Cannot access {kind.label}: {path}") from exc
    if size > max_size:
        raise FileLoadError(f"{kind.label} is larger than {max_size} bytes: {path}")

    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise FileLoadError(f"Failed to read {kind.label}: {path}: {exc}") from exc

    content, encoding = decode_text(raw)
    if encoding is None:
        raise FileLoadError(f"Cannot detect the text encoding of {kind.label}: {path}")
    if not content.strip():
        raise FileLoadError(f"{kind.label} is empty: {path}")

    logger.debug("Loaded %s %s as %s", kind.value, path, encoding)
    return LoadedFile(path=path, name=path.name, content=content, kind=kind, encoding=encoding)


def decode_text(raw: bytes) -> tuple[str, str | None]:
    """Decode bytes with the first supported encoding that accepts them.

    Input containing ISO-2022 escape sequences is tried as ISO-2022-JP first.
    """
    encodings: tuple[str, ...] = SUPPORTED_ENCODINGS
    if any(escape in raw for escape in ISO_2022_ESCAPES):
        encodings = ("iso-2022-jp", *SUPPORTED_ENCODINGS)
    for encoding in encodings:
        try:
            return (raw.decode(encoding), encoding)
        except UnicodeDecodeError:
            continue
    return ("", None)
