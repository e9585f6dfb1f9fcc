# sbml_notes/io.py
from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from .constants import MODEL_PART_FILES
from .diagnostics import Issue, print_issues

# Curated text copied verbatim from the database. Every value under these keys
# is a string, whatever a plain YAML scalar would make of it.
FREE_TEXT_KEYS: tuple[str, ...] = ("name", "text", "explanation")

_FREE_TEXT_LINE_RE = re.compile(
    r"^(?P<lead>\s*(?:-\s+)?)(?P<key>" + "|".join(FREE_TEXT_KEYS) + r"):[ \t]+(?P<value>\S.*?)\s*$"
)


def _reads_back_verbatim(value: str) -> bool:
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError:
        return False
    # An explicit null means the field is absent.
    return parsed is None or parsed == value


def _indent(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def _continues_scalar(lines: list[str], index: int, key_column: int) -> bool:
    for following in lines[index + 1 :]:
        if following.strip():
            return _indent(following) > key_column
    return False


def quote_free_text(raw: str) -> tuple[str, list[tuple[int, str]]]:
    """Double-quote free-text values that plain YAML would not read as written.

    Summation text and explanations routinely contain `: `, ` #`, a leading
    `[` or `*`, or are words like `NO` that YAML turns into booleans. Returns
    the rewritten document and the (1-based line, original value) pairs that
    were quoted. Values already quoted, block scalars and multi-line plain
    scalars are left alone.
    """
    lines = raw.splitlines()
    quoted: list[tuple[int, str]] = []

    for i, line in enumerate(lines):
        match = _FREE_TEXT_LINE_RE.match(line)
        if not match:
            continue
        value = match.group("value")
        if value[0] in "'\"|>" or _reads_back_verbatim(value):
            continue
        if _continues_scalar(lines, i, len(match.group("lead"))):
            continue

        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines[i] = f'{match.group("lead")}{match.group("key")}: "{escaped}"'
        quoted.append((i + 1, value))

    text = "\n".join(lines) + ("\n" if raw.endswith("\n") else "")
    return text, quoted


def _read_export(path: Path) -> dict[str, Any]:
    text, quoted = quote_free_text(path.read_text(encoding="utf-8"))
    print_issues(
        [
            Issue(
                severity="warning",
                code="W_YAML_FREE_TEXT_QUOTED",
                message=f"quoted free text {value!r} so it loads verbatim",
                path=f"{path}:{line}",
            )
            for line, value in quoted
        ]
    )

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise TypeError(
            f"Top-level YAML must be a mapping in {path}, got {type(data).__name__}"
        )
    return data


def _merge_part(model: dict[str, Any], part: dict[str, Any], *, source: Path) -> None:
    """Fold one part file into the export read so far.

    Record sections (`people`, `entities`, `events`) accumulate in file order,
    `database` settings merge key by key, and a setting given two different
    values is a merge conflict.
    """
    for key, value in part.items():
        if key not in model:
            model[key] = value
        elif isinstance(model[key], list) and isinstance(value, list):
            model[key] = model[key] + value
        elif isinstance(model[key], dict) and isinstance(value, dict):
            _merge_part(model[key], value, source=source)
        elif model[key] != value:
            raise ValueError(
                f"Export merge conflict on {key!r}: {source} sets {value!r}, "
                f"an earlier part set {model[key]!r}"
            )


def _part_paths(root: Path) -> list[Path]:
    paths = [root / name for name in MODEL_PART_FILES if (root / name).is_file()]
    # Sub-pathways exported one file each.
    events_dir = root / "events"
    if events_dir.is_dir():
        paths.extend(sorted(events_dir.glob("*.yaml")))
    return paths


def load_model(path: Path) -> dict[str, Any]:
    """Load a pathway export: one YAML file, or a directory of part files.

    Naming a single part file loads its whole directory.
    """
    if not path.exists():
        raise FileNotFoundError(str(path))

    if path.is_file() and path.name in MODEL_PART_FILES:
        path = path.parent
    if path.is_file():
        return _read_export(path)

    model: dict[str, Any] = {}
    for part_path in _part_paths(path):
        _merge_part(model, _read_export(part_path), source=part_path)
    return model
