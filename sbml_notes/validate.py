# sbml_notes/validate.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .annotations.history import parse_datetime
from .constants import EVENT_KINDS, MODEL_SECTIONS
from .diagnostics import Issue, Severity
from .model import EntityKind


@dataclass(frozen=True)
class ValidateConfig:
    """Validation configuration.

    `ignore` drops issues by code, `escalate` turns the named warnings into
    errors.
    """

    ignore: set[str] = field(default_factory=set)
    escalate: set[str] = field(default_factory=set)


def _component_cycles(components: dict[str, list[str]]) -> list[list[str]]:
    """Return one representative path per cycle found in the component graph."""
    WHITE, GREY, BLACK = 0, 1, 2
    color = {node: WHITE for node in components}
    cycles: list[list[str]] = []

    def visit(node: str, stack: list[str]) -> None:
        color[node] = GREY
        stack.append(node)
        for child in components.get(node, []):
            state = color.get(child, BLACK)
            if state == GREY:
                cycles.append(stack[stack.index(child):] + [child])
            elif state == WHITE:
                visit(child, stack)
        stack.pop()
        color[node] = BLACK

    for node in sorted(components):
        if color[node] == WHITE:
            visit(node, [])
    return cycles


def validate_model_issues(
    model: dict[str, Any], cfg: Optional[ValidateConfig] = None
) -> list[Issue]:
    """Return structured validation issues for a loaded export."""

    cfg = cfg or ValidateConfig()
    issues: list[Issue] = []

    def emit(
        severity: Severity,
        code: str,
        message: str,
        path: str = "",
        hint: Optional[str] = None,
    ) -> None:
        if code in cfg.ignore:
            return
        final_severity: Severity = (
            "error" if (severity == "warning" and code in cfg.escalate) else severity
        )
        issues.append(
            Issue(severity=final_severity, code=code, message=message, path=path, hint=hint)
        )

    database = model.get("database", {}) or {}
    if not isinstance(database, dict) or not isinstance(database.get("version"), int):
        emit(
            "warning",
            "W_DATABASE_VERSION_MISSING",
            "model.database.version is missing or not an integer",
            path="/database/version",
            hint="The provenance annotation will report version 0",
        )

    ids: dict[str, dict[str, int]] = {}
    for section in MODEL_SECTIONS:
        seen: dict[str, int] = {}
        ids[section] = seen
        items = model.get(section, []) or []
        if not isinstance(items, list):
            emit("error", "E_SECTION_NOT_LIST", f"model.{section} must be a list", path=f"/{section}")
            continue

        for i, item in enumerate(items):
            if not isinstance(item, dict):
                emit(
                    "warning",
                    "W_SECTION_ITEM_NOT_MAPPING",
                    f"model.{section} contains a non-mapping item; skipping",
                    path=f"/{section}/{i}",
                )
                continue

            item_id = item.get("id")
            if not isinstance(item_id, str) or not item_id:
                emit(
                    "error",
                    "E_ITEM_MISSING_ID",
                    f"model.{section} item missing string `id`",
                    path=f"/{section}/{i}/id",
                )
                continue

            if item_id in seen:
                emit(
                    "error",
                    "E_ITEM_DUPLICATE_ID",
                    f"duplicate {section} id {item_id!r} (also at {section}[{seen[item_id]}])",
                    path=f"/{section}/{i}/id",
                )
            else:
                seen[item_id] = i

    entity_ids = ids["entities"]
    people_ids = ids["people"]
    event_ids = ids["events"]

    components: dict[str, list[str]] = {}
    for i, item in enumerate(model.get("entities", []) or []):
        if not isinstance(item, dict) or not isinstance(item.get("id"), str):
            continue
        ent_id = item["id"]
        schema_class = item.get("schema_class")
        kind = EntityKind.parse(schema_class)
        if kind is None:
            emit(
                "warning",
                "W_ENTITY_UNKNOWN_SCHEMA_CLASS",
                f"entity {ent_id!r} has unknown schema_class {schema_class!r}",
                path=f"/entities/{i}/schema_class",
                hint="It will be converted without a type description",
            )

        if "components" not in item:
            continue
        refs = item.get("components") or []
        if not isinstance(refs, list):
            emit(
                "error",
                "E_COMPONENTS_NOT_LIST",
                f"entity {ent_id!r} components must be a list",
                path=f"/entities/{i}/components",
            )
            continue
        if kind is not EntityKind.COMPLEX:
            emit(
                "warning",
                "W_COMPONENTS_ON_NON_COMPLEX",
                f"entity {ent_id!r} lists components but is not a Complex; ignoring them",
                path=f"/entities/{i}/components",
            )
            continue

        components[ent_id] = [r for r in refs if isinstance(r, str)]
        for j, ref in enumerate(refs):
            if not isinstance(ref, str) or ref not in entity_ids:
                emit(
                    "warning",
                    "W_COMPONENT_UNKNOWN_ENTITY",
                    f"complex {ent_id!r} references unknown component {ref!r}",
                    path=f"/entities/{i}/components/{j}",
                    hint="The complex structure will be reported as not representable",
                )

    for cycle in _component_cycles(components):
        emit(
            "warning",
            "W_COMPONENT_CYCLE",
            "complex components form a cycle: " + " -> ".join(cycle),
            path=f"/entities/{entity_ids.get(cycle[0], 0)}/components",
        )

    pathway_id = model.get("pathway")
    if pathway_id is not None and (not isinstance(pathway_id, str) or pathway_id not in event_ids):
        emit(
            "error",
            "E_PATHWAY_UNKNOWN_EVENT",
            f"model.pathway references unknown event id {pathway_id!r}",
            path="/pathway",
        )

    for i, item in enumerate(model.get("events", []) or []):
        if not isinstance(item, dict) or not isinstance(item.get("id"), str):
            continue
        ev_id = item["id"]
        kind = item.get("kind", "reaction")
        if kind not in EVENT_KINDS:
            emit(
                "error",
                "E_EVENT_UNKNOWN_KIND",
                f"event {ev_id!r} has kind {kind!r}; expected one of {', '.join(EVENT_KINDS)}",
                path=f"/events/{i}/kind",
            )

        edits: list[tuple[str, Any]] = [
            ("created", item.get("created")),
            ("modified", item.get("modified")),
        ]
        for key in ("authored", "revised"):
            for j, edit in enumerate(item.get(key, []) or []):
                edits.append((f"{key}/{j}", edit))

        for where, edit in edits:
            if not isinstance(edit, dict):
                continue
            date = edit.get("date")
            if date is not None and parse_datetime(str(date)) is None:
                emit(
                    "warning",
                    "W_EDIT_DATE_UNPARSEABLE",
                    f"event {ev_id!r} {where} date {date!r} is not 'YYYY-MM-DD hh:mm:ss'; "
                    "it will be left out of the history",
                    path=f"/events/{i}/{where}/date",
                )
            for author in edit.get("authors", []) or []:
                if not isinstance(author, str) or author not in people_ids:
                    emit(
                        "warning",
                        "W_AUTHOR_UNKNOWN_PERSON",
                        f"event {ev_id!r} {where} references unknown person {author!r}",
                        path=f"/events/{i}/{where}/authors",
                    )

        for j, p in enumerate(item.get("participants", []) or []):
            ref = p.get("entity") if isinstance(p, dict) else None
            if not isinstance(ref, str) or ref not in entity_ids:
                emit(
                    "error",
                    "E_PARTICIPANT_UNKNOWN_ENTITY",
                    f"event {ev_id!r} participant references unknown entity {ref!r}",
                    path=f"/events/{i}/participants/{j}/entity",
                )

        for j, r in enumerate(item.get("regulations", []) or []):
            if not isinstance(r, dict) or not isinstance(r.get("id"), str):
                emit(
                    "error",
                    "E_REGULATION_MISSING_ID",
                    f"event {ev_id!r} regulation missing string `id`",
                    path=f"/events/{i}/regulations/{j}/id",
                )

    return issues
