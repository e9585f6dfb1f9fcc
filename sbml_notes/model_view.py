from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .model import (
    Event,
    InstanceEdit,
    Participant,
    Person,
    PhysicalEntity,
    Reaction,
    ReferenceEntity,
    Regulation,
    Summation,
)


def as_int(value: Any, default: int = 0) -> int:
    """Convert a value to int, falling back to a default."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _str_list(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, str) and v]


def _items(model: dict[str, Any], section: str) -> list[dict[str, Any]]:
    items = model.get(section, []) or []
    if not isinstance(items, list):
        return []
    return [it for it in items if isinstance(it, dict) and isinstance(it.get("id"), str)]


def _summations(item: dict[str, Any]) -> list[Summation]:
    out: list[Summation] = []
    for s in item.get("summations", []) or []:
        if isinstance(s, dict):
            text = s.get("text")
            out.append(Summation(text if isinstance(text, str) else None))
        elif isinstance(s, str):
            out.append(Summation(s))
    return out


def build_people(model: dict[str, Any]) -> dict[str, Person]:
    people: dict[str, Person] = {}
    for item in _items(model, "people"):
        affiliations = tuple(
            tuple(_str_list(aff)) for aff in item.get("affiliations", []) or []
        )
        people[item["id"]] = Person(
            surname=item.get("surname"),
            firstname=item.get("firstname"),
            affiliations=affiliations,
        )
    return people


def build_entities(model: dict[str, Any]) -> dict[str, PhysicalEntity]:
    """Index physical entities by stable id and wire up complex components.

    A component referenced from several complexes is the same object in each.
    References to ids that are not in the model become bare placeholders that
    never resolve to an identifier.
    """
    index: dict[str, PhysicalEntity] = {}
    raw_components: dict[str, list[str]] = {}

    for item in _items(model, "entities"):
        st_id = item["id"]
        ref = item.get("reference")
        reference = None
        if isinstance(ref, dict):
            identifier = ref.get("identifier")
            reference = ReferenceEntity(
                identifier=str(identifier) if identifier is not None else None,
                database=str(ref.get("database") or ""),
            )

        index[st_id] = PhysicalEntity(
            st_id=st_id,
            schema_class=str(item.get("schema_class") or ""),
            name=str(item.get("name") or ""),
            reference=reference,
            summations=_summations(item),
            literature_urls=_str_list(item.get("literature")),
            inferred_to=_str_list(item.get("inferred_to")),
            inferred_from=_str_list(item.get("inferred_from")),
            psi_mod_urls=_str_list(item.get("psi_mod")),
        )
        if "components" in item:
            raw_components[st_id] = _str_list(item.get("components"))

    placeholders: dict[str, PhysicalEntity] = {}
    for st_id, refs in raw_components.items():
        components: list[PhysicalEntity] = []
        for ref_id in refs:
            target = index.get(ref_id)
            if target is None:
                target = placeholders.setdefault(
                    ref_id, PhysicalEntity(st_id=ref_id, schema_class="")
                )
            components.append(target)
        index[st_id].components = components

    return index


def _edit(value: Any, people: dict[str, Person]) -> Optional[InstanceEdit]:
    if not isinstance(value, dict):
        return None
    authors = tuple(people[p] for p in _str_list(value.get("authors")) if p in people)
    date = value.get("date")
    return InstanceEdit(authors=authors, date_time=str(date) if date is not None else None)


def _edits(value: Any, people: dict[str, Person]) -> tuple[InstanceEdit, ...]:
    if not isinstance(value, list):
        return ()
    out = (_edit(v, people) for v in value)
    return tuple(e for e in out if e is not None)


@dataclass
class EventEntry:
    """One event with the reaction-level details that hang off it."""

    event: Event
    kind: str
    reaction: Optional[Reaction] = None
    participants: list[Participant] = field(default_factory=list)
    regulations: list[tuple[Regulation, Optional[PhysicalEntity]]] = field(
        default_factory=list
    )


def build_events(
    model: dict[str, Any],
    entities: dict[str, PhysicalEntity],
    people: dict[str, Person],
) -> list[EventEntry]:
    out: list[EventEntry] = []
    for item in _items(model, "events"):
        st_id = item["id"]
        event = Event(
            st_id=st_id,
            name=str(item.get("name") or ""),
            summations=tuple(_summations(item)),
            literature_urls=tuple(_str_list(item.get("literature"))),
            go_biological_process_url=item.get("go_biological_process") or None,
            created=_edit(item.get("created"), people),
            modified=_edit(item.get("modified"), people),
            authored=_edits(item.get("authored"), people),
            revised=_edits(item.get("revised"), people),
        )
        kind = str(item.get("kind") or "reaction")
        entry = EventEntry(event=event, kind=kind)

        if kind == "reaction":
            entry.reaction = Reaction(
                st_id=st_id,
                go_terms=tuple(_str_list(item.get("go_terms"))),
                ec_numbers=tuple(_str_list(item.get("ec_numbers"))),
                literature_urls=event.literature_urls,
                diseases=tuple(_str_list(item.get("diseases"))),
                cross_references=tuple(_str_list(item.get("cross_references"))),
            )

        for p in item.get("participants", []) or []:
            if not isinstance(p, dict):
                continue
            pe = entities.get(str(p.get("entity")))
            if pe is None:
                continue
            entry.participants.append(
                Participant(
                    physical_entity=pe,
                    stoichiometry=as_int(p.get("stoichiometry"), 1),
                    explanation=p.get("explanation"),
                    urls=_str_list(p.get("urls")),
                )
            )

        for r in item.get("regulations", []) or []:
            if not isinstance(r, dict) or not isinstance(r.get("id"), str):
                continue
            regulation = Regulation(st_id=r["id"], explanation=r.get("explanation"))
            entry.regulations.append((regulation, entities.get(str(r.get("regulator")))))

        out.append(entry)
    return out


def get_pathway(entries: list[EventEntry], pathway_id: Optional[str]) -> Optional[Event]:
    """Return the model's parent pathway, if the export names one."""
    if not pathway_id:
        return None
    for entry in entries:
        if entry.event.st_id == pathway_id:
            return entry.event
    raise KeyError(f"pathway {pathway_id!r} is not among the exported events")
