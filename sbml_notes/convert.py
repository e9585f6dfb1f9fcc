from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .annotations.event import annotate_event, annotate_event_list
from .annotations.provenance import add_provenance_annotation, add_sbo_term
from .annotations.reaction import add_reaction_cv_terms
from .annotations.species import annotate_species, annotate_species_reference
from .constants import (
    MODEL_ID_DEFAULT,
    SBML_LEVEL_DEFAULT,
    SBML_VERSION_DEFAULT,
    SBO_BIOCHEMICAL_REACTION,
    TOOLKIT_VERSION_DEFAULT,
)
from .diagnostics import Diagnostics
from .document import SBase
from .model import Participant
from .model_view import as_int, build_entities, build_events, build_people, get_pathway


@dataclass(frozen=True)
class ConvertConfig:
    level: int = SBML_LEVEL_DEFAULT
    version: int = SBML_VERSION_DEFAULT
    reactome_version: Optional[int] = None  # None: take it from model.database
    toolkit_version: str = TOOLKIT_VERSION_DEFAULT
    strict_ampersand: bool = True
    generated_at: Optional[datetime] = None


@dataclass
class ConversionResult:
    model: SBase
    species: dict[str, SBase] = field(default_factory=dict)
    reactions: dict[str, SBase] = field(default_factory=dict)
    species_references: dict[str, SBase] = field(default_factory=dict)
    diagnostics: Diagnostics = field(default_factory=Diagnostics)


def convert_model(model: dict[str, Any], cfg: Optional[ConvertConfig] = None) -> ConversionResult:
    """Annotate one document node per model, reaction, species and modifier.

    Bad records are reported in `result.diagnostics` and never stop the run.
    """
    cfg = cfg or ConvertConfig()
    diagnostics = Diagnostics()

    people = build_people(model)
    entities = build_entities(model)
    entries = build_events(model, entities, people)
    pathway = get_pathway(entries, model.get("pathway"))

    def node(node_id: str) -> SBase:
        return SBase(id=node_id, level=cfg.level, version=cfg.version)

    result = ConversionResult(
        model=node(pathway.st_id if pathway else MODEL_ID_DEFAULT),
        diagnostics=diagnostics,
    )

    if pathway is not None:
        annotate_event(result.model, pathway, diagnostics=diagnostics, strict=cfg.strict_ampersand)
    else:
        annotate_event_list(
            result.model,
            [e.event for e in entries],
            diagnostics=diagnostics,
            strict=cfg.strict_ampersand,
        )

    database = model.get("database") or {}
    reactome_version = cfg.reactome_version
    if reactome_version is None:
        reactome_version = as_int(database.get("version") if isinstance(database, dict) else None)
    add_provenance_annotation(
        result.model,
        reactome_version=reactome_version,
        toolkit_version=cfg.toolkit_version,
        when=cfg.generated_at,
    )

    for entry in entries:
        if entry.reaction is None:
            continue

        rxn = node(entry.reaction.st_id)
        annotate_event(rxn, entry.event, diagnostics=diagnostics, strict=cfg.strict_ampersand)
        add_reaction_cv_terms(rxn, entry.reaction)
        add_sbo_term(rxn, SBO_BIOCHEMICAL_REACTION)
        result.reactions[rxn.id] = rxn

        participants = list(entry.participants)
        # Regulators take part as modifiers; they still need a species.
        participants.extend(
            Participant(physical_entity=regulator)
            for _, regulator in entry.regulations
            if regulator is not None
        )
        for participant in participants:
            st_id = participant.physical_entity.st_id
            if st_id in result.species:
                continue
            species = node(st_id)
            annotate_species(
                species, participant, diagnostics=diagnostics, strict=cfg.strict_ampersand
            )
            result.species[st_id] = species

        for regulation, _ in entry.regulations:
            ref = node(f"{rxn.id}_{regulation.st_id}")
            annotate_species_reference(
                ref, regulation, diagnostics=diagnostics, strict=cfg.strict_ampersand
            )
            result.species_references[ref.id] = ref

    return result
