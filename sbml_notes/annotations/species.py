from __future__ import annotations

from ..constants import REACTOME_URI
from ..diagnostics import Diagnostics
from ..document import Qualifier, SBase
from ..model import EntityKind, Participant, Regulation, SET_KINDS
from ..notes import NotesBuilder, NotesOutcome
from .registry import describe_entity

# Species for these kinds stand for a group; their members go under hasPart.
_GROUP_KINDS = SET_KINDS | {EntityKind.COMPLEX, EntityKind.POLYMER}


def annotate_species(
    node: SBase,
    participant: Participant,
    *,
    diagnostics: Diagnostics,
    strict: bool = True,
) -> NotesOutcome:
    """Attach notes and CV terms describing one reaction participant."""
    pe = participant.physical_entity

    notes = NotesBuilder(node, strict=strict, diagnostics=diagnostics)
    notes.append(participant.explanation)
    notes.append_summations(pe.summations)
    notes.extend(
        describe_entity(pe, level=node.level, version=node.version, diagnostics=diagnostics)
    )
    outcome = notes.finalize()

    node.add_cv_term(Qualifier.BQB_IS_DESCRIBED_BY, pe.literature_urls)

    reactome_url = REACTOME_URI + pe.st_id
    if pe.kind in _GROUP_KINDS:
        node.add_cv_term(Qualifier.BQB_IS, [reactome_url])
        node.add_cv_term(Qualifier.BQB_HAS_PART, participant.urls)
    else:
        node.add_cv_term(Qualifier.BQB_IS, [*participant.urls, reactome_url])
        if pe.kind is EntityKind.ENTITY_WITH_ACCESSIONED_SEQUENCE:
            node.add_cv_term(Qualifier.BQB_HAS_VERSION, pe.psi_mod_urls)

    node.add_cv_term(Qualifier.BQB_IS_HOMOLOG_TO, [REACTOME_URI + s for s in pe.inferred_to])
    node.add_cv_term(Qualifier.BQB_IS_HOMOLOG_TO, [REACTOME_URI + s for s in pe.inferred_from])
    return outcome


def annotate_species_reference(
    node: SBase,
    regulation: Regulation,
    *,
    diagnostics: Diagnostics,
    strict: bool = True,
) -> NotesOutcome:
    """Notes for a modifier species reference come from the regulation text."""
    notes = NotesBuilder(node, strict=strict, diagnostics=diagnostics)
    notes.append(regulation.explanation)
    return notes.finalize()
