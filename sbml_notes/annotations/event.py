from __future__ import annotations

from typing import Optional, Sequence

from ..constants import REACTOME_URI
from ..diagnostics import Diagnostics
from ..document import Qualifier, SBase
from ..model import Event
from ..notes import NotesBuilder, NotesOutcome, SkippedEmpty
from .history import build_history


def annotate_event(
    node: SBase,
    event: Optional[Event],
    *,
    diagnostics: Diagnostics,
    strict: bool = True,
) -> NotesOutcome:
    """History, summation notes and identity terms for a reaction or pathway.

    Orphan reactions have no event; nothing is attached for them.
    """
    if event is None:
        return SkippedEmpty()

    node.set_history(build_history(event))

    notes = NotesBuilder(node, strict=strict, diagnostics=diagnostics)
    notes.append_summations(event.summations)
    outcome = notes.finalize()

    node.add_cv_term(
        Qualifier.BQB_IS, [REACTOME_URI + event.st_id, event.go_biological_process_url]
    )
    node.add_cv_term(Qualifier.BQB_IS_DESCRIBED_BY, event.literature_urls)
    return outcome


def annotate_event_list(
    node: SBase,
    events: Sequence[Event],
    *,
    diagnostics: Diagnostics,
    strict: bool = True,
) -> NotesOutcome:
    """Model notes when the document was built from loose events."""
    notes = NotesBuilder(node, strict=strict, diagnostics=diagnostics)
    notes.append_event_list_preamble()
    for event in events:
        notes.append_summations(event.summations)
    return notes.finalize()
