"""Minimal in-memory SBML node the annotators attach their output to."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from .constants import SBML_LEVEL_DEFAULT, SBML_VERSION_DEFAULT


class Qualifier(str, Enum):
    BQB_IS = "bqbiol:is"
    BQB_HAS_PART = "bqbiol:hasPart"
    BQB_HAS_VERSION = "bqbiol:hasVersion"
    BQB_IS_DESCRIBED_BY = "bqbiol:isDescribedBy"
    BQB_IS_HOMOLOG_TO = "bqbiol:isHomologTo"
    BQB_OCCURS_IN = "bqbiol:occursIn"
    BQM_HAS_INSTANCE = "bqmodel:hasInstance"


@dataclass(frozen=True)
class CVTerm:
    qualifier: Qualifier
    resources: tuple[str, ...]


@dataclass(frozen=True)
class Creator:
    family_name: str = ""
    given_name: str = ""
    organisation: Optional[str] = None


@dataclass
class History:
    creators: list[Creator] = field(default_factory=list)
    created_date: Optional[datetime] = None
    modified_dates: list[Optional[datetime]] = field(default_factory=list)

    def add_creator(self, creator: Creator) -> None:
        self.creators.append(creator)

    def add_modified_date(self, when: Optional[datetime]) -> None:
        # Unparseable source dates arrive as None and are simply left out.
        if when is not None:
            self.modified_dates.append(when)


@dataclass
class SBase:
    id: str
    level: int = SBML_LEVEL_DEFAULT
    version: int = SBML_VERSION_DEFAULT
    notes: list[ET.Element] = field(default_factory=list)
    cv_terms: list[CVTerm] = field(default_factory=list)
    history: Optional[History] = None
    sbo_term: Optional[int] = None

    def append_notes(self, fragment: ET.Element) -> None:
        self.notes.append(fragment)

    def add_cv_term(self, qualifier: Qualifier, uris: Iterable[Optional[str]]) -> None:
        # Event and reaction terms both name the Reactome page; keep one.
        existing = set(self.resources_for(qualifier))
        resources = tuple(dict.fromkeys(u for u in uris if u and u not in existing))
        if resources:
            self.cv_terms.append(CVTerm(qualifier=qualifier, resources=resources))

    def set_history(self, history: History) -> None:
        self.history = history

    def set_sbo_term(self, term: int) -> None:
        self.sbo_term = term

    def resources_for(self, qualifier: Qualifier) -> list[str]:
        out: list[str] = []
        for term in self.cv_terms:
            if term.qualifier is qualifier:
                out.extend(term.resources)
        return out

    def notes_text(self) -> str:
        """Concatenated paragraph text of every notes block attached so far."""
        return "\n".join("".join(el.itertext()) for el in self.notes)
