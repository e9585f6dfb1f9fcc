# sbml_notes/model.py
"""Read-only view of the Reactome records the annotators consume.

These are plain records; nothing in this package mutates them after
`model_view` has wired up the references.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class EntityKind(str, Enum):
    """Closed set of physical entity schema classes."""

    SIMPLE_ENTITY = "SimpleEntity"
    ENTITY_WITH_ACCESSIONED_SEQUENCE = "EntityWithAccessionedSequence"
    COMPLEX = "Complex"
    CANDIDATE_SET = "CandidateSet"
    DEFINED_SET = "DefinedSet"
    OPEN_SET = "OpenSet"
    OTHER_ENTITY = "OtherEntity"
    GENOME_ENCODED_ENTITY = "GenomeEncodedEntity"
    POLYMER = "Polymer"
    CHEMICAL_DRUG = "ChemicalDrug"
    PROTEIN_DRUG = "ProteinDrug"
    RNA_DRUG = "RNADrug"

    @classmethod
    def parse(cls, schema_class: object) -> Optional["EntityKind"]:
        if not isinstance(schema_class, str):
            return None
        try:
            return cls(schema_class)
        except ValueError:
            return None


# Only these leaf kinds carry a reference to a canonical identifier.
REFERENCED_KINDS = frozenset(
    {EntityKind.SIMPLE_ENTITY, EntityKind.ENTITY_WITH_ACCESSIONED_SEQUENCE}
)

SET_KINDS = frozenset(
    {EntityKind.CANDIDATE_SET, EntityKind.DEFINED_SET, EntityKind.OPEN_SET}
)


@dataclass(frozen=True)
class ReferenceEntity:
    identifier: Optional[str]
    database: str = ""


@dataclass(frozen=True)
class Summation:
    text: Optional[str]


@dataclass(frozen=True)
class Person:
    surname: Optional[str] = None
    firstname: Optional[str] = None
    # Each affiliation is a list of names; the last one is the preferred form.
    affiliations: tuple[tuple[str, ...], ...] = ()


@dataclass(frozen=True)
class InstanceEdit:
    authors: tuple[Person, ...] = ()
    date_time: Optional[str] = None


@dataclass(eq=False)
class PhysicalEntity:
    """A node in the (possibly shared) complex graph.

    `components` is only meaningful for complexes. The same object may appear
    under several parents.
    """

    st_id: str
    schema_class: str
    name: str = ""
    components: Optional[list["PhysicalEntity"]] = field(default=None, repr=False)
    reference: Optional[ReferenceEntity] = None
    summations: list[Summation] = field(default_factory=list)
    literature_urls: list[str] = field(default_factory=list)
    inferred_to: list[str] = field(default_factory=list)
    inferred_from: list[str] = field(default_factory=list)
    psi_mod_urls: list[str] = field(default_factory=list)

    @property
    def kind(self) -> Optional[EntityKind]:
        return EntityKind.parse(self.schema_class)

    @property
    def is_complex(self) -> bool:
        return self.kind is EntityKind.COMPLEX


@dataclass(frozen=True)
class Event:
    st_id: str
    name: str = ""
    summations: tuple[Summation, ...] = ()
    literature_urls: tuple[str, ...] = ()
    go_biological_process_url: Optional[str] = None
    created: Optional[InstanceEdit] = None
    modified: Optional[InstanceEdit] = None
    authored: tuple[InstanceEdit, ...] = ()
    revised: tuple[InstanceEdit, ...] = ()


@dataclass(frozen=True)
class Regulation:
    st_id: str
    explanation: Optional[str] = None


@dataclass
class Participant:
    """A physical entity as it takes part in a reaction."""

    physical_entity: PhysicalEntity
    stoichiometry: int = 1
    explanation: Optional[str] = None
    urls: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Reaction:
    st_id: str
    go_terms: tuple[str, ...] = ()
    ec_numbers: tuple[str, ...] = ()
    literature_urls: tuple[str, ...] = ()
    diseases: tuple[str, ...] = ()
    cross_references: tuple[str, ...] = ()
