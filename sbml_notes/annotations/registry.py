from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from ..diagnostics import Diagnostics
from ..flatten import describe_complex_structure
from ..model import EntityKind, PhysicalEntity


@dataclass(frozen=True)
class DescribeConfig:
    level: int
    version: int


StatementFn = Callable[[PhysicalEntity, DescribeConfig], str]


@dataclass(frozen=True)
class DescriptionSpec:
    kind: EntityKind
    sentences: tuple[str, ...] = ()
    computed: Optional[StatementFn] = None


def derived_from_statement(kind: EntityKind) -> str:
    return f"Derived from a Reactome {kind.value}."


def _complex_statement(entity: PhysicalEntity, cfg: DescribeConfig) -> str:
    structure = describe_complex_structure(entity)
    if not structure:
        return (
            "Reactome uses a nested structure for complexes, which cannot be fully "
            f"represented in SBML Level {cfg.level} Version {cfg.version} core."
        )
    return f"Here is Reactomes nested structure for this complex: {structure}"


_SPECS: list[DescriptionSpec] = [
    DescriptionSpec(EntityKind.SIMPLE_ENTITY, ("This is a small compound.",)),
    DescriptionSpec(EntityKind.ENTITY_WITH_ACCESSIONED_SEQUENCE, ("This is a protein.",)),
    DescriptionSpec(EntityKind.COMPLEX, computed=_complex_statement),
    DescriptionSpec(
        EntityKind.CANDIDATE_SET,
        ("A list of entities, one or more of which might perform the given function.",),
    ),
    DescriptionSpec(
        EntityKind.DEFINED_SET,
        ("This is a list of alternative entities, any of which can perform the given function.",),
    ),
    DescriptionSpec(
        EntityKind.OPEN_SET,
        (
            "A set of examples characterizing a very large but not explicitly "
            "enumerated set, e.g. mRNAs.",
        ),
    ),
    DescriptionSpec(EntityKind.OTHER_ENTITY),
    DescriptionSpec(EntityKind.GENOME_ENCODED_ENTITY),
    DescriptionSpec(EntityKind.POLYMER),
    DescriptionSpec(EntityKind.CHEMICAL_DRUG),
    DescriptionSpec(EntityKind.PROTEIN_DRUG),
    DescriptionSpec(EntityKind.RNA_DRUG),
]

DESCRIPTIONS: dict[EntityKind, DescriptionSpec] = {spec.kind: spec for spec in _SPECS}

_missing = set(EntityKind) - set(DESCRIPTIONS)
if _missing:
    raise RuntimeError(
        "no description registered for: " + ", ".join(sorted(k.value for k in _missing))
    )


def describe_entity(
    entity: PhysicalEntity,
    *,
    level: int,
    version: int,
    diagnostics: Diagnostics,
) -> list[str]:
    """Return the descriptive sentences for one physical entity.

    Schema classes outside the known set produce no sentences and a single
    warning; they never raise.
    """
    kind = entity.kind
    spec = DESCRIPTIONS.get(kind) if kind is not None else None
    if spec is None:
        diagnostics.warn(
            "W_UNKNOWN_ENTITY_KIND",
            f"encountered unknown PhysicalEntity {entity.st_id!r} "
            f"(schema class {entity.schema_class!r})",
            path=entity.st_id,
        )
        return []

    out = [derived_from_statement(spec.kind), *spec.sentences]
    if spec.computed is not None:
        out.append(spec.computed(entity, DescribeConfig(level=level, version=version)))
    return out
