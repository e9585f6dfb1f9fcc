from __future__ import annotations

from typing import Hashable, Optional

from .counter import OccurrenceCounter
from .model import REFERENCED_KINDS, PhysicalEntity

# (subtree counter, every leaf resolved)
_Subtree = tuple[OccurrenceCounter, bool]


def resolve_identifier(entity: PhysicalEntity) -> Optional[str]:
    """Return the canonical identifier of a leaf, or None when it has none."""
    if entity.kind not in REFERENCED_KINDS:
        return None
    ref = entity.reference
    if ref is None or not ref.identifier:
        return None
    return ref.identifier


def _node_key(entity: PhysicalEntity) -> Hashable:
    return entity.st_id or id(entity)


def flatten_complex(root: PhysicalEntity) -> Optional[OccurrenceCounter]:
    """Count the leaf identifiers reachable from `root`'s components.

    Traversal is depth-first, pre-order. Complexes are descended into and never
    counted themselves. Every leaf is visited even after a failure, but a
    single unresolved leaf (or a component cycle) makes the result None.
    """
    counter = OccurrenceCounter()
    memo: dict[Hashable, _Subtree] = {}
    complete = _collect_components(root, counter, memo, {_node_key(root)})
    return counter if complete else None


def _collect_components(
    node: PhysicalEntity,
    counter: OccurrenceCounter,
    memo: dict[Hashable, _Subtree],
    path: set[Hashable],
) -> bool:
    complete = True
    for component in node.components or []:
        if component.is_complex:
            if not _collect_complex(component, counter, memo, path):
                complete = False
            continue

        identifier = resolve_identifier(component)
        if identifier is None:
            complete = False
        else:
            counter.add(identifier)
    return complete


def _collect_complex(
    node: PhysicalEntity,
    counter: OccurrenceCounter,
    memo: dict[Hashable, _Subtree],
    path: set[Hashable],
) -> bool:
    key = _node_key(node)
    if key in path:
        # Complex contains itself somewhere below.
        return False

    # A shared sub-complex is counted every time it is reached, but its
    # children are only walked once per call.
    cached = memo.get(key)
    if cached is None:
        sub = OccurrenceCounter()
        path.add(key)
        sub_complete = _collect_components(node, sub, memo, path)
        path.discard(key)
        cached = (sub, sub_complete)
        memo[key] = cached

    sub, sub_complete = cached
    counter.merge(sub)
    return sub_complete


def format_structure(counter: Optional[OccurrenceCounter]) -> Optional[str]:
    """Render e.g. `(2xP1, P2)`; None when there is nothing to show."""
    if not counter:
        return None
    parts = [
        f"{occ.count}x{occ.identifier}" if occ.count > 1 else occ.identifier
        for occ in counter.entries()
    ]
    return "(" + ", ".join(parts) + ")"


def describe_complex_structure(root: PhysicalEntity) -> Optional[str]:
    return format_structure(flatten_complex(root))
