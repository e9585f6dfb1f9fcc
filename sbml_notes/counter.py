from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Occurrence:
    identifier: str
    count: int


class OccurrenceCounter:
    """Ordered multiset of identifiers.

    Entries are unique by identifier and keep the order in which each
    identifier was first added. Build a fresh instance per traversal.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def add(self, identifier: str, n: int = 1) -> None:
        if n < 1:
            raise ValueError(f"count must be >= 1, got {n!r}")
        self._counts[identifier] = self._counts.get(identifier, 0) + n

    def merge(self, other: "OccurrenceCounter") -> None:
        for identifier, n in other._counts.items():
            self.add(identifier, n)

    def entries(self) -> list[Occurrence]:
        return [Occurrence(k, v) for k, v in self._counts.items()]

    def count(self, identifier: str) -> int:
        return self._counts.get(identifier, 0)

    def total(self) -> int:
        return sum(self._counts.values())

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(self.entries())

    def __len__(self) -> int:
        return len(self._counts)

    def __bool__(self) -> bool:
        return bool(self._counts)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OccurrenceCounter):
            return NotImplemented
        return list(self._counts.items()) == list(other._counts.items())

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v}" for k, v in self._counts.items())
        return f"OccurrenceCounter({{{body}}})"
