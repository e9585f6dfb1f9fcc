import pytest

from sbml_notes.counter import Occurrence, OccurrenceCounter


def test_add_increments_existing_entry_in_place():
    counter = OccurrenceCounter()
    counter.add("b")
    counter.add("a")
    counter.add("b")

    assert counter.entries() == [Occurrence("b", 2), Occurrence("a", 1)]
    assert len(counter) == 2
    assert "a" in counter and "c" not in counter


def test_merge_keeps_first_encounter_order():
    left = OccurrenceCounter()
    left.add("x")
    right = OccurrenceCounter()
    right.add("y")
    right.add("x")
    right.add("z")

    left.merge(right)

    assert [(o.identifier, o.count) for o in left] == [("x", 2), ("y", 1), ("z", 1)]
    assert left.total() == 4


def test_counts_must_be_positive():
    with pytest.raises(ValueError):
        OccurrenceCounter().add("x", 0)


def test_equality_is_order_sensitive():
    a, b = OccurrenceCounter(), OccurrenceCounter()
    a.add("p")
    a.add("q")
    b.add("q")
    b.add("p")

    assert a != b
    assert not OccurrenceCounter()
