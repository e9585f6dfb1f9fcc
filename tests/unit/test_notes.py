import pytest

from sbml_notes.diagnostics import Diagnostics
from sbml_notes.document import SBase
from sbml_notes.model import Summation
from sbml_notes.notes import (
    EVENT_LIST_PREAMBLE,
    Attached,
    NotesBuilder,
    SkippedEmpty,
    SkippedMalformed,
)


def test_separator_only_between_segments():
    notes = NotesBuilder(SBase(id="s1"))
    notes.append("first")
    notes.append(None)
    notes.append("second")
    notes.append("third")

    assert notes.contents == "first\nsecond\nthird"
    assert notes.segments == ("first", "second", "third")


def test_finalize_attaches_parsed_fragment():
    node = SBase(id="s1")
    notes = NotesBuilder(node)
    notes.append("A<->B")

    outcome = notes.finalize()

    assert isinstance(outcome, Attached)
    assert node.notes == [outcome.fragment]
    text = node.notes_text()
    assert "A to B" in text
    assert "<" not in text and ">" not in text


def test_empty_builder_attaches_nothing():
    node = SBase(id="s1")
    assert isinstance(NotesBuilder(node).finalize(), SkippedEmpty)
    assert node.notes == []


def test_malformed_content_is_reported_not_raised():
    node = SBase(id="s1")
    diagnostics = Diagnostics()
    notes = NotesBuilder(node, diagnostics=diagnostics, sanitizer=lambda text, strict: text)
    notes.append("broken <b>markup")

    outcome = notes.finalize()

    assert isinstance(outcome, SkippedMalformed)
    assert "broken <b>markup" in outcome.content
    assert node.notes == []
    assert diagnostics.codes() == ["W_NOTES_MALFORMED"]
    assert "broken <b>markup" in diagnostics.warnings[0].message


def test_finalize_only_once():
    notes = NotesBuilder(SBase(id="s1"))
    notes.append("text")
    notes.finalize()

    with pytest.raises(RuntimeError):
        notes.finalize()
    with pytest.raises(RuntimeError):
        notes.append("more")
    with pytest.raises(RuntimeError):
        notes.append(None)


def test_summations_skip_missing_text():
    notes = NotesBuilder(SBase(id="s1"))

    assert notes.append_summations(None) is False
    assert notes.append_summations([Summation(None)]) is False
    assert notes.append_summations([Summation("one"), Summation(None), Summation("two")])
    assert notes.segments == ("one", "two")


def test_event_list_preamble_comes_first():
    notes = NotesBuilder(SBase(id="m"))
    notes.append_event_list_preamble()
    notes.append_summations([Summation("Glycolysis & more")])

    assert notes.segments == (EVENT_LIST_PREAMBLE, "Glycolysis  and  more")


def test_lenient_mode_drops_ampersands():
    notes = NotesBuilder(SBase(id="s1"), strict=False)
    notes.append("R&D")
    assert notes.contents == "R  D"
