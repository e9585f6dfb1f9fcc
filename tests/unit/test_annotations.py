from datetime import datetime

from sbml_notes.annotations.event import annotate_event, annotate_event_list
from sbml_notes.annotations.history import build_history, creator_for, parse_datetime
from sbml_notes.annotations.provenance import add_provenance_annotation, add_sbo_term
from sbml_notes.annotations.reaction import add_reaction_cv_terms
from sbml_notes.annotations.species import annotate_species, annotate_species_reference
from sbml_notes.diagnostics import Diagnostics
from sbml_notes.document import Creator, Qualifier, SBase
from sbml_notes.model import (
    Event,
    InstanceEdit,
    Participant,
    Person,
    PhysicalEntity,
    Reaction,
    ReferenceEntity,
    Regulation,
    Summation,
)
from sbml_notes.notes import Attached, SkippedEmpty

REACTOME = "https://reactome.org/content/detail/"


def test_protein_species_gets_notes_and_identity_terms():
    pe = PhysicalEntity(
        st_id="R-HSA-1",
        schema_class="EntityWithAccessionedSequence",
        reference=ReferenceEntity("P04637"),
        summations=[Summation("Tumour suppressor <i>p53</i>.")],
        literature_urls=["http://www.ncbi.nlm.nih.gov/pubmed/1"],
        inferred_to=["R-MMU-1"],
        psi_mod_urls=["http://purl.obolibrary.org/obo/MOD_00046"],
    )
    participant = Participant(
        physical_entity=pe,
        explanation="Binds DNA & activates transcription",
        urls=["http://purl.uniprot.org/uniprot/P04637"],
    )
    node = SBase(id="species_1")

    outcome = annotate_species(node, participant, diagnostics=Diagnostics())

    assert isinstance(outcome, Attached)
    paragraph = outcome.fragment[0].text
    assert paragraph.split("\n") == [
        "Binds DNA  and  activates transcription",
        "Tumour suppressor  p53 .",
        "Derived from a Reactome EntityWithAccessionedSequence.",
        "This is a protein.",
    ]
    assert node.resources_for(Qualifier.BQB_IS) == [
        "http://purl.uniprot.org/uniprot/P04637",
        REACTOME + "R-HSA-1",
    ]
    assert node.resources_for(Qualifier.BQB_HAS_VERSION) == [
        "http://purl.obolibrary.org/obo/MOD_00046"
    ]
    assert node.resources_for(Qualifier.BQB_IS_DESCRIBED_BY) == [
        "http://www.ncbi.nlm.nih.gov/pubmed/1"
    ]
    assert node.resources_for(Qualifier.BQB_IS_HOMOLOG_TO) == [REACTOME + "R-MMU-1"]
    assert node.resources_for(Qualifier.BQB_HAS_PART) == []


def test_complex_species_lists_members_under_has_part():
    member = PhysicalEntity(
        "R-HSA-1", "EntityWithAccessionedSequence", reference=ReferenceEntity("P1")
    )
    cx = PhysicalEntity("R-HSA-10", "Complex", components=[member, member])
    participant = Participant(physical_entity=cx, urls=["http://purl.uniprot.org/uniprot/P1"])
    node = SBase(id="species_10")

    annotate_species(node, participant, diagnostics=Diagnostics())

    assert node.resources_for(Qualifier.BQB_IS) == [REACTOME + "R-HSA-10"]
    assert node.resources_for(Qualifier.BQB_HAS_PART) == ["http://purl.uniprot.org/uniprot/P1"]
    assert "(2xP1)" in node.notes_text()


def test_unknown_species_kind_still_gets_cv_terms():
    diagnostics = Diagnostics()
    node = SBase(id="species_x")
    pe = PhysicalEntity("R-HSA-77", "CellType")

    outcome = annotate_species(node, Participant(physical_entity=pe), diagnostics=diagnostics)

    assert isinstance(outcome, SkippedEmpty)
    assert diagnostics.codes() == ["W_UNKNOWN_ENTITY_KIND"]
    assert node.resources_for(Qualifier.BQB_IS) == [REACTOME + "R-HSA-77"]


def test_species_reference_notes_come_from_regulation():
    node = SBase(id="ref_1")
    annotate_species_reference(
        node, Regulation("R-HSA-5", "Inhibits <->"), diagnostics=Diagnostics()
    )
    assert node.notes_text() == "Inhibits  to "


def test_event_annotation_builds_history_and_terms():
    alice = Person(surname="Smith", firstname="Alice", affiliations=(("EBI", "EMBL-EBI"),))
    event = Event(
        st_id="R-HSA-100",
        summations=(Summation("Glucose is phosphorylated."),),
        literature_urls=("http://www.ncbi.nlm.nih.gov/pubmed/2",),
        go_biological_process_url="http://purl.obolibrary.org/obo/GO_0006096",
        created=InstanceEdit((alice,), "2004-01-30 10:00:00"),
        modified=InstanceEdit((), "not a date"),
        revised=(InstanceEdit((), "2019-05-01 08:15:30"),),
    )
    node = SBase(id="r1")

    annotate_event(node, event, diagnostics=Diagnostics())

    assert node.history.creators == [Creator("Smith", "Alice", "EMBL-EBI")]
    assert node.history.created_date == datetime(2004, 1, 30, 10, 0, 0)
    assert node.history.modified_dates == [datetime(2019, 5, 1, 8, 15, 30)]
    assert node.resources_for(Qualifier.BQB_IS) == [
        REACTOME + "R-HSA-100",
        "http://purl.obolibrary.org/obo/GO_0006096",
    ]
    assert node.resources_for(Qualifier.BQB_IS_DESCRIBED_BY) == [
        "http://www.ncbi.nlm.nih.gov/pubmed/2"
    ]
    assert node.notes_text() == "Glucose is phosphorylated."


def test_orphan_reaction_has_no_event_annotation():
    node = SBase(id="r1")
    assert isinstance(annotate_event(node, None, diagnostics=Diagnostics()), SkippedEmpty)
    assert node.history is None and node.cv_terms == [] and node.notes == []


def test_event_list_notes_start_with_preamble():
    node = SBase(id="m")
    events = [Event("R-HSA-1", summations=(Summation("One."),)), Event("R-HSA-2")]

    annotate_event_list(node, events, diagnostics=Diagnostics())

    lines = node.notes_text().split("\n")
    assert lines[0].startswith("This model was created from a list of events NOT a pathway.")
    assert lines[1] == "One."


def test_reaction_cv_terms_skip_empty_lists():
    node = SBase(id="r1")
    add_reaction_cv_terms(
        node,
        Reaction(
            "R-HSA-70171",
            go_terms=("http://purl.obolibrary.org/obo/GO_0004340",),
            diseases=("http://purl.obolibrary.org/obo/DOID_162",),
        ),
    )

    assert [t.qualifier for t in node.cv_terms] == [
        Qualifier.BQB_IS,
        Qualifier.BQB_IS,
        Qualifier.BQB_OCCURS_IN,
    ]


def test_provenance_and_sbo_terms():
    node = SBase(id="m")
    fragment = add_provenance_annotation(
        node, reactome_version=88, toolkit_version="1.5", when=datetime(2024, 1, 2, 9, 30)
    )

    assert fragment.tag == "annotation"
    assert "Reactome version 88" in node.notes_text()
    assert add_sbo_term(node, 176) is True
    assert node.sbo_term == 176
    assert add_sbo_term(node, -1) is False
    assert add_sbo_term(node, 10000000) is False
    assert node.sbo_term == 176


def test_dates_and_creators_degrade_gracefully():
    assert parse_datetime("2010-02-03 04:05:06") == datetime(2010, 2, 3, 4, 5, 6)
    assert parse_datetime("03/02/2010") is None
    assert parse_datetime(None) is None
    assert creator_for(Person()) == Creator("", "", None)

    history = build_history(Event("R-HSA-1", created=InstanceEdit((), "garbage")))
    assert history.created_date is None
    assert history.modified_dates == []
