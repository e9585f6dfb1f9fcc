import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from sbml_notes.cli import main

FIXTURES = Path(__file__).resolve().parents[1] / "fixtures"
XHTML_P = "{http://www.w3.org/1999/xhtml}p"


@pytest.mark.integration
def test_cli_writes_annotated_document(tmp_path, capsys):
    out = tmp_path / "out" / "glycolysis.xml"

    main(["--model", str(FIXTURES / "glycolysis"), "--out", str(out)])

    err = capsys.readouterr().err
    assert "warning: entity 'R-HSA-88888' has unknown schema_class 'CellType'" in err
    assert "warning: encountered unknown PhysicalEntity 'R-HSA-88888'" in err

    root = ET.parse(out).getroot()
    assert root.tag == "sbml"
    assert root.get("level") == "3"

    model = root.find("model")
    assert model.get("id") == "R-HSA-70171"

    species_ids = [s.get("id") for s in model.find("listOfSpecies")]
    assert "R-HSA-71000" in species_ids

    dimer = model.find("listOfSpecies/species[@id='R-HSA-71000']")
    paragraph = dimer.find(f"notes/{XHTML_P}")
    assert "(2xP19367, CHEBI:30616)" in paragraph.text

    reaction = model.find("listOfReactions/reaction")
    assert reaction.get("sboTerm") == "SBO:0000176"
    qualifiers = [cv.get("qualifier") for cv in reaction.findall("annotation/cvTerm")]
    assert "bqbiol:is" in qualifiers
    assert reaction.find("annotation/history/created").text == "2003-03-01T10:00:00"


@pytest.mark.integration
def test_cli_strict_fails_on_warnings(tmp_path, capsys):
    out = tmp_path / "glycolysis.xml"

    with pytest.raises(SystemExit) as exc:
        main(["--model", str(FIXTURES / "glycolysis"), "--out", str(out), "--strict"])

    assert exc.value.code == 2
    assert not out.exists()
    assert "warning:" in capsys.readouterr().err


@pytest.mark.integration
def test_cli_escalated_codes_become_errors(tmp_path, capsys):
    out = tmp_path / "single.xml"

    with pytest.raises(SystemExit):
        main(
            [
                "--model",
                str(FIXTURES / "single" / "model.yaml"),
                "--out",
                str(out),
                "--escalate",
                "W_EDIT_DATE_UNPARSEABLE",
            ]
        )

    assert "error: event 'R-HSA-1' created date 'yesterday'" in capsys.readouterr().err


@pytest.mark.integration
def test_cli_lenient_single_file(tmp_path):
    out = tmp_path / "single.xml"

    main(
        [
            "--model",
            str(FIXTURES / "single" / "model.yaml"),
            "--out",
            str(out),
            "--lenient-ampersand",
            "--reactome-version",
            "91",
        ]
    )

    root = ET.parse(out).getroot()
    model = root.find("model")
    assert model.get("id") == "reactome_model"
    texts = ["".join(p.itertext()) for p in model.iter(XHTML_P)]
    assert any("Reactome version 91" in t for t in texts)
    water = model.find("listOfSpecies/species[@id='R-ALL-1']")
    assert "Water: the solvent of life." in "".join(water.itertext())
