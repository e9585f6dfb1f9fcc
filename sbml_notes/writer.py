from __future__ import annotations

import copy
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterable

from .constants import XHTML_NS
from .convert import ConversionResult
from .document import SBase

ET.register_namespace("xhtml", XHTML_NS)


def _node_element(tag: str, node: SBase) -> ET.Element:
    el = ET.Element(tag, {"id": node.id})
    if node.sbo_term is not None:
        el.set("sboTerm", f"SBO:{node.sbo_term:07d}")

    for fragment in node.notes:
        el.append(copy.deepcopy(fragment))

    if node.cv_terms or node.history is not None:
        annotation = ET.SubElement(el, "annotation")
        for term in node.cv_terms:
            cv = ET.SubElement(annotation, "cvTerm", {"qualifier": term.qualifier.value})
            for uri in term.resources:
                ET.SubElement(cv, "resource", {"uri": uri})

        history = node.history
        if history is not None:
            hist = ET.SubElement(annotation, "history")
            for creator in history.creators:
                attrs = {"familyName": creator.family_name, "givenName": creator.given_name}
                if creator.organisation:
                    attrs["organisation"] = creator.organisation
                ET.SubElement(hist, "creator", attrs)
            if history.created_date is not None:
                ET.SubElement(hist, "created").text = history.created_date.isoformat()
            for when in history.modified_dates:
                if when is not None:
                    ET.SubElement(hist, "modified").text = when.isoformat()
    return el


def _list_element(tag: str, item_tag: str, nodes: Iterable[SBase]) -> ET.Element:
    container = ET.Element(tag)
    for node in nodes:
        container.append(_node_element(item_tag, node))
    return container


def build_tree(result: ConversionResult) -> ET.Element:
    root = ET.Element(
        "sbml",
        {"level": str(result.model.level), "version": str(result.model.version)},
    )
    model_el = _node_element("model", result.model)
    model_el.append(_list_element("listOfSpecies", "species", result.species.values()))
    model_el.append(_list_element("listOfReactions", "reaction", result.reactions.values()))
    model_el.append(
        _list_element(
            "listOfModifierSpeciesReferences",
            "modifierSpeciesReference",
            result.species_references.values(),
        )
    )
    root.append(model_el)
    return root


def write_document(path: Path, result: ConversionResult) -> None:
    """Write the annotated nodes as an indented XML listing."""
    path.parent.mkdir(parents=True, exist_ok=True)
    tree = ET.ElementTree(build_tree(result))
    ET.indent(tree)
    tree.write(path, encoding="utf-8", xml_declaration=True)
