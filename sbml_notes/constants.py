# sbml_notes/constants.py
from __future__ import annotations

REACTOME_URI = "https://reactome.org/content/detail/"

XHTML_NS = "http://www.w3.org/1999/xhtml"

# Notes envelope. Downstream validators check the namespace string verbatim.
OPEN_NOTES = f'<notes><p xmlns="{XHTML_NS}">'
CLOSE_NOTES = "</p></notes>"

PROVENANCE_TEMPLATE = (
    "<annotation>"
    f'<p xmlns="{XHTML_NS}">'
    "SBML generated from Reactome version {version} on {date} using JSBML version {toolkit}."
    "</p>"
    "</annotation>"
)

# Segments are joined with this between (never before/after) entries.
NOTES_SEPARATOR = "\n"

SBML_LEVEL_DEFAULT = 3
SBML_VERSION_DEFAULT = 1
TOOLKIT_VERSION_DEFAULT = "1.5"

SBO_TERM_MAX = 9999999

# Reactome stores edit timestamps in this shape.
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
PROVENANCE_DATE_FORMAT = "%m/%d/%y %I:%M %p"

MODEL_SECTIONS: tuple[str, ...] = (
    "people",
    "entities",
    "events",
)

EVENT_KINDS: tuple[str, ...] = ("pathway", "reaction")

# Split-model filenames (loaded in deterministic order).
MODEL_PART_FILES: tuple[str, ...] = (
    "00_database.yaml",
    "10_people.yaml",
    "20_entities.yaml",
    "30_events.yaml",
)

# SBO:0000176 biochemical reaction
SBO_BIOCHEMICAL_REACTION = 176

MODEL_ID_DEFAULT = "reactome_model"
