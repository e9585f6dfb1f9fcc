from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable, Optional

from .constants import (
    CLOSE_NOTES,
    NOTES_SEPARATOR,
    OPEN_NOTES,
    PROVENANCE_DATE_FORMAT,
    PROVENANCE_TEMPLATE,
)

# C0/C1 controls, DEL, and code points XML 1.0 cannot carry at all.
CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\ud800-\udfff\ufffe\uffff]+")
AMPERSAND_RE = re.compile(r"&+")
TAG_RE = re.compile(r"</*[a-zA-Z][^>]*>")
NEWLINES_RE = re.compile(r"\n+")

REVERSIBLE_ARROW = "<->"
INTERCONVERSION = "<>"
CDATA_END = "]]>"


def sanitize(text: str, *, strict: bool = True) -> str:
    """Make free text safe to embed inside the XHTML notes paragraph.

    The stages run in a fixed order: the two arrow spellings must be rewritten
    before tag stripping, otherwise `<->` would be eaten as a tag. Applying the
    function twice gives the same result as applying it once.
    """
    out = CONTROL_RE.sub(" ", str(text))
    out = AMPERSAND_RE.sub(" and " if strict else "  ", out)
    out = out.replace(REVERSIBLE_ARROW, " to ").replace(INTERCONVERSION, " interconverts to ")
    out = TAG_RE.sub(" ", out)
    out = out.replace("<", " ")
    out = out.replace(CDATA_END, "]] >")
    out = NEWLINES_RE.sub("  ", out)
    return out


def join_segments(segments: Iterable[str]) -> str:
    return NOTES_SEPARATOR.join(segments)


def notes_envelope(body: str) -> str:
    """Wrap already-sanitized text in the `<notes><p xmlns=...>` envelope."""
    return OPEN_NOTES + body + CLOSE_NOTES


def provenance_fragment(
    reactome_version: int,
    toolkit_version: str,
    when: Optional[datetime] = None,
) -> str:
    # Inputs are system controlled; no sanitizing.
    stamp = (when or datetime.now()).strftime(PROVENANCE_DATE_FORMAT)
    return PROVENANCE_TEMPLATE.format(
        version=reactome_version, date=stamp, toolkit=toolkit_version
    )
