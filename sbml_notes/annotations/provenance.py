from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Optional

from ..constants import SBO_TERM_MAX
from ..document import SBase
from ..notes_fmt import provenance_fragment


def add_provenance_annotation(
    node: SBase,
    *,
    reactome_version: int,
    toolkit_version: str,
    when: Optional[datetime] = None,
) -> ET.Element:
    """Record database and toolkit versions; called once per document."""
    fragment = ET.fromstring(provenance_fragment(reactome_version, toolkit_version, when))
    node.append_notes(fragment)
    return fragment


def add_sbo_term(node: SBase, term: int) -> bool:
    if 0 <= term <= SBO_TERM_MAX:
        node.set_sbo_term(term)
        return True
    return False
