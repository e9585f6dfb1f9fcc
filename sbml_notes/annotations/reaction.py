from __future__ import annotations

from ..constants import REACTOME_URI
from ..document import Qualifier, SBase
from ..model import Reaction


def add_reaction_cv_terms(node: SBase, reaction: Reaction) -> None:
    node.add_cv_term(Qualifier.BQB_IS, [REACTOME_URI + reaction.st_id])
    node.add_cv_term(Qualifier.BQB_IS, reaction.go_terms)
    node.add_cv_term(Qualifier.BQB_IS, reaction.ec_numbers)
    node.add_cv_term(Qualifier.BQB_IS_DESCRIBED_BY, reaction.literature_urls)
    node.add_cv_term(Qualifier.BQB_OCCURS_IN, reaction.diseases)
    node.add_cv_term(Qualifier.BQM_HAS_INSTANCE, reaction.cross_references)
