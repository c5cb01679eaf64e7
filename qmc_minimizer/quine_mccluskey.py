"""
Prime implicant generation with the Quine-McCluskey algorithm.

Terms are grouped by the number of positions fixed to 1. Each pass tries to
merge every term of group k with every term of group k + 1; the merged terms
form the groups of the next pass. Terms that never take part in a merge are
prime implicants.
"""

import logging
from typing import Iterable

from .term import Term

log = logging.getLogger(__name__)


def group_by_ones(terms: Iterable[Term]) -> dict[int, set[Term]]:
    """Partition terms into deduplicating sets keyed by their count of ones."""
    table = {}
    for term in terms:
        table.setdefault(term.ones, set()).add(term)
    return table


def find_prime_implicants(
    minterms: Iterable[Term],
    dont_cares: Iterable[Term] = (),
) -> list[Term]:
    """
    Find all prime implicants of a function.

    Args:
        minterms: Terms where the function is 1
        dont_cares: Terms where the function is unconstrained; they take
            part in merging but do not have to be covered

    Returns:
        Every term that could not be merged any further, each appearing once
        per pass it survived in. Order is not significant.
    """
    table = group_by_ones([*minterms, *dont_cares])
    prime_implicants = []

    new_implicants = True
    while new_implicants:
        new_implicants = False
        new_table = {}
        # Identities (source sets) of terms merged during this pass only; a
        # pattern input may share its sources with a term built by a merge.
        merged: set[frozenset[int]] = set()

        for key in sorted(table):
            terms1 = table[key]
            terms2 = table.get(key + 1)

            if terms2 is None:
                log.debug("for key == %d, no terms with one more 1, skip", key)
            else:
                log.debug("for key == %d, trying to combine terms...", key)
                for t1 in terms1:
                    for t2 in terms2:
                        new_term = t1.combine(t2)
                        if new_term is None:
                            log.debug("%s + %s => None", t1, t2)
                            continue
                        log.debug("%s + %s => %s", t1, t2, new_term)
                        merged.add(t1.sources)
                        merged.add(t2.sources)
                        new_table.setdefault(key, set()).add(new_term)
                        new_implicants = True

            for term in terms1:
                if term.sources not in merged:
                    prime_implicants.append(term)
                    log.debug("%s become prime implicant", term)

        table = new_table

    log.info("found %d prime implicants", len(prime_implicants))
    return prime_implicants
