"""
Minimum cover selection with Petrick's method.

The covering requirement is a product (AND over required minterms) of sums
(OR over the prime implicants covering that minterm). Multiplying it out
gives a sum of products; every product is a set of implicant indices that
covers the whole function, and the smallest one is a minimum cover.
"""

import logging
from typing import Iterable, Sequence

from .errors import CoverError
from .term import Term

log = logging.getLogger(__name__)

Product = frozenset[int]


def build_coverage_chart(
    prime_implicants: Sequence[Term],
    minterms: Iterable[Term],
) -> dict[int, set[int]]:
    """
    Map every required source id to the indices of the implicants covering it.

    Raises:
        CoverError: if some required id is covered by no implicant.
    """
    chart = {}
    for minterm in minterms:
        for source in minterm.sources:
            chart.setdefault(source, set())

    for index, implicant in enumerate(prime_implicants):
        for source in implicant.sources:
            if source in chart:
                chart[source].add(index)

    for source in sorted(chart):
        log.debug("minterm %d covered by implicants %s", source, sorted(chart[source]))
        if not chart[source]:
            raise CoverError(f"minterm {source} is not covered by any prime implicant")

    return chart


def multiply(products: set[Product], atoms: Iterable[int]) -> set[Product]:
    """
    Multiply a sum of products by a sum of single implicants.

    An empty ``products`` is the start of the expansion and yields one
    product per atom. No absorption is applied to the result.
    """
    if not products:
        return {frozenset((atom,)) for atom in atoms}
    return {product | {atom} for product in products for atom in atoms}


def expand_products(chart: dict[int, set[int]]) -> set[Product]:
    """Expand the product of sums in ``chart`` into a sum of products."""
    products = set()
    for source in sorted(chart):
        products = multiply(products, chart[source])
        log.debug("after minterm %d: %d products", source, len(products))
    return products


def select_minimum(products: Iterable[Product]) -> Product:
    """
    Pick a product with the fewest implicants.

    Ties are broken by the lexicographically smallest sorted index tuple.
    """
    return min(products, key=lambda product: (len(product), sorted(product)))


def find_minimum_cover(
    prime_implicants: Sequence[Term],
    minterms: Iterable[Term],
) -> list[Term]:
    """
    Select a minimum-size subset of prime implicants covering every minterm.

    Args:
        prime_implicants: Candidate implicants, usually the output of
            find_prime_implicants
        minterms: Required terms only; don't-cares must not be passed here

    Returns:
        The selected implicants in the order they appear in
        ``prime_implicants``. An empty list if there are no minterms.
    """
    prime_implicants = list(prime_implicants)
    chart = build_coverage_chart(prime_implicants, minterms)
    if not chart:
        return []

    products = expand_products(chart)
    ids = select_minimum(products)
    log.info(
        "selected %d of %d prime implicants from %d products",
        len(ids), len(prime_implicants), len(products),
    )
    return [implicant for index, implicant in enumerate(prime_implicants) if index in ids]
