"""
Two-level minimization pipeline.

This module ties prime implicant generation to cover selection:
1. Quine-McCluskey to find all prime implicants
2. Petrick's method for an exact minimum cover
3. MaxSAT (RC2) on the same covering problem as an independent exact backend
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from pysat.examples.rc2 import RC2
from pysat.formula import WCNF

from .errors import CoverError, MinimizerError
from .petrick import build_coverage_chart, find_minimum_cover
from .quine_mccluskey import find_prime_implicants
from .term import MAX_WIDTH, Term, Trit
from .truth_tables import width_for

log = logging.getLogger(__name__)

METHODS = ("petrick", "maxsat")

TermLike = Union[Term, int, str]


@dataclass
class CostBreakdown:
    """Gate-input cost of a sum-of-products cover."""

    and_inputs: int      # Inputs to AND gates (multi-literal terms only)
    or_inputs: int       # Inputs to the output OR gate (one per term)
    num_and_gates: int   # Number of multi-literal terms
    num_terms: int

    @property
    def total(self) -> int:
        """Total gate inputs (AND + OR)."""
        return self.and_inputs + self.or_inputs


@dataclass
class MinimizationResult:
    """Result of a two-level minimization."""

    implicants: list[Term]
    prime_implicants: list[Term]
    method: str
    width: int
    cost: int = 0
    cost_breakdown: CostBreakdown = None
    minterms: list[int] = field(default_factory=list)
    dont_cares: list[int] = field(default_factory=list)


def to_term(value: TermLike) -> Term:
    """Accept a Term, an integer or a '0'/'1'/'*' pattern."""
    if isinstance(value, Term):
        return value
    if isinstance(value, str):
        return Term.from_pattern(value)
    return Term.from_integer(value)


def literal_count(term: Term, width: int) -> int:
    """Number of literals of ``term`` when read as a ``width``-input product."""
    return sum(1 for trit in term.padded(width)[:width] if trit is not Trit.S)


class Minimizer:
    """
    Minimizes a single-output boolean function given by minterms and
    don't-cares.

    Example:
        >>> result = Minimizer([4, 8, 10, 11, 12, 15], [9, 14]).solve()
        >>> len(result.implicants)
        3
    """

    def __init__(
        self,
        minterms: Iterable[TermLike],
        dont_cares: Iterable[TermLike] = (),
        width: int = None,
    ):
        self.minterms = [to_term(m) for m in minterms]
        self.dont_cares = [to_term(d) for d in dont_cares]
        self.prime_implicants: Optional[list[Term]] = None

        values = self.minterm_values | self.dont_care_values
        needed = max(
            width_for(values),
            max((len(t.pattern) for t in self.minterms + self.dont_cares), default=1),
        )
        if width is None:
            width = needed
        elif width < needed:
            raise MinimizerError(f"width {width} cannot hold inputs needing {needed} bits")
        elif width > MAX_WIDTH:
            raise MinimizerError(f"width {width} exceeds the {MAX_WIDTH}-bit limit")
        self.width = width

    @property
    def minterm_values(self) -> set[int]:
        return set().union(*(t.sources for t in self.minterms))

    @property
    def dont_care_values(self) -> set[int]:
        return set().union(*(t.sources for t in self.dont_cares))

    def generate_prime_implicants(self) -> list[Term]:
        """Generate all prime implicants, deduplicated, in discovery order."""
        primes = find_prime_implicants(self.minterms, self.dont_cares)
        self.prime_implicants = list(dict.fromkeys(primes))
        return self.prime_implicants

    def _compute_cost_breakdown(self, selected: list[Term]) -> CostBreakdown:
        """
        Cost model (input complements are free):
        - AND gate inputs: only for terms with 2+ literals
        - OR gate inputs: one per selected term
        """
        and_inputs = 0
        num_and_gates = 0
        for term in selected:
            literals = literal_count(term, self.width)
            if literals >= 2:
                and_inputs += literals
                num_and_gates += 1

        return CostBreakdown(
            and_inputs=and_inputs,
            or_inputs=len(selected),
            num_and_gates=num_and_gates,
            num_terms=len(selected),
        )

    def _result(self, selected: list[Term], method: str) -> MinimizationResult:
        cost_breakdown = self._compute_cost_breakdown(selected)
        return MinimizationResult(
            implicants=selected,
            prime_implicants=self.prime_implicants,
            method=method,
            width=self.width,
            cost=cost_breakdown.total,
            cost_breakdown=cost_breakdown,
            minterms=sorted(self.minterm_values),
            dont_cares=sorted(self.dont_care_values - self.minterm_values),
        )

    def petrick_cover(self) -> MinimizationResult:
        """Exact minimum-cardinality cover by Petrick's method."""
        if self.prime_implicants is None:
            self.generate_prime_implicants()

        selected = find_minimum_cover(self.prime_implicants, self.minterms)
        return self._result(selected, "petrick")

    def maxsat_cover(self) -> MinimizationResult:
        """
        Minimum-cardinality cover as weighted MaxSAT.

        - Hard clauses: every required minterm is covered by a selected
          implicant
        - Soft clauses: every implicant is left out, weight 1
        """
        if self.prime_implicants is None:
            self.generate_prime_implicants()

        chart = build_coverage_chart(self.prime_implicants, self.minterms)
        if not chart:
            return self._result([], "maxsat")

        # Variable mapping: implicant index -> SAT variable (1-indexed)
        impl_vars = {i: i + 1 for i in range(len(self.prime_implicants))}

        wcnf = WCNF()
        for source in sorted(chart):
            wcnf.append([impl_vars[i] for i in sorted(chart[source])])
        for i in impl_vars:
            wcnf.append([-impl_vars[i]], weight=1)

        with RC2(wcnf) as solver:
            model = solver.compute()
            if model is None:
                raise CoverError("MaxSAT solver found no cover")
            chosen = set(lit for lit in model if lit > 0)

        selected = [
            impl for i, impl in enumerate(self.prime_implicants)
            if impl_vars[i] in chosen
        ]
        log.info("MaxSAT selected %d implicants", len(selected))
        return self._result(selected, "maxsat")

    def solve(self, method: str = "petrick") -> MinimizationResult:
        """Run the pipeline with the given cover backend."""
        if method == "petrick":
            return self.petrick_cover()
        if method == "maxsat":
            return self.maxsat_cover()
        raise ValueError(f"unknown method {method!r}, expected one of {METHODS}")


def minimize(
    minterms: Iterable[TermLike],
    dont_cares: Iterable[TermLike] = (),
    method: str = "petrick",
    width: int = None,
) -> MinimizationResult:
    """Minimize a function in one call."""
    return Minimizer(minterms, dont_cares, width=width).solve(method)
