"""
Verification of minimization results.

Ensures a selected cover evaluates to 1 on every minterm and to 0 on every
input that is neither a minterm nor a don't-care.
"""

from typing import Iterable

from .solver import MinimizationResult
from .term import Term, Trit


def term_covers(term: Term, value: int) -> bool:
    """Check if ``value`` matches every fixed position of ``term``."""
    if value >> len(term.pattern):
        # Bits above the stored pattern are implicit zeros.
        return False
    for i, trit in enumerate(term.pattern):
        bit = (value >> i) & 1
        if trit is Trit.T and not bit:
            return False
        if trit is Trit.F and bit:
            return False
    return True


def evaluate_sop(terms: Iterable[Term], value: int) -> bool:
    """Evaluate a sum-of-products on a specific input (OR of AND terms)."""
    return any(term_covers(term, value) for term in terms)


def verify_result(result: MinimizationResult) -> tuple[bool, list[str]]:
    """
    Verify that a minimization result implements its function.

    Args:
        result: The minimization result to verify

    Returns:
        Tuple of (all_correct, list of error messages)
    """
    errors = []
    minterms = set(result.minterms)
    dont_cares = set(result.dont_cares)

    for value in range(1 << result.width):
        if value in dont_cares:
            continue

        actual = evaluate_sop(result.implicants, value)
        expected = value in minterms

        if actual != expected:
            errors.append(f"input {value}: expected {int(expected)}, got {int(actual)}")

    return len(errors) == 0, errors
