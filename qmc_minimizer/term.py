"""
Boolean terms for Quine-McCluskey minimization.

A term is a positional pattern over {1, 0, *} together with the set of
original minterms and don't-cares it covers. Positions are stored least
significant first; a term rendered as a string reads most significant first.
"""

import enum
import itertools
from dataclasses import dataclass
from typing import Optional

from .errors import PatternError, TermRangeError

MAX_WIDTH = 32


class Trit(enum.Enum):
    """Value of a single term position."""

    T = "1"
    F = "0"
    S = "*"  # simplified away by a merge


_CHAR_TO_TRIT = {trit.value: trit for trit in Trit}


@dataclass(frozen=True, eq=False)
class Term:
    """
    A (possibly merged) product term.

    Two terms are equal when their zero-extended patterns match position by
    position and they cover the same sources. The hash only looks at the
    sources, so terms that differ just in padding share a bucket and
    collapse inside sets.
    """

    pattern: tuple[Trit, ...]
    sources: frozenset[int]

    @classmethod
    def from_integer(cls, n: int) -> "Term":
        """Binary-expand ``n`` into a term covering exactly ``{n}``."""
        if not 0 <= n < (1 << MAX_WIDTH):
            raise TermRangeError(
                f"{n} does not fit in an unsigned {MAX_WIDTH}-bit integer"
            )
        pattern = []
        value = n
        while value > 0:
            pattern.append(Trit.T if value & 1 else Trit.F)
            value >>= 1
        return cls(tuple(pattern), frozenset((n,)))

    @classmethod
    def from_pattern(cls, text: str) -> "Term":
        """
        Parse a pattern of '0', '1' and '*' characters, MSB first.

        Every '*' independently ranges over 0 and 1; the sources of the term
        are all integers obtained by resolving the wildcards.

        Raises:
            PatternError: on any other character, an empty pattern or a
                pattern wider than 32 positions.
        """
        for position, char in enumerate(text):
            if char not in _CHAR_TO_TRIT:
                raise PatternError(text, position)
        if not text:
            raise PatternError(text, 0, "empty pattern")
        if len(text) > MAX_WIDTH:
            raise PatternError(
                text, MAX_WIDTH,
                f"pattern {text!r} is wider than {MAX_WIDTH} positions",
            )

        pattern = tuple(_CHAR_TO_TRIT[char] for char in reversed(text))
        choices = [("0", "1") if char == "*" else (char,) for char in text]
        sources = frozenset(
            int("".join(bits), 2) for bits in itertools.product(*choices)
        )
        return cls(pattern, sources)

    @property
    def ones(self) -> int:
        """Number of positions fixed to 1."""
        return sum(1 for trit in self.pattern if trit is Trit.T)

    @property
    def num_literals(self) -> int:
        """Number of fixed positions within the stored pattern."""
        return sum(1 for trit in self.pattern if trit is not Trit.S)

    def padded(self, length: int) -> tuple[Trit, ...]:
        """Pattern zero-extended to at least ``length`` positions."""
        missing = length - len(self.pattern)
        if missing <= 0:
            return self.pattern
        return self.pattern + (Trit.F,) * missing

    def combine(self, other: "Term") -> Optional["Term"]:
        """
        Merge two terms differing in exactly one position.

        Returns the merged term, with the differing position simplified and
        the union of both source sets, or None when the patterns differ in
        zero or more than one position.
        """
        length = max(len(self.pattern), len(other.pattern))
        left = self.padded(length)
        right = other.padded(length)

        diff = None
        for position, (val1, val2) in enumerate(zip(left, right)):
            if val1 is not val2:
                if diff is not None:
                    return None
                diff = position

        if diff is None:
            return None

        pattern = left[:diff] + (Trit.S,) + left[diff + 1:]
        return Term(pattern, self.sources | other.sources)

    def __eq__(self, other):
        if not isinstance(other, Term):
            return NotImplemented
        if self.sources != other.sources:
            return False
        length = max(len(self.pattern), len(other.pattern))
        return self.padded(length) == other.padded(length)

    def __hash__(self):
        return hash(tuple(sorted(self.sources)))

    def __str__(self):
        if not self.pattern:
            return Trit.F.value
        return "".join(trit.value for trit in reversed(self.pattern))

    def __repr__(self):
        return f"Term({str(self)!r}, sources={sorted(self.sources)})"


def term_from_integer(n: int) -> Term:
    return Term.from_integer(n)


def term_from_pattern(text: str) -> Term:
    return Term.from_pattern(text)


def combine(a: Term, b: Term) -> Optional[Term]:
    return a.combine(b)
