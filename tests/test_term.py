import dataclasses

import pytest

from qmc_minimizer import PatternError, Term, TermRangeError, Trit, combine
from qmc_minimizer.export import format_term

T, F, S = Trit.T, Trit.F, Trit.S


def weight(term):
    return sum(1 << i for i, trit in enumerate(term.pattern) if trit is T)


class TestFromInteger:
    def test_binary_expansion(self):
        term = Term.from_integer(14)
        assert term.pattern == (F, T, T, T)
        assert term.ones == 3
        assert term.sources == frozenset({14})

    def test_zero_has_empty_pattern(self):
        term = Term.from_integer(0)
        assert term.pattern == ()
        assert term.ones == 0
        assert str(term) == "0"

    @pytest.mark.parametrize("n", [0, 1, 5, 255, 1023, 2 ** 31, 2 ** 32 - 1])
    def test_true_positions_sum_to_value(self, n):
        assert weight(Term.from_integer(n)) == n

    @pytest.mark.parametrize("n", [-1, 2 ** 32])
    def test_out_of_range(self, n):
        with pytest.raises(TermRangeError):
            Term.from_integer(n)


class TestFromPattern:
    def test_wildcard_sources(self):
        term = Term.from_pattern("1*0")
        assert term.pattern == (F, S, T)
        assert term.sources == frozenset({4, 6})

    def test_all_wildcards(self):
        assert Term.from_pattern("***").sources == frozenset(range(8))

    def test_no_wildcards(self):
        assert Term.from_pattern("0101").sources == frozenset({5})

    def test_invalid_character(self):
        with pytest.raises(PatternError) as excinfo:
            Term.from_pattern("10a1")
        assert excinfo.value.position == 2
        assert "'a'" in str(excinfo.value)

    def test_empty_pattern(self):
        with pytest.raises(PatternError):
            Term.from_pattern("")

    def test_too_wide(self):
        with pytest.raises(PatternError):
            Term.from_pattern("0" * 33)

    def test_pattern_error_is_value_error(self):
        with pytest.raises(ValueError):
            Term.from_pattern("-")


class TestCombine:
    def test_one_difference(self):
        merged = combine(Term.from_integer(4), Term.from_integer(12))
        assert merged == Term.from_pattern("*100")
        assert merged.sources == frozenset({4, 12})
        assert str(merged) == "*100"

    def test_symmetric(self):
        a, b = Term.from_pattern("10*1"), Term.from_pattern("11*1")
        assert a.combine(b) == b.combine(a) == Term.from_pattern("1**1")

    @pytest.mark.parametrize("a, b", [(0, 3), (5, 10), (1, 14)])
    def test_two_or_more_differences(self, a, b):
        assert combine(Term.from_integer(a), Term.from_integer(b)) is None

    def test_identical_terms_do_not_merge(self):
        assert combine(Term.from_integer(5), Term.from_integer(5)) is None

    def test_simplified_position_counts_as_difference(self):
        a, b = Term.from_pattern("1*0"), Term.from_pattern("1*1")
        assert combine(a, b) == Term.from_pattern("1**")
        assert combine(Term.from_pattern("1*0"), Term.from_pattern("10*")) is None

    def test_inputs_are_left_untouched(self):
        a, b = Term.from_integer(8), Term.from_integer(9)
        combine(a, b)
        assert a == Term.from_integer(8)
        assert b.sources == frozenset({9})
        with pytest.raises(dataclasses.FrozenInstanceError):
            a.sources = frozenset()


class TestEquality:
    def test_padding_is_ignored(self):
        short, long = Term.from_integer(2), Term.from_pattern("0010")
        assert short.pattern != long.pattern
        assert short == long
        assert hash(short) == hash(long)
        assert len({short, long}) == 1

    def test_same_sources_different_pattern(self):
        assert Term((S,), frozenset({0, 1})) != Term((T,), frozenset({0, 1}))

    def test_same_pattern_different_sources(self):
        assert Term((T,), frozenset({1})) != Term((T,), frozenset({1, 3}))

    def test_not_equal_to_other_types(self):
        assert Term.from_integer(1) != 1

    @pytest.mark.parametrize("n", range(16))
    def test_render_then_parse(self, n):
        term = Term.from_integer(n)
        assert Term.from_pattern(format_term(term, 4)) == term
        assert Term.from_pattern(str(term)) == term

    def test_repr(self):
        assert repr(Term.from_pattern("1*")) == "Term('1*', sources=[2, 3])"
