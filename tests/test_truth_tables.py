import pytest

from qmc_minimizer import PatternError, minimize
from qmc_minimizer.truth_tables import parse_truth_table, print_truth_table, value_to_bits, width_for


def test_parse_bcd_segment():
    minterms, dont_cares = parse_truth_table("1011011111------")
    assert minterms == [0, 2, 3, 5, 6, 7, 8, 9]
    assert dont_cares == [10, 11, 12, 13, 14, 15]


def test_parse_x_as_dont_care():
    assert parse_truth_table("10x1") == ([0, 3], [2])


def test_parse_invalid_character():
    with pytest.raises(PatternError) as excinfo:
        parse_truth_table("10z")
    assert excinfo.value.position == 2


@pytest.mark.parametrize("values, width", [([], 1), ([0], 1), ([1], 1), ([15], 4), ([3, 16], 5)])
def test_width_for(values, width):
    assert width_for(values) == width


def test_value_to_bits():
    assert value_to_bits(5, 4) == "0101"


def test_print_truth_table(capsys):
    minterms, dont_cares = parse_truth_table("1011011111------")
    result = minimize(minterms, dont_cares)
    assert print_truth_table(result)
    out = capsys.readouterr().out
    assert "All correct: True" in out
    assert out.count(" | .") == 16
