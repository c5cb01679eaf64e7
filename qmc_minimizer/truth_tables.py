"""
Truth table input and display.

A truth table is written as one character per input value, input 0 first:
- '1': the function is ON (minterm)
- '0': the function is OFF
- '-' or 'x': don't care

For example "1011011111------" is segment 'a' of a BCD to 7-segment decoder:
ON for 0,2,3,5,6,7,8,9 with inputs 10-15 unconstrained.
"""

from .errors import PatternError

_DONT_CARE_CHARS = "-xX"


def parse_truth_table(table: str) -> tuple[list[int], list[int]]:
    """
    Split a truth table string into minterms and don't-cares.

    Returns:
        Tuple of (minterms, dont_cares), both in ascending order
    """
    minterms = []
    dont_cares = []
    for i, char in enumerate(table):
        if char == "1":
            minterms.append(i)
        elif char in _DONT_CARE_CHARS:
            dont_cares.append(i)
        elif char != "0":
            raise PatternError(table, i)
    return minterms, dont_cares


def width_for(values) -> int:
    """Smallest number of bits holding every value (at least 1)."""
    return max((v.bit_length() for v in values), default=0) or 1


def value_to_bits(value: int, width: int) -> str:
    """Render an input value as a ``width``-bit string, MSB first."""
    return format(value, f"0{width}b")


def print_truth_table(result):
    """Print expected vs. covered output for every input of a result."""
    from .verify import evaluate_sop

    minterms = set(result.minterms)
    dont_cares = set(result.dont_cares)
    width = result.width
    header = "Input".rjust(max(width, 5))

    print("Truth Table Verification")
    print("=" * 40)
    print(f"{'Value':>6} | {header} | Expected | Actual | Match")
    print("-" * 40)

    all_match = True
    for value in range(1 << width):
        if value in minterms:
            expected = "1"
        elif value in dont_cares:
            expected = "-"
        else:
            expected = "0"
        actual = "1" if evaluate_sop(result.implicants, value) else "0"
        match = expected in ("-", actual)
        all_match = all_match and match

        bits = value_to_bits(value, width).rjust(max(width, 5))
        print(f"{value:>6} | {bits} | {expected:>8} | {actual:>6} | {'.' if match else 'X'}")

    print("-" * 40)
    print(f"All correct: {all_match}")
    return all_match
