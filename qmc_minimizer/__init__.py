"""Boolean function minimization with Quine-McCluskey and Petrick's method."""

from .errors import MinimizerError, PatternError, TermRangeError, CoverError
from .term import Term, Trit, term_from_integer, term_from_pattern, combine
from .quine_mccluskey import find_prime_implicants
from .petrick import find_minimum_cover
from .solver import Minimizer, MinimizationResult, CostBreakdown, minimize
from .export import format_term, to_equations, to_verilog, to_c_code, to_patterns
from .verify import verify_result

__all__ = [
    "MinimizerError",
    "PatternError",
    "TermRangeError",
    "CoverError",
    "Term",
    "Trit",
    "term_from_integer",
    "term_from_pattern",
    "combine",
    "find_prime_implicants",
    "find_minimum_cover",
    "Minimizer",
    "MinimizationResult",
    "CostBreakdown",
    "minimize",
    "format_term",
    "to_equations",
    "to_verilog",
    "to_c_code",
    "to_patterns",
    "verify_result",
]
__version__ = "0.1.0"
