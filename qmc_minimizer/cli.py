"""Command-line interface for Quine-McCluskey / Petrick minimization."""

import argparse
import logging
import sys

from .errors import MinimizerError
from .export import default_var_names, to_c_code, to_equations, to_patterns, to_verilog
from .solver import METHODS, Minimizer
from .term import MAX_WIDTH
from .truth_tables import parse_truth_table, print_truth_table
from .verify import verify_result

log = logging.getLogger(__name__)

# Exhaustive verification walks every input value.
VERIFY_MAX_WIDTH = 16


def init_logger(level: int) -> logging.Logger:
    """Send package log records at ``level`` and above to stderr."""
    logger = logging.getLogger("qmc_minimizer")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False
    return logger


def verbosity_level(verbose: int, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qmc-minimize",
        description="Minimize a boolean function with Quine-McCluskey and Petrick's method",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  qmc-minimize -m 4 8 10 11 12 15 -d 9 14      Minterms with don't-cares
  qmc-minimize -p 1*0 011                      Terms given as patterns
  qmc-minimize -t 1011011111------             Truth table, '-' = don't care
  qmc-minimize -m 1 2 9 -w 4 --format verilog  Output as Verilog module
  qmc-minimize -m 1 2 9 --method maxsat        Cover with MaxSAT instead
        """,
    )

    parser.add_argument(
        "--minterms", "-m",
        type=int,
        nargs="+",
        default=[],
        metavar="N",
        help="Inputs where the function is 1",
    )
    parser.add_argument(
        "--dont-cares", "-d",
        type=int,
        nargs="+",
        default=[],
        metavar="N",
        help="Inputs where the function is unconstrained",
    )
    parser.add_argument(
        "--patterns", "-p",
        nargs="+",
        default=[],
        metavar="PATTERN",
        help="Minterms as '0'/'1'/'*' patterns, MSB first",
    )
    parser.add_argument(
        "--dont-care-patterns",
        nargs="+",
        default=[],
        metavar="PATTERN",
        help="Don't-cares as '0'/'1'/'*' patterns, MSB first",
    )
    parser.add_argument(
        "--truth-table", "-t",
        metavar="TABLE",
        help="Truth table string, input 0 first: '1' on, '0' off, '-' don't care",
    )
    parser.add_argument(
        "--width", "-w",
        type=int,
        help="Number of inputs (default: smallest width holding every input)",
    )
    parser.add_argument(
        "--method",
        choices=METHODS,
        default="petrick",
        help="Cover selection backend (default: petrick)",
    )
    parser.add_argument(
        "--format", "-f",
        choices=["text", "equations", "patterns", "verilog", "c"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--vars",
        help="Comma-separated input names, MSB first (default: A, B, C, ...)",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Print a truth table comparing the cover against the input",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="count",
        default=0,
        help="Verbose output (-vv for every merge attempt)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only log errors",
    )
    return parser


def validate_args(parser: argparse.ArgumentParser, args: argparse.Namespace):
    """Reject argument combinations the minimizer cannot handle."""
    has_terms = args.minterms or args.dont_cares or args.patterns or args.dont_care_patterns
    if args.truth_table is not None and has_terms:
        parser.error("--truth-table cannot be combined with explicit terms")
    if args.truth_table is None and not (args.minterms or args.patterns):
        parser.error("no minterms given (use --minterms, --patterns or --truth-table)")

    for n in args.minterms + args.dont_cares:
        if not 0 <= n < (1 << MAX_WIDTH):
            parser.error(f"input {n} does not fit in {MAX_WIDTH} bits")

    if args.width is not None and not 1 <= args.width <= MAX_WIDTH:
        parser.error(f"--width must be between 1 and {MAX_WIDTH}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    validate_args(parser, args)

    init_logger(verbosity_level(args.verbose, args.quiet))

    try:
        if args.truth_table is not None:
            minterms, dont_cares = parse_truth_table(args.truth_table)
            if args.width is None:
                args.width = max((len(args.truth_table) - 1).bit_length(), 1)
        else:
            minterms = [*args.minterms, *args.patterns]
            dont_cares = [*args.dont_cares, *args.dont_care_patterns]

        minimizer = Minimizer(minterms, dont_cares, width=args.width)

        if args.vars:
            var_names = [name.strip() for name in args.vars.split(",")]
            if len(var_names) != minimizer.width:
                parser.error(f"--vars needs {minimizer.width} names, got {len(var_names)}")
        else:
            var_names = default_var_names(minimizer.width)

        result = minimizer.solve(args.method)

        if args.format == "verilog":
            print(to_verilog(result, var_names=var_names))
        elif args.format == "c":
            print(to_c_code(result, var_names=var_names))
        elif args.format == "patterns":
            print(to_patterns(result))
        elif args.format == "equations":
            print(to_equations(result, var_names))
        else:
            print("Quine-McCluskey Minimizer")
            print("=" * 40)
            print(to_equations(result, var_names))

        if result.width <= VERIFY_MAX_WIDTH:
            correct, errors = verify_result(result)
            if not correct:
                for err in errors:
                    print(f"Verification error: {err}", file=sys.stderr)
                return 1
        else:
            log.info("skipping verification for %d inputs", result.width)

        if args.check and result.width <= VERIFY_MAX_WIDTH:
            print()
            print_truth_table(result)

        return 0

    except MinimizerError as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
