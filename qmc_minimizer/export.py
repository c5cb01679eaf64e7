"""
Export minimized covers to various formats (patterns, equations, Verilog, C).
"""

from .solver import MinimizationResult
from .term import Term, Trit


def format_term(term: Term, width: int) -> str:
    """Render a term MSB first, zero-left-padded to ``width`` positions."""
    return str(term).rjust(width, Trit.F.value)


def default_var_names(width: int) -> list[str]:
    """Variable names A, B, C, ... for a ``width``-input function, MSB first."""
    if width > 26:
        return [f"x{i}" for i in reversed(range(width))]
    return [chr(ord("A") + i) for i in range(width)]


def _literals(term: Term, var_names: list[str]) -> list[tuple[str, bool]]:
    """(name, positive) pairs for the fixed positions of a term, MSB first."""
    width = len(var_names)
    literals = []
    for i, trit in enumerate(reversed(term.padded(width)[:width])):
        if trit is Trit.T:
            literals.append((var_names[i], True))
        elif trit is Trit.F:
            literals.append((var_names[i], False))
    return literals


def term_to_expr(term: Term, var_names: list[str]) -> str:
    """Convert to a Boolean expression string (product term)."""
    literals = [name if positive else f"{name}'" for name, positive in _literals(term, var_names)]
    return "".join(literals) if literals else "1"


def to_expression(result: MinimizationResult, var_names: list[str] = None) -> str:
    """Sum-of-products expression of a result, e.g. ``BC'D' + AD' + AC``."""
    if var_names is None:
        var_names = default_var_names(result.width)
    terms = [term_to_expr(impl, var_names) for impl in result.implicants]
    return " + ".join(terms) if terms else "0"


def to_patterns(result: MinimizationResult) -> str:
    """One padded pattern per selected implicant."""
    return "\n".join(format_term(impl, result.width) for impl in result.implicants)


def to_equations(result: MinimizationResult, var_names: list[str] = None) -> str:
    """
    Export minimization result as Boolean equations.

    Args:
        result: The minimization result
        var_names: Input names, MSB first

    Returns:
        Human-readable Boolean equations
    """
    if var_names is None:
        var_names = default_var_names(result.width)

    lines = []
    lines.append(f"Method: {result.method}")
    lines.append(f"Inputs: {', '.join(var_names)}")
    lines.append(f"Prime implicants: {len(result.prime_implicants)}")
    lines.append(f"Selected terms: {len(result.implicants)}")
    lines.append(f"Total gate inputs: {result.cost}")
    lines.append("")

    lines.append("Selected implicants:")
    for impl in result.implicants:
        sources = ", ".join(str(s) for s in sorted(impl.sources))
        lines.append(
            f"  {format_term(impl, result.width)}  {term_to_expr(impl, var_names):12} covers {sources}"
        )
    lines.append("")

    lines.append(f"F = {to_expression(result, var_names)}")

    return "\n".join(lines)


def impl_to_verilog(impl: Term, var_names: list[str]) -> str:
    """Convert an implicant to a Verilog expression."""
    terms = [name if positive else f"~{name}" for name, positive in _literals(impl, var_names)]

    if not terms:
        return "1'b1"
    elif len(terms) == 1:
        return terms[0]
    else:
        return "(" + " & ".join(terms) + ")"


def to_verilog(
    result: MinimizationResult,
    module_name: str = "minimized",
    var_names: list[str] = None,
) -> str:
    """
    Export minimization result to Verilog.

    Args:
        result: The minimization result
        module_name: Name for the Verilog module
        var_names: Input names, MSB first

    Returns:
        Verilog source code as string
    """
    width = result.width
    if var_names is None:
        var_names = default_var_names(width)

    lines = []
    lines.append(f"// Minimized with {result.method}: {len(result.implicants)} terms, "
                 f"{result.cost} gate inputs")
    lines.append("")
    lines.append(f"module {module_name} (")
    lines.append(f"    input  wire [{width - 1}:0] in,")
    lines.append("    output wire f")
    lines.append(");")
    lines.append("")
    lines.append("    // Input aliases")
    for i, name in enumerate(var_names):
        lines.append(f"    wire {name} = in[{width - 1 - i}];")
    lines.append("")

    terms = [impl_to_verilog(impl, var_names) for impl in result.implicants]
    expr = " | ".join(terms) if terms else "1'b0"
    lines.append(f"    assign f = {expr};")
    lines.append("")
    lines.append("endmodule")

    return "\n".join(lines)


def impl_to_c(impl: Term, var_names: list[str]) -> str:
    """Convert an implicant to a C expression."""
    terms = [name if positive else f"!{name}" for name, positive in _literals(impl, var_names)]

    if not terms:
        return "1"
    elif len(terms) == 1:
        return terms[0]
    else:
        return "(" + " && ".join(terms) + ")"


def to_c_code(
    result: MinimizationResult,
    func_name: str = "minimized",
    var_names: list[str] = None,
) -> str:
    """
    Export minimization result as a C function taking the packed input.

    Args:
        result: The minimization result
        func_name: Name for the C function
        var_names: Input names, MSB first

    Returns:
        C source code as string
    """
    width = result.width
    if var_names is None:
        var_names = default_var_names(width)

    lines = []
    lines.append("/*")
    lines.append(f" * Minimized with {result.method}: {len(result.implicants)} terms")
    lines.append(f" * F = {to_expression(result, var_names)}")
    lines.append(" */")
    lines.append("")
    lines.append("#include <stdint.h>")
    lines.append("")
    lines.append(f"int {func_name}(uint32_t in) {{")
    for i, name in enumerate(var_names):
        lines.append(f"    int {name} = (in >> {width - 1 - i}) & 1;")
    lines.append("")

    terms = [impl_to_c(impl, var_names) for impl in result.implicants]
    expr = " || ".join(terms) if terms else "0"
    lines.append(f"    return {expr};")
    lines.append("}")

    return "\n".join(lines)
