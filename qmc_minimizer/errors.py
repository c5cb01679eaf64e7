"""Exceptions raised by the minimizer."""


class MinimizerError(ValueError):
    """Base class for all minimizer errors."""


class PatternError(MinimizerError):
    """A term pattern or truth table contains an invalid character."""

    def __init__(self, text: str, position: int, message: str = None):
        self.text = text
        self.position = position
        if message is None:
            message = (
                f"invalid character {text[position]!r} at position {position} "
                f"in {text!r}"
            )
        super().__init__(message)


class TermRangeError(MinimizerError):
    """An integer does not fit in the supported 32-bit domain."""


class CoverError(MinimizerError):
    """A required minterm is not covered by any prime implicant."""
