"""
Error types for the interpreter front-end.
"""


class InterpreterError(Exception):
    """Base exception for all interpreter errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class LexError(InterpreterError):
    """
    Raised when source text cannot be scanned.

    Unrecognized characters are not errors: the lexer reports them as
    ``Illegal`` tokens and keeps going.
    """

    pass


class IntegerOverflowError(LexError):
    """
    Raised when an integer literal does not fit the configured width.

    Attributes:
        lexeme: The digit run as it appeared in the source
        bits: Width of the signed integer type literals must fit
        limit: Largest literal value accepted at that width
    """

    def __init__(self, lexeme: str, bits: int):
        self.lexeme = lexeme
        self.bits = bits
        self.limit = 2 ** (bits - 1) - 1
        super().__init__(
            f"Integer literal {lexeme} does not fit in a signed {bits}-bit integer "
            f"(max {self.limit})"
        )


class ConfigError(InterpreterError):
    """
    Raised when an explicit configuration value is invalid.

    Examples:
    - Integer width smaller than two bits
    """

    pass


def make_overflow_error(lexeme: str, bits: int) -> IntegerOverflowError:
    """
    Helper to create an IntegerOverflowError.

    Args:
        lexeme: Digit run that overflowed
        bits: Configured signed integer width

    Returns:
        IntegerOverflowError describing the literal and the limit it exceeded
    """
    return IntegerOverflowError(lexeme, bits)
