"""Errors raised by the calculator pipeline."""
from typing import Optional


class CalculatorError(ValueError):
    """Base class for every recoverable pipeline error."""


class TokenizeError(CalculatorError):
    """Raised when raw text cannot be turned into a token sequence."""


class BadToken(TokenizeError):
    """An input character outside the recognized digit/operator/bracket/whitespace set."""

    def __init__(self, character: str, position: int) -> None:
        self.character = character
        self.position = position
        super().__init__(f"Unrecognized character {character!r} at position {position}")


class MismatchedParens(TokenizeError):
    """An unmatched closing parenthesis, or an opening one left unclosed at end of input."""

    def __init__(self, position: Optional[int] = None) -> None:
        self.position = position
        if position is None:
            message = "Mismatched parentheses: unclosed '('"
        else:
            message = f"Mismatched parentheses: unmatched ')' at position {position}"
        super().__init__(message)


class NumberOverflow(TokenizeError):
    """A number literal that does not fit in the unsigned 32-bit range."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Number literal too large at position {position}")


class MalformedExpression(CalculatorError):
    """A postfix sequence in which an operator lacks its two operands."""
