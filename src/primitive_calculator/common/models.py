"""Token models produced by the tokenizer and consumed by the converter and evaluator."""
from enum import Enum
from typing import Dict, Iterable, Union

from pydantic import BaseModel, ConfigDict, Field


# Largest value a Number token can hold (unsigned 32-bit range)
U32_MAX: int = 2**32 - 1


class OperatorKind(str, Enum):
    """Binary operators, valued by their source symbol."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    EXP = "^"


class BracketKind(str, Enum):
    """Opening or closing parenthesis."""

    OPEN = "("
    CLOSE = ")"


# Explicit precedence table, higher binds tighter
PRECEDENCE: Dict[OperatorKind, int] = {
    OperatorKind.ADD: 1,
    OperatorKind.SUB: 1,
    OperatorKind.MUL: 2,
    OperatorKind.DIV: 2,
    OperatorKind.EXP: 3,
}


def precedence(kind: OperatorKind) -> int:
    """
    Return the precedence rank of an operator kind.

    :param OperatorKind kind: Operator kind

    :return: Precedence rank, higher binds tighter
    :rtype: int
    """
    return PRECEDENCE[kind]


class Number(BaseModel):
    """Non-negative integer literal."""

    # Tokens are immutable once produced
    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, le=U32_MAX, description="Accumulated decimal value")

    def __str__(self) -> str:
        return str(self.value)


class Operator(BaseModel):
    """Binary operator."""

    model_config = ConfigDict(frozen=True)

    kind: OperatorKind = Field(..., description="Operator kind")

    @property
    def precedence(self) -> int:
        return precedence(self.kind)

    def __str__(self) -> str:
        return self.kind.value


class Bracket(BaseModel):
    """Opening or closing parenthesis."""

    model_config = ConfigDict(frozen=True)

    which: BracketKind = Field(..., description="Bracket side")

    @property
    def is_open(self) -> bool:
        return self.which is BracketKind.OPEN

    def __str__(self) -> str:
        return self.which.value


Token = Union[Number, Operator, Bracket]


def format_tokens(tokens: Iterable[Token]) -> str:
    """
    Render a token sequence as space-separated source symbols.

    Examples:
        - [Number(1), Number(2), Operator(ADD)] -> "1 2 +"

    :param Iterable[Token] tokens: Token sequence

    :return: Space-separated symbols
    :rtype: str
    """
    return " ".join(str(token) for token in tokens)
