"""Turn raw expression text into a token sequence."""
import string
from typing import Dict, List

from primitive_calculator.common.errors import BadToken, MismatchedParens, NumberOverflow
from primitive_calculator.common.models import (
    Bracket,
    BracketKind,
    Number,
    Operator,
    OperatorKind,
    Token,
    U32_MAX,
)


# Characters skipped between tokens
SKIPPED: str = " \n\r"

OPERATOR_SYMBOLS: Dict[str, OperatorKind] = {kind.value: kind for kind in OperatorKind}


def tokenize(text: str) -> List[Token]:
    """
    Split an arithmetic expression into Number, Operator and Bracket tokens.

    Contiguous digits accumulate into one Number. Since skipped characters emit
    no token, digits separated only by spaces also accumulate ("1 2" -> 12),
    while a digit after any other token starts a new Number.

    :param str text: Arithmetic expression

    :return: Parenthesis-balanced token sequence
    :rtype: List[Token]
    :raises BadToken: On a character outside the recognized set
    :raises MismatchedParens: On an unmatched ')' or an unclosed '('
    :raises NumberOverflow: On a number literal above the unsigned 32-bit range
    """
    tokens: List[Token] = []
    # Only opening brackets are ever pushed, so the size is enough to match them
    open_brackets: List[int] = []

    for position, char in enumerate(text):
        if char in SKIPPED:
            continue

        if char in string.digits:
            digit = ord(char) - ord("0")
            if tokens and isinstance(tokens[-1], Number):
                value = tokens[-1].value * 10 + digit
                if value > U32_MAX:
                    raise NumberOverflow(position)
                tokens[-1] = Number(value=value)
            else:
                tokens.append(Number(value=digit))
        elif char == BracketKind.OPEN.value:
            tokens.append(Bracket(which=BracketKind.OPEN))
            open_brackets.append(position)
        elif char == BracketKind.CLOSE.value:
            if not open_brackets:
                raise MismatchedParens(position)
            open_brackets.pop()
            tokens.append(Bracket(which=BracketKind.CLOSE))
        elif char in OPERATOR_SYMBOLS:
            tokens.append(Operator(kind=OPERATOR_SYMBOLS[char]))
        else:
            raise BadToken(char, position)

    if open_brackets:
        raise MismatchedParens()

    return tokens
