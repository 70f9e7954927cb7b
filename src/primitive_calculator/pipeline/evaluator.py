"""Evaluate a postfix token sequence with a numeric stack."""
from typing import Callable, Dict, Iterable, List, Optional

import numpy as np

from primitive_calculator.common.errors import MalformedExpression
from primitive_calculator.common.models import Number, Operator, OperatorKind, Token


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[np.float64, np.float64], np.float64]

# numpy ufuncs keep IEEE-754 semantics: 1/0 -> inf, 0/0 -> nan, (-8)^(1/3) -> nan
OPERATIONS: Dict[OperatorKind, OperatorFn] = {
    OperatorKind.ADD: np.add,
    OperatorKind.SUB: np.subtract,
    OperatorKind.MUL: np.multiply,
    OperatorKind.DIV: np.divide,
    OperatorKind.EXP: np.power,
}


def evaluate(tokens: Iterable[Token]) -> Optional[float]:
    """
    Evaluate a postfix token sequence.

    Numbers are pushed as floats. Each operator pops its right operand, then its
    left one, and pushes the result. Bracket tokens are ignored. Division by zero
    and invalid powers follow floating-point rules instead of raising.

    :param Iterable[Token] tokens: Tokens in postfix order

    :return: The single remaining value, or None if zero or several values remain
    :rtype: Optional[float]
    :raises MalformedExpression: If an operator has fewer than two operands
    """
    stack: List[np.float64] = []

    with np.errstate(all="ignore"):
        for token in tokens:
            if isinstance(token, Number):
                stack.append(np.float64(token.value))
            elif isinstance(token, Operator):
                if len(stack) < 2:
                    raise MalformedExpression(
                        f"Operator {token} needs two operands, found {len(stack)}"
                    )
                right: np.float64 = stack.pop()
                left: np.float64 = stack.pop()
                stack.append(OPERATIONS[token.kind](left, right))

    if len(stack) != 1:
        return None

    return float(stack[0])
