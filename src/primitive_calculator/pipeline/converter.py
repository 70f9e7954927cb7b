"""Convert an infix token sequence into postfix (Reverse Polish) order."""
from typing import Iterable, List

from primitive_calculator.common.models import Bracket, Number, Operator, Token


def _is_open(token: Token) -> bool:
    return isinstance(token, Bracket) and token.is_open


def to_postfix(tokens: Iterable[Token]) -> List[Token]:
    """
    Reorder infix tokens into postfix order using the Shunting-yard algorithm.

    Operators wait on a stack until an operator of lower precedence, a closing
    bracket or the end of input releases them. Ties pop the stack first, so every
    operator is left-associative, exponentiation included (2^3^2 -> 2 3 ^ 2 ^).
    Bracket tokens never reach the output, and any depth of nesting is supported.

    Examples:
        - Infix: 1 + 2 * 3    -> Postfix: 1 2 3 * +
        - Infix: (1 + 2) * 3  -> Postfix: 1 2 + 3 *

    The conversion never fails: a closing bracket without a matching opening one
    is dropped, as is an opening bracket never closed.

    :param Iterable[Token] tokens: Infix token sequence

    :return: Tokens in postfix order
    :rtype: List[Token]
    """
    output: List[Token] = []
    stack: List[Token] = []

    for token in tokens:
        if isinstance(token, Number):
            output.append(token)
        elif isinstance(token, Operator):
            # Pop operators with higher or equal precedence
            while stack and isinstance(stack[-1], Operator) and stack[-1].precedence >= token.precedence:
                output.append(stack.pop())
            stack.append(token)
        elif token.is_open:
            stack.append(token)
        else:
            while stack and not _is_open(stack[-1]):
                output.append(stack.pop())
            if stack:
                # Discard the matching opening bracket
                stack.pop()

    # Remaining operators in reverse order (stack top first)
    output.extend(token for token in reversed(stack) if isinstance(token, Operator))
    return output
