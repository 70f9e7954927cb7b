"""Chain the tokenizer, converter and evaluator into one pipeline."""
from typing import Iterable, List, Optional

from primitive_calculator.common.logger import logger
from primitive_calculator.common.models import Token, format_tokens
from primitive_calculator.pipeline import converter, evaluator, tokenizer


class Calculator:
    """
    Evaluate arithmetic expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - Safe, deterministic computation

    Algorithm:
        1. Tokenize characters into numbers, operators and brackets
        2. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        3. Evaluate RPN using a stack

    Each stage consumes the previous one's output, and a failing stage stops the
    pipeline for that expression.
    """

    @staticmethod
    def tokenize(text: str) -> List[Token]:
        """
        Split an arithmetic expression into tokens.

        :param str text: Arithmetic expression

        :return: Token sequence
        :rtype: List[Token]
        :raises TokenizeError: If the text contains a bad character or unbalanced parentheses
        """
        tokens = tokenizer.tokenize(text)
        logger.debug(f"🔤 Tokens: {format_tokens(tokens)}")
        return tokens

    @staticmethod
    def to_postfix(tokens: Iterable[Token]) -> List[Token]:
        """
        Convert infix tokens to postfix order.

        :param Iterable[Token] tokens: Infix token sequence

        :return: Postfix token sequence
        :rtype: List[Token]
        """
        postfix = converter.to_postfix(tokens)
        logger.debug(f"🔀 Postfix: {format_tokens(postfix)}")
        return postfix

    @staticmethod
    def evaluate(tokens: Iterable[Token]) -> Optional[float]:
        """
        Evaluate a postfix token sequence.

        :param Iterable[Token] tokens: Postfix token sequence

        :return: Computed result, or None when the expression yields no single value
        :rtype: Optional[float]
        :raises MalformedExpression: If an operator lacks operands
        """
        result = evaluator.evaluate(tokens)
        logger.debug(f"🧮 Result: {result}")
        return result

    @staticmethod
    def calculate(text: str) -> Optional[float]:
        """
        Run the full pipeline on an arithmetic expression.

        :param str text: Arithmetic expression

        :return: Computed result, or None
        :rtype: Optional[float]
        :raises CalculatorError: If any stage fails
        """
        tokens = Calculator.tokenize(text)
        postfix = Calculator.to_postfix(tokens)
        return Calculator.evaluate(postfix)
