"""Line-by-line calculator session."""
from typing import Iterable, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from primitive_calculator.common.errors import CalculatorError
from primitive_calculator.common.logger import logger
from primitive_calculator.common.models import format_tokens
from primitive_calculator.common.operations import OperationResult
from primitive_calculator.pipeline.calculator import Calculator


class CalculatorSession(BaseModel):
    """
    Feed input lines through the calculator pipeline and write what each one yields.

    For every line:
        - a tokenize error is written and the line is skipped
        - a computed value is written
        - an expression without a single result writes nothing
    """

    model_config = ConfigDict(frozen=True)

    show_postfix: bool = Field(default=False, description="Write the postfix form before each result")

    def process_line(self, line: str, line_number: int = 1) -> OperationResult:
        """
        Run the pipeline on one line and capture its outcome.

        :param str line: Raw input line
        :param int line_number: Line number in the input

        :return: Outcome holding either the result or the error message
        :rtype: OperationResult
        """
        expression = line.strip()
        postfix: Optional[str] = None

        try:
            tokens = Calculator.tokenize(line)
            postfix_tokens = Calculator.to_postfix(tokens)
            postfix = format_tokens(postfix_tokens)
            result = Calculator.evaluate(postfix_tokens)
        except CalculatorError as exc:
            logger.info(f"❌ Line {line_number} failed: {exc} ({expression!r})")
            return OperationResult(
                expression=expression, line_number=line_number, error=str(exc), postfix=postfix
            )

        if result is None:
            logger.info(f"🤷 Line {line_number} produced no result: {expression!r}")
        return OperationResult(
            expression=expression, line_number=line_number, result=result, postfix=postfix
        )

    def run(self, lines: Iterable[str], out: TextIO) -> int:
        """
        Process every line and write the rendered outcome to the output stream.

        Output is flushed after each line so results show up while input is still being read.

        :param Iterable[str] lines: Input lines, e.g. an open text stream
        :param TextIO out: Stream receiving results and errors

        :return: Number of lines processed
        :rtype: int
        """
        count = 0
        for line_number, line in enumerate(lines, start=1):
            outcome = self.process_line(line, line_number)
            count += 1

            if self.show_postfix and outcome.postfix:
                out.write(f"{outcome.postfix}\n")

            text = outcome.render()
            if text is not None:
                out.write(f"{text}\n")
            out.flush()

        logger.info(f"✅ Processed {count} lines")
        return count
