"""Pydantic model for the outcome of evaluating one input line."""
import math
from typing import Optional

from pydantic import BaseModel, Field


def format_number(value: float) -> str:
    """
    Format an evaluation result for display.

    Integral values drop the trailing ".0"; non-finite values render as inf, -inf or NaN.

    :param float value: Evaluation result

    :return: Display text
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        return str(int(value))
    return repr(value)


class OperationResult(BaseModel):
    """Represents the outcome of running the pipeline on a single line of input."""

    expression: str = Field(..., description="Original input line")
    line_number: int = Field(default=1, ge=1, description="Line number in the input")
    result: Optional[float] = Field(default=None, description="Evaluated value, if any")
    error: Optional[str] = Field(default=None, description="Error message if the line failed")
    postfix: Optional[str] = Field(default=None, description="Postfix form of the expression")

    def render(self) -> Optional[str]:
        """
        Return the text to display for this line, or None when there is nothing to show.

        :return: Error text, formatted result, or None
        :rtype: Optional[str]
        """
        if self.error is not None:
            return f"ERROR: {self.error}"
        if self.result is None:
            return None
        return format_number(self.result)
