"""Test class CalculatorSession."""
import io

from pydantic import ValidationError
import pytest

from primitive_calculator.driver.session import CalculatorSession
from primitive_calculator.pipeline.calculator import Calculator


@pytest.fixture
def session() -> CalculatorSession:
    return CalculatorSession()


def test_process_line_result(session: CalculatorSession) -> None:
    """A valid line carries its result and postfix form."""
    outcome = session.process_line("1+2*3\n", 4)
    assert outcome.expression == "1+2*3"
    assert outcome.line_number == 4
    assert outcome.result == 7.0
    assert outcome.error is None
    assert outcome.postfix == "1 2 3 * +"


def test_process_line_error(session: CalculatorSession) -> None:
    """A tokenize error is captured rather than raised."""
    outcome = session.process_line("3&4")
    assert outcome.result is None
    assert "'&'" in outcome.error
    assert outcome.postfix is None


def test_process_line_no_result(session: CalculatorSession) -> None:
    """A line without a single value has neither result nor error."""
    outcome = session.process_line("(1)2")
    assert outcome.result is None
    assert outcome.error is None
    assert outcome.render() is None


def test_run_writes_results_and_errors(session: CalculatorSession) -> None:
    """Run writes one line per result or error and nothing for lines without a result."""
    lines = ["1+2*3\n", "(1+2\n", "\n", "1/0\n", "3/2\n", "3&4\n"]
    out = io.StringIO()

    count = session.run(lines, out)

    assert count == 6
    assert out.getvalue().splitlines() == [
        "7",
        "ERROR: Mismatched parentheses: unclosed '('",
        "inf",
        "1.5",
        "ERROR: Unrecognized character '&' at position 1",
    ]


def test_run_continues_after_error(session: CalculatorSession) -> None:
    """An error on one line does not stop the following ones."""
    out = io.StringIO()
    session.run(io.StringIO(")\n2^3^2\n"), out)
    assert out.getvalue().splitlines()[-1] == "64"


def test_run_with_postfix() -> None:
    """With show_postfix the postfix form precedes each result."""
    out = io.StringIO()
    CalculatorSession(show_postfix=True).run(["(1+2)*3"], out)
    assert out.getvalue().splitlines() == ["1 2 + 3 *", "9"]


def test_session_is_frozen(session: CalculatorSession) -> None:
    """Session settings cannot change once created."""
    with pytest.raises(ValidationError):
        session.show_postfix = True


def test_process_line_malformed(session: CalculatorSession) -> None:
    """A dangling operator is reported as an error with its postfix form."""
    outcome = session.process_line("2+")
    assert outcome.result is None
    assert outcome.error == "Operator + needs two operands, found 1"
    assert outcome.postfix == "2 +"
    assert outcome.render() == "ERROR: Operator + needs two operands, found 1"


@pytest.mark.parametrize("line", ["(1+2", "3&4"])
def test_process_line_tokenize_error_skips_later_stages(session: CalculatorSession, monkeypatch, line) -> None:
    """A line that fails to tokenize is never converted or evaluated."""
    def fail(_tokens):
        raise AssertionError("later stage must not run")

    monkeypatch.setattr(Calculator, "to_postfix", staticmethod(fail))
    monkeypatch.setattr(Calculator, "evaluate", staticmethod(fail))

    outcome = session.process_line(line)
    assert outcome.error is not None
    assert outcome.postfix is None
    assert outcome.result is None
