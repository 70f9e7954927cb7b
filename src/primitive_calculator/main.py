"""
Command-line entrypoint.

This script:
- Reads arithmetic expressions, one per line, from a file, an archive or stdin
- Runs each line through the tokenizer, converter and evaluator
- Prints each result or error, and nothing for lines without a result

Reading stdin continues until the stream is closed (Ctrl-D) or interrupted (Ctrl-C).
"""

import argparse
import io
import sys
from typing import List, Literal, Optional

from pydantic import BaseModel, FilePath, ValidationError

from primitive_calculator.common.logger import configure_logging, logger
from primitive_calculator.driver.session import CalculatorSession
from primitive_calculator.driver.sources import ExpressionSource


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : Optional[FilePath]
        File or archive containing arithmetic expressions; stdin when absent.
    postfix : bool
        Print the postfix form of each expression before its result.
    log_level : Optional[LogLevel]
        Logging level override.
    """

    file_path: Optional[FilePath] = None
    postfix: bool = False
    log_level: Optional[LogLevel] = None


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments, sys.argv[1:] when None

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic expressions line by line"
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        help="File (.txt, .zip, .tar.xz, .7z) containing arithmetic expressions; reads stdin if omitted",
    )
    parser.add_argument(
        "--postfix",
        action="store_true",
        help="Print the postfix (RPN) form of each expression",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, postfix=args.postfix, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the console script.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    session = CalculatorSession(show_postfix=cli_args.postfix)

    if cli_args.file_path is not None:
        try:
            lines = ExpressionSource(path=cli_args.file_path).read_lines()
        except ValueError as exc:
            logger.error(f"📄❌ Could not read {cli_args.file_path}: {exc}")
            sys.exit(1)
        session.run(lines, sys.stdout)
        return

    # Undecodable bytes become U+FFFD so a bad line fails alone instead of ending the session
    if isinstance(sys.stdin, io.TextIOWrapper):
        sys.stdin.reconfigure(errors="replace")

    try:
        session.run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        logger.info("👋 Interrupted")


if __name__ == "__main__":
    main()
