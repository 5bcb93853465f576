"""
Command line entry point for intcalc.

This allows the calculator to be run as:
    python -m intcalc "(1+2)*3"
"""

import argparse
import logging
from logging.handlers import RotatingFileHandler
import os
import sys
from typing import List, NoReturn

from intcalc.intcalc import IntCalc
from intcalc.intcalc_error import IntCalcEvalError, IntCalcParseError, IntCalcUsageError
from intcalc.intcalc_settings import IntCalcSettings


EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_EVAL_ERROR = 3


class IntCalcArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports bad arguments as usage errors instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise IntCalcUsageError(message=message)


def create_parser() -> argparse.ArgumentParser:
    """Create the command line argument parser."""
    parser = IntCalcArgumentParser(
        prog="intcalc",
        description="Evaluate integer arithmetic expressions using +, -, *, / and parentheses",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  intcalc "1+2*3"          prints 7
  intcalc "(1+2)*3"        prints 9
  intcalc 8 - 3 - 1        prints 4
  intcalc --postfix 1+2*3  prints 1 2 3 * +

Exit status is 0 on success, 1 for usage errors, 2 for malformed expressions
and 3 for evaluation errors such as division by zero.
"""
    )
    parser.add_argument(
        'expression',
        nargs='*',
        help='Expression to evaluate (multiple words are joined with spaces)'
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        '--postfix',
        action='store_true',
        help='Print the postfix (reverse Polish) form instead of the value'
    )
    output_group.add_argument(
        '--format',
        action='store_true',
        help='Print the expression with minimal parentheses instead of the value'
    )

    parser.add_argument(
        '--settings',
        help=f'Settings file (default: {IntCalcSettings.DEFAULT_PATH})'
    )
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Override the configured log level'
    )

    return parser


def load_settings(path: str | None) -> tuple[IntCalcSettings, str | None]:
    """
    Load settings, falling back to defaults.

    Args:
        path: Explicit settings path, or None to use the default file if it exists

    Returns:
        Tuple of (settings, description of the load failure or None)
    """
    settings_path = path if path is not None else IntCalcSettings.default_path()
    if path is None and not os.path.exists(settings_path):
        return IntCalcSettings.create_default(), None

    try:
        return IntCalcSettings.load(settings_path), None

    except (OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        return IntCalcSettings.create_default(), f"Failed to load settings from {settings_path}: {e}"


def setup_logging(settings: IntCalcSettings) -> str | None:
    """
    Configure logging to stderr and, if configured, a rotating log file.

    Returns:
        Description of why the log file could not be opened, or None
    """
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    log_file_error = None
    if settings.log_dir:
        log_dir = os.path.expanduser(settings.log_dir)
        try:
            os.makedirs(log_dir, exist_ok=True)
            handlers.append(RotatingFileHandler(
                os.path.join(log_dir, "intcalc.log"),
                maxBytes=1024*1024,  # 1MB
                backupCount=5,
                encoding='utf-8'
            ))

        except OSError as e:
            log_file_error = f"Cannot write log file in {log_dir}: {e}"

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    return log_file_error


def run(args: argparse.Namespace) -> int:
    """Evaluate the requested expression and print the result."""
    logger = logging.getLogger("IntCalcMain")

    settings, settings_error = load_settings(args.settings)
    if args.log_level:
        settings.log_level = args.log_level

    log_file_error = setup_logging(settings)
    if settings_error:
        logger.warning("%s; using defaults", settings_error)

    if log_file_error:
        logger.warning("%s; logging to stderr only", log_file_error)

    if not args.expression:
        raise IntCalcUsageError(
            message="No expression supplied",
            example='intcalc "(1+2)*3"'
        )

    expression = " ".join(args.expression)
    calc = IntCalc()

    try:
        if args.postfix:
            print(calc.format_postfix(expression))

        elif args.format:
            print(calc.format_infix(expression))

        else:
            print(calc.evaluate(expression))

    except IntCalcParseError as e:
        logger.warning("Failed to parse %r: %s", expression, e.message)
        print(str(e), file=sys.stderr)
        return EXIT_PARSE_ERROR

    except IntCalcEvalError as e:
        logger.warning("Failed to evaluate %r: %s", expression, e.message)
        print(str(e), file=sys.stderr)
        return EXIT_EVAL_ERROR

    return EXIT_SUCCESS


def main(argv: List[str] | None = None) -> int:
    """Main entry point."""
    # Results may have more digits than Python converts to text by default
    sys.set_int_max_str_digits(0)

    parser = create_parser()
    try:
        args = parser.parse_args(argv)
        return run(args)

    except IntCalcUsageError as e:
        parser.print_usage(sys.stderr)
        print(str(e), file=sys.stderr)
        return EXIT_USAGE_ERROR


if __name__ == "__main__":
    sys.exit(main())
