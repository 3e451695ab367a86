"""
Command-Line Interface for the COBOL case folder.

The tool is a filter: it reads fixed-format source from stdin (or --input)
and writes the folded source to stdout (or --output).

Usage:
    cobol-casefold < PROGRAM.cbl > program.cbl
    cobol-casefold --upper --input program.cbl --output PROGRAM.cbl
    cobol-casefold --verbose --report run.json < PROGRAM.cbl > program.cbl
"""

import argparse
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional

from cobol_casefold import __version__
from cobol_casefold.config import Config, create_default_config, merge_configs
from cobol_casefold.core.scanner import FoldCase
from cobol_casefold.exceptions import ConfigError, MalformedLineBreakError
from cobol_casefold.logging_config import setup_logging
from cobol_casefold.main import CaseFolder
from cobol_casefold.output.report import FoldReport, create_summary_report

EXIT_OK = 0
EXIT_CR_WITHOUT_LF = 1
EXIT_CONFIG_ERROR = 2

PROG = "cobol-casefold"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=(
            "Fold letter case in fixed-format COBOL source. Literals, "
            "pseudo-text, sequence numbers, comment lines, comment paragraphs "
            "and the comment area (columns 73+) are left as they are."
        ),
        epilog="Reads stdin and writes stdout unless --input/--output are given.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Fold direction
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument(
        "-l", "--lower",
        dest="fold_case",
        action="store_const",
        const=FoldCase.LOWER,
        help="Fold code to lowercase (default)",
    )
    case_group.add_argument(
        "-u", "--upper",
        dest="fold_case",
        action="store_const",
        const=FoldCase.UPPER,
        help="Fold code to uppercase",
    )

    # Input/Output
    parser.add_argument(
        "-i", "--input",
        type=Path,
        help="Source file to read (default: stdin)",
        metavar="FILE",
    )

    parser.add_argument(
        "-o", "--output",
        type=Path,
        help="File to write (default: stdout)",
        metavar="FILE",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (JSON)",
        metavar="FILE",
    )

    parser.add_argument(
        "--report",
        type=Path,
        help="Write a JSON run report to FILE",
        metavar="FILE",
    )

    # Diagnostics
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print a run summary to stderr",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress everything but errors",
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log messages to FILE",
        metavar="FILE",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def args_to_config(args: argparse.Namespace) -> Config:
    """Convert parsed arguments to Config object."""
    config = create_default_config()

    config.fold_case = args.fold_case or FoldCase.LOWER
    config.input_path = args.input
    config.output_path = args.output
    config.report_file = args.report
    config.verbose = args.verbose
    config.quiet = args.quiet
    config.log_level = args.log_level
    config.log_file = args.log_file

    # Command-line args override file config
    if args.config:
        file_config = Config.load_from_file(args.config)
        config = merge_configs(file_config, config)

    return config


def run_fold(config: Config) -> int:
    """
    Fold the configured input into the configured output.

    Returns:
        Exit code (0 for success, EXIT_CR_WITHOUT_LF on a bad line break)
    """
    folder = CaseFolder(config)
    exit_code = EXIT_OK

    with ExitStack() as stack:
        if config.input_path is not None:
            input_stream = stack.enter_context(open(config.input_path, "rb"))
        else:
            input_stream = sys.stdin.buffer
        if config.output_path is not None:
            output_stream = stack.enter_context(open(config.output_path, "wb"))
        else:
            output_stream = sys.stdout.buffer

        try:
            folder.fold_stream(input_stream, output_stream)
        except MalformedLineBreakError as e:
            print(f"{PROG}: {e}", file=sys.stderr)
            exit_code = EXIT_CR_WITHOUT_LF

    result = folder.result
    if result is not None:
        if config.verbose and not config.quiet:
            print(create_summary_report(result, config.fold_case.value), file=sys.stderr)
        if config.report_file:
            report = FoldReport(
                result=result,
                fold_case=config.fold_case.value,
                input_name=str(config.input_path or "<stdin>"),
                output_name=str(config.output_path or "<stdout>"),
                tool_version=__version__,
            )
            report.save_json(config.report_file)

    return exit_code


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    try:
        config = args_to_config(parsed)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    level = "ERROR" if config.quiet else config.log_level
    setup_logging(level=level, log_file=config.log_file, verbose=config.verbose)

    return run_fold(config)


if __name__ == "__main__":
    sys.exit(main())
