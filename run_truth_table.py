#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Command-line interface printing truth tables and canonical normal forms

import sys
import argparse
from pathlib import Path
from typing import List, Optional

from logic import (
    ASCII_SYMBOLS,
    UNICODE_SYMBOLS,
    DEFAULT_MAX_VARIABLES,
    PipelineResult,
    SymbolSet,
    TooManyVariablesError,
    run_pipeline,
)
from logic.render import format_formula, render_table
from parser import DEFAULT_MAX_DEPTH, LexError, ParseError, parse
from utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_LEX_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_TOO_MANY_VARIABLES = 3
EXIT_INPUT_ERROR = 4


def read_formula_file(filepath: Path) -> str:
    """Read a formula from file.

    Args:
        filepath: Path to the formula file

    Returns:
        Formula text with surrounding whitespace removed

    Raises:
        FileNotFoundError: If formula file doesn't exist
        ValueError: If formula file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            content = f.read().strip()
    except FileNotFoundError:
        raise FileNotFoundError(f"Formula file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading formula file: {e}")

    if not content:
        raise ValueError("Formula file is empty")

    return content


def print_result(result: PipelineResult, symbols: SymbolSet) -> None:
    """Print the truth table followed by both normal forms.

    Args:
        result: Completed pipeline result
        symbols: Symbol set used for the header and the normal forms
    """
    header = format_formula(result.source, symbols)
    print(render_table(result.table, header=header))
    print()
    print(f"DNF: {result.dnf.render(symbols)}")
    print(f"CNF: {result.cnf.render(symbols)}")


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Truth tables and canonical DNF/CNF for propositional formulas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py "(A & B) -> C"
  python run_truth_table.py "A <-> ~B" --ascii
  python run_truth_table.py -f formula.txt --debug
  python run_truth_table.py "A | B & C" --validate-only

Accepted symbols:
  not: ~ ! ¬    and: & ∧    or: | ∨    implies: -> =>    iff: <-> <=>
        """,
    )

    parser.add_argument("formula", nargs="?", help="Formula to evaluate")

    parser.add_argument(
        "-f", "--file", type=Path, help="Read the formula from a file instead"
    )

    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Print operators as ASCII (~ & |) instead of logical glyphs",
    )

    parser.add_argument(
        "--max-variables",
        type=int,
        default=DEFAULT_MAX_VARIABLES,
        help=f"Largest variable count to enumerate (default: {DEFAULT_MAX_VARIABLES})",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Largest formula nesting depth (default: {DEFAULT_MAX_DEPTH})",
    )

    parser.add_argument(
        "--validate-only",
        action="store_true",
        help="Only check that the formula is well-formed",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the truth-table application.

    Args:
        argv: Command line arguments; sys.argv[1:] when omitted

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.file is not None:
            formula = read_formula_file(args.file)
        elif args.formula is not None:
            formula = args.formula
        else:
            logger.error("No formula given; pass one as an argument or with --file")
            return EXIT_INPUT_ERROR

        logger.info(f"📋 Formula loaded: {formula}")

        if args.validate_only:
            parse(formula, max_depth=args.max_depth)
            logger.validation_passed(formula)
            print("Formula is well-formed")
            return EXIT_OK

        result = run_pipeline(
            formula, max_variables=args.max_variables, max_depth=args.max_depth
        )
        print_result(result, ASCII_SYMBOLS if args.ascii else UNICODE_SYMBOLS)
        return EXIT_OK

    except LexError as e:
        logger.error(f"Formula scanning error: {e}")
        return EXIT_LEX_ERROR

    except ParseError as e:
        logger.error(f"Formula parsing error: {e}")
        return EXIT_PARSE_ERROR

    except TooManyVariablesError as e:
        logger.error(f"Truth table too large: {e}")
        return EXIT_TOO_MANY_VARIABLES

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Formula file error: {e}")
        return EXIT_INPUT_ERROR


if __name__ == "__main__":
    sys.exit(main())
