# parser/__init__.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Formula scanning and parsing components for propositional logic

"""Propositional formula scanning and parsing.

This package turns a formula string into an immutable Abstract Syntax Tree.
The tree is the single input to every later stage of the truth-table
pipeline: variable collection, evaluation, enumeration and normal form
derivation.

Core Functions:
    tokenize: Converts a formula string into a list of tokens
    parse: Converts a formula string into an Abstract Syntax Tree

Supported Logic:
    - Propositional variables
    - Negation, conjunction, disjunction, implication, biconditional
    - ASCII spellings and their Unicode glyph synonyms

Example:
    >>> from parser import parse
    >>> ast = parse("(A & B) -> C")
    >>> str(ast)
    '((A & B) -> C)'
"""

from .exceptions import (
    FormulaError,
    LexError,
    ParseError,
    UnexpectedTokenError,
    UnexpectedEndError,
    MissingParenthesisError,
    NestingTooDeepError,
)
from .grammar import _FormulaParser, DEFAULT_MAX_DEPTH
from .lexer import tokenize
from utils.logger import get_logger


def parse(source: str, max_depth: int = DEFAULT_MAX_DEPTH):
    """Parse a formula string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation so that no state is
    carried between calls.

    Args:
        source: Formula string to parse
        max_depth: Largest nesting of parentheses and negations accepted

    Returns:
        Root AST node representing the parsed formula structure

    Raises:
        LexError: Formula contains a character that starts no token
        ParseError: Formula syntax is malformed or nested too deeply

    Example:
        >>> ast = parse("~~A")
        >>> # Returns Not node wrapping a Not node wrapping Var("A")
    """
    logger = get_logger()
    logger.debug(f"Parsing formula: {source}")

    parser = _FormulaParser(max_depth=max_depth)

    try:
        result = parser.parse(source)
        logger.debug(
            f"Formula parsed successfully into AST with type: {type(result).__name__}"
        )
        return result

    except FormulaError as exc:
        logger.debug(f"{type(exc).__name__} encountered during formula parsing")
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


__all__ = [
    "parse",
    "tokenize",
    "FormulaError",
    "LexError",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndError",
    "MissingParenthesisError",
    "NestingTooDeepError",
    "DEFAULT_MAX_DEPTH",
]

__version__ = "1.0.0"
__description__ = "Propositional formula scanning and parsing components"
