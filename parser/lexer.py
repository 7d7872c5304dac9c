# parser/lexer.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Lexical analyzer for propositional formula tokenization using SLY

"""Lexical analyzer for propositional formula strings.

This module implements tokenization of propositional formulas, breaking input
strings into tokens for parser consumption. Every connective has an ASCII
spelling and may also be written with its usual logical glyph; all spellings
of one connective produce the same token type.

Supported Tokens:
- Negation: ~, !, ¬
- Conjunction: &, ∧
- Disjunction: |, ∨
- Implication: ->, =>
- Biconditional: <->, <=>
- Grouping: (, )
- Identifiers: a letter followed by letters, digits or underscores
- Whitespace: any Unicode whitespace (including no-break spaces) is ignored
"""

from sly import Lexer
from .exceptions import LexError
from utils.logger import get_logger


class FormulaLexer(Lexer):
    """SLY-based lexer for propositional formula tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ignore_whitespace: Any other Unicode whitespace run, also skipped
    """

    # Valid token types for parser recognition
    tokens = {
        "ID",
        "NOT",
        "AND",
        "OR",
        "IMPLIES",
        "EQUIV",
        "LPAREN",
        "RPAREN",
    }

    # Whitespace characters to ignore
    ignore = " \t\r\n"
    ignore_whitespace = r"\s+"

    # Three-character biconditional is tried before the two-character implication
    EQUIV = r"<->|<=>"
    IMPLIES = r"->|=>"

    NOT = r"[~!¬]"
    AND = r"[&∧]"
    OR = r"[|∨]"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[A-Za-z][A-Za-z0-9_]*"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Called automatically when encountering characters that don't match
        any defined token patterns.

        Args:
            t: SLY token object containing error context

        Raises:
            LexError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        raise LexError(illegal_char, error_pos)


def tokenize(source: str) -> list:
    """Scan ``source`` into a list of tokens.

    Each token keeps its SLY ``type``, its source ``value`` and the character
    offset ``index`` at which it starts.

    Raises:
        LexError: On the first character that starts no token
    """
    tokens = list(FormulaLexer().tokenize(source))
    get_logger().debug(f"Scanned {len(tokens)} tokens from: {source!r}")
    return tokens
