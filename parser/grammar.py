# parser/grammar.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# LALR(1) grammar and parser for propositional formulas using SLY

"""Propositional formula grammar implementation using SLY parser generator.

This module defines the grammar rules and parsing logic for propositional
formulas. The grammar is stratified with one nonterminal per precedence level,
so precedence and associativity follow from the rules themselves:

    equiv       := equiv "<->" implies | implies
    implies     := implies "->" disjunction | disjunction
    disjunction := disjunction "|" conjunction | conjunction
    conjunction := conjunction "&" negation | negation
    negation    := "~" negation | primary
    primary     := ID | "(" equiv ")"

Operator Precedence (tightest to loosest):
- NOT ('~'): prefix, right-associative
- AND ('&'): left-associative
- OR ('|'): left-associative
- IMPLIES ('->'): left-associative
- EQUIV ('<->'): left-associative

A parenthesized group re-enters at the loosest level, so parentheses fully
override precedence. LALR parsing keeps its own explicit stack. After parsing,
the nesting of parentheses and negations is checked against a bound; long
chains of binary connectives are never limited.
"""

from typing import Iterable
from sly import Parser
from .lexer import FormulaLexer, tokenize
from .ast_nodes import Expr, Var, Not, And, Or, Implies, Equiv, tree_height
from .exceptions import (
    ParseError,
    UnexpectedTokenError,
    UnexpectedEndError,
    MissingParenthesisError,
    NestingTooDeepError,
)
from utils.logger import get_logger

DEFAULT_MAX_DEPTH = 200

# Tokens after which the formula so far is a complete operand
_OPERAND_END = {"ID", "RPAREN"}


def nesting_depth(tokens: Iterable) -> int:
    """Return how deeply the operands of a scanned formula are enclosed.

    Each open parenthesis around an operand adds one level, and so does each
    prefix negation applied to it (including a negation applied to a whole
    group). Binary connectives add nothing, so ``A | B | ... | Z`` is as flat
    as ``A``.

    Args:
        tokens: Scanned tokens of a well-formed formula

    Returns:
        Largest nesting level of any variable; 0 for a bare variable
    """
    deepest = level = pending = 0
    enclosing = []
    for token in tokens:
        if token.type == "NOT":
            pending += 1
        elif token.type == "LPAREN":
            enclosing.append(pending + 1)
            level += pending + 1
            pending = 0
        elif token.type == "RPAREN":
            level -= enclosing.pop()
        elif token.type == "ID":
            deepest = max(deepest, level + pending)
            pending = 0
    return deepest


class _FormulaParser(Parser):
    """SLY-based LALR(1) parser for propositional formulas.

    Attributes:
        tokens: Token types from FormulaLexer
        max_depth: Largest nesting depth accepted (see nesting_depth)
    """

    tokens = FormulaLexer.tokens

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH):
        super().__init__()
        self.max_depth = max_depth
        self._scanned = []

    @_("equiv")
    def formula(self, p) -> Expr:
        """Start rule: complete formula is a single biconditional level."""
        return p.equiv

    @_("equiv EQUIV implies")
    def equiv(self, p) -> Expr:
        return Equiv(p.equiv, p.implies)

    @_("implies")
    def equiv(self, p) -> Expr:
        return p.implies

    @_("implies IMPLIES disjunction")
    def implies(self, p) -> Expr:
        return Implies(p.implies, p.disjunction)

    @_("disjunction")
    def implies(self, p) -> Expr:
        return p.disjunction

    @_("disjunction OR conjunction")
    def disjunction(self, p) -> Expr:
        return Or(p.disjunction, p.conjunction)

    @_("conjunction")
    def disjunction(self, p) -> Expr:
        return p.conjunction

    @_("conjunction AND negation")
    def conjunction(self, p) -> Expr:
        return And(p.conjunction, p.negation)

    @_("negation")
    def conjunction(self, p) -> Expr:
        return p.negation

    @_("NOT negation")
    def negation(self, p) -> Expr:
        """Prefix negation; recursion makes it right-associative."""
        return Not(p.negation)

    @_("primary")
    def negation(self, p) -> Expr:
        return p.primary

    @_("ID")
    def primary(self, p) -> Expr:
        """Identifier as propositional variable."""
        return Var(p.ID)

    @_("LPAREN equiv RPAREN")
    def primary(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.equiv

    def parse(self, text: str) -> Expr:
        """Parse formula text into AST.

        Args:
            text: Formula string to parse

        Returns:
            Root AST node representing the parsed formula

        Raises:
            LexError: If the text contains a character no token starts with
            ParseError: If the token stream is not a well-formed formula
        """
        logger = get_logger()
        logger.debug(f"Parsing formula: {text}")

        self._scanned = tokenize(text)
        ast_result = super().parse(iter(self._scanned))

        if ast_result is None:
            raise ParseError("Failed to parse formula (syntax error).")

        depth = nesting_depth(self._scanned)
        if depth > self.max_depth:
            raise NestingTooDeepError(depth, self.max_depth)

        logger.debug(
            f"Successfully parsed formula into {type(ast_result).__name__} "
            f"of height {tree_height(ast_result)}, nesting depth {depth}"
        )
        return ast_result

    def error(self, token):
        """Handle syntax errors during parsing.

        Called automatically by SLY when encountering tokens that don't
        match any grammar rule. At end of input the scanned tokens tell an
        unclosed group apart from a dangling operator.

        Args:
            token: Problematic token or None for end of input

        Raises:
            ParseError: Always raises the subclass matching the failure
        """
        if token is not None:
            raise UnexpectedTokenError(token)

        if not self._scanned:
            raise UnexpectedEndError("Input formula is empty.")

        open_count = sum(
            1 if t.type == "LPAREN" else -1
            for t in self._scanned
            if t.type in ("LPAREN", "RPAREN")
        )
        if open_count > 0 and self._scanned[-1].type in _OPERAND_END:
            raise MissingParenthesisError(open_count)

        last = self._scanned[-1]
        raise UnexpectedEndError(
            f"Unexpected end of input: expected an operand after '{last.value}'"
        )
