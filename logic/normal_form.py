# logic/normal_form.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Canonical DNF and CNF derivation from truth-table rows

"""Derives the canonical Disjunctive and Conjunctive Normal Forms of a formula.

The forms are read directly off the truth table, without any minimisation:

* DNF: one minterm per true row. Each variable appears as-is when it is true
  in the row and negated when false; the minterm is true for that row only.
* CNF: one maxterm per false row. Each variable appears negated when it is
  true in the row and as-is when false, so the row drives every literal to
  false while any other row flips at least one literal to true.

A DNF without minterms is the constant False (the formula is a
contradiction). A CNF without maxterms is the constant True (the formula is a
tautology).
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import UnboundVariableError
from .symbols import ASCII_SYMBOLS, SymbolSet
from .truth_table import Row, TruthTable


class NormalFormKind(Enum):
    """Which canonical form a NormalForm holds."""

    DNF = "DNF"
    CNF = "CNF"


@dataclass(frozen=True)
class Literal:
    """A variable or its negation inside a clause."""

    name: str
    negated: bool = False

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        try:
            value = bool(assignment[self.name])
        except KeyError:
            raise UnboundVariableError(self.name) from None
        return not value if self.negated else value

    def to_expr(self) -> ast.Expr:
        var = ast.Var(self.name)
        return ast.Not(var) if self.negated else var

    def render(self, symbols: SymbolSet = ASCII_SYMBOLS) -> str:
        return f"{symbols.not_}{self.name}" if self.negated else self.name

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class Clause:
    """Literals joined by one connective, in canonical variable order.

    Attributes:
        literals: The clause's literals
        connective: BinaryOp.AND for a minterm, BinaryOp.OR for a maxterm
    """

    literals: Tuple[Literal, ...]
    connective: ast.BinaryOp

    @property
    def is_single(self) -> bool:
        """True when the clause has one literal and needs no grouping."""
        return len(self.literals) == 1

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        values = [literal.evaluate(assignment) for literal in self.literals]
        if self.connective is ast.BinaryOp.AND:
            return all(values)
        return any(values)

    def to_expr(self) -> ast.Expr:
        """Build a left-associative tree of the clause's literals."""
        node_type = ast.BINARY_NODES[self.connective]
        expr = self.literals[0].to_expr()
        for literal in self.literals[1:]:
            expr = node_type(expr, literal.to_expr())
        return expr

    def render(self, symbols: SymbolSet = ASCII_SYMBOLS) -> str:
        joiner = symbols.and_ if self.connective is ast.BinaryOp.AND else symbols.or_
        text = joiner.join(literal.render(symbols) for literal in self.literals)
        return text if self.is_single else f"({text})"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class NormalForm:
    """A DNF or CNF as an ordered list of clauses.

    Attributes:
        kind: DNF (clauses joined by OR) or CNF (clauses joined by AND)
        clauses: Clauses in truth-table row order
    """

    kind: NormalFormKind
    clauses: Tuple[Clause, ...]

    @property
    def is_constant(self) -> bool:
        return not self.clauses

    @property
    def constant(self) -> Optional[bool]:
        """The sentinel value of an empty form, None when clauses exist."""
        if self.clauses:
            return None
        return self.kind is NormalFormKind.CNF

    @property
    def outer_connective(self) -> ast.BinaryOp:
        if self.kind is NormalFormKind.DNF:
            return ast.BinaryOp.OR
        return ast.BinaryOp.AND

    def evaluate(self, assignment: Mapping[str, bool]) -> bool:
        if self.is_constant:
            return self.constant
        values = [clause.evaluate(assignment) for clause in self.clauses]
        if self.kind is NormalFormKind.DNF:
            return any(values)
        return all(values)

    def to_expr(self) -> ast.Expr:
        """Build the form as a formula tree.

        Raises:
            ValueError: The form is a constant, which the grammar cannot express
        """
        if self.is_constant:
            raise ValueError(f"{self.kind.value} is the constant {self.constant}")

        node_type = ast.BINARY_NODES[self.outer_connective]
        expr = self.clauses[0].to_expr()
        for clause in self.clauses[1:]:
            expr = node_type(expr, clause.to_expr())
        return expr

    def render(self, symbols: SymbolSet = ASCII_SYMBOLS) -> str:
        if self.is_constant:
            return symbols.true if self.constant else symbols.false
        joiner = symbols.or_ if self.kind is NormalFormKind.DNF else symbols.and_
        return joiner.join(clause.render(symbols) for clause in self.clauses)

    def __str__(self) -> str:
        return self.render()


def _minterm(variables: Sequence[str], row: Row) -> Clause:
    literals = tuple(
        Literal(name, negated=not value) for name, value in zip(variables, row.values)
    )
    return Clause(literals, ast.BinaryOp.AND)


def _maxterm(variables: Sequence[str], row: Row) -> Clause:
    literals = tuple(
        Literal(name, negated=value) for name, value in zip(variables, row.values)
    )
    return Clause(literals, ast.BinaryOp.OR)


def derive_dnf(rows: Sequence[Row], variables: Sequence[str]) -> NormalForm:
    """Build the DNF from the rows whose result is true.

    Args:
        rows: Truth-table rows in enumeration order
        variables: Canonical variable list the rows are aligned with

    Returns:
        DNF with one minterm per true row, or the constant False
    """
    clauses = tuple(_minterm(variables, row) for row in rows if row.result)
    return NormalForm(NormalFormKind.DNF, clauses)


def derive_cnf(rows: Sequence[Row], variables: Sequence[str]) -> NormalForm:
    """Build the CNF from the rows whose result is false.

    Args:
        rows: Truth-table rows in enumeration order
        variables: Canonical variable list the rows are aligned with

    Returns:
        CNF with one maxterm per false row, or the constant True
    """
    clauses = tuple(_maxterm(variables, row) for row in rows if not row.result)
    return NormalForm(NormalFormKind.CNF, clauses)


def derive_normal_forms(table: TruthTable) -> Tuple[NormalForm, NormalForm]:
    """Derive both canonical forms of an enumerated table.

    Returns:
        Pair (dnf, cnf)
    """
    logger = get_logger()

    dnf = derive_dnf(table.rows, table.variables)
    cnf = derive_cnf(table.rows, table.variables)

    logger.debug(
        f"Derived DNF with {len(dnf.clauses)} minterms and "
        f"CNF with {len(cnf.clauses)} maxterms"
    )
    return dnf, cnf
