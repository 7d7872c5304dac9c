# logic/variables.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Variable collection over formula ASTs

"""Collects the canonical variable list of a formula.

The list is the set of distinct variable names in the tree, sorted by code
point. Its order fixes the column order of the truth table and the literal
order inside every normal form clause.
"""

from __future__ import annotations
from typing import Set, Tuple
from parser import ast_nodes as ast


class VariableCollector(ast.Visitor):
    """Visitor gathering every variable name of a tree into a set.

    It is fed the flat node list of ``ast.postorder``; connectives carry no
    names of their own and are skipped.
    """

    def __init__(self):
        self.names: Set[str] = set()

    def visit_var(self, n: ast.Var) -> None:
        self.names.add(n.name)

    def _skip(self, n: ast.Expr) -> None:
        pass

    visit_not = _skip
    visit_and = _skip
    visit_or = _skip
    visit_implies = _skip
    visit_equiv = _skip


def collect_variables(root: ast.Expr) -> Tuple[str, ...]:
    """Return the distinct variable names of ``root`` in lexicographic order.

    Args:
        root: Root of the formula tree

    Returns:
        Sorted tuple of names, without duplicates
    """
    collector = VariableCollector()
    for node in ast.postorder(root):
        node.accept(collector)
    return tuple(sorted(collector.names))
