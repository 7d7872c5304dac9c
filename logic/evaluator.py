# logic/evaluator.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Boolean evaluation of formula ASTs

"""Evaluates a formula tree under a variable assignment.

Evaluation is a pure visitor: it reads the tree and the assignment and
returns a bool, without caching anything between calls. Nodes are visited
children first (see ``ast.postorder``) and operand values travel on an
explicit stack, so a derived normal form with tens of thousands of clauses
evaluates as readily as a short formula.
"""

from __future__ import annotations
from typing import Iterable, List, Mapping, Tuple
from parser import ast_nodes as ast
from .exceptions import UnboundVariableError


class Evaluator(ast.Visitor):
    """Computes the truth value of a tree for one assignment.

    Each visit pops the values of the node's operands off ``values`` and
    pushes the node's own value.

    Attributes:
        assignment: Mapping from variable name to its value
        values: Operand values not yet consumed by a parent node
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment
        self.values: List[bool] = []

    def visit_var(self, n: ast.Var) -> None:
        try:
            value = bool(self.assignment[n.name])
        except KeyError:
            raise UnboundVariableError(n.name) from None
        self.values.append(value)

    def visit_not(self, n: ast.Not) -> None:
        self.values.append(not self.values.pop())

    def _operands(self) -> Tuple[bool, bool]:
        right = self.values.pop()
        return self.values.pop(), right

    def visit_and(self, n: ast.And) -> None:
        left, right = self._operands()
        self.values.append(left and right)

    def visit_or(self, n: ast.Or) -> None:
        left, right = self._operands()
        self.values.append(left or right)

    def visit_implies(self, n: ast.Implies) -> None:
        left, right = self._operands()
        self.values.append((not left) or right)

    def visit_equiv(self, n: ast.Equiv) -> None:
        left, right = self._operands()
        self.values.append(left == right)

    def run(self, nodes: Iterable[ast.Expr]) -> bool:
        """Visit ``nodes`` in children-first order and return the root's value.

        Every leaf is visited, so an unbound variable is reported whatever
        the value of the rest of the formula.
        """
        for node in nodes:
            node.accept(self)
        return self.values.pop()


def evaluate(root: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Evaluate ``root`` with the given variable values.

    Args:
        root: Root of the formula tree
        assignment: Value for every variable referenced by the tree

    Returns:
        Truth value of the formula

    Raises:
        UnboundVariableError: A referenced variable is missing from the assignment
    """
    return Evaluator(assignment).run(ast.postorder(root))
