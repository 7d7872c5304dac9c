# parser/ast_nodes.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Abstract Syntax Tree node classes for propositional formula representation

"""AST node classes for representing parsed propositional formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas. The tree is built once by the
parser and then shared, read-only, by the variable collector, the evaluator
and every renderer.

Node Types:
    Var: Propositional variables
    Not: Negation
    And, Or, Implies, Equiv: Binary connectives (see Binary)

All nodes support the visitor design pattern for traversal. The string form
of a node is fully parenthesized ASCII syntax that parses back to an equal
tree.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Protocol


class BinaryOp(Enum):
    """Kinds of binary connective, with their canonical ASCII symbol."""

    AND = "&"
    OR = "|"
    IMPLIES = "->"
    EQUIV = "<->"


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_var(self, n: Var): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...

    def visit_implies(self, n: Implies): ...

    def visit_equiv(self, n: Equiv): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and implement the
    accept method for visitor dispatch. The string form is built here, without
    recursion, for every node kind.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        parts = []
        for node in postorder(self):
            if isinstance(node, Var):
                parts.append(node.name)
            elif isinstance(node, Not):
                parts.append(f"~{parts.pop()}")
            else:
                right = parts.pop()
                parts.append(f"({parts.pop()} {node.op.value} {right})")
        return parts.pop()


@dataclass(frozen=True, slots=True)
class Var(Expr):
    """Propositional variable referenced by name.

    Leaf node of the tree. The same name may occur in several distinct leaves.

    Attributes:
        name: The identifier string for this variable
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_var(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of its operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)


@dataclass(frozen=True, slots=True)
class Binary(Expr):
    """Common shape of the binary connectives.

    Concrete subclasses fix the connective through the class-level ``op``
    attribute; two nodes are only equal when they have the same class.

    Attributes:
        left: Left operand
        right: Right operand
    """

    op: ClassVar[BinaryOp]

    left: Expr
    right: Expr


@dataclass(frozen=True, slots=True)
class And(Binary):
    """Conjunction: true when both operands are true."""

    op: ClassVar[BinaryOp] = BinaryOp.AND

    def accept(self, v: Visitor):
        return v.visit_and(self)


@dataclass(frozen=True, slots=True)
class Or(Binary):
    """Disjunction: true when at least one operand is true."""

    op: ClassVar[BinaryOp] = BinaryOp.OR

    def accept(self, v: Visitor):
        return v.visit_or(self)


@dataclass(frozen=True, slots=True)
class Implies(Binary):
    """Material implication: false only when left is true and right is false."""

    op: ClassVar[BinaryOp] = BinaryOp.IMPLIES

    def accept(self, v: Visitor):
        return v.visit_implies(self)


@dataclass(frozen=True, slots=True)
class Equiv(Binary):
    """Biconditional: true when both operands have the same value."""

    op: ClassVar[BinaryOp] = BinaryOp.EQUIV

    def accept(self, v: Visitor):
        return v.visit_equiv(self)


BINARY_NODES = {
    BinaryOp.AND: And,
    BinaryOp.OR: Or,
    BinaryOp.IMPLIES: Implies,
    BinaryOp.EQUIV: Equiv,
}


def tree_height(root: Expr) -> int:
    """Return the height of the tree rooted at ``root`` (a leaf has height 1).

    Walks the tree with an explicit stack, like every other pass over it.
    """
    height = 0
    stack = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        height = max(height, depth)
        if isinstance(node, Not):
            stack.append((node.operand, depth + 1))
        elif isinstance(node, Binary):
            stack.append((node.left, depth + 1))
            stack.append((node.right, depth + 1))
    return height


def postorder(root: Expr) -> List[Expr]:
    """Return the nodes of the tree rooted at ``root``, children first.

    Operands come before the node that owns them, left before right. Passes
    that fold a tree (evaluation, rendering, collection) run over this list
    with a value stack, so connective chains of any length never touch the
    interpreter's recursion limit.
    """
    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        if isinstance(node, Not):
            stack.append(node.operand)
        elif isinstance(node, Binary):
            stack.append(node.left)
            stack.append(node.right)
    order.reverse()
    return order
