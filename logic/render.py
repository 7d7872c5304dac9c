# logic/render.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Plain-text rendering of formulas and truth tables

"""Plain-text rendering for formulas and truth tables.

Normal forms render themselves (see NormalForm.render); this module covers
the remaining pieces a front end needs: a tree rendered with a chosen symbol
set, the user's own formula re-spelled with that symbol set, and a column
aligned T/F table.
"""

from __future__ import annotations
from typing import List, Optional

from parser import ast_nodes as ast
from parser.lexer import tokenize
from .symbols import ASCII_SYMBOLS, SymbolSet
from .truth_table import TruthTable


class ExprRenderer(ast.Visitor):
    """Renders a tree fully parenthesized with the given symbols.

    Fed children first, it keeps the text of pending operands on ``parts``.
    """

    def __init__(self, symbols: SymbolSet = ASCII_SYMBOLS):
        self.symbols = symbols
        self.parts: List[str] = []

    def visit_var(self, n: ast.Var) -> None:
        self.parts.append(n.name)

    def visit_not(self, n: ast.Not) -> None:
        self.parts.append(f"{self.symbols.not_}{self.parts.pop()}")

    def _binary(self, joiner: str) -> None:
        right = self.parts.pop()
        self.parts.append(f"({self.parts.pop()}{joiner}{right})")

    def visit_and(self, n: ast.And) -> None:
        self._binary(self.symbols.and_)

    def visit_or(self, n: ast.Or) -> None:
        self._binary(self.symbols.or_)

    def visit_implies(self, n: ast.Implies) -> None:
        self._binary(self.symbols.implies)

    def visit_equiv(self, n: ast.Equiv) -> None:
        self._binary(self.symbols.equiv)


def render_expr(root: ast.Expr, symbols: SymbolSet = ASCII_SYMBOLS) -> str:
    renderer = ExprRenderer(symbols)
    for node in ast.postorder(root):
        node.accept(renderer)
    return renderer.parts.pop()


_TOKEN_SPELLING = {
    "NOT": lambda s: s.not_,
    "AND": lambda s: s.and_,
    "OR": lambda s: s.or_,
    "IMPLIES": lambda s: s.implies,
    "EQUIV": lambda s: s.equiv,
}


def format_formula(source: str, symbols: SymbolSet = ASCII_SYMBOLS) -> str:
    """Re-spell the user's formula with ``symbols``, keeping its own grouping.

    Whitespace is normalised: binary connectives get one space on each side
    and everything else is written without spaces.

    Raises:
        LexError: ``source`` contains a character that starts no token
    """
    parts = []
    for token in tokenize(source):
        spell = _TOKEN_SPELLING.get(token.type)
        parts.append(spell(symbols) if spell else token.value)
    return "".join(parts)


def render_table(
    table: TruthTable,
    header: Optional[str] = None,
    true_mark: str = "T",
    false_mark: str = "F",
) -> str:
    """Render ``table`` as aligned text columns.

    Args:
        table: Enumerated truth table
        header: Title of the result column; defaults to "result"
        true_mark: Cell text for true
        false_mark: Cell text for false

    Returns:
        Multi-line string: header line, separator, one line per row
    """
    titles = list(table.variables) + [header or "result"]
    widths = [max(len(title), len(true_mark), len(false_mark)) for title in titles]

    def line(cells: List[str]) -> str:
        return " | ".join(cell.center(width) for cell, width in zip(cells, widths))

    lines = [line(titles), "-+-".join("-" * width for width in widths)]
    for row in table.rows:
        cells = [true_mark if value else false_mark for value in row.values]
        cells.append(true_mark if row.result else false_mark)
        lines.append(line(cells))
    return "\n".join(lines)
