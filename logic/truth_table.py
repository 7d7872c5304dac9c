# logic/truth_table.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Exhaustive truth-table enumeration

"""Enumerates the full truth table of a formula.

Rows are produced for every integer i from 2^n - 1 down to 0. Variable j of
the canonical variable list takes bit (n - j - 1) of i, so the first variable
is the most significant bit and its column reads all-true before all-false.
The row order is part of the result and is never changed afterwards.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

from parser.ast_nodes import Expr, postorder
from utils.logger import get_logger
from .evaluator import Evaluator
from .exceptions import TooManyVariablesError
from .variables import collect_variables

DEFAULT_MAX_VARIABLES = 16


@dataclass(frozen=True)
class Row:
    """One line of a truth table.

    Attributes:
        values: Value of each variable, aligned with the table's variables
        result: Value of the formula for those values
    """

    values: Tuple[bool, ...]
    result: bool


@dataclass(frozen=True)
class TruthTable:
    """Variables and rows of an enumerated formula.

    Attributes:
        variables: Canonical variable list (column order)
        rows: Rows in enumeration order
    """

    variables: Tuple[str, ...]
    rows: Tuple[Row, ...]

    def assignment(self, row: Row) -> Dict[str, bool]:
        """Return a fresh name-to-value mapping for ``row``."""
        return dict(zip(self.variables, row.values))

    def results(self) -> Tuple[bool, ...]:
        """Return the formula column."""
        return tuple(row.result for row in self.rows)

    @property
    def is_tautology(self) -> bool:
        return all(row.result for row in self.rows)

    @property
    def is_contradiction(self) -> bool:
        return not any(row.result for row in self.rows)


def row_values(index: int, width: int) -> Tuple[bool, ...]:
    """Spell ``index`` as ``width`` booleans, most significant bit first."""
    return tuple(bool((index >> (width - j - 1)) & 1) for j in range(width))


def enumerate_truth_table(
    root: Expr,
    variables: Optional[Sequence[str]] = None,
    max_variables: int = DEFAULT_MAX_VARIABLES,
) -> TruthTable:
    """Evaluate ``root`` under every assignment of its variables.

    Args:
        root: Root of the formula tree
        variables: Canonical variable list; collected from ``root`` when omitted
        max_variables: Largest variable count that may be enumerated

    Returns:
        Truth table with exactly 2^n rows in descending index order

    Raises:
        TooManyVariablesError: The variable count exceeds ``max_variables``
    """
    logger = get_logger()

    if variables is None:
        variables = collect_variables(root)
    variables = tuple(variables)

    width = len(variables)
    if width > max_variables:
        raise TooManyVariablesError(width, max_variables)

    logger.debug(f"Enumerating {2 ** width} rows over variables {list(variables)}")

    nodes = postorder(root)
    rows = []
    for index in range(2**width - 1, -1, -1):
        values = row_values(index, width)
        assignment = dict(zip(variables, values))
        rows.append(Row(values, Evaluator(assignment).run(nodes)))

    table = TruthTable(variables, tuple(rows))
    logger.debug(
        f"Truth table complete: {sum(table.results())} true rows, "
        f"{len(rows) - sum(table.results())} false rows"
    )
    return table
