# logic/pipeline.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# End-to-end formula pipeline: parse, enumerate, derive

"""Single entry point from a formula string to its table and normal forms.

The pipeline is a pure function of its input: every call builds a fresh
parser, and the only state passed between stages is the immutable tree and
the values derived from it. Either a complete PipelineResult is returned or
the first error raised by a stage propagates unchanged.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from parser import parse, DEFAULT_MAX_DEPTH
from parser.ast_nodes import Expr
from utils.logger import get_logger
from .normal_form import NormalForm, derive_normal_forms
from .truth_table import DEFAULT_MAX_VARIABLES, TruthTable, enumerate_truth_table
from .variables import collect_variables


@dataclass(frozen=True)
class PipelineResult:
    """Everything derived from one formula.

    Attributes:
        source: The formula text as given
        expr: Parsed tree
        variables: Canonical variable list
        table: Enumerated truth table
        dnf: Canonical disjunctive normal form
        cnf: Canonical conjunctive normal form
    """

    source: str
    expr: Expr
    variables: Tuple[str, ...]
    table: TruthTable
    dnf: NormalForm
    cnf: NormalForm


def run_pipeline(
    source: str,
    *,
    max_variables: int = DEFAULT_MAX_VARIABLES,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> PipelineResult:
    """Parse ``source``, enumerate its truth table and derive DNF and CNF.

    Args:
        source: Formula text
        max_variables: Largest variable count that may be enumerated
        max_depth: Largest nesting of parentheses and negations accepted

    Returns:
        Complete pipeline result

    Raises:
        LexError: Unrecognised character in ``source``
        ParseError: Malformed or too deeply nested formula
        TooManyVariablesError: Variable count above ``max_variables``
    """
    logger = get_logger()
    logger.pipeline_start(source)

    expr = parse(source, max_depth=max_depth)
    variables = collect_variables(expr)
    logger.debug(f"Collected variables: {list(variables)}")

    table = enumerate_truth_table(expr, variables, max_variables=max_variables)
    dnf, cnf = derive_normal_forms(table)

    logger.pipeline_complete(len(table.rows), len(dnf.clauses), len(cnf.clauses))
    return PipelineResult(source, expr, variables, table, dnf, cnf)
