# logic/__init__.py

"""Truth-table and normal-form derivation for parsed formulas.

This package provides:
  • collect_variables: canonical, sorted variable list of a tree
  • evaluate: truth value of a tree under an assignment
  • enumerate_truth_table: all 2^n rows in descending bit order
  • derive_normal_forms: canonical DNF and CNF read off the table
  • run_pipeline: formula string to complete PipelineResult
"""

from .evaluator import evaluate
from .exceptions import TooManyVariablesError, UnboundVariableError
from .normal_form import (
    Clause,
    Literal,
    NormalForm,
    NormalFormKind,
    derive_cnf,
    derive_dnf,
    derive_normal_forms,
)
from .pipeline import PipelineResult, run_pipeline
from .symbols import ASCII_SYMBOLS, UNICODE_SYMBOLS, SymbolSet
from .truth_table import DEFAULT_MAX_VARIABLES, Row, TruthTable, enumerate_truth_table
from .variables import collect_variables

__all__ = [
    "evaluate",
    "collect_variables",
    "enumerate_truth_table",
    "derive_dnf",
    "derive_cnf",
    "derive_normal_forms",
    "run_pipeline",
    "PipelineResult",
    "Row",
    "TruthTable",
    "Literal",
    "Clause",
    "NormalForm",
    "NormalFormKind",
    "SymbolSet",
    "ASCII_SYMBOLS",
    "UNICODE_SYMBOLS",
    "DEFAULT_MAX_VARIABLES",
    "TooManyVariablesError",
    "UnboundVariableError",
]
