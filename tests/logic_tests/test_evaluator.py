# tests/logic_tests/test_evaluator.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Test suite for formula evaluation and variable collection

"""Tests for the evaluator and the variable collector."""

import pytest
from parser import parse
from parser.ast_nodes import Var
from logic import UnboundVariableError, collect_variables, evaluate


class TestEvaluator:
    """Connective semantics under explicit assignments."""

    CONNECTIVE_CASES = [
        # (formula, A, B, expected)
        ("A & B", True, True, True),
        ("A & B", True, False, False),
        ("A & B", False, False, False),
        ("A | B", False, True, True),
        ("A | B", False, False, False),
        ("A -> B", True, False, False),
        ("A -> B", False, False, True),
        ("A -> B", False, True, True),
        ("A -> B", True, True, True),
        ("A <-> B", True, True, True),
        ("A <-> B", False, False, True),
        ("A <-> B", True, False, False),
        ("~A", True, False, False),
        ("~A", False, True, True),
        ("~~A", True, False, True),
    ]

    @pytest.mark.parametrize("formula, a, b, expected", CONNECTIVE_CASES)
    def test_connectives(self, formula, a, b, expected):
        assert evaluate(parse(formula), {"A": a, "B": b}) is expected

    def test_evaluation_does_not_touch_assignment(self):
        assignment = {"A": True, "B": False}
        evaluate(parse("A -> B"), assignment)
        assert assignment == {"A": True, "B": False}

    def test_unbound_variable(self):
        with pytest.raises(UnboundVariableError) as exc_info:
            evaluate(parse("A & C"), {"A": True})

        assert exc_info.value.name == "C"

    def test_unbound_variable_reported_despite_short_circuit(self):
        with pytest.raises(UnboundVariableError):
            evaluate(parse("A | C"), {"A": True})
        with pytest.raises(UnboundVariableError):
            evaluate(parse("A -> C"), {"A": False})


class TestVariableCollector:
    """Canonical variable list extraction."""

    @pytest.mark.parametrize(
        "formula, expected",
        [
            ("A", ("A",)),
            ("B & A", ("A", "B")),
            ("C | A & C -> B", ("A", "B", "C")),
            ("q <-> ~p & q", ("p", "q")),
            # Code point order: upper case sorts before lower case
            ("b & B & a & A", ("A", "B", "a", "b")),
            ("x10 | x2 | x1", ("x1", "x10", "x2")),
        ],
    )
    def test_sorted_and_distinct(self, formula, expected):
        assert collect_variables(parse(formula)) == expected

    def test_same_result_for_reordered_formula(self):
        assert collect_variables(parse("(C & B) | A")) == collect_variables(
            parse("A | (B & C)")
        )

    def test_single_leaf(self):
        assert collect_variables(Var("only")) == ("only",)
