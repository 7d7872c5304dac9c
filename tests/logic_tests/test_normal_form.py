# tests/logic_tests/test_normal_form.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Test suite for canonical DNF and CNF derivation

"""Tests for minterm / maxterm normal form derivation.

Covers the exact clauses produced for small formulas, the constant forms of
tautologies and contradictions, clause grouping, and semantic equivalence of
every derived form with its source formula.
"""

import pytest
from parser import parse
from parser.ast_nodes import BinaryOp, Not, Or, And, Var
from logic import (
    Clause,
    Literal,
    NormalFormKind,
    derive_cnf,
    derive_dnf,
    derive_normal_forms,
    enumerate_truth_table,
    evaluate,
)


def _forms(formula: str):
    table = enumerate_truth_table(parse(formula))
    return table, *derive_normal_forms(table)


def _clause_literals(form):
    return [
        [(literal.name, literal.negated) for literal in clause.literals]
        for clause in form.clauses
    ]


class TestNormalFormDerivation:
    """Exact clause lists for hand-checked formulas."""

    def test_implication(self):
        _, dnf, cnf = _forms("A -> B")

        assert _clause_literals(dnf) == [
            [("A", False), ("B", False)],
            [("A", True), ("B", False)],
            [("A", True), ("B", True)],
        ]
        assert _clause_literals(cnf) == [[("A", True), ("B", False)]]
        assert str(dnf) == "(A & B) | (~A & B) | (~A & ~B)"
        assert str(cnf) == "(~A | B)"

    def test_conjunction(self):
        _, dnf, cnf = _forms("A & B")

        assert str(dnf) == "(A & B)"
        assert str(cnf) == "(~A | B) & (A | ~B) & (A | B)"

    def test_three_variable_implication(self):
        _, dnf, cnf = _forms("(A & B) -> C")

        assert len(dnf.clauses) == 7
        assert str(cnf) == "(~A | ~B | C)"

    def test_single_variable_clauses_are_not_grouped(self):
        _, dnf, cnf = _forms("~~A")

        assert str(dnf) == "A"
        assert str(cnf) == "A"
        assert all(clause.is_single for clause in dnf.clauses + cnf.clauses)

    def test_multi_literal_clauses_are_grouped(self):
        _, dnf, _ = _forms("A <-> B")

        assert not any(clause.is_single for clause in dnf.clauses)
        assert str(dnf) == "(A & B) | (~A & ~B)"

    def test_clause_connectives(self):
        _, dnf, cnf = _forms("A | B")

        assert dnf.kind is NormalFormKind.DNF
        assert cnf.kind is NormalFormKind.CNF
        assert all(c.connective is BinaryOp.AND for c in dnf.clauses)
        assert all(c.connective is BinaryOp.OR for c in cnf.clauses)

    def test_tautology(self):
        table, dnf, cnf = _forms("A | ~A")

        assert len(dnf.clauses) == len(table.rows) == 2
        assert cnf.is_constant
        assert cnf.constant is True
        assert str(cnf) == "True"

    def test_contradiction(self):
        table, dnf, cnf = _forms("A & ~A")

        assert len(cnf.clauses) == len(table.rows)
        assert dnf.is_constant
        assert dnf.constant is False
        assert str(dnf) == "False"

    def test_constant_has_no_tree(self):
        _, dnf, _ = _forms("A & ~A")

        with pytest.raises(ValueError):
            dnf.to_expr()

    def test_to_expr_is_left_associative(self):
        _, dnf, cnf = _forms("A -> B")

        a, b = Var("A"), Var("B")
        assert dnf.to_expr() == Or(Or(And(a, b), And(Not(a), b)), And(Not(a), Not(b)))
        assert cnf.to_expr() == Or(Not(a), b)

    def test_derive_from_rows_directly(self):
        table = enumerate_truth_table(parse("A | B"))

        assert derive_dnf(table.rows, table.variables) == derive_normal_forms(table)[0]
        assert derive_cnf(table.rows, table.variables).clauses == (
            Clause((Literal("A"), Literal("B")), BinaryOp.OR),
        )


class TestNormalFormProperties:
    """Invariants that hold for every formula."""

    def test_clause_counts_partition_rows(self, sample_formulas):
        for formula in sample_formulas:
            table, dnf, cnf = _forms(formula)
            true_rows = sum(table.results())

            assert len(dnf.clauses) == true_rows
            assert len(cnf.clauses) == len(table.rows) - true_rows
            assert len(dnf.clauses) + len(cnf.clauses) == 2 ** len(table.variables)

    def test_semantic_equivalence(self, sample_formulas):
        for formula in sample_formulas:
            table, dnf, cnf = _forms(formula)
            expr = parse(formula)

            for row in table.rows:
                assignment = table.assignment(row)
                expected = evaluate(expr, assignment)

                assert dnf.evaluate(assignment) is expected, formula
                assert cnf.evaluate(assignment) is expected, formula
                if not dnf.is_constant:
                    assert evaluate(dnf.to_expr(), assignment) is expected
                if not cnf.is_constant:
                    assert evaluate(cnf.to_expr(), assignment) is expected

    @pytest.mark.parametrize("width", [1, 2, 3, 5, 8, 10])
    def test_semantic_equivalence_by_width(self, width, formula_of_width):
        table, dnf, cnf = _forms(formula_of_width(width))

        assert len(table.rows) == 2**width
        assert len(dnf.clauses) + len(cnf.clauses) == 2**width
        for form in (dnf, cnf):
            values = tuple(form.evaluate(table.assignment(row)) for row in table.rows)
            assert values == table.results()
            if not form.is_constant:
                rebuilt = enumerate_truth_table(form.to_expr(), table.variables)
                assert rebuilt.results() == table.results()

    def test_each_minterm_selects_its_own_row(self):
        table, dnf, cnf = _forms("A <-> ~B | C")
        true_rows = [row for row in table.rows if row.result]
        false_rows = [row for row in table.rows if not row.result]

        for clause, origin in zip(dnf.clauses, true_rows):
            for row in table.rows:
                assert clause.evaluate(table.assignment(row)) is (row is origin)

        for clause, origin in zip(cnf.clauses, false_rows):
            for row in table.rows:
                assert clause.evaluate(table.assignment(row)) is (row is not origin)

    def test_literal_order_follows_variables(self):
        table, dnf, cnf = _forms("C -> (B & A)")

        for clause in dnf.clauses + cnf.clauses:
            assert tuple(lit.name for lit in clause.literals) == table.variables
