# logic/exceptions.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Exceptions raised after a formula has been parsed

"""Errors raised by evaluation and truth-table enumeration."""

from parser.exceptions import FormulaError


class UnboundVariableError(FormulaError):
    """Evaluator met a variable the assignment does not cover.

    Never raised when the assignment comes from the enumerator, which always
    assigns every collected variable.

    Attributes:
        name: The unassigned variable
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Variable '{name}' has no value in the assignment")


class TooManyVariablesError(FormulaError):
    """Formula has more variables than the enumerator is allowed to expand.

    Attributes:
        count: Number of distinct variables in the formula
        limit: Largest variable count accepted
    """

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"Formula has {count} variables; truth tables are limited to "
            f"{limit} variables ({2 ** limit} rows)"
        )
