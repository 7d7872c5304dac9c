# parser/exceptions.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Custom exceptions for formula scanning and parsing

"""Domain-specific exceptions for propositional formula processing.

This module defines the exceptions raised while scanning and parsing
propositional formulas. All of them derive from FormulaError so that a
caller can catch every pipeline failure with a single clause, while still
being able to tell a lexical error from a syntax error.
"""


class FormulaError(RuntimeError):
    """Base class for every error raised by the formula pipeline."""

    pass


class LexError(FormulaError):
    """Exception raised when the scanner meets a character it cannot use.

    Attributes:
        char: The offending character
        position: Character offset of the offending character in the source
    """

    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Illegal character '{char}' encountered at position {position}"
        )


class ParseError(FormulaError):
    """Exception raised when formula parsing fails due to syntax errors.

    Indicates that the token stream does not conform to the formula grammar.
    Subclasses narrow down the reason; the generic class is also used to wrap
    unexpected failures inside the parser.

    Attributes:
        token: Offending token, or None when the problem is the end of input
    """

    def __init__(self, message: str, token=None):
        self.token = token
        super().__init__(message)


class UnexpectedTokenError(ParseError):
    """A token appeared where neither an operator nor an operand fits."""

    def __init__(self, token):
        super().__init__(
            f"Unexpected token '{token.value}' (type: {token.type}) "
            f"at position {token.index}",
            token,
        )


class UnexpectedEndError(ParseError):
    """Input ended while an operand was still expected."""

    def __init__(self, message: str = "Unexpected end of input: expected an operand"):
        super().__init__(message, None)


class MissingParenthesisError(ParseError):
    """Input ended while a parenthesized group was still open.

    Attributes:
        open_count: Number of unclosed '(' tokens
    """

    def __init__(self, open_count: int):
        self.open_count = open_count
        super().__init__(
            f"Missing closing parenthesis: {open_count} unclosed '(' at end of input",
            None,
        )


class NestingTooDeepError(ParseError):
    """Parsed formula is nested deeper than the configured bound.

    Only parentheses and prefix negations count towards the depth; the
    length of a chain of binary connectives does not.

    Attributes:
        depth: Deepest nesting of parentheses and negations around a variable
        limit: Maximum nesting depth accepted
    """

    def __init__(self, depth: int, limit: int):
        self.depth = depth
        self.limit = limit
        super().__init__(
            f"Formula nesting depth {depth} exceeds the maximum of {limit}", None
        )
