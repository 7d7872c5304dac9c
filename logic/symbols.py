# logic/symbols.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Symbol sets used when rendering formulas

"""Symbol sets for rendering formulas, normal forms and tables as text.

Both sets only use spellings the lexer accepts, so any rendered formula can
be fed back through the parser.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SymbolSet:
    """Spelling of each connective, with surrounding spaces for binary ones."""

    not_: str
    and_: str
    or_: str
    implies: str
    equiv: str
    true: str = "True"
    false: str = "False"


ASCII_SYMBOLS = SymbolSet(
    not_="~",
    and_=" & ",
    or_=" | ",
    implies=" -> ",
    equiv=" <-> ",
)

UNICODE_SYMBOLS = SymbolSet(
    not_="¬",
    and_=" ∧ ",
    or_=" ∨ ",
    implies=" -> ",
    equiv=" <-> ",
)
