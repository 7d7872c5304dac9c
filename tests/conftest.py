# tests/conftest.py
# This file is part of Tabula - Propositional Truth Tables and Normal Forms
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Tabula test suite.

This module ensures the project root is importable and provides formulas
and helpers shared by the parser, logic and integration tests.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages import before any test runs.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import parser
        import logic
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    # Bind the shared logger to the session-wide stdout, not a per-test capture
    from utils.logger import get_logger

    get_logger()

    yield


@pytest.fixture
def sample_formulas():
    """Formulas covering every connective, used by property-style tests.

    Returns:
        List[str]: Well-formed formulas
    """
    return [
        "A",
        "~A",
        "A & B",
        "A | B",
        "A -> B",
        "A <-> B",
        "(A & B) -> C",
        "A | B & C",
        "(A | B) & C",
        "~(A <-> B) | C & ~D",
        "A -> B -> C",
        "A | ~A",
        "A & ~A",
        "(p1 -> q_2) <-> (~q_2 -> ~p1)",
    ]


@pytest.fixture
def formula_of_width():
    """Build a formula over ``width`` variables ``v0 .. v{width-1}``.

    Connectives cycle through | & -> <-> and every odd variable is negated,
    so each width mixes all connectives and has non-trivial normal forms.

    Returns:
        Callable[[int], str]: Formula builder
    """
    connectives = ["|", "&", "->", "<->"]

    def build(width: int) -> str:
        parts = []
        for i in range(width):
            if i:
                parts.append(connectives[(i - 1) % len(connectives)])
            parts.append(f"~v{i}" if i % 2 else f"v{i}")
        return " ".join(parts)

    return build
