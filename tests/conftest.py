from __future__ import annotations

from typing import List

import pytest

# Import project primitives
from bigmath.core import BigDecimal, BigInteger, BigNumber, BigRational


# -----------------------------
# Pytest fixtures
# -----------------------------

@pytest.fixture()
def one_in_every_kind() -> List[BigNumber]:
    """The value 1 as integer, decimal 1.0 and unreduced rational 2/2."""
    return [BigInteger(1), BigDecimal(10, 1), BigRational(2, 2)]


@pytest.fixture()
def mixed_literals() -> List[str]:
    """Literals of all three shapes, deliberately unsorted and with ties."""
    return ["3", "1/2", "-1", "2.5", "1.0", "1"]
