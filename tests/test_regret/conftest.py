"""Shared fixtures for regret tests."""

import pytest
from tests.conftest import make_profile

from minimax.models import PSRWeights


@pytest.fixture
def borda():
    """Borda weights for three alternatives: 2, 1, 0."""
    return PSRWeights.given([2, 1, 0])


@pytest.fixture
def two_ranks():
    """Weights 3, 1 for two alternatives."""
    return PSRWeights.given([3, 1])


@pytest.fixture
def three_voters():
    """Three voters, three alternatives.

         v1  v2  v3
    a1    1   2   3
    a2    2   1   1
    a3    3   3   2

    Borda: a1=3, a2=5, a3=1
    """
    return make_profile({
        1: [1, 2, 3],
        2: [2, 1, 3],
        3: [2, 3, 1],
    })


@pytest.fixture
def fractional():
    """Weights whose sums are not exact in binary floating point."""
    return PSRWeights.given([0.7, 0.3, 0.1])
