"""
Shared pytest fixtures for the coursework tests.

Provides a shorthand for building Complex values and ready-made factories,
calculators and maps.
"""

from __future__ import annotations

import pytest

from coursework.algebra.complex import Complex
from coursework.calculus.calculator import Calculator
from coursework.cards.card import FRENCH_NAMES, FRENCH_SEEDS
from coursework.cards.deck import DeckFactory
from coursework.indexers.map2d import Map2D


def c(real: float, imaginary: float = 0.0) -> Complex:
    """Build a Complex with a short name.

    Examples:
        >>> c(3)
        Complex(real=3.0, imaginary=0.0)
        >>> c(1, -2)
        Complex(real=1.0, imaginary=-2.0)
    """
    return Complex(real, imaginary)


@pytest.fixture
def french_factory() -> DeckFactory:
    """Return a factory configured with the 13 French names and 4 seeds."""
    return DeckFactory(FRENCH_NAMES, FRENCH_SEEDS)


@pytest.fixture
def calculator() -> Calculator:
    return Calculator()


@pytest.fixture
def grid() -> Map2D[int, str, int]:
    """A 3x2 map: rows 0..2, columns 'a'/'b', value = row * 10 + column index."""
    m: Map2D[int, str, int] = Map2D()
    for row in range(3):
        for col_index, col in enumerate('ab'):
            m[row, col] = row * 10 + col_index
    return m
