"""
Pytest configuration and fixtures.

This file is automatically loaded by pytest and provides
shared fixtures for all tests.
"""

import pytest

from matchelo.elo.calculator import CalculatorBuilder
from matchelo.elo.strategy import scored_strategy


class Player:
    """Minimal in-memory rating holder."""

    def __init__(self, elo: float):
        self.elo = elo

    def get_elo(self) -> float:
        return self.elo

    def set_elo(self, elo: float) -> None:
        self.elo = elo


@pytest.fixture
def make_player():
    """Factory for rating holders: make_player(1600)."""
    return Player


@pytest.fixture
def calculator():
    """Calculator with all defaults (outcome strategy, K=32, D=400)."""
    return CalculatorBuilder().build()


@pytest.fixture
def scored_calculator():
    """Calculator using the scored strategy with default parameters."""
    return CalculatorBuilder().with_strategy(scored_strategy).build()
