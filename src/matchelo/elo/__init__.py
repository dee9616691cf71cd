"""
ELO rating system module.

Implements two-player ELO calculations with:
- Outcome-based (win/draw/loss) and score-weighted strategies
- Pluggable caller-supplied strategies
- An immutable calculator built with a fluent builder
- One-shot match sessions with per-match parameter overrides
"""

from matchelo.elo.calculator import CalculatorBuilder, EloCalculator, calculate_elo_change
from matchelo.elo.constants import DEFAULT_DEVIATION, DEFAULT_K, DEFAULT_SCORE_WEIGHT
from matchelo.elo.match import EloUpdate, Match, RatingHolder
from matchelo.elo.outcomes import MatchOdds, MatchResult, Outcome, is_ignored_draw
from matchelo.elo.strategy import (
    STRATEGIES,
    Strategy,
    StrategyInput,
    expected_scores,
    get_strategy,
    outcome_strategy,
    scored_strategy,
)

__all__ = [
    "CalculatorBuilder",
    "EloCalculator",
    "calculate_elo_change",
    "DEFAULT_DEVIATION",
    "DEFAULT_K",
    "DEFAULT_SCORE_WEIGHT",
    "EloUpdate",
    "Match",
    "RatingHolder",
    "MatchOdds",
    "MatchResult",
    "Outcome",
    "is_ignored_draw",
    "STRATEGIES",
    "Strategy",
    "StrategyInput",
    "expected_scores",
    "get_strategy",
    "outcome_strategy",
    "scored_strategy",
]
