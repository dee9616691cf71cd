"""
matchelo - ELO ratings for two-player matches

Computes updated ratings for two competitors after a match, using either
a win/draw/loss outcome or the final score.

Main components:
- elo: strategies, the calculator builder, and match sessions
- config: default parameters loaded from the environment
- logging_setup: opt-in logging configuration
"""

from matchelo.elo import (
    CalculatorBuilder,
    EloCalculator,
    EloUpdate,
    Match,
    MatchOdds,
    MatchResult,
    Outcome,
    RatingHolder,
    outcome_strategy,
    scored_strategy,
)

__version__ = "1.0.0"

__all__ = [
    "CalculatorBuilder",
    "EloCalculator",
    "EloUpdate",
    "Match",
    "MatchOdds",
    "MatchResult",
    "Outcome",
    "RatingHolder",
    "outcome_strategy",
    "scored_strategy",
]
