"""
Rating strategies: the functions that turn a match into two new ratings.

A strategy takes a StrategyInput (both ratings, the result, and the tuning
parameters) and returns the two new ratings. Both built-in strategies use
the standard ELO formula:

  Expected score: E_A = 1 / (1 + 10^((R_B - R_A) / D))
  New rating: R'_A = R_A + K * (actual - expected)

Where:
  R_A, R_B = Current ratings of players one and two
  K = How much ratings change (volatility factor)
  D = Deviation (how rating difference maps to win probability)

They differ only in how the actual score is chosen:
- outcome_strategy: 1 / 0.5 / 0 for a win / draw / loss
- scored_strategy: the winner's actual score is pushed above its expected
  score by an amount that grows with how dominant the final score was

Callers can plug in any callable with the same signature.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from matchelo.elo.constants import DRAW_SCORE, LOSS_SCORE, WIN_SCORE
from matchelo.elo.outcomes import Outcome


@dataclass(frozen=True)
class StrategyInput:
    """Everything a strategy needs to rate one match."""

    # Ratings before the match
    player_one: float
    player_two: float

    # Used by outcome-based strategies
    outcome: Outcome = Outcome.DRAW

    # Used by scored strategies
    player_one_score: float = 0
    player_two_score: float = 0

    # Tuning parameters
    k: float = 0.0
    deviation: float = 0.0
    score_weight: float = 0.0


@runtime_checkable
class Strategy(Protocol):
    """Callable that maps a StrategyInput to (new_player_one, new_player_two)."""

    def __call__(self, input: StrategyInput) -> tuple[float, float]:
        ...


def expected_scores(rating_one: float, rating_two: float, deviation: float) -> tuple[float, float]:
    """
    Expected scores (win probabilities) for both players.

    Args:
        rating_one: Player one's rating
        rating_two: Player two's rating
        deviation: Spread divisor for the rating gap

    Returns:
        Tuple of (E_one, E_two), always summing to 1
    """
    try:
        exp_one = 1.0 / (1.0 + 10.0 ** ((rating_two - rating_one) / deviation))
    except OverflowError:
        # Gap too large for a float: player one is a certain underdog
        exp_one = 0.0

    return exp_one, 1.0 - exp_one


def _apply(input: StrategyInput, actual_one: float, actual_two: float,
           exp_one: float, exp_two: float) -> tuple[float, float]:
    new_one = input.player_one + input.k * (actual_one - exp_one)
    new_two = input.player_two + input.k * (actual_two - exp_two)
    return new_one, new_two


def outcome_strategy(input: StrategyInput) -> tuple[float, float]:
    """
    Calculate new ratings from a win/loss/draw outcome.

    This is the default strategy. Scores on the input are ignored.

    Example:
        # 1200 beats 1000 with K=32, D=400
        outcome_strategy(StrategyInput(1200, 1000, Outcome.PLAYER_ONE_WIN, k=32, deviation=400))
        # -> (1207.688..., 992.311...)
    """
    exp_one, exp_two = expected_scores(input.player_one, input.player_two, input.deviation)

    if input.outcome == Outcome.PLAYER_ONE_WIN:
        actual_one, actual_two = WIN_SCORE, LOSS_SCORE
    elif input.outcome == Outcome.PLAYER_TWO_WIN:
        actual_one, actual_two = LOSS_SCORE, WIN_SCORE
    else:
        actual_one = actual_two = DRAW_SCORE

    return _apply(input, actual_one, actual_two, exp_one, exp_two)


def _weighted_actual_scores(
    winner_score: float,
    loser_score: float,
    winner_expected: float,
    loser_expected: float,
    weight: float,
) -> tuple[float, float]:
    """
    Actual scores for a winner and loser, weighted by how dominant the win was.

    The dominance ratio D = winner / (winner + loser) is in (0.5, 1) here,
    since both scores are positive and the winner's is strictly larger.

    The surplus G = (1 - E_w) * D is small when the winner was heavily
    favoured and large for an upset, then dampened by exp(-weight * E_w).
    The winner gets E_w + G and the loser E_l - G, so the pair still sums
    to 1 and the rating changes stay zero-sum.

    Returns:
        Tuple of (winner_actual, loser_actual)
    """
    dominance = winner_score / (winner_score + loser_score)
    surplus = (1.0 - winner_expected) * dominance
    surplus *= math.exp(-weight * winner_expected)
    return winner_expected + surplus, loser_expected - surplus


def scored_strategy(input: StrategyInput) -> tuple[float, float]:
    """
    Calculate new ratings weighted by the final score.

    A more dominant score means more rating gained. The outcome field is
    ignored; the winner is whoever has the higher score.

    - A score of exactly 0 is a full loss for that player, whatever the
      other player scored (player one's score is checked first).
    - Equal non-zero scores are a draw.
    - Otherwise see _weighted_actual_scores().

    Raises:
        ValueError: If either score is negative

    Example:
        # 1200 beats 1000 12-8, K=32, D=400, weight=0.33
        # -> (1203.589..., 996.410...)
    """
    score_one = input.player_one_score
    score_two = input.player_two_score
    if score_one < 0 or score_two < 0:
        raise ValueError(f"scores must be non-negative, got {score_one}-{score_two}")

    exp_one, exp_two = expected_scores(input.player_one, input.player_two, input.deviation)

    if score_one == 0:
        actual_one, actual_two = LOSS_SCORE, WIN_SCORE
    elif score_two == 0:
        actual_one, actual_two = WIN_SCORE, LOSS_SCORE
    elif score_one > score_two:
        actual_one, actual_two = _weighted_actual_scores(
            score_one, score_two, exp_one, exp_two, input.score_weight,
        )
    elif score_two > score_one:
        actual_two, actual_one = _weighted_actual_scores(
            score_two, score_one, exp_two, exp_one, input.score_weight,
        )
    else:
        actual_one = actual_two = DRAW_SCORE

    return _apply(input, actual_one, actual_two, exp_one, exp_two)


# Strategies selectable by name (e.g. from Settings.strategy)
STRATEGIES: dict[str, Strategy] = {
    "outcome": outcome_strategy,
    "scored": scored_strategy,
}


def get_strategy(name: str) -> Strategy:
    """Return a built-in strategy by name, raising ValueError for unknown names."""
    try:
        return STRATEGIES[name.lower()]
    except KeyError:
        raise ValueError(
            f"unknown strategy {name!r}, expected one of {sorted(STRATEGIES)}"
        ) from None
