"""
ELO rating calculator.

A calculator is an immutable bundle of tuning parameters plus a strategy.
It is assembled with a CalculatorBuilder, then either rates two raw
ratings directly via calculate(), or hands out Match sessions that copy
its parameters and can override them per match.

Usage:
    calculator = (
        CalculatorBuilder()
        .with_strategy(scored_strategy)
        .with_score_weight(0.33)
        .build()
    )

    new_one, new_two = calculator.calculate(1200, 1000, MatchResult.scored(12, 8))
    # -> (1203.59, 996.41)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional, Union

from matchelo.config import Settings, get_settings
from matchelo.elo.constants import (
    DEFAULT_DEVIATION,
    DEFAULT_K,
    DEFAULT_SCORE_WEIGHT,
    is_valid_score_weight,
)
from matchelo.elo.outcomes import MatchOdds, MatchResult, Outcome, is_ignored_draw
from matchelo.elo.strategy import (
    Strategy,
    StrategyInput,
    expected_scores,
    get_strategy,
    outcome_strategy,
)

if TYPE_CHECKING:
    from matchelo.elo.match import Match, RatingHolder

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EloCalculator:
    """
    Shared, immutable rating configuration.

    Don't construct directly unless you mean to skip validation;
    use CalculatorBuilder.
    """

    k: float = DEFAULT_K
    deviation: float = DEFAULT_DEVIATION
    score_weight: float = DEFAULT_SCORE_WEIGHT
    ignore_draws: bool = False
    strategy: Strategy = outcome_strategy

    def calculate(self, player_one: float, player_two: float, result: MatchResult) -> tuple[float, float]:
        """
        Calculate new ratings for two players without a Match session.

        Args:
            player_one: Player one's rating before the match
            player_two: Player two's rating before the match
            result: How the match ended

        Returns:
            Tuple of (new_player_one, new_player_two). If draws are ignored
            and the result is a draw, the inputs come back unchanged.
        """
        if is_ignored_draw(result, self.ignore_draws):
            logger.debug("Ignoring draw between %s and %s", player_one, player_two)
            return player_one, player_two

        return self.strategy(self._input(player_one, player_two, result))

    def get_odds(self, player_one: float, player_two: float) -> MatchOdds:
        """Each player's win probability under this calculator's deviation."""
        exp_one, exp_two = expected_scores(player_one, player_two, self.deviation)
        return MatchOdds(player_one_odds=exp_one, player_two_odds=exp_two)

    def new_match(self, player_one: "RatingHolder", player_two: "RatingHolder") -> "Match":
        """Create a one-shot Match between two rating holders."""
        from matchelo.elo.match import Match

        return Match(self, player_one, player_two)

    def _input(self, player_one: float, player_two: float, result: MatchResult) -> StrategyInput:
        return StrategyInput(
            player_one=player_one,
            player_two=player_two,
            outcome=result.outcome,
            player_one_score=result.player_one_score,
            player_two_score=result.player_two_score,
            k=self.k,
            deviation=self.deviation,
            score_weight=self.score_weight,
        )


class CalculatorBuilder:
    """
    Fluent builder for EloCalculator.

    Every with_* method returns the builder so calls can be chained.
    Invalid score weights are ignored rather than raising, leaving the
    previous value in place.
    """

    def __init__(self):
        self._calculator = EloCalculator()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "CalculatorBuilder":
        """
        Start a builder from application settings.

        Args:
            settings: Settings to use. Defaults to the cached get_settings().
        """
        settings = settings or get_settings()
        builder = (
            cls()
            .with_k_value(settings.k)
            .with_deviation(settings.deviation)
            .with_score_weight(settings.score_weight)
            .with_strategy(settings.strategy)
        )
        if settings.ignore_draws:
            builder.with_ignore_draws()
        return builder

    def with_strategy(self, strategy: Union[Strategy, str]) -> "CalculatorBuilder":
        """
        Set the strategy used to calculate ratings. Default is outcome_strategy.

        Accepts a callable or the name of a built-in strategy ("outcome", "scored").
        """
        if isinstance(strategy, str):
            strategy = get_strategy(strategy)
        if not callable(strategy):
            raise ValueError(f"strategy must be callable, got {type(strategy).__name__}")
        self._calculator = replace(self._calculator, strategy=strategy)
        return self

    def with_k_value(self, k: float) -> "CalculatorBuilder":
        """Set K. A greater K means more rapid changes. Default is 32."""
        self._calculator = replace(self._calculator, k=k)
        return self

    def with_deviation(self, deviation: float) -> "CalculatorBuilder":
        """
        Set the deviation. The lower the number, the more likely the
        higher-rated player is to win (and so the less they gain). Default is 400.
        """
        self._calculator = replace(self._calculator, deviation=deviation)
        return self

    def with_score_weight(self, weight: float) -> "CalculatorBuilder":
        """
        Set the score weight used by the scored strategy. Default is 0.

        Must be between 0 and 1 inclusive; anything else is ignored.
        """
        if not is_valid_score_weight(weight):
            logger.debug(
                "Rejected score weight %s, keeping %s", weight, self._calculator.score_weight
            )
            return self
        self._calculator = replace(self._calculator, score_weight=weight)
        return self

    def with_ignore_draws(self) -> "CalculatorBuilder":
        """Skip draws entirely: a drawn result leaves both ratings unchanged."""
        self._calculator = replace(self._calculator, ignore_draws=True)
        return self

    def build(self) -> EloCalculator:
        """Return the configured calculator. The builder can keep being used."""
        return self._calculator


# Convenience function for simple usage
def calculate_elo_change(
    player_one: float,
    player_two: float,
    outcome: Outcome,
    k: float = DEFAULT_K,
    deviation: float = DEFAULT_DEVIATION,
) -> tuple[float, float]:
    """
    Simple function to calculate new ratings from a win/loss/draw.

    For when you just need the new ratings without building a calculator.

    Returns:
        Tuple of (new_player_one, new_player_two)
    """
    calc = CalculatorBuilder().with_k_value(k).with_deviation(deviation).build()
    return calc.calculate(player_one, player_two, MatchResult(outcome=outcome))
