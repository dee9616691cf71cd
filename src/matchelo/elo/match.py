"""
One-shot match sessions between two rating holders.

A Match is created from an EloCalculator and copies its parameters, which
can then be overridden for this match only. Ratings are read from the
players when play() is called and written back through set_elo(); the
match never keeps its own copy.

Usage:
    match = calculator.new_match(alice, bob)
    match.k = 40                          # this match only
    print(match.get_odds())               # pre-match win probabilities
    update = match.play(MatchResult.win())
    match.play(MatchResult.win(False))    # no-op, already played
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from matchelo.elo.constants import is_valid_score_weight
from matchelo.elo.outcomes import MatchOdds, MatchResult, Outcome, is_draw, is_ignored_draw
from matchelo.elo.strategy import StrategyInput, expected_scores

if TYPE_CHECKING:
    from matchelo.elo.calculator import EloCalculator
    from matchelo.elo.strategy import Strategy

logger = logging.getLogger(__name__)


@runtime_checkable
class RatingHolder(Protocol):
    """Anything that owns a rating, e.g. a player record backed by a database."""

    def get_elo(self) -> float:
        ...

    def set_elo(self, elo: float) -> None:
        ...


@dataclass
class EloUpdate:
    """
    Result of playing a match.

    Contains the ratings on both sides of the update and the expected
    scores the players went in with.
    """
    # Ratings before the match
    player_one_before: float
    player_two_before: float

    # Ratings after the match
    player_one_after: float
    player_two_after: float

    # Expected win probabilities (before the match)
    expected_one: float
    expected_two: float

    # Whether the result was a draw (never an upset)
    draw: bool = False

    @property
    def player_one_change(self) -> float:
        """Rating change for player one."""
        return self.player_one_after - self.player_one_before

    @property
    def player_two_change(self) -> float:
        """Rating change for player two."""
        return self.player_two_after - self.player_two_before

    @property
    def was_upset(self) -> bool:
        """Whether the lower-rated player won. Draws are never upsets."""
        if self.draw:
            return False
        if self.player_one_change > 0:
            return self.player_one_before < self.player_two_before
        if self.player_two_change > 0:
            return self.player_two_before < self.player_one_before
        return False

    def __repr__(self) -> str:
        return (
            f"<EloUpdate(1: {self.player_one_before:.0f} -> {self.player_one_after:.0f}, "
            f"2: {self.player_two_before:.0f} -> {self.player_two_after:.0f})>"
        )


class Match:
    """
    A single match between two rating holders.

    K, deviation, score weight, ignore-draws and strategy start as copies
    of the calculator's values. Setting them affects only this match;
    invalid values (negative K, deviation of 0 or less, score weight outside [0, 1])
    are ignored and the previous value is kept.

    play() can only change ratings once. A draw skipped because draws are
    ignored does not count, so a later real result is still applied.
    """

    def __init__(self, calculator: "EloCalculator", player_one: RatingHolder, player_two: RatingHolder):
        for player in (player_one, player_two):
            if not isinstance(player, RatingHolder):
                raise TypeError(
                    f"players must provide get_elo() and set_elo(), got {type(player).__name__}"
                )

        self.player_one = player_one
        self.player_two = player_two
        self._finished = False

        self._strategy = calculator.strategy
        self._k = calculator.k
        self._deviation = calculator.deviation
        self._score_weight = calculator.score_weight
        self._ignore_draws = calculator.ignore_draws

    # ------------------------------------------------------------------
    # Per-match overrides
    # ------------------------------------------------------------------

    @property
    def finished(self) -> bool:
        """Whether play() has already updated the ratings."""
        return self._finished

    @property
    def strategy(self) -> "Strategy":
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: "Strategy") -> None:
        if not callable(strategy):
            raise ValueError(f"strategy must be callable, got {type(strategy).__name__}")
        self._strategy = strategy

    @property
    def k(self) -> float:
        return self._k

    @k.setter
    def k(self, k: float) -> None:
        # Must be non-negative
        if k < 0:
            logger.debug("Rejected K %s, keeping %s", k, self._k)
            return
        self._k = k

    @property
    def deviation(self) -> float:
        return self._deviation

    @deviation.setter
    def deviation(self, deviation: float) -> None:
        # Must be positive; 0 would divide by zero in the odds
        if deviation <= 0:
            logger.debug("Rejected deviation %s, keeping %s", deviation, self._deviation)
            return
        self._deviation = deviation

    @property
    def score_weight(self) -> float:
        return self._score_weight

    @score_weight.setter
    def score_weight(self, weight: float) -> None:
        if not is_valid_score_weight(weight):
            logger.debug("Rejected score weight %s, keeping %s", weight, self._score_weight)
            return
        self._score_weight = weight

    @property
    def ignore_draws(self) -> bool:
        return self._ignore_draws

    @ignore_draws.setter
    def ignore_draws(self, ignore: bool) -> None:
        self._ignore_draws = bool(ignore)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_odds(self) -> MatchOdds:
        """Each player's current chance to win, using this match's deviation."""
        exp_one, exp_two = expected_scores(
            self.player_one.get_elo(), self.player_two.get_elo(), self._deviation
        )
        return MatchOdds(player_one_odds=exp_one, player_two_odds=exp_two)

    def player_one_gain(self) -> float:
        """
        How much player one stands to gain if they win.

        Equivalent to how much player two loses if they lose. May not be
        accurate for the scored strategy, since no score is supplied.
        """
        new_one, _ = self._strategy(self._hypothetical_win(Outcome.PLAYER_ONE_WIN))
        return new_one - self.player_one.get_elo()

    def player_two_gain(self) -> float:
        """
        How much player two stands to gain if they win.

        Equivalent to how much player one loses if they lose. May not be
        accurate for the scored strategy, since no score is supplied.
        """
        _, new_two = self._strategy(self._hypothetical_win(Outcome.PLAYER_TWO_WIN))
        return new_two - self.player_two.get_elo()

    def _hypothetical_win(self, outcome: Outcome) -> StrategyInput:
        return StrategyInput(
            player_one=self.player_one.get_elo(),
            player_two=self.player_two.get_elo(),
            outcome=outcome,
            k=self._k,
            deviation=self._deviation,
        )

    # ------------------------------------------------------------------
    # Playing
    # ------------------------------------------------------------------

    def play(self, result: MatchResult) -> Optional[EloUpdate]:
        """
        Apply the result to both players' ratings.

        Only the first applied result counts; later calls return None and
        change nothing. A draw skipped because draws are ignored also
        returns None, but leaves the match open.

        Args:
            result: How the match ended

        Returns:
            EloUpdate describing the change, or None if nothing happened

        Raises:
            Whatever the strategy raises. Ratings are untouched in that case.
        """
        if self._finished:
            logger.debug("Match already played, ignoring %s", result)
            return None
        if is_ignored_draw(result, self._ignore_draws):
            logger.debug("Ignoring draw, match stays open")
            return None

        before_one = self.player_one.get_elo()
        before_two = self.player_two.get_elo()
        exp_one, exp_two = expected_scores(before_one, before_two, self._deviation)

        new_one, new_two = self._strategy(StrategyInput(
            player_one=before_one,
            player_two=before_two,
            outcome=result.outcome,
            player_one_score=result.player_one_score,
            player_two_score=result.player_two_score,
            k=self._k,
            deviation=self._deviation,
            score_weight=self._score_weight,
        ))

        self.player_one.set_elo(new_one)
        self.player_two.set_elo(new_two)
        self._finished = True

        update = EloUpdate(
            player_one_before=before_one,
            player_two_before=before_two,
            player_one_after=new_one,
            player_two_after=new_two,
            expected_one=exp_one,
            expected_two=exp_two,
            draw=is_draw(result),
        )
        logger.debug("Played match: %r", update)
        return update

    def __repr__(self) -> str:
        return (
            f"<Match(1: {self.player_one.get_elo():.0f}, 2: {self.player_two.get_elo():.0f}, "
            f"finished={self._finished})>"
        )
