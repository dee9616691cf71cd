"""Match outcome and result types shared by the calculator and match sessions.

This module is the single source of truth for how a finished match is
described, and for the ignore-draws guard that both
`EloCalculator.calculate()` and `Match.play()` apply before rating anything.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Outcome(IntEnum):
    """Who won a match. DRAW is the zero value and the default."""

    DRAW = 0
    PLAYER_ONE_WIN = 1
    PLAYER_TWO_WIN = 2


@dataclass
class MatchResult:
    """
    The result of a match, as handed to a strategy.

    Outcome-based strategies only read `outcome`. Scored strategies only
    read the two scores. Fields a strategy doesn't use keep their defaults,
    so `MatchResult(player_one_score=6, player_two_score=3)` is a normal
    scored result even though its outcome is DRAW.
    """

    outcome: Outcome = Outcome.DRAW
    player_one_score: float = 0
    player_two_score: float = 0

    @classmethod
    def win(cls, player_one: bool = True) -> "MatchResult":
        """Decisive result for player one (default) or player two."""
        return cls(outcome=Outcome.PLAYER_ONE_WIN if player_one else Outcome.PLAYER_TWO_WIN)

    @classmethod
    def draw(cls) -> "MatchResult":
        return cls(outcome=Outcome.DRAW)

    @classmethod
    def scored(cls, player_one_score: float, player_two_score: float) -> "MatchResult":
        return cls(player_one_score=player_one_score, player_two_score=player_two_score)


@dataclass(frozen=True)
class MatchOdds:
    """
    Each player's chance to win, as a number between 0 and 1.

    0 is a 0% chance to win, 1 is a 100% chance. The two always sum to 1.
    """

    player_one_odds: float
    player_two_odds: float


def is_draw(result: MatchResult) -> bool:
    """
    Whether a result is a draw.

    True for a DRAW outcome whose scores are equal, which covers both a
    plain outcome-based draw (scores left at 0) and a tied scored result.
    """
    return (
        result.outcome == Outcome.DRAW
        and result.player_one_score == result.player_two_score
    )


def is_ignored_draw(result: MatchResult, ignore_draws: bool) -> bool:
    """Whether a result should be skipped because draws are being ignored."""
    return ignore_draws and is_draw(result)
