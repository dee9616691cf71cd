"""
Unit tests for the ELO calculator and its builder.

Tests the shared configuration layer to ensure:
- Builder defaults and fluent setters behave as documented
- Invalid score weights are silently ignored
- Draws are skipped when ignore-draws is set
- Built calculators are immutable
"""

import dataclasses
import logging

import pytest

from matchelo.elo.calculator import CalculatorBuilder, calculate_elo_change
from matchelo.elo.constants import DEFAULT_DEVIATION, DEFAULT_K, DEFAULT_SCORE_WEIGHT
from matchelo.elo.match import Match
from matchelo.elo.outcomes import MatchResult, Outcome
from matchelo.elo.strategy import outcome_strategy, scored_strategy


class TestCalculatorBuilder:
    """Tests for CalculatorBuilder."""

    def test_defaults(self):
        calc = CalculatorBuilder().build()

        assert calc.k == DEFAULT_K == 32
        assert calc.deviation == DEFAULT_DEVIATION == 400
        assert calc.score_weight == DEFAULT_SCORE_WEIGHT == 0
        assert calc.ignore_draws is False
        assert calc.strategy is outcome_strategy

    def test_fluent_chain(self):
        calc = (
            CalculatorBuilder()
            .with_strategy(scored_strategy)
            .with_k_value(60)
            .with_deviation(200)
            .with_score_weight(0.5)
            .with_ignore_draws()
            .build()
        )

        assert calc.strategy is scored_strategy
        assert calc.k == 60
        assert calc.deviation == 200
        assert calc.score_weight == 0.5
        assert calc.ignore_draws is True

    def test_k_and_deviation_not_validated(self):
        """The builder accepts any K and deviation, even negative ones."""
        calc = CalculatorBuilder().with_k_value(-10).with_deviation(-200).build()
        assert calc.k == -10
        assert calc.deviation == -200

    @pytest.mark.parametrize("weight", [-2, -0.13, 1.5, 100])
    def test_invalid_score_weight_ignored(self, weight):
        calc = CalculatorBuilder().with_score_weight(0.33).with_score_weight(weight).build()
        assert calc.score_weight == 0.33

    @pytest.mark.parametrize("weight", [0, 0.5, 1])
    def test_valid_score_weight(self, weight):
        calc = CalculatorBuilder().with_score_weight(0.33).with_score_weight(weight).build()
        assert calc.score_weight == weight

    def test_rejected_score_weight_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="matchelo")
        CalculatorBuilder().with_score_weight(1.5)
        assert "Rejected score weight 1.5" in caplog.text

    def test_strategy_by_name(self):
        assert CalculatorBuilder().with_strategy("scored").build().strategy is scored_strategy

    def test_unknown_strategy_name(self):
        with pytest.raises(ValueError):
            CalculatorBuilder().with_strategy("trueskill")

    def test_non_callable_strategy(self):
        with pytest.raises(ValueError):
            CalculatorBuilder().with_strategy(42)

    def test_built_calculators_are_independent(self):
        """Later builder calls don't leak into calculators already built."""
        builder = CalculatorBuilder()
        first = builder.build()
        second = builder.with_k_value(99).build()

        assert first.k == 32
        assert second.k == 99


class TestEloCalculator:
    """Tests for EloCalculator.calculate() and friends."""

    def test_calculate(self, calculator):
        new_one, new_two = calculator.calculate(1200, 1000, MatchResult.win())

        assert abs(1200 - new_one) == pytest.approx(abs(1000 - new_two))
        assert new_one == pytest.approx(1207.688098, abs=1e-6)
        assert new_two == pytest.approx(992.311902, abs=1e-6)

    def test_calculate_scored(self):
        calc = (
            CalculatorBuilder()
            .with_strategy(scored_strategy)
            .with_score_weight(0.33)
            .with_score_weight(-2)  # ignored
            .build()
        )

        new_one, new_two = calc.calculate(1200, 1000, MatchResult.scored(12, 8))

        assert abs(1200 - new_one) == pytest.approx(abs(1000 - new_two))
        assert new_one == pytest.approx(1203.589925, abs=1e-6)
        assert new_two == pytest.approx(996.410075, abs=1e-6)

    def test_ignore_draw(self):
        calc = CalculatorBuilder().with_ignore_draws().build()
        assert calc.calculate(1200, 1000, MatchResult.draw()) == (1200, 1000)

    def test_ignore_scored_draw(self):
        calc = CalculatorBuilder().with_ignore_draws().with_strategy(scored_strategy).build()
        assert calc.calculate(1600, 1800, MatchResult.scored(500, 500)) == (1600, 1800)

    def test_ignore_draws_still_rates_wins(self):
        calc = CalculatorBuilder().with_ignore_draws().build()
        new_one, _ = calc.calculate(1200, 1000, MatchResult.win())
        assert new_one == pytest.approx(1207.688098, abs=1e-6)

    def test_draw_rated_by_default(self, calculator):
        new_one, new_two = calculator.calculate(1600, 1800, MatchResult.draw())
        assert new_one == pytest.approx(1608.311902, abs=1e-6)
        assert new_two == pytest.approx(1791.688098, abs=1e-6)

    def test_custom_strategy_receives_parameters(self):
        seen = []

        def recording_strategy(input):
            seen.append(input)
            return input.player_one, input.player_two

        calc = (
            CalculatorBuilder()
            .with_strategy(recording_strategy)
            .with_k_value(10)
            .with_deviation(300)
            .with_score_weight(0.25)
            .build()
        )
        calc.calculate(1500, 1400, MatchResult(Outcome.PLAYER_TWO_WIN, 3, 4))

        (received,) = seen
        assert (received.player_one, received.player_two) == (1500, 1400)
        assert received.outcome == Outcome.PLAYER_TWO_WIN
        assert (received.player_one_score, received.player_two_score) == (3, 4)
        assert (received.k, received.deviation, received.score_weight) == (10, 300, 0.25)

    def test_strategy_errors_propagate(self, scored_calculator):
        with pytest.raises(ValueError):
            scored_calculator.calculate(1500, 1500, MatchResult.scored(-1, 2))

    def test_get_odds(self, calculator):
        odds = calculator.get_odds(1600, 1800)
        assert odds.player_one_odds == pytest.approx(0.240253, abs=1e-6)
        assert odds.player_two_odds == pytest.approx(0.759747, abs=1e-6)

    def test_immutable(self, calculator):
        with pytest.raises(dataclasses.FrozenInstanceError):
            calculator.k = 10

    def test_new_match(self, calculator, make_player):
        match = calculator.new_match(make_player(1600), make_player(1800))
        assert isinstance(match, Match)
        assert not match.finished


class TestConvenienceFunction:
    """Tests for the calculate_elo_change convenience function."""

    def test_calculate_elo_change(self):
        new_one, new_two = calculate_elo_change(1600.0, 1800.0, Outcome.PLAYER_TWO_WIN)

        assert new_one == pytest.approx(1592.311902, abs=1e-6)
        assert new_two == pytest.approx(1807.688098, abs=1e-6)

        # Floats returned
        assert isinstance(new_one, float)
        assert isinstance(new_two, float)

    def test_custom_k(self):
        new_one, new_two = calculate_elo_change(800, 1300, Outcome.PLAYER_ONE_WIN, k=55)
        assert new_one == pytest.approx(852.071788, abs=1e-6)
        assert new_two == pytest.approx(1247.928212, abs=1e-6)
