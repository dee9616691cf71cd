"""
ELO rating system constants.

K factor: Controls rating volatility (how much ratings change per match)
  - Higher K = bigger rating swings
  - Lower K = more stable ratings

Deviation: Controls the spread (how rating differences translate to win probability)
  - Lower deviation = a given rating gap means a more certain favourite
  - Higher deviation = flatter, less predictive ratings

Score weight: Dampens the dominance bonus of the scored strategy
  for winners who were already favoured. 0 disables the dampening.
"""

# Defaults used by CalculatorBuilder when nothing is overridden
DEFAULT_K = 32.0
DEFAULT_DEVIATION = 400.0
DEFAULT_SCORE_WEIGHT = 0.0

# Score weight must stay inside this closed interval
SCORE_WEIGHT_MIN = 0.0
SCORE_WEIGHT_MAX = 1.0

# Actual scores for a decisive result and a draw
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0


def is_valid_score_weight(weight: float) -> bool:
    """Whether a score weight lies in [SCORE_WEIGHT_MIN, SCORE_WEIGHT_MAX]."""
    return SCORE_WEIGHT_MIN <= weight <= SCORE_WEIGHT_MAX
