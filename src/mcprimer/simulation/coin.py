"""Coin flips."""

import numpy as np

from mcprimer.models import CoinConfig


class CoinFlipper:
    """Flips a coin ``config.flips`` times per trial."""

    labels = ("fraction of heads",)

    def __init__(self, config: CoinConfig | None = None):
        self.config = config if config is not None else CoinConfig()

    def trial(self, rng: np.random.Generator) -> tuple[int, ...]:
        """Flip the coin; 1 is heads, 0 is tails."""
        flips = rng.random(self.config.flips) < self.config.p_heads
        return tuple(int(f) for f in flips)

    @staticmethod
    def score(outcome: tuple[int, ...]) -> float:
        """Fraction of heads (the heads indicator for a single flip)."""
        return sum(outcome) / len(outcome)

    def expected(self) -> float:
        return self.config.p_heads


def is_heads(outcome: tuple[int, ...]) -> int:
    """Indicator that the first flip of a trial landed heads."""
    return outcome[0]
