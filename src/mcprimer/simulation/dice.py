"""Dice rolls."""

import numpy as np

from mcprimer.analysis.combinatorics import dice_sum_probability
from mcprimer.models import DiceConfig


class DiceRoller:
    """Rolls ``config.dice`` fair dice per trial."""

    def __init__(self, config: DiceConfig | None = None):
        self.config = config if config is not None else DiceConfig()

    @property
    def labels(self) -> tuple[str, ...]:
        if self.config.target_sum is None:
            return ("mean total",)
        return (f"P(total = {self.config.target_sum})",)

    def trial(self, rng: np.random.Generator) -> tuple[int, ...]:
        faces = rng.integers(1, self.config.sides + 1, size=self.config.dice)
        return tuple(int(f) for f in faces)

    def score(self, outcome: tuple[int, ...]) -> int:
        """Total of the faces, or the target-sum indicator."""
        total = sum(outcome)
        if self.config.target_sum is None:
            return total
        return int(total == self.config.target_sum)

    def expected(self) -> float:
        if self.config.target_sum is None:
            return self.config.dice * (self.config.sides + 1) / 2
        return dice_sum_probability(self.config.target_sum, self.config.dice, self.config.sides)
