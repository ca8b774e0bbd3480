"""The birthday problem."""

import numpy as np

from mcprimer.analysis.combinatorics import birthday_probability
from mcprimer.models import BirthdayConfig


class BirthdayRoom:
    """Assigns each person in the room a uniformly random birthday."""

    labels = ("P(shared birthday)",)

    def __init__(self, config: BirthdayConfig | None = None):
        self.config = config if config is not None else BirthdayConfig()

    def trial(self, rng: np.random.Generator) -> tuple[int, ...]:
        days = rng.integers(0, self.config.days, size=self.config.people)
        return tuple(int(d) for d in days)

    @staticmethod
    def score(birthdays: tuple[int, ...]) -> int:
        return int(len(set(birthdays)) < len(birthdays))

    def expected(self) -> float:
        return birthday_probability(self.config.people, self.config.days)
