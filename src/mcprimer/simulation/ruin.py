"""Gambler's ruin: a +/-1 random walk between two absorbing barriers."""

import math
from dataclasses import dataclass

import numpy as np

from mcprimer.models import RuinConfig


@dataclass(frozen=True)
class RuinOutcome:
    """Result of one gambling session."""

    reached_target: bool
    bets: int  # includes the bet that ended the session
    final_wealth: int


class GamblersRuin:
    """Bets one unit at a time until wealth hits 0 or the target."""

    labels = ("P(reach target)", "mean bets per session")

    def __init__(self, config: RuinConfig | None = None):
        self.config = config if config is not None else RuinConfig()

    def trial(self, rng: np.random.Generator) -> RuinOutcome:
        """Play one session from the initial stake."""
        wealth = self.config.stake
        target = self.config.target
        max_bets = self.config.max_bets
        bets = 0

        while 0 < wealth < target:
            if max_bets is not None and bets >= max_bets:
                break
            if rng.random() < self.config.p_win:
                wealth += 1
            else:
                wealth -= 1
            bets += 1

        return RuinOutcome(reached_target=wealth >= target, bets=bets, final_wealth=wealth)

    @staticmethod
    def score(outcome: RuinOutcome) -> tuple[int, int]:
        """(reached target indicator, number of bets)."""
        return int(outcome.reached_target), outcome.bets

    def _near_fair(self) -> bool:
        return math.isclose(self.config.p_win, 0.5, abs_tol=1e-9)

    def success_probability(self) -> float:
        """Closed-form probability of reaching the target before ruin.

        With r = q/p this is (1 - r**s) / (1 - r**n), evaluated through
        log(r) so that no power of r exceeds 1.
        """
        s, n, p = self.config.stake, self.config.target, self.config.p_win
        if self._near_fair():
            return s / n
        log_r = math.log((1 - p) / p)
        if log_r < 0:
            return math.expm1(s * log_r) / math.expm1(n * log_r)
        return math.exp((s - n) * log_r) * math.expm1(-s * log_r) / math.expm1(-n * log_r)

    def expected_bets(self) -> float:
        """Closed-form expected session length, counting the final bet."""
        s, n, p = self.config.stake, self.config.target, self.config.p_win
        if self._near_fair():
            return float(s * (n - s))
        drift = (1 - p) - p
        return (s - n * self.success_probability()) / drift

    def expected(self) -> tuple[float, float] | None:
        # No closed form once sessions can be cut off
        if self.config.max_bets is not None:
            return None
        return self.success_probability(), self.expected_bets()
