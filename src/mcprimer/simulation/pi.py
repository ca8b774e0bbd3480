"""Estimating pi by sampling points in the unit square."""

import math

import numpy as np

from mcprimer.analysis.estimator import estimate


class QuarterCircle:
    """Uniform points in [0, 1)^2, scored on landing inside the quarter circle."""

    labels = ("P(inside quarter circle) = pi/4",)

    @staticmethod
    def trial(rng: np.random.Generator) -> tuple[float, float]:
        x, y = rng.random(2)
        return float(x), float(y)

    @staticmethod
    def score(point: tuple[float, float]) -> int:
        x, y = point
        return int(x * x + y * y <= 1.0)

    @staticmethod
    def expected() -> float:
        return math.pi / 4


def estimate_pi(sample_count: int, seed: int | None = None) -> float:
    """Four times the fraction of points that fall inside the quarter circle."""
    result = estimate(sample_count, QuarterCircle.trial, QuarterCircle.score, seed=seed)
    return 4 * result.value
