"""Exact counting results used as reference values for the estimators."""

import math

import numpy as np

from mcprimer.errors import InvalidArgument


def _check_counts(n: int, k: int) -> None:
    if n < 0 or k < 0:
        raise InvalidArgument(f"n and k must be non-negative, got n={n}, k={k}")
    if k > n:
        raise InvalidArgument(f"k must not exceed n, got n={n}, k={k}")


def permutations(n: int, k: int) -> int:
    """Number of ordered arrangements of k items chosen from n."""
    _check_counts(n, k)
    return math.perm(n, k)


def combinations(n: int, k: int) -> int:
    """Number of unordered selections of k items from n."""
    _check_counts(n, k)
    return math.comb(n, k)


def dice_sum_distribution(dice: int, sides: int) -> dict[int, float]:
    """Exact probability of every total when rolling ``dice`` fair dice.

    Counts are built by repeated convolution of the single-die face counts.
    """
    if dice <= 0 or sides <= 0:
        raise InvalidArgument(f"dice and sides must be positive, got {dice}, {sides}")

    counts = np.ones(1, dtype=np.int64)
    face = np.ones(sides, dtype=np.int64)
    for _ in range(dice):
        counts = np.convolve(counts, face)

    total_outcomes = sides ** dice
    return {
        total: int(count) / total_outcomes
        for total, count in enumerate(counts, start=dice)
    }


def dice_sum_probability(total: int, dice: int = 2, sides: int = 6) -> float:
    """Probability that ``dice`` fair dice sum to ``total``."""
    return dice_sum_distribution(dice, sides).get(total, 0.0)


def birthday_probability(people: int, days: int = 365) -> float:
    """Probability that at least two of ``people`` share a birthday."""
    if people < 0 or days <= 0:
        raise InvalidArgument(f"invalid birthday problem: people={people}, days={days}")
    if people > days:
        return 1.0
    return 1.0 - permutations(days, people) / days ** people
