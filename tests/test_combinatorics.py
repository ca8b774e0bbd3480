"""Tests for exact counting helpers."""

import pytest

from mcprimer.analysis.combinatorics import (
    birthday_probability,
    combinations,
    dice_sum_distribution,
    dice_sum_probability,
    permutations,
)
from mcprimer.errors import InvalidArgument


class TestCounting:
    """Tests for permutations and combinations."""

    def test_permutations(self) -> None:
        assert permutations(5, 2) == 20
        assert permutations(10, 3) == 720
        assert permutations(4, 0) == 1

    def test_combinations(self) -> None:
        assert combinations(52, 5) == 2_598_960
        assert combinations(6, 3) == 20
        assert combinations(7, 7) == 1

    @pytest.mark.parametrize("n,k", [(3, 4), (-1, 0), (5, -2)])
    def test_invalid_counts(self, n: int, k: int) -> None:
        with pytest.raises(InvalidArgument):
            permutations(n, k)
        with pytest.raises(InvalidArgument):
            combinations(n, k)


class TestDice:
    """Tests for exact dice-sum probabilities."""

    def test_two_dice_seven(self) -> None:
        assert dice_sum_probability(7) == pytest.approx(6 / 36)

    def test_two_dice_extremes(self) -> None:
        assert dice_sum_probability(2) == pytest.approx(1 / 36)
        assert dice_sum_probability(12) == pytest.approx(1 / 36)
        assert dice_sum_probability(13) == 0.0

    def test_distribution_sums_to_one(self) -> None:
        dist = dice_sum_distribution(3, 6)
        assert min(dist) == 3
        assert max(dist) == 18
        assert sum(dist.values()) == pytest.approx(1.0)
        assert dist[10] == pytest.approx(27 / 216)

    def test_invalid_dice(self) -> None:
        with pytest.raises(InvalidArgument):
            dice_sum_distribution(0, 6)


class TestBirthday:
    """Tests for the exact birthday probability."""

    def test_twenty_three_people(self) -> None:
        assert birthday_probability(23) == pytest.approx(0.507297, abs=1e-6)

    def test_trivial_rooms(self) -> None:
        assert birthday_probability(1) == 0.0
        assert birthday_probability(366) == 1.0

    def test_invalid(self) -> None:
        with pytest.raises(InvalidArgument):
            birthday_probability(5, days=0)
