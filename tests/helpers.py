"""Module-level trial helpers (picklable for process pools)."""

import numpy as np


def uniform_trial(rng: np.random.Generator) -> float:
    return float(rng.random())


def fair_flip(rng: np.random.Generator) -> bool:
    return bool(rng.random() < 0.5)


def identity(x):
    return x
