"""Normal draws."""

import numpy as np
from scipy import stats

from mcprimer.models import GaussianConfig


class GaussianSampler:
    """Draws one normal value per trial."""

    def __init__(self, config: GaussianConfig | None = None):
        self.config = config if config is not None else GaussianConfig()

    @property
    def labels(self) -> tuple[str, ...]:
        if self.config.band is None:
            return ("mean",)
        return (f"P(|x - mean| <= {self.config.band:g} sd)",)

    def trial(self, rng: np.random.Generator) -> float:
        return float(rng.normal(self.config.mean, self.config.std))

    def score(self, x: float) -> float:
        if self.config.band is None:
            return x
        return float(abs(x - self.config.mean) <= self.config.band * self.config.std)

    def expected(self) -> float:
        if self.config.band is None:
            return self.config.mean
        k = self.config.band
        return float(stats.norm.cdf(k) - stats.norm.cdf(-k))
