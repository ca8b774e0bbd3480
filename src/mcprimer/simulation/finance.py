"""Toy finance examples: European option pricing and Value at Risk."""

import math

import numpy as np
from scipy import stats

from mcprimer.analysis.estimator import Estimate
from mcprimer.errors import InvalidArgument
from mcprimer.models import OptionConfig, OptionKind, VaRConfig


class EuropeanOption:
    """Prices a European option from simulated terminal stock prices."""

    labels = ("discounted payoff",)

    def __init__(self, config: OptionConfig | None = None):
        self.config = config if config is not None else OptionConfig()

    def trial(self, rng: np.random.Generator) -> float:
        """Terminal stock price under geometric Brownian motion."""
        c = self.config
        drift = (c.rate - 0.5 * c.volatility ** 2) * c.maturity
        diffusion = c.volatility * math.sqrt(c.maturity) * rng.standard_normal()
        return c.spot * math.exp(drift + diffusion)

    def score(self, terminal_price: float) -> float:
        c = self.config
        if c.kind == OptionKind.CALL:
            payoff = max(terminal_price - c.strike, 0.0)
        else:
            payoff = max(c.strike - terminal_price, 0.0)
        return math.exp(-c.rate * c.maturity) * payoff

    def expected(self) -> float:
        """Black-Scholes price."""
        c = self.config
        root_t = math.sqrt(c.maturity)
        d1 = (math.log(c.spot / c.strike) + (c.rate + 0.5 * c.volatility ** 2) * c.maturity) / (
            c.volatility * root_t
        )
        d2 = d1 - c.volatility * root_t
        discount = math.exp(-c.rate * c.maturity)
        if c.kind == OptionKind.CALL:
            return float(c.spot * stats.norm.cdf(d1) - c.strike * discount * stats.norm.cdf(d2))
        return float(c.strike * discount * stats.norm.cdf(-d2) - c.spot * stats.norm.cdf(-d1))


class PortfolioReturn:
    """Simulates portfolio profit and loss over the holding period."""

    labels = ("mean P&L",)

    def __init__(self, config: VaRConfig | None = None):
        self.config = config if config is not None else VaRConfig()

    def trial(self, rng: np.random.Generator) -> float:
        c = self.config
        shock = c.volatility * math.sqrt(c.horizon_days) * rng.standard_normal()
        return c.value * (c.mean_return * c.horizon_days + shock)

    @staticmethod
    def score(pnl: float) -> float:
        return pnl

    def expected(self) -> float:
        return self.config.value * self.config.mean_return * self.config.horizon_days

    def parametric_var(self) -> float:
        """Variance-covariance VaR for normally distributed returns."""
        c = self.config
        z = stats.norm.ppf(c.level)
        return c.value * (z * c.volatility * math.sqrt(c.horizon_days) - c.mean_return * c.horizon_days)


def value_at_risk(result: Estimate, level: float = 0.99) -> float:
    """Loss not exceeded with probability ``level``, from simulated P&L.

    Args:
        result: Estimate run with ``keep_contributions=True`` over P&L trials
        level: Confidence level in (0, 1)

    Returns:
        VaR as a positive loss amount
    """
    if not 0.0 < level < 1.0:
        raise InvalidArgument(f"level must be in (0, 1), got {level}")
    if result.contributions is None:
        raise InvalidArgument("value_at_risk needs an estimate run with keep_contributions=True")
    if result.contributions.ndim != 1:
        raise InvalidArgument("value_at_risk needs scalar P&L contributions")
    return float(-np.quantile(result.contributions, 1.0 - level))
