"""Option pricing and Value-at-Risk parameters."""

from enum import Enum

from pydantic import BaseModel, Field


class OptionKind(str, Enum):
    """European option payoff types."""

    CALL = "call"
    PUT = "put"


class OptionConfig(BaseModel):
    """European option on a stock following geometric Brownian motion."""

    spot: float = Field(default=100.0, gt=0.0, description="Current stock price")
    strike: float = Field(default=100.0, gt=0.0, description="Strike price")
    rate: float = Field(default=0.05, ge=-0.5, le=1.0, description="Continuous risk-free rate")
    volatility: float = Field(default=0.2, gt=0.0, le=5.0, description="Annualised volatility")
    maturity: float = Field(default=1.0, gt=0.0, le=50.0, description="Time to expiry in years")
    kind: OptionKind = Field(default=OptionKind.CALL, description="Call or put payoff")


class VaRConfig(BaseModel):
    """Normally distributed portfolio returns over a holding period."""

    value: float = Field(default=1_000_000.0, gt=0.0, description="Portfolio value")
    mean_return: float = Field(default=0.0005, description="Mean daily return")
    volatility: float = Field(default=0.01, gt=0.0, description="Daily return volatility")
    horizon_days: int = Field(default=10, gt=0, le=3650, description="Holding period in days")
    level: float = Field(default=0.99, gt=0.5, lt=1.0, description="VaR confidence level")
