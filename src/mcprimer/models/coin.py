"""Coin-flip experiment parameters."""

from pydantic import BaseModel, Field


class CoinConfig(BaseModel):
    """A possibly biased coin flipped a fixed number of times per trial."""

    p_heads: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Probability that a single flip lands heads",
    )
    flips: int = Field(
        default=1,
        gt=0,
        le=10_000,
        description="Number of flips in one trial",
    )
