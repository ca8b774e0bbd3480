"""Gambler's-ruin random walk parameters."""

from pydantic import BaseModel, Field, model_validator


class RuinConfig(BaseModel):
    """Unit bets from an initial stake until ruin or the target is reached."""

    stake: int = Field(default=6, gt=0, description="Initial wealth in betting units")
    target: int = Field(default=12, gt=1, description="Wealth at which the gambler stops")
    p_win: float = Field(
        default=0.5,
        gt=0.0,
        lt=1.0,
        description="Probability of winning a single unit bet",
    )
    max_bets: int | None = Field(
        default=None,
        gt=0,
        description="Optional cap on bets per trial; the walk stops unresolved at the cap",
    )

    @model_validator(mode="after")
    def _stake_below_target(self) -> "RuinConfig":
        if self.stake >= self.target:
            raise ValueError(f"stake ({self.stake}) must be below target ({self.target})")
        return self
