"""Dice-roll experiment parameters."""

from pydantic import BaseModel, Field, model_validator


class DiceConfig(BaseModel):
    """Fair dice rolled together in one trial."""

    dice: int = Field(default=2, gt=0, le=100, description="Number of dice rolled per trial")
    sides: int = Field(default=6, ge=2, le=1000, description="Faces per die, numbered from 1")
    target_sum: int | None = Field(
        default=None,
        description="If set, score the event 'total equals target_sum' instead of the total",
    )

    @model_validator(mode="after")
    def _target_reachable(self) -> "DiceConfig":
        if self.target_sum is not None and not self.dice <= self.target_sum <= self.dice * self.sides:
            raise ValueError(
                f"target_sum {self.target_sum} is outside {self.dice}..{self.dice * self.sides}"
            )
        return self
