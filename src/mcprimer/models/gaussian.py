"""Normal-distribution sampling parameters."""

from pydantic import BaseModel, Field


class GaussianConfig(BaseModel):
    """A single normal draw per trial."""

    mean: float = Field(default=0.0, description="Distribution mean")
    std: float = Field(default=1.0, gt=0.0, description="Distribution standard deviation")
    band: float | None = Field(
        default=None,
        gt=0.0,
        description="If set, score |x - mean| <= band * std instead of the raw draw",
    )
