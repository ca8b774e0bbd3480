"""Birthday-problem parameters."""

from pydantic import BaseModel, Field


class BirthdayConfig(BaseModel):
    """A room of people with independent, uniformly distributed birthdays."""

    people: int = Field(default=23, gt=0, le=10_000, description="People in the room")
    days: int = Field(default=365, gt=0, description="Days in the year")
