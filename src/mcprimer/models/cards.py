"""Card-draw experiment parameters."""

from enum import Enum

from pydantic import BaseModel, Field


class CardEvent(str, Enum):
    """Events scored on a hand drawn from a standard deck."""

    ACE = "ace"  # at least one ace in the hand
    HEART = "heart"  # first card drawn is a heart
    PAIR = "pair"  # at least two cards share a rank
    FLUSH = "flush"  # every card shares one suit


class CardConfig(BaseModel):
    """A hand drawn without replacement from a shuffled 52-card deck."""

    hand_size: int = Field(default=5, gt=0, le=52, description="Cards drawn per trial")
    event: CardEvent = Field(default=CardEvent.ACE, description="Event scored on each hand")
